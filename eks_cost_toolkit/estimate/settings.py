"""
Settings loader for the EKS static cost estimator.

Settings come from a .env file parsed with python-dotenv. Values in the file
win over variables already exported in the process environment; variables
that only exist in the environment still count.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from eks_cost_toolkit.common.format_utils import DEFAULT_CURRENCY_SYMBOL

from .exceptions import InvalidSettingError, MissingSettingError, SettingsFileNotFoundError

DEFAULT_ENV_FILE = ".env"
EC2_PRICE_PREFIX = "EC2_"

REQUIRED_SETTINGS = (
    "CLUSTER_NAME",
    "AWS_PROFILE",
    "AWS_REGION",
    "HOURS_PER_MONTH",
    "EKS_CONTROL_PLANE_HOURLY",
    "EBS_GP3_PER_GB_MONTH",
    "NAT_GATEWAY_HOURLY",
    "ALB_HOURLY",
    "NLB_HOURLY",
)


@dataclass(frozen=True)
class EstimatorSettings:
    """Validated settings for one estimator run."""

    cluster_name: str
    aws_profile: str
    aws_region: str
    hours_per_month: float
    eks_control_plane_hourly: float
    ebs_gp3_per_gb_month: float
    nat_gateway_hourly: float
    alb_hourly: float
    nlb_hourly: float
    ec2_prices: dict[str, float] = field(default_factory=dict)
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL


def instance_type_from_setting(name: str) -> Optional[str]:
    """
    Map an EC2 price setting name to its instance type.

    Examples:
        >>> instance_type_from_setting("EC2_T3_MEDIUM")
        't3.medium'
        >>> instance_type_from_setting("EC2_M5_2XLARGE")
        'm5.2xlarge'
        >>> instance_type_from_setting("EBS_GP3_PER_GB_MONTH") is None
        True
    """
    if not name.startswith(EC2_PRICE_PREFIX):
        return None
    family, sep, size = name[len(EC2_PRICE_PREFIX) :].partition("_")
    if not family or not sep or not size:
        return None
    return f"{family}.{size}".lower()


def _parse_number(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise InvalidSettingError(name, value) from exc


def _build_price_table(values: Mapping[str, str]) -> dict[str, float]:
    prices = {}
    for name, value in values.items():
        instance_type = instance_type_from_setting(name)
        if instance_type is None or not value:
            continue
        prices[instance_type] = _parse_number(name, value)
    return prices


def read_settings_file(env_path: str) -> dict:
    """
    Read the values of a .env file.

    Args:
        env_path: Path to the .env file

    Returns:
        dict: Setting name to string value; names without a value are dropped

    Raises:
        SettingsFileNotFoundError: If env_path does not exist
    """
    if not Path(env_path).is_file():
        raise SettingsFileNotFoundError(env_path)
    return {name: value for name, value in dotenv_values(env_path).items() if value is not None}


def parse_settings(
    values: Mapping[str, str], price_values: Optional[Mapping[str, str]] = None
) -> EstimatorSettings:
    """
    Validate raw values and build EstimatorSettings.

    Every required setting is checked for presence before any value is parsed,
    so the first missing name in REQUIRED_SETTINGS order is the one reported.

    Args:
        values: Setting name to string value
        price_values: Where EC2_<FAMILY>_<SIZE> prices are read from (defaults to values)

    Raises:
        MissingSettingError: If a required setting is absent or empty
        InvalidSettingError: If a numeric setting does not parse
    """
    for name in REQUIRED_SETTINGS:
        if not values.get(name):
            raise MissingSettingError(name)

    return EstimatorSettings(
        cluster_name=values["CLUSTER_NAME"],
        aws_profile=values["AWS_PROFILE"],
        aws_region=values["AWS_REGION"],
        hours_per_month=_parse_number("HOURS_PER_MONTH", values["HOURS_PER_MONTH"]),
        eks_control_plane_hourly=_parse_number(
            "EKS_CONTROL_PLANE_HOURLY", values["EKS_CONTROL_PLANE_HOURLY"]
        ),
        ebs_gp3_per_gb_month=_parse_number(
            "EBS_GP3_PER_GB_MONTH", values["EBS_GP3_PER_GB_MONTH"]
        ),
        nat_gateway_hourly=_parse_number("NAT_GATEWAY_HOURLY", values["NAT_GATEWAY_HOURLY"]),
        alb_hourly=_parse_number("ALB_HOURLY", values["ALB_HOURLY"]),
        nlb_hourly=_parse_number("NLB_HOURLY", values["NLB_HOURLY"]),
        ec2_prices=_build_price_table(values if price_values is None else price_values),
        currency_symbol=values.get("CURRENCY_SYMBOL") or DEFAULT_CURRENCY_SYMBOL,
    )


def load_settings(
    env_path: str = DEFAULT_ENV_FILE, environ: Optional[Mapping[str, str]] = None
) -> EstimatorSettings:
    """
    Load and validate estimator settings from a .env file.

    Values in the file win over the environment. The instance price table is
    read from the file only, so unrelated EC2_* variables exported in the
    shell are never mistaken for prices.

    Args:
        env_path: Path to the .env file (defaults to ./.env)
        environ: Environment to merge under the file (defaults to os.environ)

    Returns:
        EstimatorSettings: Validated settings

    Raises:
        ConfigurationError: If the file is missing or a setting is absent or invalid
    """
    file_values = read_settings_file(env_path)
    merged = dict(os.environ if environ is None else environ)
    merged.update(file_values)

    settings = parse_settings(merged, price_values=file_values)
    logging.info(
        "✅ Settings loaded from %s (%d priced instance types)",
        env_path,
        len(settings.ec2_prices),
    )
    return settings
