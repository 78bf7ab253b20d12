"""Shared pytest fixtures for test files."""

from __future__ import annotations

import copy

import pytest
from botocore.exceptions import ClientError

from eks_cost_toolkit.estimate.settings import REQUIRED_SETTINGS, EstimatorSettings
from tests.conftest_test_values import VALID_ENV_LINES


class _DefaultResponse(dict):
    """Dict returning empty list for missing keys."""

    def __missing__(self, key):
        return []


_DEFAULT_RESPONSES: dict[str, dict] = {
    "describe_instances": _DefaultResponse(Reservations=[]),
    "describe_volumes": _DefaultResponse(Volumes=[]),
    "describe_nat_gateways": _DefaultResponse(NatGateways=[]),
    "describe_load_balancers": _DefaultResponse(LoadBalancers=[]),
    "describe_tags": _DefaultResponse(TagDescriptions=[]),
}


class _StubPaginator:
    """Paginator yielding a single default page."""

    def __init__(self, operation_name: str):
        self.operation_name = operation_name

    def paginate(self, **kwargs):
        del kwargs
        return [copy.deepcopy(_DEFAULT_RESPONSES.get(self.operation_name, _DefaultResponse()))]


class _StubBotoClient:
    """Minimal stub for boto3 clients used in tests."""

    def __init__(self, service_name: str):
        self.service_name = service_name
        self.exceptions = ClientError

    def get_paginator(self, operation_name: str):
        return _StubPaginator(operation_name)

    def __getattr__(self, name: str):
        def _method(*args, **kwargs):
            del args, kwargs
            response = _DEFAULT_RESPONSES.get(name)
            if response is None:
                return _DefaultResponse()
            return copy.deepcopy(response)

        return _method


class _StubBotoSession:
    """Minimal stub for boto3.Session."""

    def __init__(self, profile_name=None, region_name=None, **kwargs):
        del kwargs
        self.profile_name = profile_name
        self.region_name = region_name

    def client(self, service_name, **kwargs):
        del kwargs
        return _StubBotoClient(service_name)


@pytest.fixture(autouse=True)
def stub_boto3_session(monkeypatch):
    """Replace boto3.Session with a stub so tests don't call real AWS."""
    monkeypatch.setattr("boto3.Session", _StubBotoSession)


@pytest.fixture(autouse=True)
def clear_estimator_env(monkeypatch):
    """Keep estimator settings exported in the developer's shell out of tests."""
    for name in REQUIRED_SETTINGS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("CURRENCY_SYMBOL", raising=False)


@pytest.fixture
def estimator_settings():
    """Settings with round prices so expected figures are easy to check."""
    return EstimatorSettings(
        cluster_name="demo",
        aws_profile="demo-profile",
        aws_region="eu-west-2",
        hours_per_month=730.0,
        eks_control_plane_hourly=0.10,
        ebs_gp3_per_gb_month=0.08,
        nat_gateway_hourly=0.05,
        alb_hourly=0.025,
        nlb_hourly=0.03,
        ec2_prices={"t3.medium": 0.0416, "m5.large": 0.096},
    )


@pytest.fixture
def write_env_file(tmp_path):
    """Return a writer that creates a .env file from lines, skipping excluded names."""

    def _write(lines=None, exclude=()):
        lines = VALID_ENV_LINES if lines is None else lines
        kept = [line for line in lines if line.split("=", 1)[0] not in exclude]
        env_file = tmp_path / ".env"
        env_file.write_text("\n".join(kept) + "\n", encoding="utf-8")
        return str(env_file)

    return _write
