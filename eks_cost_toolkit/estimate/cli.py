#!/usr/bin/env python3
"""
EKS Static Cost CLI
Main entry point for the static monthly cost estimate of an EKS cluster.
"""

import argparse
import logging
from typing import Optional, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from eks_cost_toolkit.common.aws_client_factory import create_session

from .exceptions import ConfigurationError
from .pricing import build_cost_breakdown
from .report import print_cost_report, print_header
from .resources import collect_cluster_resources
from .settings import DEFAULT_ENV_FILE, load_settings


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the estimator."""
    parser = argparse.ArgumentParser(
        description="Estimate the static monthly cost of an AWS EKS cluster."
    )
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Settings file with cluster, profile, region and prices (default: {DEFAULT_ENV_FILE}).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each AWS query and its result count.",
    )
    return parser


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if verbose:
        # botocore DEBUG output drowns the estimator's own messages
        logging.getLogger("botocore").setLevel(logging.INFO)


def run_estimate(env_path: str = DEFAULT_ENV_FILE) -> int:
    """
    Load settings, query the cluster's resources and print the report.

    Returns:
        int: Process exit code (0 on success, 1 on configuration or AWS failure)
    """
    try:
        settings = load_settings(env_path)
    except ConfigurationError as exc:
        print(f"❌ {exc}")
        return 1

    print_header(settings)

    try:
        session = create_session(settings.aws_profile, settings.aws_region)
        resources = collect_cluster_resources(session, settings.cluster_name)
    except (ClientError, BotoCoreError) as exc:
        print(f"❌ AWS query failed: {exc}")
        return 1

    breakdown = build_cost_breakdown(settings, resources)
    print_cost_report(breakdown, settings)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function to display the EKS static cost estimate"""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return run_estimate(args.env_file)


if __name__ == "__main__":  # pragma: no cover - script entry point
    raise SystemExit(main())
