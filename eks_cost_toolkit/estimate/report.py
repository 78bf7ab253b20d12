"""
Text report for the EKS static cost estimate.
"""

from eks_cost_toolkit.common.format_utils import format_money, format_report_line, rule

from .pricing import EC2_SECTION, SECTION_ORDER, CostBreakdown
from .settings import EstimatorSettings

TOTAL_LABEL = "💰 TOTAL ESTIMATED MONTHLY COST"
STATIC_COST_NOTE = "⚠️  Static cost only (no traffic, logs, requests, data transfer)"


def print_header(settings: EstimatorSettings):
    """Print the cluster, profile and region the estimate is for."""
    print(f"🔍 Calculating static monthly cost for EKS cluster: {settings.cluster_name}")
    print(f"AWS profile: {settings.aws_profile}")
    print(f"Region: {settings.aws_region}")
    print(rule())


def _print_section(breakdown: CostBreakdown, section: str, currency_symbol: str):
    if section:
        print()
        print(section)

    for line in breakdown.lines_for(section):
        print(format_report_line(line.label, format_money(line.monthly_cost, currency_symbol)))

    if section == EC2_SECTION:
        for warning in breakdown.warnings:
            print(f"⚠️  {warning}")


def print_total(total: float, currency_symbol: str):
    """Print the monthly total between separator rules."""
    print()
    print(rule())
    print(format_report_line(TOTAL_LABEL, format_money(total, currency_symbol)))
    print(rule())
    print()
    print(STATIC_COST_NOTE)


def print_cost_report(breakdown: CostBreakdown, settings: EstimatorSettings):
    """Print every section of the breakdown followed by the total."""
    currency_symbol = settings.currency_symbol
    for section in SECTION_ORDER:
        _print_section(breakdown, section, currency_symbol)
    print_total(breakdown.total, currency_symbol)
