"""
AWS Cost Calculation Utilities

Unit-price arithmetic shared by the cost aggregator. Every figure is a
monthly amount rounded to two decimals, the precision the report prints.
"""

MONEY_DECIMAL_PLACES = 2


def round_money(amount: float) -> float:
    """Round an amount to the precision used in reports."""
    return round(amount, MONEY_DECIMAL_PLACES)


def hourly_to_monthly(hourly_rate: float, hours_per_month: float, quantity: int = 1) -> float:
    """
    Convert an hourly unit price into a monthly cost.

    Args:
        hourly_rate: Price of one resource for one hour
        hours_per_month: Billing hours in a month (e.g. 730)
        quantity: Number of resources billed at that rate

    Returns:
        float: Monthly cost rounded to two decimals

    Examples:
        >>> hourly_to_monthly(0.10, 730)
        73.0
        >>> hourly_to_monthly(0.0416, 730, quantity=3)
        91.1
    """
    return round_money(hourly_rate * quantity * hours_per_month)


def calculate_ebs_storage_cost(total_size_gb: int, price_per_gb_month: float) -> float:
    """
    Calculate monthly cost for provisioned EBS storage.

    Args:
        total_size_gb: Summed size of all volumes in gigabytes
        price_per_gb_month: gp3 storage price per GB-month

    Returns:
        float: Monthly cost rounded to two decimals
    """
    # Storage is already billed per GB-month, no hours factor
    return round_money(total_size_gb * price_per_gb_month)
