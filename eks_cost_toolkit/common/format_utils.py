"""
Shared formatting utilities for consistent report output.

This module provides the canonical money and report-line formatting so every
section of the report lines up the same way.
"""

DEFAULT_CURRENCY_SYMBOL = "£"
LABEL_WIDTH = 40
AMOUNT_WIDTH = 10
RULE_WIDTH = 60


def format_money(amount: float, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Format an amount with a currency symbol and two decimal places.

    Examples:
        >>> format_money(73)
        '£73.00'
        >>> format_money(0, currency_symbol="$")
        '$0.00'
    """
    return f"{currency_symbol}{amount:.2f}"


def format_report_line(label: str, value: str) -> str:
    """
    Format one report row: label left-aligned, value right-aligned.

    Labels longer than the column are kept whole rather than truncated.

    Examples:
        >>> format_report_line("EKS control plane", "£73.00")
        'EKS control plane                            £73.00'
    """
    return f"{label:<{LABEL_WIDTH}} {value:>{AMOUNT_WIDTH}}"


def rule(width: int = RULE_WIDTH) -> str:
    """Return a horizontal separator line."""
    return "-" * width
