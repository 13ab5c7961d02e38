"""Formatting helpers for calculation and estimate output.

Provides human-readable formatting for currency amounts and crew hours,
matching how estimators read quotes (e.g., '$12,438' instead of
'$12,437.89' on large jobs).
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$12,438')
    - Amounts < $10,000: with cents (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_hours(hours: float) -> str:
    """Format crew hours with two decimals, e.g. '7.25 hours'."""
    if hours == 1:
        return "1.00 hour"
    return f"{hours:,.2f} hours"


def format_days(days: int) -> str:
    return "1 day" if days == 1 else f"{days} days"


def format_rate(rate: float, unit_label: str) -> str:
    """Format a unit rate, e.g. '$70.00/window' or '$0.35/sq ft'."""
    return f"{format_currency(rate)}/{unit_label}"
