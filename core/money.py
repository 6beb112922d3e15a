"""
Fixed-point currency helpers.

Amounts are plain integers counting hundredths of a dollar. Only the
amortization math widens to float, and it comes back through round_cents().
"""

from __future__ import annotations

import math

USD = int


def round_half_away(x: float, decimals: int = 0) -> float:
    """ROUND half away from zero (Excel-style), scalar version."""
    m = 10 ** decimals
    return math.copysign(math.floor(abs(x) * m + 0.5) / m, x)


def round_cents(amount: float) -> USD:
    """Round a float dollar figure to integer cents, half away from zero."""
    return int(round_half_away(amount * 100))


def dollars(amount: float) -> USD:
    """Dollars (whole or fractional) to cents."""
    return round_cents(amount)


def to_dollars(cents: USD) -> float:
    return cents / 100


def format_usd(cents: USD) -> str:
    """Render as $1,234.56; negatives are parenthesized."""
    if cents < 0:
        return f"(${-cents // 100:,}.{-cents % 100:02d})"
    return f"${cents // 100:,}.{cents % 100:02d}"
