from __future__ import annotations


def round_half_up(numerator: int, denominator: int) -> int:
    """Integer division rounding halves away from zero.

    Amounts handled here are never negative, so this is round-half-up.
    """
    if numerator < 0:
        return -round_half_up(-numerator, denominator)
    return (2 * numerator + denominator) // (2 * denominator)


def format_amount(amount_by_100: int) -> str:
    """Format hundredths of a currency unit as $units.cents."""
    sign = "-" if amount_by_100 < 0 else ""
    units, cents = divmod(abs(amount_by_100), 100)
    return f"{sign}${units}.{cents:02d}"
