"""Money rounding helpers shared by every report."""

from decimal import ROUND_HALF_UP, Decimal

_UNIT = Decimal("1")


def round2(value: float) -> float:
    """Round half away from zero to two decimals.

    Rounds the float product ``value * 100`` to a whole number of cents, so
    ``12.345`` becomes ``12.35`` while ``1.005`` (``100.4999...`` cents in
    binary) stays ``1.00``.
    """
    cents = Decimal(value * 100).quantize(_UNIT, rounding=ROUND_HALF_UP)
    return float(cents / 100)


def format2(value: float) -> str:
    """Render a money value with exactly two decimals."""
    return f"{round2(value):.2f}"


def safe_div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator
