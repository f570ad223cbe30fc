from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round half-up to two decimals; applied to outputs only, never to intermediates."""
    return float(Decimal(repr(float(value))).quantize(_CENT, rounding=ROUND_HALF_UP))


def safe_pct(numerator: float, denominator: float) -> float:
    """numerator / denominator * 100, or 0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator * 100.0


def safe_ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    return numerator / denominator
