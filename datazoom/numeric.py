from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import math
from typing import Sequence


# Assumed on-screen span used when guessing a write-back precision.
DEFAULT_PIXEL_EXTENT: tuple[float, float] = (0.0, 500.0)
MAX_ROUNDING_DIGITS = 20


def asc(pair: Sequence[float]) -> tuple[float, float]:
    lo, hi = float(pair[0]), float(pair[1])
    if hi < lo:
        return (hi, lo)
    return (lo, hi)


def linear_map(
    value: float,
    domain: Sequence[float],
    range_: Sequence[float],
    clamp: bool = False,
) -> float:
    a, b = float(domain[0]), float(domain[1])
    c, d = float(range_[0]), float(range_[1])
    sub = b - a
    if sub == 0 or not math.isfinite(sub):
        return c
    t = (float(value) - a) / sub
    if clamp:
        t = min(max(t, 0.0), 1.0)
    if t == 0.0:
        return c
    if t == 1.0:
        return d
    return c + t * (d - c)


def pixel_precision(
    value_window: Sequence[float],
    pixel_extent: Sequence[float] = DEFAULT_PIXEL_EXTENT,
) -> float:
    """Number of decimals worth keeping when ``value_window`` spans ``pixel_extent`` pixels.

    Returns ``math.inf`` for an empty or non-finite window so callers can treat it
    as an unusable rounding precision.
    """
    span = float(value_window[1]) - float(value_window[0])
    pixels = abs(float(pixel_extent[1]) - float(pixel_extent[0]))
    if not math.isfinite(span) or span <= 0 or pixels <= 0:
        return math.inf
    data_quantity = math.floor(math.log10(span))
    size_quantity = round(math.log10(pixels))
    return float(max(-data_quantity + size_quantity, 0))


def is_valid_precision(precision: float) -> bool:
    if not math.isfinite(precision):
        return False
    return 0 <= precision <= MAX_ROUNDING_DIGITS and float(precision).is_integer()


def round_to_precision(value: float, digits: int) -> float:
    if not math.isfinite(value):
        return float(value)
    quant = Decimal("1").scaleb(-int(digits))
    try:
        return float(Decimal(value).quantize(quant, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return float(value)
