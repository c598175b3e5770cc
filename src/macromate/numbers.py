"""Numeric coercion helpers shared by calculators and normalizers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards +infinity."""
    return math.floor(value + 0.5)


def to_finite_float(value: object) -> float | None:
    """Coerce a loosely typed value to a finite float, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def to_positive_float(value: object) -> float | None:
    """Coerce a value to a finite float greater than zero, or None."""
    number = to_finite_float(value)
    if number is None or number <= 0:
        return None
    return number
