"""Coercion helpers that turn untrusted numeric input into safe values.

Every analytics calculator routes raw numbers through this module before
doing arithmetic, so none of them raise on ``None``, junk strings, ``NaN`` or
infinities.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any


def to_safe_number(value: Any, fallback: float | None = 0.0) -> float | None:
    """Return ``value`` as a finite float, or ``fallback`` when it is not one."""

    if value is None or isinstance(value, bool):
        return fallback

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return fallback
    elif isinstance(value, Decimal):
        try:
            number = float(value)
        except (InvalidOperation, OverflowError):
            return fallback
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return fallback
        try:
            number = float(text)
        except ValueError:
            return fallback
    else:
        return fallback

    if not math.isfinite(number):
        return fallback
    return number


def to_fixed_safe(value: Any, decimals: int = 1, fallback_text: str | None = None) -> str:
    """Format ``value`` with exactly ``decimals`` places.

    Invalid input falls back to ``fallback_text``. A numeric fallback is
    padded the same way as a valid value; a non-numeric one (``"N/A"``) is
    returned untouched.
    """

    places = max(0, int(to_safe_number(decimals, 0)))
    number = to_safe_number(value, None)
    if number is None:
        if fallback_text is None:
            return f"{0.0:.{places}f}"
        fallback_number = to_safe_number(fallback_text, None)
        if fallback_number is None:
            return fallback_text
        number = fallback_number
    return f"{number:.{places}f}"


def to_percent_text(value: Any, decimals: int = 1) -> str:
    """Render a 0-1 fraction as percentage text (``0.25`` -> ``"25.0%"``)."""

    places = max(0, int(to_safe_number(decimals, 0)))
    number = to_safe_number(value, None)
    if number is None:
        return f"{0.0:.{places}f}%"
    return f"{number * 100:.{places}f}%"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def non_negative(value: Any) -> float:
    """Safe number floored at zero; used for point totals."""

    return max(0.0, to_safe_number(value, 0.0))


def round_to_step(value: float, step: int) -> int:
    """Round half-up to the nearest multiple of ``step``."""

    return int(math.floor(value / step + 0.5)) * step


__all__ = [
    "clamp",
    "non_negative",
    "round_to_step",
    "to_fixed_safe",
    "to_percent_text",
    "to_safe_number",
]
