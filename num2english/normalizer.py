"""
Input normalization: any supported numeric value to a canonical decimal string.

Canonical form: optional leading "-", digits, optional "." and digits.
No exponent, no "+" sign, no whitespace, no grouping separators.

    255                      → "255"
    -0.0                     → "-0.0"
    Decimal("1234.5678")     → "1234.5678"
    "  +60.212 "             → "60.212"
    1.7976931348623157e308   → "17976931348623157" + "0" * 292

Floats are expanded from their shortest round-trip digits (``repr``), so a
float never produces an exponent. Decimals and strings are taken literally:
if they are written with an exponent, we refuse rather than guess.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from decimal import Decimal

from .exceptions import MagnitudeOverflow, MalformedNumber, UnsupportedNotation
from .scales import MAX_MAGNITUDE_EXPONENT

logger = logging.getLogger(__name__)

_CANONICAL_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_EXPONENT_RE = re.compile(r"[0-9.][eE][+-]?[0-9]")


def to_decimal_string(value: object) -> str:
    """Render a numeric value as its canonical decimal string.

    Raises:
        UnsupportedNotation: The value's string form uses an exponent.
        MagnitudeOverflow: An integer too large for our scale words.
        MalformedNumber: The value is not a finite base-10 number.
        TypeError: The value is not a supported numeric type.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, numbers.Integral):
        return _integer_to_string(int(value))
    if isinstance(value, float):
        return _float_to_string(value)
    if isinstance(value, Decimal):
        return _decimal_to_string(value)
    if isinstance(value, str):
        return _check_string(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to English: {value!r}")


# ─── Per-Type Renderers ──────────────────────────────────────────────


def _integer_to_string(value: int) -> str:
    # Checked before str(), which refuses integers past 4300 digits.
    if abs(value) >= 10**MAX_MAGNITUDE_EXPONENT:
        raise MagnitudeOverflow(
            f"Number too large: needs 10^{MAX_MAGNITUDE_EXPONENT} or more",
            {"max_exponent": MAX_MAGNITUDE_EXPONENT},
        )
    return str(value)


def _float_to_string(value: float) -> str:
    if not math.isfinite(value):
        raise MalformedNumber(
            f"Cannot name a non-finite float: {value!r}",
            {"value": repr(value)},
        )
    # repr gives the shortest digits that round-trip; "f" lays them out
    # positionally, padding with zeros instead of using an exponent.
    return format(Decimal(float.__repr__(value)), "f")


def _decimal_to_string(value: Decimal) -> str:
    if not value.is_finite():
        raise MalformedNumber(
            f"Cannot name a non-finite Decimal: {value!r}",
            {"value": str(value)},
        )
    return _check_string(str(value))


def _check_string(value: str) -> str:
    text = value.strip()
    if text.startswith("+"):
        text = text[1:]

    if _EXPONENT_RE.search(text):
        logger.warning("Rejected exponential notation: %r", value)
        raise UnsupportedNotation(
            f"Scientific notation is not supported: {value!r}",
            {"value": value},
        )
    if not _CANONICAL_RE.fullmatch(text):
        logger.warning("Rejected malformed number: %r", value)
        raise MalformedNumber(
            f"Not a base-10 number: {value!r}",
            {"value": value},
        )

    logger.debug("Normalized %r → %r", value, text)
    return text
