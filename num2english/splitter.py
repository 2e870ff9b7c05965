"""
Split a canonical decimal string into integer and fractional parts.

    "60.212"  → SplitNumber(integer=60, fraction=212, decimal_places=3)
    "0.056"   → SplitNumber(integer=None, fraction=56, decimal_places=3)
    "-0.0"    → SplitNumber(integer=None, fraction=None, decimal_places=1, negative=True)

Zero-valued parts are stored as None so the assembler never names them.
"""

from __future__ import annotations

import logging
import re

from .exceptions import MagnitudeOverflow, MalformedNumber
from .models import SplitNumber
from .scales import DECIMALS, MAX_MAGNITUDE_EXPONENT

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]*")


def split_number(text: str) -> SplitNumber:
    """Split a canonical decimal string on its first ".".

    Raises:
        MalformedNumber: Either side is not made of digits (the integer side
            may carry a leading "-").
        MagnitudeOverflow: More integer digits or decimal places than we have
            words for.
    """
    left, point, right = text.partition(".")
    negative = left.startswith("-")
    digits = left[1:] if negative else left

    if not (_DIGITS_RE.fullmatch(digits) and _DIGITS_RE.fullmatch(right)):
        raise MalformedNumber(f"Not a canonical decimal string: {text!r}", {"value": text})
    if not digits and not right:
        raise MalformedNumber(f"No digits in: {text!r}", {"value": text})

    # Checked before int(), which refuses strings past 4300 digits.
    if len(digits.lstrip("0")) > MAX_MAGNITUDE_EXPONENT:
        raise MagnitudeOverflow(
            f"Number too large: needs 10^{MAX_MAGNITUDE_EXPONENT} or more",
            {"max_exponent": MAX_MAGNITUDE_EXPONENT},
        )
    if len(right) > len(DECIMALS):
        raise MagnitudeOverflow(
            f"Too many decimal places: {len(right)}, the smallest place word is "
            f"{DECIMALS[-1]!r} ({len(DECIMALS)} places)",
            {"decimal_places": len(right), "max_decimal_places": len(DECIMALS)},
        )

    integer = _parse_nonzero(digits)
    if integer is not None and negative:
        integer = -integer

    split = SplitNumber(
        integer=integer,
        fraction=_parse_nonzero(right),
        decimal_places=len(right) if point else 0,
        negative=negative,
    )
    logger.debug("Split %r → %r", text, split)
    return split


def _parse_nonzero(digits: str) -> int | None:
    """Parse a digit string; empty or all-zero strings give None."""
    if not digits:
        return None
    value = int(digits)
    return value if value else None
