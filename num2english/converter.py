"""
Top-level conversion: orchestrates the full workflow.

Flow:
    value ──► to_decimal_string ──► split_number ──► assemble ──► words
              (normalizer.py)       (splitter.py)    name_integer / name_fraction
                                                     (namer.py)

Example:
    to_english(60.212)   → "sixty and two hundred twelve thousandths"
    to_english(-60.212)  → "negative sixty and two hundred twelve thousandths"
    to_english(0.056)    → "fifty-six thousandths"
    to_english(-0.0)     → "zero"
"""

from __future__ import annotations

import logging

from .models import ConversionResult, SplitNumber
from .namer import name_fraction, name_integer
from .normalizer import to_decimal_string
from .splitter import split_number

logger = logging.getLogger(__name__)


def to_english(value: object) -> str:
    """Convert a number to its name in English.

    Args:
        value: An int, float, Decimal, or numeric string.

    Raises:
        UnsupportedNotation: The value is written with an exponent.
        MagnitudeOverflow: The value is too large (or has too many decimal
            places) for our scale words.
        MalformedNumber: The value is not a finite base-10 number.
        TypeError: The value is not a supported numeric type.
    """
    return convert(value).words


def convert(value: object) -> ConversionResult:
    """Like to_english, but also returns the canonical string and split parts."""
    text = to_decimal_string(value)
    split = split_number(text)
    words = assemble(split)
    logger.debug("Converted %r → %r", text, words)
    return ConversionResult(
        value=text,
        words=words,
        integer=split.integer,
        fraction=split.fraction,
        decimal_places=split.decimal_places,
    )


def assemble(split: SplitNumber) -> str:
    """Join the integer and fraction names, falling back to "zero".

    A negative number is prefixed with "negative" only when something
    non-zero was named, so "-0.0" is "zero".
    """
    parts: list[str] = []

    if split.integer is not None:
        parts.append(name_integer(abs(split.integer)))

    if split.fraction is not None:
        parts.append(name_fraction(split.fraction, split.decimal_places))

    if not parts:
        return "zero"

    result = " and ".join(parts)
    if split.negative or (split.integer is not None and split.integer < 0):
        result = f"negative {result}"
    return result
