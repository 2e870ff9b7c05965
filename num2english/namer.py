"""
Name non-negative integers and decimal fractions in English words.

Supported patterns:
    255              → "two hundred fifty-five"
    1_250_000        → "one million two hundred fifty thousand"
    (212, 3 places)  → "two hundred twelve thousandths"
    (1, 6 places)    → "one millionth"

Both namers work on base-1000 chunks, least significant first: each
non-zero chunk is named, tagged with its magnitude word, and prepended to
what has been built so far.
"""

from __future__ import annotations

from .exceptions import MagnitudeOverflow
from .scales import DECIMALS, MAGNITUDES, ONE_TO_NINETEEN, TENS


# ─── Chunk Namer ─────────────────────────────────────────────────────


def name_chunk(number: int) -> str:
    """Name a number between 0 and 999 (e.g. 342 → "three hundred forty-two").

    Returns an empty string for 0.

    Raises:
        ValueError: If the number is outside 0..999.
    """
    if not 0 <= number <= 999:
        raise ValueError(f"Chunk out of range 0..999: {number}")

    hundreds, rest = divmod(number, 100)
    result = ""

    if hundreds:
        result = f"{ONE_TO_NINETEEN[hundreds - 1]} hundred"
        if rest:
            result += " "

    if rest:
        if rest < 20:
            result += ONE_TO_NINETEEN[rest - 1]
        else:
            tens, ones = divmod(rest, 10)
            result += TENS[tens - 1]
            if ones:
                result += f"-{ONE_TO_NINETEEN[ones - 1]}"

    return result


# ─── Integer Namer ───────────────────────────────────────────────────


def name_integer(number: int) -> str:
    """Name a non-negative integer (e.g. 60 → "sixty").

    Returns an empty string for 0; the caller decides whether that means
    "zero".

    Raises:
        ValueError: If the number is negative.
        MagnitudeOverflow: If the number needs a scale word past the table.
    """
    if number < 0:
        raise ValueError(f"Cannot name a negative integer directly: {number}")

    result = ""
    magnitude = 0

    while number > 0:
        number, chunk = divmod(number, 1000)

        if chunk:
            words = name_chunk(chunk)
            if magnitude > 0:
                words = f"{words} {_magnitude_word(magnitude)}"
            result = f"{words} {result}" if result else words

        magnitude += 1

    return result


def _magnitude_word(magnitude: int) -> str:
    """Scale word for the chunk at `magnitude` (1 → "thousand", 2 → "million")."""
    if magnitude > len(MAGNITUDES):
        raise MagnitudeOverflow(
            f"Number too large: needs 10^{3 * magnitude}, largest scale word is "
            f"{MAGNITUDES[-1]!r} (10^{3 * len(MAGNITUDES)})",
            {"magnitude": magnitude, "max_magnitude": len(MAGNITUDES)},
        )
    return MAGNITUDES[magnitude - 1]


# ─── Fraction Namer ──────────────────────────────────────────────────


def name_fraction(numerator: int, decimal_places: int) -> str:
    """Name a decimal fraction from its digits and their count.

    Args:
        numerator: The fractional digits read as an integer (0.056 → 56).
        decimal_places: How many digits followed the point (0.056 → 3).

    Returns:
        e.g. "fifty-six thousandths"; the place word is plural unless the
        numerator is exactly 1.

    Raises:
        ValueError: If decimal_places is not positive or the numerator is
            negative.
        MagnitudeOverflow: If there are more places than we have words for.
    """
    if decimal_places < 1:
        raise ValueError(f"A fraction needs at least one decimal place, got {decimal_places}")
    if numerator < 0:
        raise ValueError(f"Fraction numerator cannot be negative: {numerator}")
    if decimal_places > len(DECIMALS):
        raise MagnitudeOverflow(
            f"Too many decimal places: {decimal_places}, the smallest place word is "
            f"{DECIMALS[-1]!r} ({len(DECIMALS)} places)",
            {"decimal_places": decimal_places, "max_decimal_places": len(DECIMALS)},
        )

    suffix = DECIMALS[decimal_places - 1]
    if numerator > 1:
        suffix += "s"

    return f"{name_integer(numerator) or 'zero'} {suffix}"
