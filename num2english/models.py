"""
Pydantic models for split numbers and conversion results.

A number is split into its integer and fractional parts before naming.
The model is frozen: once the splitter builds it, nothing downstream
can change it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Split Number ───────────────────────────────────────────────────


class SplitNumber(BaseModel):
    """A number split into its integer and fractional parts.

    Example (for "-60.0212"):
        integer=-60, fraction=212, decimal_places=4, negative=True

    `decimal_places` is the length of the fractional digit string, leading
    zeros included, so "0.05" and "0.5" name different place values even
    though both fractions parse to 5.
    """

    model_config = ConfigDict(frozen=True)

    integer: Optional[int] = None  # None when absent or zero
    fraction: Optional[int] = Field(default=None, ge=0)  # None when absent or zero
    decimal_places: int = Field(default=0, ge=0)
    negative: bool = False  # Leading "-" in the canonical string


# ─── Conversion Result ──────────────────────────────────────────────


class ConversionResult(BaseModel):
    """The words for a value, with the parts they were built from."""

    value: str  # Canonical decimal string
    words: str
    integer: Optional[int] = None
    fraction: Optional[int] = None
    decimal_places: int = 0
