"""
Custom exception hierarchy for number-to-English conversion.

Each exception type maps to a specific reason a value cannot be named,
so callers (CLI, API) can report a machine-readable code instead of a
bare traceback. Conversion is atomic: when one of these is raised, no
partial text is ever returned.
"""

from __future__ import annotations


class NumberToEnglishError(ValueError):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnsupportedNotation(NumberToEnglishError):
    """The value's canonical string uses exponential (scientific) notation."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_NOTATION", message, details)


class MagnitudeOverflow(NumberToEnglishError):
    """The value needs a scale word beyond the largest one we know."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OVERFLOW", message, details)


class MalformedNumber(NumberToEnglishError):
    """The value is not a finite base-10 number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MALFORMED_NUMBER", message, details)
