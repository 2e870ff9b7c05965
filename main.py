#!/usr/bin/env python3
"""
num2english: Command-Line Entry Point
======================================

Spells out each number given on the command line.

Usage:
    python main.py 60.212 -123456 0.056     # Name the given values
    python main.py                          # Name a built-in demo set
    NUM2ENGLISH_LOG_LEVEL=DEBUG python main.py 6.2
"""

from __future__ import annotations

import logging
import sys

from num2english.config import load_settings
from num2english.converter import to_english
from num2english.exceptions import NumberToEnglishError

# ─── Demo Values ────────────────────────────────────────────────────

DEMO_VALUES: list[object] = [
    0,
    -0.0,
    255,
    -123_456,
    1_000_000_000,
    6.2,
    600_000.21,
    0.056,
    52.000_001,
    sys.float_info.max,
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversion(value: object) -> bool:
    """Print one value and its English name.

    Returns:
        True if the value converted, False if it was rejected.
    """
    print(f"  {_CYAN}{value}{_RESET}")
    try:
        words = to_english(value)
    except NumberToEnglishError as e:
        print(f"    {_RED}[{e.code}]{_RESET} {e}")
        for k, v in e.details.items():
            print(f"      {_DIM}{k}: {v}{_RESET}")
        return False
    print(f"    {_GREEN}{words}{_RESET}")
    return True


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert every argument (or the demo set) and print the results.

    Returns:
        0 if every value converted, 1 if any was rejected.
    """
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    values: list[object] = list(sys.argv[1:] if argv is None else argv) or DEMO_VALUES

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBERS IN ENGLISH{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = sum(1 for value in values if not print_conversion(value))

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} value(s) could not be converted{_RESET}\n")
        return 1
    print(f"  {_GREEN}{_BOLD}All {len(values)} value(s) converted{_RESET}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
