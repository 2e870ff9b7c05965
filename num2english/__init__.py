"""
num2english: spell out any number in English words.

Architecture: Normalize → Split → Name chunks (integer + fraction) → Assemble
Example:     60.212 → "sixty and two hundred twelve thousandths"
"""

from .converter import to_english

__version__ = "1.0.0"

__all__ = ["to_english", "__version__"]
