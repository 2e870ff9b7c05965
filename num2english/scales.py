"""
English word tables for spelling out numbers.

All tables are immutable tuples, built once at import time and shared by
every conversion. Illion names beyond "nonillion" follow the Conway-Wechsler
system (e.g. "senonagintillion" = 10^291, "uncentillion" = 10^306), which
keeps the names regular all the way past the largest double-precision float.
"""

from __future__ import annotations

# ─── Word Lookup Tables ──────────────────────────────────────────────

# Index n - 1 holds the word for n.
ONE_TO_NINETEEN: tuple[str, ...] = (
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

# Index n - 1 holds the word for n * 10; index 0 ("ten") is never used
# because 10..19 come from ONE_TO_NINETEEN.
TENS: tuple[str, ...] = (
    "ten",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# ─── Magnitude Words ─────────────────────────────────────────────────
# Index k holds the name of 10^(3 * (k + 1)): "thousand", "million", ...

MAGNITUDES: tuple[str, ...] = (
    "thousand",
    # 10^6 .. 10^30
    "million", "billion", "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion", "nonillion", "decillion",
    # 10^36 .. 10^63
    "undecillion", "duodecillion", "tredecillion", "quattuordecillion",
    "quinquadecillion", "sedecillion", "septendecillion", "octodecillion",
    "novendecillion", "vigintillion",
    # 10^66 .. 10^93
    "unvigintillion", "duovigintillion", "tresvigintillion",
    "quattuorvigintillion", "quinquavigintillion", "sesvigintillion",
    "septemvigintillion", "octovigintillion", "novemvigintillion",
    "trigintillion",
    # 10^96 .. 10^123
    "untrigintillion", "duotrigintillion", "trestrigintillion",
    "quattuortrigintillion", "quinquatrigintillion", "sestrigintillion",
    "septentrigintillion", "octotrigintillion", "noventrigintillion",
    "quadragintillion",
    # 10^126 .. 10^153
    "unquadragintillion", "duoquadragintillion", "tresquadragintillion",
    "quattuorquadragintillion", "quinquaquadragintillion",
    "sesquadragintillion", "septenquadragintillion", "octoquadragintillion",
    "novenquadragintillion", "quinquagintillion",
    # 10^156 .. 10^183
    "unquinquagintillion", "duoquinquagintillion", "tresquinquagintillion",
    "quattuorquinquagintillion", "quinquaquinquagintillion",
    "sesquinquagintillion", "septenquinquagintillion",
    "octoquinquagintillion", "novenquinquagintillion", "sexagintillion",
    # 10^186 .. 10^213
    "unsexagintillion", "duosexagintillion", "tresexagintillion",
    "quattuorsexagintillion", "quinquasexagintillion", "sesexagintillion",
    "septensexagintillion", "octosexagintillion", "novensexagintillion",
    "septuagintillion",
    # 10^216 .. 10^243
    "unseptuagintillion", "duoseptuagintillion", "treseptuagintillion",
    "quattuorseptuagintillion", "quinquaseptuagintillion",
    "seseptuagintillion", "septenseptuagintillion", "octoseptuagintillion",
    "novenseptuagintillion", "octogintillion",
    # 10^246 .. 10^273
    "unoctogintillion", "duooctogintillion", "tresoctogintillion",
    "quattuoroctogintillion", "quinquaoctogintillion", "sexoctogintillion",
    "septemoctogintillion", "octooctogintillion", "novemoctogintillion",
    "nonagintillion",
    # 10^276 .. 10^303
    "unnonagintillion", "duononagintillion", "trenonagintillion",
    "quattuornonagintillion", "quinquanonagintillion", "senonagintillion",
    "septenonagintillion", "octononagintillion", "novenonagintillion",
    "centillion",
    # 10^306 .. 10^333
    "uncentillion", "duocentillion", "trescentillion", "quattuorcentillion",
    "quinquacentillion", "sexcentillion", "septencentillion",
    "octocentillion", "novencentillion", "decicentillion",
)

# ─── Fractional Place Words ──────────────────────────────────────────
# Index p - 1 holds the singular place word for p decimal places:
# "tenth", "hundredth", "thousandth", "ten-thousandth", ...


def _place_words() -> tuple[str, ...]:
    words = ["tenth", "hundredth"]
    for magnitude in MAGNITUDES:
        words.extend((f"{magnitude}th", f"ten-{magnitude}th", f"hundred-{magnitude}th"))
    return tuple(words)


DECIMALS: tuple[str, ...] = _place_words()

# Largest power of ten (exclusive) whose integer part can be named.
MAX_MAGNITUDE_EXPONENT = 3 * (len(MAGNITUDES) + 1)
