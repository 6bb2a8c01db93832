"""Number <-> display text conversion for calcpad.

Both directions are deliberately narrow: the display only ever holds what a
decimal keypad can produce, so parsing accepts exactly that and rendering
drops the trailing ".0" noise Python's float repr adds.
"""

from __future__ import annotations

import math
import re

from calcpad.models import ERROR

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> float:
    """Parse display text as a float.

    Raises ValueError for anything that is not a plain decimal numeral,
    including Python-only spellings like 'nan', 'inf' or '1_000'.
    """
    candidate = text.strip()
    if not _NUMBER_RE.fullmatch(candidate):
        raise ValueError(f"not a number: {text!r}")
    return float(candidate)


def strip_trailing_zeros(value: float) -> str:
    """Render a result for the display.

    14.0 → '14', 0.50 → '0.5', 1e+16 → '1e+16' (exponent form untouched),
    inf/nan → 'Error'.
    """
    if math.isinf(value) or math.isnan(value):
        return ERROR
    s = repr(value)
    if "e" in s or "E" in s:
        return s
    if "." in s:
        s = s.rstrip("0")
        if s.endswith("."):
            s = s[:-1]
    return s
