from __future__ import annotations

import re


_INT_RE = re.compile(r"[+-]?[0-9]+")

# Branch codes are parsed as signed 32-bit integers; anything wider is kept verbatim
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# int32 has at most 10 digits; longer strings are never parsed
_MAX_DIGITS = 10


def normalize_code(fragment: str) -> str:
    """
    Canonicalize a branch code fragment.

    Numeric fragments collapse to their decimal form ("007" -> "7", "+12" ->
    "12"). Anything else, including the empty string, is returned unchanged.
    The same function is applied to dataset entries and to query input so that
    both sides compare equal regardless of leading zeros.
    """

    if not _INT_RE.fullmatch(fragment) or len(fragment.lstrip("+-")) > _MAX_DIGITS:
        return fragment
    value = int(fragment)
    if value < _INT32_MIN or value > _INT32_MAX:
        return fragment
    return str(value)
