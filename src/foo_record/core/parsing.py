"""Strict unsigned-integer parsing for fixed storage widths.

Python's :func:`int` is far more lenient than a storage-width parse
should be: it accepts surrounding whitespace, ``_`` separators, a minus
sign and non-ASCII digits.  :func:`parse_uint` accepts only an optional
leading ``+`` followed by ASCII digits, and rejects values that do not
fit in *bits* bits.
"""

from __future__ import annotations

import string

EMPTY_MESSAGE: str = "cannot parse integer from empty string"
INVALID_DIGIT_MESSAGE: str = "invalid digit found in string"
OVERFLOW_MESSAGE: str = "number too large to fit in target type"


def uint_max(bits: int) -> int:
    """Return the largest value representable in *bits* unsigned bits."""
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    return (1 << bits) - 1


def parse_uint(text: str, *, bits: int = 8) -> int:
    """Parse *text* as an unsigned integer of *bits* width.

    Raises
    ------
    ValueError
        With one of :data:`EMPTY_MESSAGE`, :data:`INVALID_DIGIT_MESSAGE`
        or :data:`OVERFLOW_MESSAGE` as its text.
    """
    limit = uint_max(bits)
    if not text:
        raise ValueError(EMPTY_MESSAGE)

    digits = text[1:] if text[0] == "+" else text
    if not digits or any(ch not in string.digits for ch in digits):
        raise ValueError(INVALID_DIGIT_MESSAGE)

    value = int(digits)
    if value > limit:
        raise ValueError(OVERFLOW_MESSAGE)
    return value
