"""Small string helpers: prefixes, C-style integer parsing, filename chars."""

from __future__ import annotations

import re
import string

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)

_PORTABLE_CHARS = frozenset(string.ascii_letters + string.digits + "._-")


def startswith(text: str, prefix: str) -> bool:
    """Tell whether text starts with prefix."""
    return text.startswith(prefix)


def parse_long(text: str) -> int:
    """Parse a whole string as a signed 64-bit integer, auto-detecting the base.

    Accepts leading whitespace, a sign, and 0x / 0 prefixes for hexadecimal
    and octal. Raises ValueError on bad syntax, OverflowError when out of range.
    """
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    if sign == "-":
        value = -value
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def parse_int(text: str) -> int:
    """Like parse_long, restricted to the signed 32-bit range."""
    value = parse_long(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def portable_filename_char(c: str) -> bool:
    """Tell whether c belongs to the POSIX portable filename character set."""
    return c in _PORTABLE_CHARS