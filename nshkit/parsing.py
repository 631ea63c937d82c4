"""Digit and unsigned integer parsing in arbitrary bases up to 16."""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1

_DIGIT_VALUES = {ord(ch): int(ch, 16) for ch in "0123456789abcdefABCDEF"}


def parse_digit(c):
    """Return the value of a hexadecimal digit (character or code), or None."""
    if isinstance(c, str):
        if len(c) != 1:
            return None
        c = ord(c)
    return _DIGIT_VALUES.get(c)


def parse_integer(text: str, basis: int, max_length: int | None = None):
    """Parse the leading digits of text in the given basis.

    Returns (value, number of characters consumed). Raises OverflowError
    when the value does not fit in an unsigned 64-bit integer.
    """
    value = 0
    length = 0
    chars = text if max_length is None else text[:max_length]
    for ch in chars:
        digit = parse_digit(ch)
        if digit is None or digit >= basis:
            break
        value = value * basis + digit
        if value > _SIZE_MAX:
            raise OverflowError(f"integer too large: {text!r}")
        length += 1
    return value, length


def parse_pure_integer(text: str, basis: int) -> int:
    """Parse a string made only of digits; raise ValueError on other characters."""
    value, length = parse_integer(text, basis)
    if length != len(text):
        raise ValueError(f"invalid base {basis} integer: {text!r}")
    return value