"""Parsing unsigned decimal numbers from command-line text."""

import re

_UINTMAX = 2**64 - 1
_LEADING_DIGITS = re.compile(r"[0-9]+")


def str_to_number(text: str) -> int:
    """Parse the leading decimal digits of ``text`` as an unsigned integer.

    Raises ValueError when ``text`` does not start with a digit and
    OverflowError when the value does not fit in 64 bits.
    """
    match = _LEADING_DIGITS.match(text)
    if match is None:
        raise ValueError(f"Expected a numerical secuence, not '{text}'")
    value = int(match.group())
    if value > _UINTMAX:
        raise OverflowError(f"numerical value out of range: '{text}'")
    return value