"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from typing import Any

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)
_UINT32 = 0xFFFF_FFFF
_ULONG = 0xFFFF_FFFF_FFFF_FFFF


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = int(value) & _ULONG
    return "(nil)" if address == 0 else f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_signed32(int(value))),
    "i": lambda value: str(_signed32(int(value))),
    "u": lambda value: str(int(value) & _UINT32),
    "x": lambda value: format(int(value) & _UINT32, "x"),
    "X": lambda value: format(int(value) & _UINT32, "X"),
}


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    An unknown conversion is written as a bare '%' and its letter dropped.
    Raises ValueError when there are fewer arguments than conversions.
    """
    remaining = iter(args)

    def substitute(match: re.Match[str]) -> str:
        convert = _CONVERSIONS.get(match.group(1))
        if convert is None:
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None
        return convert(value)

    return _DIRECTIVE.sub(substitute, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)