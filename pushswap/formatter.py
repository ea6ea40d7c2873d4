"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_CONVERSIONS = "cspdiuxX%"
_UINT32 = 0xFFFFFFFF
_POINTER = 0xFFFFFFFFFFFFFFFF


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    value = _next_arg(args)
    if spec == "c":
        return value[:1] if isinstance(value, str) else chr(int(value) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_signed32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT32)
    if spec in "xX":
        return format(int(value) & _UINT32, spec)
    return "0x" + format((int(value) if value is not None else 0) & _POINTER, "x")


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    A '%' followed by anything other than a supported conversion is dropped.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec and spec in _CONVERSIONS:
            pieces.append(_convert(spec, values))
        else:
            pieces.append(spec)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)