"""Attribute-value text for the DecentSampler XML renderer.

Values are interpolated verbatim, with numbers printed the way a JSON number
reads back (``36``, ``-12``, ``0.001``) so that a kit loaded from JSON renders
the same text no matter whether the parser produced ``36`` or ``36.0``.
Values are not XML-escaped.
"""
from __future__ import annotations

import math


def format_number(value: int | float) -> str:
    """Shortest round-trip text for *value*; integral floats drop the ``.0``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return _integral_text(value)
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else "+"
        return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"
    return text


def _integral_text(value: float) -> str:
    """Round-trip digits of an integral float written out without an exponent."""
    if value == 0:
        return "0"
    text = repr(value)
    if "e" not in text:
        return text.removesuffix(".0")
    mantissa, exponent = text.split("e")
    sign = "-" if mantissa.startswith("-") else ""
    whole, _, fraction = mantissa.lstrip("-").partition(".")
    return sign + (whole + fraction).ljust(len(whole) + int(exponent), "0")


def format_value(value: object) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def attr(name: str, value: object) -> str:
    """`` name="value"`` with the leading space the renderer concatenates on."""
    return f' {name}="{format_value(value)}"'
