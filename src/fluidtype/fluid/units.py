"""Tokenizing and converting the numeric values of fluid declarations.

Numbers are read and printed with the same rules browsers' CSS tooling uses
for JavaScript numbers, so that ``1.8em - 1.2em`` is written out as
``0.6000000000000001`` and ``840 / 1`` as ``840``.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from fluidtype.model.params import Dimension, Unit

__all__ = [
    "get_unit",
    "magnitude",
    "parse_dimension",
    "numeric_tokens",
    "px_to_rem",
    "format_number",
]

# Leftmost match wins; at a single position "px" is tried before "rem"/"em".
_UNIT_RE = re.compile(r"px|rem|em")

# Leading number, as read by JavaScript's parseFloat().
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

# A number with an optional sign and unit suffix: 16px, -1.5em, .5, 2
_NUMERIC_TOKEN_RE = re.compile(r"-?\d*\.?\d+(?:\w+)?")


def get_unit(value: str) -> Unit:
    """Return the first px/rem/em unit found in *value*."""
    match = _UNIT_RE.search(value)
    if match is None:
        return Unit.UNRECOGNIZED
    return Unit(match.group())


def magnitude(value: str) -> float:
    """Return the leading number of *value*, or NaN when there is none."""
    match = _LEADING_NUMBER_RE.match(value)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_dimension(value: str) -> Dimension:
    return Dimension(magnitude=magnitude(value), unit=get_unit(value))


def numeric_tokens(value: str) -> list[str]:
    """Return every number in *value*, each with its unit suffix if present."""
    return _NUMERIC_TOKEN_RE.findall(value)


def format_number(number: float) -> str:
    """Format *number* the way JavaScript's ``String(number)`` does."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == int(number) and abs(number) < 1e21:
        return str(int(number))
    text = repr(number)
    if "e" not in text:
        return text
    if 1e-6 <= abs(number) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0')}"


def px_to_rem(px: str, root_size: str) -> str:
    """Convert a pixel length to rem relative to *root_size* (e.g. ``"16px"``)."""
    return format_number(magnitude(px) / magnitude(root_size)) + "rem"
