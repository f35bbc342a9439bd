"""Fluid sizing parameters and the units they are expressed in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Unit(StrEnum):
    """Length units understood by the fluid transform."""

    PX = "px"
    REM = "rem"
    EM = "em"
    UNRECOGNIZED = ""


@dataclass(frozen=True)
class Dimension:
    """A numeric magnitude paired with its unit, e.g. ``1.5rem``."""

    magnitude: float
    unit: Unit


@dataclass(frozen=True)
class ParameterSet:
    """The four bounds a fluid size interpolates between.

    Sizes are the property values at the two viewport widths; widths are the
    viewport widths where interpolation starts and stops. All four keep their
    original text (``"1.2em"``, ``"420px"``) so they can be written back out
    unchanged.
    """

    min_size: str
    max_size: str
    min_width: str
    max_width: str
