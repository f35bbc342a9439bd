"""Tests for unit extraction and number formatting."""

import math

import pytest

from fluidtype.fluid.units import (
    format_number,
    get_unit,
    magnitude,
    numeric_tokens,
    parse_dimension,
    px_to_rem,
)
from fluidtype.model.params import Dimension, Unit


class TestGetUnit:
    @pytest.mark.parametrize(
        "value, unit",
        [
            ("16px", Unit.PX),
            ("1.5rem", Unit.REM),
            ("1.2em", Unit.EM),
            ("-2px", Unit.PX),
            ("1.5", Unit.UNRECOGNIZED),
            ("", Unit.UNRECOGNIZED),
        ],
    )
    def test_units(self, value, unit):
        assert get_unit(value) is unit

    def test_leftmost_unit_wins(self):
        assert get_unit("2em 12px") is Unit.EM
        assert get_unit("12px 2em") is Unit.PX

    def test_rem_is_not_read_as_em(self):
        assert get_unit("2rem") is Unit.REM


class TestMagnitude:
    def test_leading_number(self):
        assert magnitude("420px") == 420
        assert magnitude("1.25em") == 1.25
        assert magnitude(".5rem") == 0.5
        assert magnitude("-1px") == -1

    def test_no_number_is_nan(self):
        assert math.isnan(magnitude("fluid"))
        assert math.isnan(magnitude("px"))

    def test_parse_dimension(self):
        assert parse_dimension("1.5rem") == Dimension(magnitude=1.5, unit=Unit.REM)
        assert parse_dimension("2") == Dimension(magnitude=2.0, unit=Unit.UNRECOGNIZED)


class TestNumericTokens:
    def test_sizes_after_marker(self):
        assert numeric_tokens("fluid 16px 32px") == ["16px", "32px"]

    def test_negative_and_decimal(self):
        assert numeric_tokens("fluid -1.5em .5em") == ["-1.5em", ".5em"]

    def test_unitless(self):
        assert numeric_tokens("fluid 1.5 2") == ["1.5", "2"]

    def test_bare_marker(self):
        assert numeric_tokens("fluid") == []


class TestFormatNumber:
    @pytest.mark.parametrize(
        "number, text",
        [
            (9.0, "9"),
            (860.0, "860"),
            (0.5, "0.5"),
            (-0.25, "-0.25"),
            (53.75, "53.75"),
            (1.8 - 1.2, "0.6000000000000001"),
            (-0.0, "0"),
            (0.00005, "0.00005"),
            (1e21, "1e+21"),
        ],
    )
    def test_format(self, number, text):
        assert format_number(number) == text

    def test_nan(self):
        assert format_number(math.nan) == "NaN"


class TestPxToRem:
    def test_default_root(self):
        assert px_to_rem("420px", "16px") == "26.25rem"
        assert px_to_rem("1280px", "16px") == "80rem"

    def test_custom_root(self):
        assert px_to_rem("1200px", "20px") == "60rem"
