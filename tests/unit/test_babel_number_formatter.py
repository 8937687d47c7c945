"""Tests for BabelNumberFormatter."""

import logging
import math

import pytest

from domain.exceptions import NumericRenderingError
from infrastructure.formatting.babel_number_formatter import (
    BabelNumberFormatter,
    _cap_fraction_digits,
)


@pytest.fixture
def us_formatter() -> BabelNumberFormatter:
    """Create en_US formatter."""
    return BabelNumberFormatter("en_US")


class TestFormat:
    """Test format method."""

    def test_formats_integers_without_fraction(self, us_formatter: BabelNumberFormatter) -> None:
        assert us_formatter.format(1.0) == "1"
        assert us_formatter.format(250) == "250"

    def test_rounds_to_three_fraction_digits(self, us_formatter: BabelNumberFormatter) -> None:
        assert us_formatter.format(10.3 / 4.184) == "2.462"

    def test_groups_thousands(self, us_formatter: BabelNumberFormatter) -> None:
        assert us_formatter.format(1234567.891) == "1,234,567.891"

    def test_uses_locale_separators(self) -> None:
        assert BabelNumberFormatter("de_DE").format(1234.5) == "1.234,5"

    def test_fixed_digits(self) -> None:
        assert BabelNumberFormatter("en_US", digits=2).format(2.5) == "2.50"
        assert BabelNumberFormatter("en_US", digits=0).format(1234.6) == "1,235"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, us_formatter: BabelNumberFormatter, value: float) -> None:
        with pytest.raises(NumericRenderingError) as excinfo:
            us_formatter.format(value)

        assert excinfo.value.value is value

    def test_rejects_non_numbers(self, us_formatter: BabelNumberFormatter) -> None:
        with pytest.raises(NumericRenderingError):
            us_formatter.format("ten")  # type: ignore[arg-type]


class TestLocale:
    """Test locale handling."""

    def test_exposes_locale_identifier(self) -> None:
        formatter = BabelNumberFormatter("de_DE", digits=1)

        assert formatter.locale_identifier == "de_DE"
        assert formatter.digits == 1

    def test_unknown_locale_falls_back_for_rendering(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            formatter = BabelNumberFormatter("xx_YY")

        assert formatter.locale_identifier == "xx_YY"
        assert formatter.format(1234.5) == "1,234.5"
        assert "Unknown locale" in caplog.text


class TestLargeValues:
    """Test rendering of large finite values."""

    def test_formats_values_beyond_default_decimal_precision(
        self,
        us_formatter: BabelNumberFormatter,
    ) -> None:
        assert us_formatter.format(1e25) == "10,000,000,000,000,000,000,000,000"

    def test_formats_largest_magnitudes(self, us_formatter: BabelNumberFormatter) -> None:
        text = us_formatter.format(1e300)

        assert text.replace(",", "") == "1" + "0" * 300

    def test_keeps_fraction_rounding(self, us_formatter: BabelNumberFormatter) -> None:
        assert us_formatter.format(2.4617) == "2.462"


class TestFractionDigits:
    """Test the default fraction digit limit."""

    def test_caps_posix_locale_at_three_digits(self) -> None:
        formatter = BabelNumberFormatter("en_US_POSIX")

        assert formatter.format(10.3 / 4.184) == "2.462"
        assert formatter.format(1234.5) == "1234.5"

    def test_cap_fraction_digits(self) -> None:
        assert _cap_fraction_digits("0.######", 3) == "0.###"
        assert _cap_fraction_digits("#,##0.###", 3) == "#,##0.###"
        assert _cap_fraction_digits("#,##0.0000", 3) == "#,##0.000"
        assert _cap_fraction_digits("#,##0", 3) == "#,##0"

    def test_fixed_digits_override_cap(self) -> None:
        assert BabelNumberFormatter("en_US", digits=5).format(1.5) == "1.50000"
