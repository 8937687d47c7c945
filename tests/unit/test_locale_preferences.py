"""Tests for locale calorie preference."""

import pytest

from domain.services.locale_preferences import uses_calories


class TestUsesCalories:
    """Test uses_calories function."""

    @pytest.mark.parametrize(
        "identifier",
        ["en_US", "en_US_POSIX", "haw_US", "es_US", "chr_US", "en_GB", "kw_GB", "cy_GB", "gv_GB"],
    )
    def test_listed_locales_use_calories(self, identifier: str) -> None:
        assert uses_calories(identifier) is True

    def test_other_locales_use_joules(self) -> None:
        assert uses_calories("fr_FR") is False
        assert uses_calories("de_DE") is False
        assert uses_calories("en_AU") is False

    def test_requires_exact_identifier(self) -> None:
        assert uses_calories("en") is False
        assert uses_calories("US") is False
        assert uses_calories("en-US") is False
        assert uses_calories("en_us") is False

    def test_handles_empty_and_none(self) -> None:
        assert uses_calories("") is False
        assert uses_calories(None) is False
