"""Locale preferences for the energy unit family."""

from __future__ import annotations

from typing import Optional

from config.constants import CALORIE_LOCALES


def uses_calories(locale_identifier: Optional[str]) -> bool:
    """Check whether a locale prefers calories over joules.

    Only exact identifiers listed in ``CALORIE_LOCALES`` match; there is
    no fallback on language or region alone.
    """
    if not locale_identifier:
        return False
    return locale_identifier in CALORIE_LOCALES
