"""Domain models.

Core value types for energy formatting: the energy units with their
metadata, the unit styles, and the formatter configuration.
These models are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from config.constants import (
    JOULES_PER_CALORIE,
    JOULES_PER_JOULE,
    JOULES_PER_KILOCALORIE,
    JOULES_PER_KILOJOULE,
)
from domain.services.number_formatter import NumberFormatter


class EnergyUnit(Enum):
    """An energy unit supported by the formatter.

    Values are the integer codes historically used for these units.
    """

    JOULE = 11
    KILOJOULE = 14
    CALORIE = 1793  # chemistry calorie, "cal"
    KILOCALORIE = 1794  # "kcal", or "C"/"Cal" in food energy mode

    @property
    def joules_per_unit(self) -> float:
        """Conversion factor from this unit to joules."""
        return _JOULES_PER_UNIT[self]

    @property
    def symbol(self) -> str:
        """Display symbol for short and medium styles."""
        return _SYMBOLS[self]

    @property
    def singular_name(self) -> str:
        """Full singular name, e.g. ``joule``."""
        return _SINGULAR_NAMES[self]

    @property
    def plural_name(self) -> str:
        """Full plural name, e.g. ``joules``."""
        return f"{self.singular_name}s"


_JOULES_PER_UNIT = {
    EnergyUnit.JOULE: JOULES_PER_JOULE,
    EnergyUnit.KILOJOULE: JOULES_PER_KILOJOULE,
    EnergyUnit.CALORIE: JOULES_PER_CALORIE,
    EnergyUnit.KILOCALORIE: JOULES_PER_KILOCALORIE,
}

# Kilocalorie shows "kcal" rather than the conversion symbol "kCal"
_SYMBOLS = {
    EnergyUnit.JOULE: "J",
    EnergyUnit.KILOJOULE: "kJ",
    EnergyUnit.CALORIE: "cal",
    EnergyUnit.KILOCALORIE: "kcal",
}

_SINGULAR_NAMES = {
    EnergyUnit.JOULE: "joule",
    EnergyUnit.KILOJOULE: "kilojoule",
    EnergyUnit.CALORIE: "calorie",
    EnergyUnit.KILOCALORIE: "kilocalorie",
}


class UnitStyle(Enum):
    """Verbosity of the rendered unit."""

    SHORT = 1
    MEDIUM = 2
    LONG = 3


@dataclass
class FormatterConfig:
    """Settings consumed by ``EnergyFormatter``.

    Mutable so that callers can switch style or food energy mode between
    calls on the same formatter.
    """

    number_formatter: NumberFormatter
    unit_style: UnitStyle = UnitStyle.MEDIUM
    is_for_food_energy_use: bool = False
    locale_identifier: Optional[str] = None

    @property
    def effective_locale_identifier(self) -> str:
        """Locale used for the calorie preference.

        Falls back to the number formatter's locale when none is set.
        """
        if self.locale_identifier:
            return self.locale_identifier
        return self.number_formatter.locale_identifier


class EnergyFormatResult(NamedTuple):
    """Rendered text together with the unit chosen for it."""

    text: str
    unit: EnergyUnit
