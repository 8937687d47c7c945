"""Energy unit selection, conversion and labelling helpers."""

from __future__ import annotations

from typing import Optional

from config.constants import (
    CALORIE_FAMILY_THRESHOLD,
    FOOD_KILOCALORIE_LONG,
    FOOD_KILOCALORIE_MEDIUM,
    FOOD_KILOCALORIE_SHORT,
    JOULE_FAMILY_THRESHOLD,
)
from domain.exceptions import InvalidEnergyUnitError
from domain.models import EnergyUnit, UnitStyle

_ENERGY_UNIT_ALIASES = {
    "j": EnergyUnit.JOULE,
    "joule": EnergyUnit.JOULE,
    "joules": EnergyUnit.JOULE,
    "kj": EnergyUnit.KILOJOULE,
    "kilojoule": EnergyUnit.KILOJOULE,
    "kilojoules": EnergyUnit.KILOJOULE,
    "cal": EnergyUnit.CALORIE,
    "calorie": EnergyUnit.CALORIE,
    "calories": EnergyUnit.CALORIE,
    "kcal": EnergyUnit.KILOCALORIE,
    "kilocalorie": EnergyUnit.KILOCALORIE,
    "kilocalories": EnergyUnit.KILOCALORIE,
}

_FOOD_KILOCALORIE_LABELS = {
    UnitStyle.SHORT: FOOD_KILOCALORIE_SHORT,
    UnitStyle.MEDIUM: FOOD_KILOCALORIE_MEDIUM,
    UnitStyle.LONG: FOOD_KILOCALORIE_LONG,
}


def parse_energy_unit(unit: Optional[str]) -> EnergyUnit:
    """Resolve a unit symbol or name (case-insensitive) to an energy unit."""
    cleaned = str(unit or "").strip().lower()
    if cleaned in _ENERGY_UNIT_ALIASES:
        return _ENERGY_UNIT_ALIASES[cleaned]
    raise InvalidEnergyUnitError(f"Unknown energy unit: {unit!r}")


def select_unit(value_in_joules: float, prefer_calories: bool) -> EnergyUnit:
    """Pick the unit a joule quantity should be displayed in.

    The small unit of the family covers (0, threshold]; zero, negative
    and NaN quantities get the large unit.
    """
    if prefer_calories:
        if 0 < value_in_joules <= CALORIE_FAMILY_THRESHOLD:
            return EnergyUnit.CALORIE
        return EnergyUnit.KILOCALORIE

    if 0 < value_in_joules <= JOULE_FAMILY_THRESHOLD:
        return EnergyUnit.JOULE
    return EnergyUnit.KILOJOULE


def convert_from_joules(value_in_joules: float, unit: EnergyUnit) -> float:
    """Convert a joule quantity to ``unit``."""
    return value_in_joules / unit.joules_per_unit


def convert_to_joules(value: float, unit: EnergyUnit) -> float:
    """Convert a quantity expressed in ``unit`` to joules."""
    return value * unit.joules_per_unit


def unit_label(
    value: float,
    unit: EnergyUnit,
    style: UnitStyle,
    is_for_food_energy_use: bool = False,
) -> str:
    """Return the unit text to display next to ``value``.

    Args:
        value: Quantity already expressed in ``unit``
        unit: Unit being displayed
        style: Short and medium use the symbol, long uses the full name
        is_for_food_energy_use: Render kilocalories as food Calories

    Returns:
        Unit label; long style is singular only when ``value`` is exactly 1
    """
    if is_for_food_energy_use and unit is EnergyUnit.KILOCALORIE:
        return _FOOD_KILOCALORIE_LABELS[style]

    if style in (UnitStyle.SHORT, UnitStyle.MEDIUM):
        return unit.symbol
    if value == 1.0:
        return unit.singular_name
    return unit.plural_name
