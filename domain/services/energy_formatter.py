"""Energy formatting service.

Turns energy quantities into localized, unit-scaled text such as
``2.462 cal`` or ``1 kilojoule``.
Pure business logic: number rendering is delegated to the configured
number formatter.
"""

import logging

from domain.models import EnergyFormatResult, EnergyUnit, FormatterConfig, UnitStyle
from domain.services.energy_units import convert_from_joules, select_unit, unit_label
from domain.services.locale_preferences import uses_calories


class EnergyFormatter:
    """Format energy values for display."""

    def __init__(self, config: FormatterConfig) -> None:
        self.config = config

    def format(self, value: float, unit: EnergyUnit) -> str:
        """Format a value already expressed in ``unit``.

        Args:
            value: Quantity in ``unit``
            unit: Unit to display

        Returns:
            Number, style separator and unit label, e.g. ``5 kJ``

        Raises:
            NumericRenderingError: If the number formatter cannot render the value
        """
        formatted_value = self.config.number_formatter.format(value)
        separator = "" if self.config.unit_style is UnitStyle.SHORT else " "
        return f"{formatted_value}{separator}{self.unit_label(value, unit)}"

    def format_from_joules(self, value_in_joules: float) -> EnergyFormatResult:
        """Format a joule quantity in the locale-appropriate unit and scale.

        For example 10.3 J renders as ``2.462 cal`` in the US locale.
        """
        unit, value = self._scale_joules(value_in_joules)
        return EnergyFormatResult(self.format(value, unit), unit)

    def unit_label(self, value: float, unit: EnergyUnit) -> str:
        """Return the unit label for ``value``, singular or plural as needed."""
        return unit_label(
            value,
            unit,
            self.config.unit_style,
            self.config.is_for_food_energy_use,
        )

    def unit_label_from_joules(self, value_in_joules: float) -> EnergyFormatResult:
        """Return the label of the unit ``format_from_joules`` would use."""
        unit, value = self._scale_joules(value_in_joules)
        return EnergyFormatResult(self.unit_label(value, unit), unit)

    def _scale_joules(self, value_in_joules: float) -> tuple[EnergyUnit, float]:
        locale_identifier = self.config.effective_locale_identifier
        prefer_calories = uses_calories(locale_identifier)
        unit = select_unit(value_in_joules, prefer_calories)
        logging.debug(
            "Selected %s for %s J (locale=%s, calories=%s)",
            unit.name,
            value_in_joules,
            locale_identifier,
            prefer_calories,
        )
        return unit, convert_from_joules(value_in_joules, unit)
