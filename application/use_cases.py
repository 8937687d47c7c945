"""Application use cases.

Use cases orchestrate the energy formatter for the entry points.
"""

from domain.models import EnergyFormatResult, EnergyUnit
from domain.services.energy_formatter import EnergyFormatter


class FormatEnergyUseCase:
    """Format a value already expressed in a given unit."""

    def __init__(self, formatter: EnergyFormatter) -> None:
        self._formatter = formatter

    def execute(self, value: float, unit: EnergyUnit) -> str:
        """Format value.

        Args:
            value: Quantity in ``unit``
            unit: Unit of the quantity

        Returns:
            Formatted text, e.g. ``2 kilojoules``
        """
        return self._formatter.format(value, unit)


class FormatJoulesUseCase:
    """Format a joule quantity in the locale-appropriate unit."""

    def __init__(self, formatter: EnergyFormatter) -> None:
        self._formatter = formatter

    def execute(self, value_in_joules: float) -> EnergyFormatResult:
        """Format joules.

        Args:
            value_in_joules: Quantity in joules

        Returns:
            Formatted text and the unit chosen for it
        """
        return self._formatter.format_from_joules(value_in_joules)


class DescribeEnergyUnitUseCase:
    """Return only the unit label for a joule quantity or a unit value."""

    def __init__(self, formatter: EnergyFormatter) -> None:
        self._formatter = formatter

    def execute(
        self,
        value: float,
        unit: EnergyUnit | None = None,
    ) -> EnergyFormatResult:
        """Describe unit.

        Args:
            value: Quantity in ``unit``, or in joules when ``unit`` is None
            unit: Unit of the quantity (None = pick from joules)

        Returns:
            Unit label and the unit it belongs to
        """
        if unit is None:
            return self._formatter.unit_label_from_joules(value)
        return EnergyFormatResult(self._formatter.unit_label(value, unit), unit)
