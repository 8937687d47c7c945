"""Dependency Injection container.

Provides centralized dependency management for the application.
Defaults come from the environment, optionally loaded from a ``.env`` file.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from application.use_cases import (
    DescribeEnergyUnitUseCase,
    FormatEnergyUseCase,
    FormatJoulesUseCase,
)
from config.constants import ENV_DIGITS, ENV_FOOD_ENERGY, ENV_UNIT_STYLE
from domain.exceptions import InvalidConfigurationError
from domain.models import FormatterConfig, UnitStyle
from domain.services.energy_formatter import EnergyFormatter
from domain.services.number_formatter import NumberFormatter
from infrastructure.environment.locale_provider import (
    EnvironmentLocaleProvider,
    LocaleProvider,
    StaticLocaleProvider,
    normalize_locale_identifier,
)
from infrastructure.formatting.babel_number_formatter import BabelNumberFormatter

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_unit_style(value: Optional[str]) -> UnitStyle:
    """Parse a unit style name; empty means medium."""
    cleaned = (value or "").strip().upper()
    if not cleaned:
        return UnitStyle.MEDIUM
    try:
        return UnitStyle[cleaned]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unit style must be short, medium or long, got {value!r}"
        ) from None


def parse_flag(value: Optional[str], default: bool = False) -> bool:
    """Parse a boolean environment flag."""
    cleaned = (value or "").strip().lower()
    if not cleaned:
        return default
    if cleaned in _TRUE_VALUES:
        return True
    if cleaned in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(f"Expected a boolean flag, got {value!r}")


def parse_digits(value: Optional[str]) -> Optional[int]:
    """Parse an optional fraction digit count."""
    cleaned = (value or "").strip()
    if not cleaned:
        return None
    try:
        digits = int(cleaned)
    except ValueError:
        raise InvalidConfigurationError(f"Digits must be an integer, got {value!r}") from None
    if digits < 0:
        raise InvalidConfigurationError(f"Digits cannot be negative: {digits}")
    return digits


class Container:
    """Dependency injection container.

    Provides singleton instances of services and use cases.
    """

    def __init__(
        self,
        locale_identifier: Optional[str] = None,
        unit_style: Optional[UnitStyle] = None,
        is_for_food_energy_use: Optional[bool] = None,
        digits: Optional[int] = None,
        locale_provider: Optional[LocaleProvider] = None,
    ) -> None:
        """Initialize container.

        Args:
            locale_identifier: Locale to format for (if None, asks the locale provider)
            unit_style: Unit style (if None, reads ENERGY_FORMATTER_UNIT_STYLE)
            is_for_food_energy_use: Food energy mode (if None, reads
                ENERGY_FORMATTER_FOOD_ENERGY)
            digits: Fraction digits (if None, reads ENERGY_FORMATTER_DIGITS)
            locale_provider: Locale source (if None, uses the environment)
        """
        if locale_provider is None:
            locale_provider = (
                StaticLocaleProvider(normalize_locale_identifier(locale_identifier))
                if locale_identifier
                else EnvironmentLocaleProvider()
            )
        self._locale_provider = locale_provider
        self._unit_style = (
            unit_style if unit_style is not None else parse_unit_style(os.getenv(ENV_UNIT_STYLE))
        )
        self._is_for_food_energy_use = (
            is_for_food_energy_use
            if is_for_food_energy_use is not None
            else parse_flag(os.getenv(ENV_FOOD_ENERGY))
        )
        self._digits = digits if digits is not None else parse_digits(os.getenv(ENV_DIGITS))

        # Lazy-initialized singletons
        self._number_formatter: Optional[NumberFormatter] = None
        self._energy_formatter: Optional[EnergyFormatter] = None

        self._format_energy_use_case: Optional[FormatEnergyUseCase] = None
        self._format_joules_use_case: Optional[FormatJoulesUseCase] = None
        self._describe_unit_use_case: Optional[DescribeEnergyUnitUseCase] = None

    # Infrastructure
    @property
    def locale_provider(self) -> LocaleProvider:
        """Get locale provider."""
        return self._locale_provider

    @property
    def number_formatter(self) -> NumberFormatter:
        """Get Babel number formatter for the provided locale."""
        if self._number_formatter is None:
            self._number_formatter = BabelNumberFormatter(
                self._locale_provider.locale_identifier(),
                digits=self._digits,
            )
        return self._number_formatter

    # Domain Services
    @property
    def energy_formatter(self) -> EnergyFormatter:
        """Get energy formatter."""
        if self._energy_formatter is None:
            self._energy_formatter = EnergyFormatter(
                FormatterConfig(
                    number_formatter=self.number_formatter,
                    unit_style=self._unit_style,
                    is_for_food_energy_use=self._is_for_food_energy_use,
                )
            )
        return self._energy_formatter

    # Use Cases
    @property
    def format_energy(self) -> FormatEnergyUseCase:
        """Get format energy use case."""
        if self._format_energy_use_case is None:
            self._format_energy_use_case = FormatEnergyUseCase(self.energy_formatter)
        return self._format_energy_use_case

    @property
    def format_joules(self) -> FormatJoulesUseCase:
        """Get format joules use case."""
        if self._format_joules_use_case is None:
            self._format_joules_use_case = FormatJoulesUseCase(self.energy_formatter)
        return self._format_joules_use_case

    @property
    def describe_unit(self) -> DescribeEnergyUnitUseCase:
        """Get describe unit use case."""
        if self._describe_unit_use_case is None:
            self._describe_unit_use_case = DescribeEnergyUnitUseCase(self.energy_formatter)
        return self._describe_unit_use_case
