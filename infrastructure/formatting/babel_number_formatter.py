"""Babel-backed number formatter.

Renders decimals with CLDR locale data through ``babel.numbers``.
"""

import decimal
import logging
import math
import re
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from config.constants import (
    DECIMAL_CONTEXT_PRECISION,
    DEFAULT_NUMBER_LOCALE,
    DEFAULT_NUMBER_PATTERN,
    MAX_FRACTION_DIGITS,
)
from domain.exceptions import NumericRenderingError
from domain.services.number_formatter import NumberFormatter

_FRACTION_RE = re.compile(r"\.(0*)(#*)")


def _cap_fraction_digits(pattern: str, limit: int) -> str:
    """Limit every fraction part of ``pattern`` to ``limit`` digits."""

    def replace(match: re.Match) -> str:
        required = min(len(match.group(1)), limit)
        return "." + ("0" * required) + ("#" * (limit - required))

    return _FRACTION_RE.sub(replace, pattern)


def _decimal_pattern(locale: Locale, digits: Optional[int]) -> str:
    if digits is None:
        locale_pattern = locale.decimal_formats.get(None)
        if locale_pattern is None:
            return DEFAULT_NUMBER_PATTERN
        return _cap_fraction_digits(locale_pattern.pattern, MAX_FRACTION_DIGITS)
    if digits <= 0:
        return "#,##0"
    return "#,##0." + ("0" * digits)


class BabelNumberFormatter(NumberFormatter):
    """Locale-aware decimal formatter using Babel.

    Immutable after construction, so one instance can be shared between
    threads.
    """

    def __init__(self, locale_identifier: str, digits: Optional[int] = None) -> None:
        """Initialize formatter.

        Args:
            locale_identifier: Locale to render for, e.g. ``de_DE``
            digits: Fixed number of fraction digits (None = locale pattern,
                at most three)
        """
        self._locale_identifier = locale_identifier
        self._digits = digits
        self._locale = self._resolve_locale(locale_identifier)
        self._pattern = _decimal_pattern(self._locale, digits)

    @property
    def locale_identifier(self) -> str:
        return self._locale_identifier

    @property
    def digits(self) -> Optional[int]:
        return self._digits

    @property
    def pattern(self) -> str:
        return self._pattern

    def format(self, value: float) -> str:
        try:
            finite = math.isfinite(value)
        except TypeError as exc:
            raise NumericRenderingError(f"Cannot format {value!r} as a number", value) from exc
        if not finite:
            raise NumericRenderingError(f"Cannot format {value} as string", value)

        try:
            # Every finite double must fit, including its fraction digits
            with decimal.localcontext() as ctx:
                ctx.prec = DECIMAL_CONTEXT_PRECISION
                return format_decimal(value, format=self._pattern, locale=self._locale)
        except (ArithmeticError, TypeError, ValueError) as exc:
            raise NumericRenderingError(f"Cannot format {value} as string: {exc}", value) from exc

    @staticmethod
    def _resolve_locale(locale_identifier: str) -> Locale:
        try:
            return Locale.parse(locale_identifier)
        except (UnknownLocaleError, ValueError, TypeError) as exc:
            logging.warning(
                "Unknown locale %r for number formatting, using %s: %s",
                locale_identifier,
                DEFAULT_NUMBER_LOCALE,
                exc,
            )
            return Locale.parse(DEFAULT_NUMBER_LOCALE)
