"""Locale identifier providers.

Supply the locale the formatter uses to choose between calories and
joules.
"""

import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from config.constants import DEFAULT_LOCALE_IDENTIFIER, ENV_LOCALE, SYSTEM_LOCALE_VARIABLES

_POSIX_LOCALES = {"C", "POSIX"}


def normalize_locale_identifier(raw: Optional[str]) -> str:
    """Turn a POSIX locale value into a locale identifier.

    ``en_US.UTF-8@euro`` becomes ``en_US``, ``en-GB`` becomes ``en_GB`` and
    ``C``/``POSIX`` become ``en_US_POSIX``. Returns "" for empty input.
    """
    if not raw:
        return ""
    cleaned = str(raw).strip()
    cleaned = cleaned.split("@", 1)[0].split(".", 1)[0]
    if not cleaned:
        return ""
    if cleaned in _POSIX_LOCALES:
        return DEFAULT_LOCALE_IDENTIFIER
    return cleaned.replace("-", "_")


class LocaleProvider(ABC):
    """Abstract locale identifier source."""

    @abstractmethod
    def locale_identifier(self) -> str:
        """Return the current locale identifier, e.g. ``en_US``."""


class StaticLocaleProvider(LocaleProvider):
    """Always returns the identifier it was created with."""

    def __init__(self, identifier: str) -> None:
        self._identifier = identifier

    def locale_identifier(self) -> str:
        return self._identifier


class EnvironmentLocaleProvider(LocaleProvider):
    """Reads the locale from environment variables.

    ``ENERGY_FORMATTER_LOCALE`` wins over ``LC_ALL``, ``LC_NUMERIC`` and
    ``LANG``; the first non-empty value is used.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Initialize provider.

        Args:
            environ: Variables to read (if None, reads ``os.environ`` on each call)
        """
        self._environ = environ

    def locale_identifier(self) -> str:
        environ = self._environ if self._environ is not None else os.environ
        for name in (ENV_LOCALE, *SYSTEM_LOCALE_VARIABLES):
            identifier = normalize_locale_identifier(environ.get(name))
            if identifier:
                return identifier
        return DEFAULT_LOCALE_IDENTIFIER
