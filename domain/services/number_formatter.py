"""Number formatter abstraction.

The energy formatter renders numbers through this interface and never
formats decimals itself.
"""

from abc import ABC, abstractmethod


class NumberFormatter(ABC):
    """Abstract locale-aware decimal formatter."""

    @property
    @abstractmethod
    def locale_identifier(self) -> str:
        """Locale identifier the formatter renders for, e.g. ``en_US``."""

    @abstractmethod
    def format(self, value: float) -> str:
        """Render a number as a localized decimal string.

        Args:
            value: Number to render

        Returns:
            Localized decimal text

        Raises:
            NumericRenderingError: If the value cannot be rendered
        """
