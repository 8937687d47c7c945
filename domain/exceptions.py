"""Domain-specific exceptions.

Custom exceptions provide better error handling and clearer intent
than generic exceptions.
"""


class EnergyFormatterError(Exception):
    """Base exception for all application errors."""


# ============================================================================
# Formatting Errors
# ============================================================================


class NumericRenderingError(EnergyFormatterError):
    """Raised when the number formatter cannot render a value."""

    def __init__(self, message: str, value: float | None = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidEnergyUnitError(EnergyFormatterError):
    """Raised when a unit name does not match any energy unit."""


# ============================================================================
# Configuration Errors
# ============================================================================


class InvalidConfigurationError(EnergyFormatterError):
    """Raised when a configuration value is malformed."""
