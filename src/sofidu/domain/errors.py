from __future__ import annotations

"""
Domain Exceptions.

Errors raised while interpreting user input. Filesystem problems met
during a walk are never raised; they are absorbed by the walker.
"""

# -----------------------------------------------------------------------------
# SIZE STRING ERRORS
# -----------------------------------------------------------------------------

class SizeFormatError(ValueError):
    """Base class for human-readable size strings that cannot be converted."""


class InvalidUnitError(SizeFormatError):
    """The unit suffix of a size string is not one of B, KB, MB, GB."""

    def __init__(self, unit: str, supported: str) -> None:
        self.unit = unit
        super().__init__(
            f"Invalid file size unit: {unit}.\n Supported file size units: {supported}."
        )


class SizeParseError(SizeFormatError):
    """The numeric portion of a size string is not a valid number."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Failed to parse value: {value}")

# -----------------------------------------------------------------------------
# CONFIGURATION ERRORS
# -----------------------------------------------------------------------------

class ConfigurationError(Exception):
    """Raised by the validator when settings cannot be used to start a walk."""
