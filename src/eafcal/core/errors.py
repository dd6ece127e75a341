class EafError(Exception):
    """Base error."""

class DomainError(EafError, ValueError):
    """Raised by explicit validation when an input is outside a calendar's domain."""

class CoefficientOverflowError(EafError, OverflowError):
    """Raised when a derived fast-EAF coefficient does not fit its 64-bit field."""

class ConfigError(EafError):
    """Raised for an invalid width or calendar configuration."""
