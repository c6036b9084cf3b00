"""Custom exceptions for numlingo."""


class NumlingoError(Exception):
    """Base exception for all numlingo errors."""


class InvalidArgumentError(NumlingoError, ValueError):
    """Raised when an argument is malformed or inconsistent."""


class OutOfRangeError(InvalidArgumentError):
    """Raised when an argument falls outside the supported domain."""


class CurrencyFormatError(InvalidArgumentError):
    """Raised when an amount cannot be interpreted as a decimal number."""


class ConfigurationError(NumlingoError):
    """Raised when configuration is invalid."""


class PercentageError(NumlingoError, ZeroDivisionError):
    """Raised when a percentage is taken of a zero total."""
