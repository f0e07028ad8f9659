"""Header validation and composition errors."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a header line, directive or value fails validation."""
    pass


class InvalidHeaderNameError(InvalidArgumentError):
    """Raised when a header line carries an unexpected or malformed field name."""
    pass


class HeaderRuntimeError(RuntimeError):
    """Raised when headers of different types are combined for serialization."""
    pass
