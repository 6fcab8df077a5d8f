"""Input-validation errors raised while placing shared figure labels."""

from __future__ import annotations


class SuplabelError(ValueError):
    """Base class for invalid ``suplabel`` requests."""


class MixedFigureError(SuplabelError):
    """Raised when explicitly given axes belong to more than one figure."""


class TooManyOutputsError(SuplabelError):
    """Raised when more handles are requested than labels + overlay axes."""
