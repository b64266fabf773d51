"""Exceptions raised by sigsmooth."""

from __future__ import annotations

__all__ = ["InvalidCoefficients", "OperationFailed"]


class InvalidCoefficients(ValueError):
    """Raised when a filter is constructed with an inconsistent window geometry.

    The coefficient vector of a Savitzky-Golay filter must hold exactly
    ``left_width + 1 + right_width`` values, and both widths must be
    non-negative.
    """


class OperationFailed(RuntimeError):
    """Raised when the input curve cannot answer ``size()`` / ``get(i)``.

    The original exception raised by the curve is chained as ``__cause__``.
    """
