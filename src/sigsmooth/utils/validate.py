"""Validation utilities for sigsmooth."""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Integral

import numpy as np
from numpy.typing import ArrayLike, NDArray

from sigsmooth.errors import InvalidCoefficients

__all__ = [
    "validate_window",
    "validate_xy",
]


def validate_window(
    left_width: int,
    right_width: int,
    coefficients: Iterable[float],
) -> tuple[float, ...]:
    """Validates a filter window and returns its coefficients as a tuple.

    Requirements:
      - ``left_width`` and ``right_width`` are non-negative integers.
      - ``len(coefficients) == left_width + 1 + right_width``.

    The coefficient values are returned unchanged, only converted to
    ``float`` and frozen into a tuple.

    Args:
        left_width: Number of samples used before the current one.
        right_width: Number of samples used after the current one.
        coefficients: Convolution weights ordered from the leftmost
            neighbour to the rightmost one.

    Returns:
        The coefficients as a tuple of floats.

    Raises:
        InvalidCoefficients: If a width is not a non-negative integer, a
            coefficient is not a real number, or the number of
            coefficients does not match the window.
    """
    for label, width in (("left_width", left_width), ("right_width", right_width)):
        if isinstance(width, bool) or not isinstance(width, Integral):
            raise InvalidCoefficients(
                f"{label} must be an integer; got {width!r} of type {type(width).__name__}."
            )
    if left_width < 0 or right_width < 0:
        raise InvalidCoefficients(
            f"window widths must be non-negative; got left_width={left_width}, "
            f"right_width={right_width}."
        )
    try:
        coeffs = tuple(float(c) for c in coefficients)
    except (TypeError, ValueError) as e:
        raise InvalidCoefficients(f"coefficients must be real numbers: {e}") from e
    expected = left_width + 1 + right_width
    if len(coeffs) != expected:
        raise InvalidCoefficients(
            f"coefficients must have length left_width + 1 + right_width = {expected}; "
            f"got {len(coeffs)}."
        )
    return coeffs


def validate_xy(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Validates and converts curve ``x`` and ``y`` arrays into NumPy arrays.

    Unlike a tabulated model grid, ``x`` is not required to be increasing:
    the ordering of a curve is a convention of the caller.

    Args:
        x: 1D array-like of abscissas.
        y: 1D array-like of ordinates with ``len(y) == len(x)``.

    Returns:
        Tuple of (x_array, y_array) as 1D float NumPy arrays.

    Raises:
        ValueError: If input arrays do not meet the required conditions.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)

    if x_arr.ndim != 1:
        raise ValueError(f"x must be 1D; got ndim={x_arr.ndim}.")
    if y_arr.ndim != 1:
        raise ValueError(f"y must be 1D; got ndim={y_arr.ndim}.")
    if x_arr.shape[0] != y_arr.shape[0]:
        raise ValueError(
            f"x and y must have the same length; got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )

    return x_arr, y_arr
