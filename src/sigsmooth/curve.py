"""Sampled curves ("signatures") operated on by the filters.

A curve is an ordered, 0-indexed sequence of ``(x, y)`` datapoints. The
filters only rely on the small read interface described by
:class:`CurveLike` (``size()`` and ``get(i)``), so any object exposing it
can be smoothed. :class:`Curve` is the concrete implementation used for
filter outputs, and it can be built point by point with
:meth:`Curve.add_datapoint`, from arrays with :meth:`Curve.from_xy`, or
from a 2D table with :func:`curve_from_table`.

Example:
    >>> from sigsmooth.curve import Curve
    >>> curve = Curve.from_xy([0.0, 1.0, 2.0], [1.0, 2.0, 3.0])
    >>> curve.size()
    3
    >>> curve.get(1)
    Datapoint(x=1.0, y=2.0)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike

from sigsmooth.utils.types import Array, ArrayLike1D, ArrayLike2D
from sigsmooth.utils.validate import validate_xy

__all__ = ["Datapoint", "CurveLike", "Curve", "curve_from_table", "parse_xy_table"]


@dataclass(frozen=True)
class Datapoint:
    """A single ``(x, y)`` sample of a curve."""
    x: float
    y: float


class CurveLike(Protocol):
    """Protocol for the curves a filter can read.

    Only two queries are needed: the number of samples and random access
    to the ``i``-th sample for ``0 <= i < size()``. The returned object
    must expose ``x`` and ``y`` attributes.
    """
    def size(self) -> int:
        """Return the number of datapoints."""
        ...
    def get(self, i: int) -> Datapoint:
        """Return the datapoint at index ``i``."""
        ...


class Curve:
    """Ordered sequence of datapoints.

    The abscissas are conventionally non-decreasing but this is not
    enforced. Filters never modify a curve; they build a new one with
    :meth:`add_datapoint`.
    """

    def __init__(self) -> None:
        """Initializes an empty curve."""
        self._x: list[float] = []
        self._y: list[float] = []

    @classmethod
    def from_xy(cls, x: ArrayLike1D, y: ArrayLike1D) -> Curve:
        """Builds a curve from matching 1D ``x`` and ``y`` arrays.

        Args:
            x: Abscissas, shape ``(N,)``.
            y: Ordinates, shape ``(N,)``.

        Returns:
            A new curve with ``N`` datapoints.

        Raises:
            ValueError: If ``x`` and ``y`` are not 1D arrays of equal length.
        """
        x_arr, y_arr = validate_xy(x, y)
        curve = cls()
        curve._x = [float(v) for v in x_arr]
        curve._y = [float(v) for v in y_arr]
        return curve

    def size(self) -> int:
        """Returns the number of datapoints."""
        return len(self._x)

    def get(self, i: int) -> Datapoint:
        """Returns the datapoint at index ``i``.

        Args:
            i: Index with ``0 <= i < size()``.

        Raises:
            IndexError: If ``i`` is out of range. Negative indices are
                rejected rather than counted from the end.
        """
        if not 0 <= i < len(self._x):
            raise IndexError(f"datapoint index {i} out of range for curve of size {len(self._x)}.")
        return Datapoint(self._x[i], self._y[i])

    def add_datapoint(self, x: float, y: float) -> None:
        """Appends a datapoint at the end of the curve."""
        self._x.append(float(x))
        self._y.append(float(y))

    @property
    def x(self) -> Array:
        """Abscissas as a new float array."""
        return np.array(self._x, dtype=float)

    @property
    def y(self) -> Array:
        """Ordinates as a new float array."""
        return np.array(self._y, dtype=float)

    def __len__(self) -> int:
        return len(self._x)

    def __getitem__(self, i: int) -> Datapoint:
        return self.get(i)

    def __iter__(self) -> Iterator[Datapoint]:
        for x, y in zip(self._x, self._y):
            yield Datapoint(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __repr__(self) -> str:
        return f"Curve(size={len(self._x)})"


def curve_from_table(table: ArrayLike2D) -> Curve:
    """Creates a curve from a simple 2D ``(x, y)`` table.

    Args:
        table: 2D array with layout ``(N, 2)`` or ``(2, N)``.
            See :func:`parse_xy_table`.

    Returns:
        A :class:`Curve` built from the parsed table.
    """
    x, y = parse_xy_table(table)
    return Curve.from_xy(x, y)


def parse_xy_table(
    table: ArrayLike,
) -> tuple[Array, Array]:
    """Parses a 2D table into ``(x, y)`` arrays.

    Supported layouts:

    * ``(2, N)``:
        Row 0 = x, row 1 = y. A ``(2, 2)`` table is read this way.
    * ``(N, 2)``:
        Column 0 = x, column 1 = y.

    Args:
        table: 2D array containing x and y (e.g. data loaded from a text
            file with shape ``(N, 2)``).

    Returns:
        A tuple ``(x, y)`` of 1D NumPy arrays of length ``N``.

    Raises:
        ValueError: If the input does not match any of the supported layouts.
    """
    arr = np.asarray(table, dtype=float)
    if arr.ndim != 2:
        raise ValueError("table must be a 2D array.")

    match arr.shape:
        case (2, _):
            x = arr[0, :]
            y = arr[1, :]
        case (_, 2):
            x = arr[:, 0]
            y = arr[:, 1]
        case _:
            raise ValueError(
                f"Unexpected table shape {arr.shape}; expected (N, 2) or (2, N)."
            )

    return x, y
