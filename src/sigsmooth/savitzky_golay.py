"""Savitzky-Golay smoothing filter.

A Savitzky-Golay filter replaces each sample by a weighted sum of its
neighbours, where the weights are the convolution coefficients of a local
least-squares polynomial fit. This module only *applies* coefficients; they
are supplied at construction (see :mod:`sigsmooth.catalog` for the
precomputed ones).

Boundary behaviour:
    Near either end of the curve some neighbour offsets fall outside the
    valid index range. Their coefficients are skipped and the remaining
    ones are **not** renormalized, so the first ``left_width`` and the last
    ``right_width`` smoothed samples use a truncated kernel and are biased
    towards zero. This is the reference behaviour of the filters and must
    be kept to reproduce their output.

Example:
    >>> from sigsmooth.curve import Curve
    >>> from sigsmooth.savitzky_golay import SavitzkyGolayFilter
    >>> box = SavitzkyGolayFilter(0, 1, 1, [1 / 3, 1 / 3, 1 / 3])
    >>> curve = Curve.from_xy([0.0, 1.0, 2.0, 3.0], [0.0, 3.0, 6.0, 9.0])
    >>> smoothed = box.apply(curve, 0.0, 3.0)
    >>> [round(float(v), 6) for v in smoothed.y]
    [1.0, 3.0, 6.0, 5.0]
"""

from __future__ import annotations

from collections.abc import Iterable

from sigsmooth.curve import Curve, CurveLike
from sigsmooth.errors import OperationFailed
from sigsmooth.logger import sigsmooth_logger
from sigsmooth.utils.validate import validate_window

__all__ = ["SavitzkyGolayFilter"]


class SavitzkyGolayFilter:
    """Savitzky-Golay FIR filter with a fixed window geometry.

    Filters are immutable: all fields are exposed as read-only properties,
    so a single instance can be shared and applied concurrently.

    Attributes:
        order: Polynomial degree the coefficients were fit to. Informative
            only, it does not take part in the computation.
        left_width: Number of samples used before the current one.
        right_width: Number of samples used after the current one.
        coefficients: Weights ordered from offset ``-left_width`` to
            ``+right_width``.
    """

    def __init__(
        self,
        order: int,
        left_width: int,
        right_width: int,
        coefficients: Iterable[float],
    ) -> None:
        """Initializes a filter with given geometry and coefficients.

        Args:
            order: Polynomial degree of the underlying fit (informative).
            left_width: Number of neighbours on the left, ``>= 0``.
            right_width: Number of neighbours on the right, ``>= 0``.
            coefficients: Exactly ``left_width + 1 + right_width`` weights.

        Raises:
            InvalidCoefficients: If the number of coefficients does not
                match the window, a width is not a non-negative integer, or
                a coefficient is not a real number.
        """
        self._coefficients = validate_window(left_width, right_width, coefficients)
        self._order = order
        self._left_width = left_width
        self._right_width = right_width

    @property
    def order(self) -> int:
        return self._order

    @property
    def left_width(self) -> int:
        return self._left_width

    @property
    def right_width(self) -> int:
        return self._right_width

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._coefficients

    @property
    def window_size(self) -> int:
        """Total number of coefficients, ``left_width + 1 + right_width``."""
        return self._left_width + 1 + self._right_width

    @property
    def name(self) -> str:
        """Returns ``"SG:<order>-<left_width>-<right_width>"``."""
        return f"SG:{self._order}-{self._left_width}-{self._right_width}"

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"SavitzkyGolayFilter(order={self._order}, left_width={self._left_width}, "
            f"right_width={self._right_width}, coefficients={list(self._coefficients)})"
        )

    def apply(self, curve: CurveLike, from_x: float, to_x: float) -> Curve:
        """Applies this filter on a curve.

        Every datapoint whose abscissa lies in the closed range
        ``[from_x, to_x]`` is replaced by the weighted sum of its
        neighbours; all other datapoints are copied unchanged. The range is
        not clamped: bounds beyond the curve simply select all or none of
        its points.

        Args:
            curve: The curve to be smoothed. It is only read.
            from_x: Lowest abscissa to smooth (inclusive).
            to_x: Highest abscissa to smooth (inclusive).

        Returns:
            A new curve with the same size and abscissas as ``curve``.

        Raises:
            OperationFailed: If ``curve`` fails to report its size or one of
                its datapoints.
        """
        xs, ys = _read_points(curve)
        size = len(xs)
        sigsmooth_logger.debug(
            "Applying %s to %d datapoints over [%r, %r].", self.name, size, from_x, to_x
        )

        coeffs = self._coefficients
        new_curve = Curve()
        for i in range(size):
            x = xs[i]
            y = ys[i]

            if from_x <= x <= to_x:
                y = 0.0
                k = 0
                for n in range(i - self._left_width, i + self._right_width + 1):
                    if 0 <= n < size:
                        y += coeffs[k] * ys[n]
                    k += 1

            new_curve.add_datapoint(x, y)

        return new_curve


def _read_points(curve: CurveLike) -> tuple[list[float], list[float]]:
    """Reads all datapoints of ``curve`` into parallel ``x`` and ``y`` lists.

    Raises:
        OperationFailed: If the curve cannot answer ``size()`` or ``get(i)``,
            or a datapoint has no usable ``x``/``y``.
    """
    try:
        size = int(curve.size())
        xs: list[float] = []
        ys: list[float] = []
        for i in range(size):
            dp = curve.get(i)
            xs.append(float(dp.x))
            ys.append(float(dp.y))
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        raise OperationFailed(f"could not read input curve: {e}") from e
    return xs, ys
