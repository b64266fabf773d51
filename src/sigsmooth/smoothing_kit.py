"""Provides the SmoothingKit API.

This class is a lightweight front end over the Savitzky-Golay filters.
You provide the curve to smooth, then choose a filter either by catalog
name (e.g. ``"SG:2-10-10"``) or by passing a
:class:`~sigsmooth.savitzky_golay.SavitzkyGolayFilter` instance.

Examples:
    Smoothing a whole curve with the default filter:

        >>> import numpy as np
        >>> from sigsmooth.curve import Curve
        >>> from sigsmooth.smoothing_kit import SmoothingKit
        >>> x = np.linspace(0.0, 1.0, 50)
        >>> kit = SmoothingKit(Curve.from_xy(x, np.sin(6 * x)))
        >>> smoothed = kit.smooth()
        >>> smoothed.size()
        50

    Smoothing only part of it with a wider filter:

        >>> part = kit.smooth(filter="SG:2-10-10", from_x=0.25, to_x=0.75)

Notes:
    - ``from_x=None`` and ``to_x=None`` leave that side of the range open,
      so the default is to smooth every datapoint.
    - For the catalog names available at runtime, call
      :func:`sigsmooth.catalog.available_filters`.
"""

from __future__ import annotations

import math

from sigsmooth.catalog import DEFAULT_FILTER, get_filter
from sigsmooth.curve import Curve, CurveLike
from sigsmooth.logger import sigsmooth_logger
from sigsmooth.savitzky_golay import SavitzkyGolayFilter

__all__ = ["SmoothingKit"]


class SmoothingKit:
    """Unified interface for smoothing a curve.

    Attributes:
        curve: The curve to smooth. It is never modified.
        default_filter: Catalog name used when no filter is specified.
    """

    def __init__(self, curve: CurveLike):
        """Initializes the SmoothingKit with the curve to smooth.

        Args:
            curve: Any object with ``size()`` and ``get(i)`` returning
                datapoints with ``x`` and ``y``.
        """
        self.curve = curve
        self.default_filter = DEFAULT_FILTER

    def smooth(
        self,
        *,
        filter: str | SavitzkyGolayFilter | None = None,
        from_x: float | None = None,
        to_x: float | None = None,
        variant: int = 0,
    ) -> Curve:
        """Smooth the curve with the chosen filter.

        Args:
            filter: Catalog name or a filter instance. Default is ``"SG:2-5-5"``.
            from_x: Lowest abscissa to smooth (inclusive). ``None`` means no
                lower bound.
            to_x: Highest abscissa to smooth (inclusive). ``None`` means no
                upper bound.
            variant: Catalog variant for names shared by several filters.
                Ignored when ``filter`` is an instance.

        Returns:
            The smoothed curve.

        Raises:
            ValueError: If ``filter`` is not a known catalog name.
            OperationFailed: If the curve cannot be read.
        """
        chosen = self.default_filter if filter is None else filter
        if isinstance(chosen, SavitzkyGolayFilter):
            sg = chosen
        else:
            sg = get_filter(chosen, variant=variant)

        lo = -math.inf if from_x is None else from_x
        hi = math.inf if to_x is None else to_x
        if lo > hi:
            sigsmooth_logger.warning(
                "Empty smoothing range [%r, %r]; the curve is returned unchanged.", lo, hi
            )
        return sg.apply(self.curve, lo, hi)
