"""Savitzky-Golay smoothing of sampled curves."""

from importlib.metadata import PackageNotFoundError, version

from sigsmooth.catalog import FILTERS, available_filters, get_filter
from sigsmooth.curve import Curve, Datapoint, curve_from_table
from sigsmooth.errors import InvalidCoefficients, OperationFailed
from sigsmooth.savitzky_golay import SavitzkyGolayFilter
from sigsmooth.smoothing_kit import SmoothingKit

try:
    __version__ = version("sigsmooth")
except PackageNotFoundError:
    pass

__all__ = [
    "FILTERS",
    "Curve",
    "Datapoint",
    "InvalidCoefficients",
    "OperationFailed",
    "SavitzkyGolayFilter",
    "SmoothingKit",
    "available_filters",
    "curve_from_table",
    "get_filter",
]
