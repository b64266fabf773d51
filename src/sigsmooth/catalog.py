"""Catalog of precomputed Savitzky-Golay filters.

The catalog is a fixed, ordered tuple of filters built once at import time.
Each entry is identified by its ``SG:<order>-<left_width>-<right_width>``
name. The first nine entries hold 6-decimal smoothing coefficients; the
remaining ones are the 3-decimal tables of Numerical Recipes. The name
``SG:2-5-5`` therefore appears twice: ``variant=0`` selects the 6-decimal
filter and ``variant=1`` the Numerical Recipes one.

Names are matched leniently (case, ``SG`` prefix and separators are
ignored), so ``"SG:2-5-5"``, ``"sg 2-5-5"`` and ``"2-5-5"`` are the same.

Examples:
    >>> from sigsmooth.catalog import available_filters, get_filter
    >>> available_filters()[:3]
    ['SG:3-40-40', 'SG:3-30-30', 'SG:3-20-20']
    >>> get_filter("sg 2-4-0").coefficients
    (0.086, -0.143, -0.086, 0.257, 0.886)
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from sigsmooth.savitzky_golay import SavitzkyGolayFilter

__all__ = ["FILTERS", "DEFAULT_FILTER", "available_filters", "filters_named", "get_filter"]

DEFAULT_FILTER = "SG:2-5-5"

FILTERS: tuple[SavitzkyGolayFilter, ...] = (
    SavitzkyGolayFilter(3, 40, 40, (
        -0.017403, -0.015172, -0.012997, -0.010879, -0.008817, -0.006812, -0.004863, -0.002971,
        -0.001135, 0.000644, 0.002367, 0.004033, 0.005643, 0.007196, 0.008693, 0.010133,
        0.011517, 0.012845, 0.014116, 0.015330, 0.016488, 0.017589, 0.018634, 0.019623,
        0.020555, 0.021430, 0.022249, 0.023012, 0.023718, 0.024368, 0.024961, 0.025497,
        0.025977, 0.026401, 0.026768, 0.027079, 0.027333, 0.027531, 0.027672, 0.027757,
        0.027785, 0.027757, 0.027672, 0.027531, 0.027333, 0.027079, 0.026768, 0.026401,
        0.025977, 0.025497, 0.024961, 0.024368, 0.023718, 0.023012, 0.022249, 0.021430,
        0.020555, 0.019623, 0.018634, 0.017589, 0.016488, 0.015330, 0.014116, 0.012845,
        0.011517, 0.010133, 0.008693, 0.007196, 0.005643, 0.004033, 0.002367, 0.000644,
        -0.001135, -0.002971, -0.004863, -0.006812, -0.008817, -0.010879, -0.012997, -0.015172,
        -0.017403,
    )),
    SavitzkyGolayFilter(3, 30, 30, (
        -0.022639, -0.018735, -0.014964, -0.011326, -0.007820, -0.004446, -0.001204, 0.001905,
        0.004882, 0.007727, 0.010439, 0.013019, 0.015467, 0.017783, 0.019966, 0.022017,
        0.023935, 0.025721, 0.027375, 0.028897, 0.030286, 0.031543, 0.032668, 0.033660,
        0.034520, 0.035248, 0.035843, 0.036306, 0.036637, 0.036836, 0.036902, 0.036836,
        0.036637, 0.036306, 0.035843, 0.035248, 0.034520, 0.033660, 0.032668, 0.031543,
        0.030286, 0.028897, 0.027375, 0.025721, 0.023935, 0.022017, 0.019966, 0.017783,
        0.015467, 0.013019, 0.010439, 0.007727, 0.004882, 0.001905, -0.001204, -0.004446,
        -0.007820, -0.011326, -0.014964, -0.018735, -0.022639,
    )),
    SavitzkyGolayFilter(3, 20, 20, (
        -0.032331, -0.023823, -0.015751, -0.008116, -0.000916, 0.005847, 0.012173, 0.018064,
        0.023518, 0.028535, 0.033117, 0.037262, 0.040970, 0.044243, 0.047079, 0.049479,
        0.051442, 0.052969, 0.054060, 0.054714, 0.054933, 0.054714, 0.054060, 0.052969,
        0.051442, 0.049479, 0.047079, 0.044243, 0.040970, 0.037262, 0.033117, 0.028535,
        0.023518, 0.018064, 0.012173, 0.005847, -0.000916, -0.008116, -0.015751, -0.023823,
        -0.032331,
    )),
    SavitzkyGolayFilter(3, 12, 12, (
        -0.048889, -0.026667, -0.006377, 0.011981, 0.028406, 0.042899, 0.055459, 0.066087,
        0.074783, 0.081546, 0.086377, 0.089275, 0.090242, 0.089275, 0.086377, 0.081546,
        0.074783, 0.066087, 0.055459, 0.042899, 0.028406, 0.011981, -0.006377, -0.026667,
        -0.048889,
    )),
    SavitzkyGolayFilter(2, 25, 25, (
        -0.026637, -0.021088, -0.015765, -0.010668, -0.005799, -0.001155, 0.003262, 0.007452,
        0.011416, 0.015153, 0.018664, 0.021948, 0.025006, 0.027838, 0.030442, 0.032821,
        0.034972, 0.036898, 0.038597, 0.040069, 0.041315, 0.042334, 0.043127, 0.043693,
        0.044033, 0.044146, 0.044033, 0.043693, 0.043127, 0.042334, 0.041315, 0.040069,
        0.038597, 0.036898, 0.034972, 0.032821, 0.030442, 0.027838, 0.025006, 0.021948,
        0.018664, 0.015153, 0.011416, 0.007452, 0.003262, -0.001155, -0.005799, -0.010668,
        -0.015765, -0.021088, -0.026637,
    )),
    SavitzkyGolayFilter(2, 20, 20, (
        -0.032331, -0.023823, -0.015751, -0.008116, -0.000916, 0.005847, 0.012173, 0.018064,
        0.023518, 0.028535, 0.033117, 0.037262, 0.040970, 0.044243, 0.047079, 0.049479,
        0.051442, 0.052969, 0.054060, 0.054714, 0.054933, 0.054714, 0.054060, 0.052969,
        0.051442, 0.049479, 0.047079, 0.044243, 0.040970, 0.037262, 0.033117, 0.028535,
        0.023518, 0.018064, 0.012173, 0.005847, -0.000916, -0.008116, -0.015751, -0.023823,
        -0.032331,
    )),
    SavitzkyGolayFilter(2, 15, 15, (
        -0.041056, -0.026393, -0.012741, -0.000101, 0.011528, 0.022146, 0.031752, 0.040348,
        0.047932, 0.054505, 0.060067, 0.064617, 0.068157, 0.070685, 0.072201, 0.072707,
        0.072201, 0.070685, 0.068157, 0.064617, 0.060067, 0.054505, 0.047932, 0.040348,
        0.031752, 0.022146, 0.011528, -0.000101, -0.012741, -0.026393, -0.041056,
    )),
    SavitzkyGolayFilter(2, 10, 10, (
        -0.055901, -0.024845, 0.002942, 0.027460, 0.048709, 0.066688, 0.081399, 0.092841,
        0.101013, 0.105917, 0.107551, 0.105917, 0.101013, 0.092841, 0.081399, 0.066688,
        0.048709, 0.027460, 0.002942, -0.024845, -0.055901,
    )),
    SavitzkyGolayFilter(2, 5, 5, (
        -0.083916, 0.020979, 0.102564, 0.160839, 0.195804, 0.207459, 0.195804, 0.160839,
        0.102564, 0.020979, -0.083916,
    )),
    # Numerical Recipes in C, 2nd ed., p. 651.
    SavitzkyGolayFilter(2, 2, 2, (
        -0.086, 0.343, 0.486, 0.343, -0.086,
    )),
    SavitzkyGolayFilter(2, 3, 1, (
        -0.143, 0.171, 0.343, 0.371, 0.257,
    )),
    SavitzkyGolayFilter(2, 4, 0, (
        0.086, -0.143, -0.086, 0.257, 0.886,
    )),
    SavitzkyGolayFilter(2, 5, 5, (
        -0.084, 0.021, 0.103, 0.161, 0.196, 0.207, 0.196, 0.161,
        0.103, 0.021, -0.084,
    )),
    SavitzkyGolayFilter(4, 4, 4, (
        0.035, -0.128, 0.070, 0.315, 0.417, 0.315, 0.070, -0.128,
        0.035,
    )),
    SavitzkyGolayFilter(4, 5, 5, (
        0.042, -0.105, -0.023, 0.140, 0.280, 0.333, 0.280, 0.140,
        -0.023, -0.105, 0.042,
    )),
)

_NAME_PATTERN = re.compile(r"(?:sg)?\D*?(\d+)\D+(\d+)\D+(\d+)")


def _norm(name: str) -> tuple[int, int, int]:
    """Parse a filter name into its ``(order, left_width, right_width)`` key.

    Args:
        name: Filter name, e.g. ``"SG:3-12-12"``.

    Returns:
        The integer triple identifying the filter.

    Raises:
        ValueError: If the name does not contain three integers.
    """
    match = _NAME_PATTERN.fullmatch(name.strip().lower())
    if match is None:
        raise ValueError(
            f"Invalid filter name '{name}'; expected 'SG:<order>-<left_width>-<right_width>'."
        )
    order, left, right = (int(g) for g in match.groups())
    return order, left, right


def _build_index() -> Mapping[tuple[int, int, int], tuple[SavitzkyGolayFilter, ...]]:
    """Group the catalog entries by ``(order, left_width, right_width)``, keeping catalog order."""
    index: dict[tuple[int, int, int], list[SavitzkyGolayFilter]] = {}
    for f in FILTERS:
        index.setdefault((f.order, f.left_width, f.right_width), []).append(f)
    return {key: tuple(group) for key, group in index.items()}


_INDEX = _build_index()


def available_filters() -> list[str]:
    """List the catalog filter names in catalog order.

    Duplicate names are kept, one per variant.

    Returns:
        List of names such as ``"SG:3-40-40"``.
    """
    return [f.name for f in FILTERS]


def filters_named(name: str) -> list[SavitzkyGolayFilter]:
    """Return every catalog filter with the given name, in catalog order.

    Args:
        name: Filter name or alias.

    Returns:
        The matching filters; empty if the name is well-formed but unknown.

    Raises:
        ValueError: If ``name`` cannot be parsed.
    """
    return list(_INDEX.get(_norm(name), ()))


def get_filter(name: str, variant: int = 0) -> SavitzkyGolayFilter:
    """Look up a catalog filter by name.

    Args:
        name: Filter name or alias, e.g. ``"SG:2-10-10"``.
        variant: Which of the filters sharing ``name`` to return, counted
            in catalog order. Only ``"SG:2-5-5"`` has more than one.

    Returns:
        The requested filter.

    Raises:
        ValueError: If the name is unknown or ``variant`` is out of range.
    """
    matches = filters_named(name)
    if not matches:
        opts = ", ".join(dict.fromkeys(available_filters()))
        raise ValueError(f"Unknown filter '{name}'. Choose one of {{{opts}}}.")
    if not 0 <= variant < len(matches):
        raise ValueError(
            f"Filter '{matches[0].name}' has {len(matches)} variant(s); got variant={variant}."
        )
    return matches[variant]
