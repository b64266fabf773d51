"""Unit tests for sigsmooth.catalog."""

from __future__ import annotations

import numpy as np
import pytest
from scipy.signal import savgol_coeffs

from sigsmooth.catalog import (
    DEFAULT_FILTER,
    FILTERS,
    available_filters,
    filters_named,
    get_filter,
)
from sigsmooth.savitzky_golay import SavitzkyGolayFilter

EXPECTED_ORDER = [
    (3, 40, 40),
    (3, 30, 30),
    (3, 20, 20),
    (3, 12, 12),
    (2, 25, 25),
    (2, 20, 20),
    (2, 15, 15),
    (2, 10, 10),
    (2, 5, 5),
    (2, 2, 2),
    (2, 3, 1),
    (2, 4, 0),
    (2, 5, 5),
    (4, 4, 4),
    (4, 5, 5),
]


def test_catalog_entries_and_order():
    """Tests that the catalog holds exactly the expected filters in order."""
    got = [(f.order, f.left_width, f.right_width) for f in FILTERS]
    assert got == EXPECTED_ORDER
    assert all(isinstance(f, SavitzkyGolayFilter) for f in FILTERS)


def test_catalog_is_immutable_tuple():
    """Tests that the catalog container itself cannot be modified."""
    assert isinstance(FILTERS, tuple)


def test_every_entry_has_consistent_window():
    """Tests that every catalog filter satisfies the coefficient-count invariant."""
    for f in FILTERS:
        assert len(f.coefficients) == f.left_width + 1 + f.right_width


@pytest.mark.parametrize("f", FILTERS, ids=lambda f: f.name)
def test_coefficients_match_least_squares_fit(f):
    """Tests the tabulated weights against scipy's Savitzky-Golay coefficients."""
    expected = savgol_coeffs(f.window_size, f.order, pos=f.left_width, use="dot")
    # Numerical Recipes tables are rounded to 3 decimals, the others to 6
    decimals = max(len(repr(c).split(".")[-1]) for c in f.coefficients)
    atol = 1e-6 if decimals > 3 else 1e-3

    np.testing.assert_allclose(f.coefficients, expected, rtol=0.0, atol=atol)


def test_symmetric_entries_are_symmetric():
    """Tests that filters with equal widths have mirror-symmetric weights."""
    for f in FILTERS:
        if f.left_width == f.right_width:
            assert f.coefficients == f.coefficients[::-1], f.name


def test_reference_values_spot_check():
    """Tests a few reference coefficients bit for bit."""
    assert FILTERS[0].coefficients[40] == 0.027785
    assert FILTERS[8].coefficients == (
        -0.083916, 0.020979, 0.102564, 0.160839, 0.195804,
        0.207459,
        0.195804, 0.160839, 0.102564, 0.020979, -0.083916,
    )
    assert FILTERS[11].coefficients == (0.086, -0.143, -0.086, 0.257, 0.886)


def test_available_filters_lists_names_with_duplicates():
    """Tests that available_filters keeps catalog order and both SG:2-5-5 variants."""
    names = available_filters()

    assert len(names) == 15
    assert names[0] == "SG:3-40-40"
    assert names[-1] == "SG:4-5-5"
    assert names.count("SG:2-5-5") == 2


@pytest.mark.parametrize("alias", ["SG:3-12-12", "sg:3-12-12", "sg 3-12-12", "3-12-12", " SG3-12-12 "])
def test_get_filter_accepts_lenient_names(alias):
    """Tests that name lookup ignores case, prefix, separators and padding."""
    assert get_filter(alias) is FILTERS[3]


def test_get_filter_variants_of_duplicate_name():
    """Tests that the two SG:2-5-5 filters are reachable by variant."""
    first = get_filter("SG:2-5-5")
    second = get_filter("SG:2-5-5", variant=1)

    assert first is FILTERS[8]
    assert second is FILTERS[12]
    assert first.coefficients != second.coefficients
    assert filters_named("2-5-5") == [first, second]


def test_get_filter_unknown_name_lists_options():
    """Tests that an unknown filter name raises a helpful ValueError."""
    with pytest.raises(ValueError, match="Unknown filter 'SG:9-9-9'") as excinfo:
        get_filter("SG:9-9-9")

    assert "SG:3-40-40" in str(excinfo.value)


def test_get_filter_bad_variant():
    """Tests that an out-of-range variant raises ValueError."""
    with pytest.raises(ValueError, match="variant"):
        get_filter("SG:2-10-10", variant=1)


def test_malformed_name_raises():
    """Tests that names without three integers are rejected."""
    with pytest.raises(ValueError, match="Invalid filter name"):
        get_filter("savitzky")
    with pytest.raises(ValueError, match="Invalid filter name"):
        filters_named("SG:2-5")


def test_filters_named_unknown_is_empty():
    """Tests that a well-formed but unknown name returns no filters."""
    assert filters_named("SG:1-1-1") == []


def test_default_filter_is_in_catalog():
    """Tests that the default filter name resolves."""
    assert get_filter(DEFAULT_FILTER).name == "SG:2-5-5"
