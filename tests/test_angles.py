"""Tests for angle normalization."""

import math

from realzodiac.angles import normalize_degrees, wrap_degrees


def test_wrap_degrees_basic():
    """Values outside (-180, 180] are folded back in."""
    assert wrap_degrees(190.0) == -170.0
    assert wrap_degrees(-190.0) == 170.0
    assert wrap_degrees(180.0) == 180.0
    assert wrap_degrees(-180.0) == 180.0
    assert wrap_degrees(0.0) == 0.0


def test_wrap_degrees_multiple_turns():
    """Several full turns collapse to the same angle."""
    assert wrap_degrees(540.0) == 180.0
    assert wrap_degrees(-540.0) == 180.0
    assert abs(wrap_degrees(725.0) - 5.0) < 1e-9
    assert abs(wrap_degrees(-725.0) + 5.0) < 1e-9


def test_wrap_degrees_range_and_idempotence():
    """Every result lies in (-180, 180] and wrapping twice changes nothing."""
    for raw in range(-1500, 1500, 7):
        wrapped = wrap_degrees(raw + 0.25)
        assert -180.0 < wrapped <= 180.0
        assert wrap_degrees(wrapped) == wrapped


def test_wrap_degrees_non_finite():
    """NaN passes through untouched."""
    assert math.isnan(wrap_degrees(float("nan")))


def test_normalize_degrees():
    """Angles map into [0, 360)."""
    assert normalize_degrees(-10.0) == 350.0
    assert normalize_degrees(360.0) == 0.0
    assert normalize_degrees(725.0) == 5.0
    assert normalize_degrees(-1e-17) == 0.0
