"""Tests for zodiac classification."""

from datetime import datetime

import pytest
from pytz import utc

from realzodiac.astronomy import sun_right_ascension
from realzodiac.errors import ClassificationError, ZodiacTableError
from realzodiac.models import ZodiacSegment
from realzodiac.zodiac import (
    CONSTELLATION_DATE_RANGES,
    CONSTELLATION_NAMES,
    ELEMENT_COLORS,
    TROPICAL_DATE_RANGES,
    ZODIAC_IDS,
    ZODIAC_SEGMENTS,
    compare_zodiac,
    constellation_midpoints,
    current_constellation,
    tropical_sign,
    validate_segments,
)


def test_every_degree_classifies():
    """Each integer degree maps to exactly one segment."""
    for degree in range(360):
        matches = [seg for seg in ZODIAC_SEGMENTS if seg.contains(float(degree))]
        assert len(matches) == 1
        assert current_constellation(float(degree)) in ZODIAC_IDS


@pytest.mark.parametrize(
    "degree, code",
    [
        (0, "Psc"),
        (30, "Ari"),
        (50, "Tau"),
        (90, "Gem"),
        (120, "Cnc"),
        (140, "Leo"),
        (177, "Vir"),
        (220, "Lib"),
        (243, "Sco"),
        (250, "Oph"),
        (268, "Sgr"),
        (300, "Cap"),
        (328, "Aqr"),
        (350, "Psc"),
    ],
)
def test_boundaries_belong_to_next_segment(degree, code):
    """A boundary degree is the start of the following segment."""
    assert current_constellation(float(degree)) == code


def test_negative_ra_is_normalized():
    """Wrapped RA values are folded into [0, 360) before lookup."""
    assert current_constellation(-10.0) == "Psc"
    assert current_constellation(-100.0) == "Oph"
    assert current_constellation(180.0) == "Vir"
    assert current_constellation(-1e-17) == "Psc"


def test_equinox_sun_is_in_pisces():
    """At the March equinox the Sun is in Pisces, not Aries."""
    ra = sun_right_ascension(datetime(2000, 3, 20, 12, 0, tzinfo=utc))
    assert current_constellation(ra) == "Psc"


def test_non_finite_ra_raises():
    """NaN cannot be classified."""
    with pytest.raises(ClassificationError):
        current_constellation(float("nan"))


def test_incomplete_table_raises_classification_error():
    """A table that misses a value signals failure instead of returning a sentinel."""
    partial = (ZodiacSegment(0, 180, "Aaa"),)
    with pytest.raises(ClassificationError):
        current_constellation(200.0, partial)


def test_validate_segments_accepts_builtin_table():
    """The shipped table tiles the circle."""
    validate_segments(ZODIAC_SEGMENTS)
    assert len(ZODIAC_SEGMENTS) == 14


@pytest.mark.parametrize(
    "segments",
    [
        (),
        (ZodiacSegment(0, 100, "A"), ZodiacSegment(110, 360, "B")),
        (ZodiacSegment(0, 100, "A"), ZodiacSegment(90, 360, "B")),
        (ZodiacSegment(0, 100, "A"), ZodiacSegment(100, 350, "B")),
        (ZodiacSegment(10, 360, "A"),),
        (ZodiacSegment(0, 0, "A"), ZodiacSegment(0, 360, "B")),
    ],
)
def test_validate_segments_rejects_malformed_tables(segments):
    """Gaps, overlaps, short or empty tables are configuration errors."""
    with pytest.raises(ZodiacTableError):
        validate_segments(segments)


@pytest.mark.parametrize(
    "when, sign",
    [
        (datetime(2001, 4, 5), "Ari"),
        (datetime(2001, 7, 30), "Leo"),
        (datetime(2001, 1, 5), "Cap"),
        (datetime(2001, 12, 5), "Sgr"),
    ],
)
def test_tropical_sign(when, sign):
    """Tropical signs follow the calendar, 30° apiece from the equinox."""
    assert tropical_sign(when) == sign


def test_compare_zodiac_disagrees_in_april():
    """Early April is Aries to astrologers but Pisces in the sky."""
    result = compare_zodiac(datetime(2001, 4, 5))
    assert result.tropical_sign == "Ari"
    assert result.constellation == "Psc"
    assert result.agrees is False


def test_compare_zodiac_finds_ophiuchus():
    """Early December puts the Sun in Ophiuchus."""
    result = compare_zodiac(datetime(2001, 12, 5))
    assert result.constellation == "Oph"
    assert result.tropical_sign == "Sgr"


def test_constellation_midpoints():
    """Label anchors sit mid-segment; Pisces straddles 0°."""
    mids = constellation_midpoints()
    assert set(mids) == set(ZODIAC_IDS)
    assert mids["Psc"] == pytest.approx(10.0)
    assert mids["Ari"] == pytest.approx(40.0)
    assert mids["Aqr"] == pytest.approx(-21.0)


def test_metadata_tables_cover_all_codes():
    """Names, colours and date ranges exist for every constellation."""
    assert set(CONSTELLATION_NAMES) == set(ZODIAC_IDS)
    assert set(ELEMENT_COLORS) == set(ZODIAC_IDS)
    assert set(CONSTELLATION_DATE_RANGES) == set(ZODIAC_IDS)
    assert set(TROPICAL_DATE_RANGES) == set(ZODIAC_IDS) - {"Oph"}
