"""Zodiac classification: constellation behind the Sun vs. the tropical sign."""

import math
from datetime import datetime

from realzodiac.angles import normalize_degrees, wrap_degrees
from realzodiac.astronomy import sun_right_ascension, tropical_sun_longitude
from realzodiac.errors import ClassificationError, ZodiacTableError
from realzodiac.models import ZodiacComparison, ZodiacSegment


# Unequal constellation widths along the ecliptic. Pisces straddles 0°.
ZODIAC_SEGMENTS: tuple[ZodiacSegment, ...] = (
    ZodiacSegment(0, 30, "Psc"),
    ZodiacSegment(30, 50, "Ari"),
    ZodiacSegment(50, 90, "Tau"),
    ZodiacSegment(90, 120, "Gem"),
    ZodiacSegment(120, 140, "Cnc"),
    ZodiacSegment(140, 177, "Leo"),
    ZodiacSegment(177, 220, "Vir"),
    ZodiacSegment(220, 243, "Lib"),
    ZodiacSegment(243, 250, "Sco"),
    ZodiacSegment(250, 268, "Oph"),
    ZodiacSegment(268, 300, "Sgr"),
    ZodiacSegment(300, 328, "Cap"),
    ZodiacSegment(328, 350, "Aqr"),
    ZodiacSegment(350, 360, "Psc"),
)

ZODIAC_IDS: tuple[str, ...] = (
    "Ari", "Tau", "Gem", "Cnc", "Leo", "Vir", "Lib", "Sco", "Oph", "Sgr", "Cap", "Aqr", "Psc",
)

# The twelve tropical signs, 30° each from the vernal equinox
TROPICAL_SIGNS: tuple[str, ...] = (
    "Ari", "Tau", "Gem", "Cnc", "Leo", "Vir", "Lib", "Sco", "Sgr", "Cap", "Aqr", "Psc",
)

CONSTELLATION_NAMES: dict[str, str] = {
    "Ari": "Aries",
    "Tau": "Taurus",
    "Gem": "Gemini",
    "Cnc": "Cancer",
    "Leo": "Leo",
    "Vir": "Virgo",
    "Lib": "Libra",
    "Sco": "Scorpio",
    "Oph": "Ophiuchus",
    "Sgr": "Sagittarius",
    "Cap": "Capricorn",
    "Aqr": "Aquarius",
    "Psc": "Pisces",
}

# Fill and glow colours by element
ELEMENT_COLORS: dict[str, dict[str, str]] = {
    # Fire
    "Ari": {"color": "rgba(248, 113, 113, 0.3)", "glow": "rgba(248, 113, 113, 0.8)"},
    "Leo": {"color": "rgba(251, 146, 60, 0.3)", "glow": "rgba(251, 146, 60, 0.8)"},
    "Sgr": {"color": "rgba(251, 191, 36, 0.3)", "glow": "rgba(251, 191, 36, 0.8)"},
    # Earth
    "Tau": {"color": "rgba(163, 230, 53, 0.3)", "glow": "rgba(163, 230, 53, 0.8)"},
    "Vir": {"color": "rgba(74, 222, 128, 0.3)", "glow": "rgba(74, 222, 128, 0.8)"},
    "Cap": {"color": "rgba(52, 211, 153, 0.3)", "glow": "rgba(52, 211, 153, 0.8)"},
    # Air
    "Gem": {"color": "rgba(34, 211, 238, 0.3)", "glow": "rgba(34, 211, 238, 0.8)"},
    "Lib": {"color": "rgba(56, 189, 248, 0.3)", "glow": "rgba(56, 189, 248, 0.8)"},
    "Aqr": {"color": "rgba(96, 165, 250, 0.3)", "glow": "rgba(96, 165, 250, 0.8)"},
    # Water
    "Cnc": {"color": "rgba(167, 139, 250, 0.3)", "glow": "rgba(167, 139, 250, 0.8)"},
    "Sco": {"color": "rgba(192, 132, 252, 0.3)", "glow": "rgba(192, 132, 252, 0.8)"},
    "Psc": {"color": "rgba(216, 180, 254, 0.3)", "glow": "rgba(216, 180, 254, 0.8)"},
    "Oph": {"color": "rgba(192, 132, 252, 0.3)", "glow": "rgba(192, 132, 252, 0.8)"},
}

TROPICAL_DATE_RANGES: dict[str, str] = {
    "Ari": "March 21 - April 19",
    "Tau": "April 20 - May 20",
    "Gem": "May 21 - June 20",
    "Cnc": "June 21 - July 22",
    "Leo": "July 23 - August 22",
    "Vir": "August 23 - September 22",
    "Lib": "September 23 - October 22",
    "Sco": "October 23 - November 21",
    "Sgr": "November 22 - December 21",
    "Cap": "December 22 - January 19",
    "Aqr": "January 20 - February 18",
    "Psc": "February 19 - March 20",
}

CONSTELLATION_DATE_RANGES: dict[str, str] = {
    "Ari": "April 19 - May 13",
    "Tau": "May 14 - June 19",
    "Gem": "June 20 - July 20",
    "Cnc": "July 21 - August 9",
    "Leo": "August 10 - September 15",
    "Vir": "September 16 - October 30",
    "Lib": "October 31 - November 22",
    "Sco": "November 23 - November 29",
    "Oph": "November 30 - December 17",
    "Sgr": "December 18 - January 18",
    "Cap": "January 19 - February 15",
    "Aqr": "February 16 - March 11",
    "Psc": "March 12 - April 18",
}


def validate_segments(segments: tuple[ZodiacSegment, ...]) -> None:
    """Check that segments tile [0, 360) in ascending order with no gap or overlap.

    Raises:
        ZodiacTableError: On the first malformed boundary.
    """
    if not segments:
        raise ZodiacTableError("empty zodiac table")
    expected_start = 0.0
    for seg in segments:
        if seg.start_deg != expected_start:
            raise ZodiacTableError(
                f"segment {seg.code} starts at {seg.start_deg}, expected {expected_start}"
            )
        if seg.end_deg <= seg.start_deg:
            raise ZodiacTableError(f"segment {seg.code} is empty or reversed")
        expected_start = seg.end_deg
    if expected_start != 360.0:
        raise ZodiacTableError(f"zodiac table ends at {expected_start}, expected 360")


validate_segments(ZODIAC_SEGMENTS)


def current_constellation(
    sun_ra_deg: float, segments: tuple[ZodiacSegment, ...] = ZODIAC_SEGMENTS
) -> str:
    """Return the IAU code of the constellation containing sun_ra_deg.

    Raises:
        ClassificationError: For non-finite input or a value no segment covers.
    """
    if not math.isfinite(sun_ra_deg):
        raise ClassificationError(f"cannot classify RA {sun_ra_deg!r}")
    ra = normalize_degrees(sun_ra_deg)
    for seg in segments:
        if seg.contains(ra):
            return seg.code
    raise ClassificationError(f"no zodiac segment contains {ra:.4f}°")


def tropical_sign(when: datetime) -> str:
    """IAU code of the astrological sign, ignoring precession."""
    return TROPICAL_SIGNS[int(tropical_sun_longitude(when) // 30.0) % 12]


def compare_zodiac(when: datetime) -> ZodiacComparison:
    sun_ra = sun_right_ascension(when)
    return ZodiacComparison(
        tropical_sign=tropical_sign(when),
        constellation=current_constellation(sun_ra),
        sun_ra_deg=sun_ra,
    )


def constellation_midpoints(
    segments: tuple[ZodiacSegment, ...] = ZODIAC_SEGMENTS,
) -> dict[str, float]:
    """Label anchor per constellation as a wrapped RA.

    Pisces spans the 0° seam, so its anchor is the centre of both pieces combined.
    """
    spans: dict[str, list[tuple[float, float]]] = {}
    for seg in segments:
        spans.setdefault(seg.code, []).append((seg.start_deg, seg.end_deg))

    midpoints: dict[str, float] = {}
    for code, ranges in spans.items():
        if len(ranges) == 1:
            start, end = ranges[0]
            mid = (start + end) / 2.0
        else:
            # Unroll pieces past 360 so they form one contiguous arc
            unrolled = [(s + 360.0, e + 360.0) if s < 180.0 else (s, e) for s, e in ranges]
            start = min(s for s, _ in unrolled)
            end = max(e for _, e in unrolled)
            mid = (start + end) / 2.0
        midpoints[code] = wrap_degrees(mid)
    return midpoints
