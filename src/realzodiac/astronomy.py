"""Sun and Moon models, precession, and the solar horizon transform.

Every function here is pure: the same timestamp always yields the same value,
so animation loops can recompute freely.
"""

import math
from datetime import datetime

from pytz import utc

from realzodiac.angles import normalize_degrees, wrap_degrees
from realzodiac.models import EquatorialPosition, GeoCoordinate, HorizonPosition
from realzodiac.timebasis import day_of_year, days_since_epoch, fractional_hours

# 50.3 arc-seconds per year
PRECESSION_DEG_PER_YEAR = 0.01397

SUN_DEG_PER_DAY = 0.9856
SPRING_EQUINOX_DAY = 80
OBLIQUITY_DEG = 23.45
SOLAR_DECLINATION_PHASE_DAY = 81

REFERENCE_NEW_MOON = datetime(2000, 1, 6, 18, 14, 0, tzinfo=utc)
SYNODIC_MONTH_DAYS = 29.53058867
DRACONIC_MONTH_DAYS = 27.21222
# Moon's angular rate relative to the Sun
MOON_ELONGATION_DEG_PER_DAY = 12.19
MOON_INCLINATION_DEG = 5.145

# Numerical floor for cos(altitude) and cos(latitude) in the azimuth formula
_AZIMUTH_EPSILON = 1e-12


def precession_offset(when: datetime) -> float:
    """Linear precession correction in degrees since J2000.

    Unbounded by design; only human-historical dates are meaningful.
    """
    years_since_j2000 = (when.year - 2000) + day_of_year(when) / 365.25
    return years_since_j2000 * PRECESSION_DEG_PER_YEAR


def tropical_sun_longitude(when: datetime) -> float:
    """Mean solar longitude without precession, in [0, 360)."""
    return normalize_degrees((day_of_year(when) - SPRING_EQUINOX_DAY) * SUN_DEG_PER_DAY)


def sun_right_ascension(when: datetime) -> float:
    """Precessed mean solar longitude, in (-180, 180]."""
    base = (day_of_year(when) - SPRING_EQUINOX_DAY) * SUN_DEG_PER_DAY
    return wrap_degrees(base - precession_offset(when))


def solar_declination(when: datetime) -> float:
    """±23.45° sinusoid keyed to day-of-year."""
    angle = math.radians((360.0 / 365.0) * (day_of_year(when) - SOLAR_DECLINATION_PHASE_DAY))
    return OBLIQUITY_DEG * math.sin(angle)


def sun_position(when: datetime) -> EquatorialPosition:
    # The Sun sits on the ecliptic in display coordinates
    return EquatorialPosition(ra_deg=sun_right_ascension(when), dec_deg=0.0)


def days_since_new_moon(when: datetime) -> float:
    """Days into the current synodic month, in [0, SYNODIC_MONTH_DAYS).

    Python's modulo already folds pre-2000 dates forward by one synodic period.
    """
    elapsed = days_since_epoch(when, REFERENCE_NEW_MOON) % SYNODIC_MONTH_DAYS
    if elapsed >= SYNODIC_MONTH_DAYS:
        elapsed = 0.0
    return elapsed


def moon_phase(when: datetime) -> float:
    """Fraction of the synodic month elapsed: 0 = new moon, 0.5 = full moon."""
    phase = days_since_new_moon(when) / SYNODIC_MONTH_DAYS
    if phase >= 1.0:
        phase = 0.0
    return phase


def moon_right_ascension(when: datetime) -> float:
    """Sun RA plus the Moon's elongation.

    Chained off the precessed Sun so the Sun-Moon separation, and therefore the
    phase, is unaffected by precession.
    """
    offset = days_since_new_moon(when) * MOON_ELONGATION_DEG_PER_DAY
    return wrap_degrees(sun_right_ascension(when) + offset)


def moon_declination(when: datetime) -> float:
    """Draconic-month sinusoid for the Moon's tilt against the ecliptic."""
    cycle = days_since_epoch(when, REFERENCE_NEW_MOON) / DRACONIC_MONTH_DAYS
    return MOON_INCLINATION_DEG * math.sin(2.0 * math.pi * cycle)


def moon_position(when: datetime) -> EquatorialPosition:
    return EquatorialPosition(ra_deg=moon_right_ascension(when), dec_deg=moon_declination(when))


# Synodic fraction windows for the eight named phases
PHASE_NAMES: tuple[tuple[float, float, str], ...] = (
    (0.000, 0.0625, "new_moon"),
    (0.0625, 0.1875, "waxing_crescent"),
    (0.1875, 0.3125, "first_quarter"),
    (0.3125, 0.4375, "waxing_gibbous"),
    (0.4375, 0.5625, "full_moon"),
    (0.5625, 0.6875, "waning_gibbous"),
    (0.6875, 0.8125, "last_quarter"),
    (0.8125, 0.9375, "waning_crescent"),
    (0.9375, 1.000, "new_moon"),
)


def moon_phase_name(phase: float) -> str:
    """Name the phase for a synodic fraction. Out-of-range input is folded into [0, 1)."""
    phase = phase % 1.0
    for low, high, name in PHASE_NAMES:
        if low <= phase < high:
            return name
    return "new_moon"


def solar_horizon_position(when: datetime, observer: GeoCoordinate) -> HorizonPosition:
    """Local altitude/azimuth of the Sun.

    Hour angle comes from the timestamp's own wall clock, so the result is only
    as timezone-correct as the caller's datetime. Observer longitude is unused.
    """
    dec = math.radians(solar_declination(when))
    lat = math.radians(observer.lat)
    hour_angle = math.radians((fractional_hours(when) - 12.0) * 15.0)

    sin_alt = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(hour_angle)
    altitude = math.asin(max(-1.0, min(1.0, sin_alt)))

    cos_alt = math.cos(altitude)
    cos_lat = math.cos(lat)
    if abs(cos_alt) < _AZIMUTH_EPSILON or abs(cos_lat) < _AZIMUTH_EPSILON:
        # Zenith, nadir or a pole: azimuth undefined, 0 by convention
        return HorizonPosition(altitude_deg=math.degrees(altitude), azimuth_deg=0.0)

    sin_az = math.cos(dec) * math.sin(hour_angle) / cos_alt
    cos_az = (math.sin(dec) - math.sin(lat) * math.sin(altitude)) / (cos_lat * cos_alt)
    azimuth = normalize_degrees(math.degrees(math.atan2(sin_az, cos_az)))
    return HorizonPosition(altitude_deg=math.degrees(altitude), azimuth_deg=azimuth)


def solar_altitude(when: datetime, lat: float, lng: float) -> float:
    return solar_horizon_position(when, GeoCoordinate(lat=lat, lng=lng)).altitude_deg


def solar_azimuth(when: datetime, lat: float, lng: float) -> float:
    return solar_horizon_position(when, GeoCoordinate(lat=lat, lng=lng)).azimuth_deg
