"""Planet and special-point models, with a pluggable high-precision provider.

The analytic model is a circular mean-element scheme: longitude advances
linearly from its J2000 value and declination is a coarse inclination-scaled
sinusoid. The skyfield provider replaces it for the eight major planets when a
JPL kernel is available.
"""

import logging
import math
from datetime import datetime
from typing import Protocol

from skyfield.api import Loader

from realzodiac.angles import wrap_degrees
from realzodiac.astronomy import precession_offset
from realzodiac.bodies import DEFAULT_INCLINATION_DEG, ORBITAL_ELEMENTS, coerce_body
from realzodiac.errors import EphemerisUnavailableError
from realzodiac.models import BodyId, EquatorialPosition, OrbitalElements
from realzodiac.timebasis import J2000, as_aware, day_of_year, days_since_epoch

logger = logging.getLogger(__name__)


def _lookup(body: "BodyId | str") -> tuple[BodyId | None, OrbitalElements | None]:
    body_id = coerce_body(body)
    elements = ORBITAL_ELEMENTS.get(body_id) if body_id is not None else None
    if elements is None:
        logger.debug("No orbital elements for %r; using defaults", body)
    return body_id, elements


def mean_longitude(when: datetime, elements: OrbitalElements) -> float:
    """Mean longitude in [0, 360) at when."""
    mean_anomaly = (360.0 / elements.period_days) * days_since_epoch(when, J2000)
    return (elements.mean_longitude_at_epoch + mean_anomaly) % 360.0


def body_right_ascension(when: datetime, body: "BodyId | str") -> float:
    """Geocentric-opposition display longitude, in (-180, 180].

    Bodies without orbital elements (Sun, Moon, unknown ids) give 0 instead of
    raising, so a renderer never crashes on a bad id.
    """
    _, elements = _lookup(body)
    if elements is None:
        return 0.0
    return wrap_degrees(mean_longitude(when, elements) - 180.0 - precession_offset(when))


def body_declination(when: datetime, body: "BodyId | str") -> float:
    """Inclination-scaled yearly sinusoid; the lunar node stays on the ecliptic."""
    body_id, elements = _lookup(body)
    if body_id is BodyId.NORTH_NODE:
        return 0.0
    inclination = elements.inclination_deg if elements is not None else DEFAULT_INCLINATION_DEG
    return math.sin((day_of_year(when) / 365.0) * math.pi * 2.0) * inclination


class PlanetProvider(Protocol):
    name: str

    def position(self, when: datetime, body: BodyId) -> EquatorialPosition: ...


class AnalyticPlanetProvider:
    """Mean-element positions for every non-luminary body."""

    name = "analytic"

    def position(self, when: datetime, body: BodyId) -> EquatorialPosition:
        return EquatorialPosition(
            ra_deg=body_right_ascension(when, body),
            dec_deg=body_declination(when, body),
        )


# Segment names in the DE4xx planetary kernels
_SKYFIELD_TARGETS: dict[BodyId, str] = {
    BodyId.MERCURY: "mercury",
    BodyId.VENUS: "venus",
    BodyId.MARS: "mars",
    BodyId.JUPITER: "jupiter barycenter",
    BodyId.SATURN: "saturn barycenter",
    BodyId.URANUS: "uranus barycenter",
    BodyId.NEPTUNE: "neptune barycenter",
    BodyId.PLUTO: "pluto barycenter",
}


class SkyfieldPlanetProvider:
    """Major planets from a JPL ephemeris via skyfield; everything else analytic.

    Apparent ecliptic-of-date longitude is shifted by the same precession
    offset as the Sun model so planets stay in the Sun's display frame.
    """

    name = "skyfield"

    def __init__(
        self,
        ephemeris_dir: str = "resources",
        ephemeris_file: str = "de421.bsp",
        *,
        ephemeris=None,
        timescale=None,
        fallback: PlanetProvider | None = None,
    ) -> None:
        if ephemeris is None:
            loader = Loader(ephemeris_dir)
            try:
                ephemeris = loader(ephemeris_file)
            except (OSError, ValueError) as exc:
                logger.warning("Could not load %s from %s: %s", ephemeris_file, ephemeris_dir, exc)
                raise EphemerisUnavailableError(f"ephemeris {ephemeris_file} unavailable: {exc}") from exc
            logger.info("Loaded ephemeris %s", ephemeris_file)
            if timescale is None:
                timescale = loader.timescale()
        if timescale is None:
            timescale = Loader(ephemeris_dir).timescale()
        self._eph = ephemeris
        self._earth = ephemeris["earth"]
        self._ts = timescale
        self._fallback = fallback or AnalyticPlanetProvider()

    def position(self, when: datetime, body: BodyId) -> EquatorialPosition:
        target = _SKYFIELD_TARGETS.get(body)
        if target is None:
            return self._fallback.position(when, body)

        t = self._ts.from_datetime(as_aware(when))
        apparent = self._earth.at(t).observe(self._eph[target]).apparent()
        lat, lon, _ = apparent.ecliptic_latlon(epoch="date")
        return EquatorialPosition(
            ra_deg=wrap_degrees(lon.degrees - precession_offset(when)),
            dec_deg=float(lat.degrees),
        )
