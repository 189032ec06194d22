"""Position engine: one entry point over the Sun, Moon, and planet models."""

import logging
from datetime import datetime

from pytz import UnknownTimeZoneError, timezone, utc
from pytz.exceptions import InvalidTimeError

from realzodiac.astronomy import (
    moon_phase,
    moon_phase_name,
    moon_position,
    solar_horizon_position,
    sun_position,
)
from realzodiac.bodies import coerce_body
from realzodiac.config import EngineSettings
from realzodiac.errors import InvalidQueryError
from realzodiac.models import (
    BodyId,
    BodyPlacement,
    EquatorialPosition,
    GeoCoordinate,
    QueryInput,
    SkyFrame,
)
from realzodiac.planets import AnalyticPlanetProvider, PlanetProvider, SkyfieldPlanetProvider
from realzodiac.projection import project
from realzodiac.zodiac import current_constellation, tropical_sign

logger = logging.getLogger(__name__)


def build_provider(settings: EngineSettings) -> PlanetProvider:
    """Instantiate the planet provider named in settings.

    Raises:
        EphemerisUnavailableError: The skyfield kernel could not be loaded.
    """
    if settings.planet_provider == "skyfield":
        logger.info("Using skyfield planet provider (%s)", settings.ephemeris_file)
        return SkyfieldPlanetProvider(settings.ephemeris_dir, settings.ephemeris_file)
    logger.info("Using analytic planet provider")
    return AnalyticPlanetProvider()


class SkyEngine:
    """Sun and Moon stay analytic; every other body goes through the provider.

    Stateless apart from the provider, so one instance can serve any number of
    frames or threads.
    """

    def __init__(self, provider: PlanetProvider | None = None) -> None:
        self.provider = provider or AnalyticPlanetProvider()

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "SkyEngine":
        return cls(build_provider(settings))

    def position(self, when: datetime, body: "BodyId | str") -> EquatorialPosition:
        body_id = coerce_body(body)
        if body_id is BodyId.SUN:
            return sun_position(when)
        if body_id is BodyId.MOON:
            return moon_position(when)
        if body_id is None:
            logger.debug("Unknown body %r", body)
            return EquatorialPosition(ra_deg=0.0, dec_deg=0.0)
        return self.provider.position(when, body_id)

    def positions(self, when: datetime) -> dict[BodyId, EquatorialPosition]:
        return {body: self.position(when, body) for body in BodyId}

    def compute_frame(
        self,
        when: datetime,
        observer: GeoCoordinate | None = None,
        width: float = 800,
        height: float = 600,
    ) -> SkyFrame:
        """Compute every body for one instant and project it into the viewport.

        Args:
            when: Timestamp; naive values are read as UTC.
            observer: Optional location for the solar horizon position.
            width: Viewport width in pixels.
            height: Viewport height in pixels.

        Returns:
            SkyFrame holding all 13 placements plus zodiac and moon state.
        """
        positions = self.positions(when)
        sun_ra = positions[BodyId.SUN].ra_deg
        placements = tuple(
            BodyPlacement(body=body, position=pos, point=project(pos, sun_ra, width, height))
            for body, pos in positions.items()
        )
        phase = moon_phase(when)
        return SkyFrame(
            when=when,
            width=width,
            height=height,
            sun_ra_deg=sun_ra,
            constellation=current_constellation(sun_ra),
            tropical_sign=tropical_sign(when),
            moon_phase=phase,
            moon_phase_name=moon_phase_name(phase),
            placements=placements,
            observer=observer,
            horizon=solar_horizon_position(when, observer) if observer is not None else None,
            provider_name=self.provider.name,
        )


def parse_when(when: str, tz: str = "UTC") -> datetime:
    """Parse a "YYYY-MM-DD HH:MM" wall-clock string in zone tz into an aware datetime.

    The result keeps the local clock, which is what the horizon transform reads.

    Raises:
        InvalidQueryError: Malformed string or unknown zone.
    """
    try:
        dt = datetime.strptime(when.strip(), "%Y-%m-%d %H:%M")
    except ValueError as exc:
        raise InvalidQueryError(f"Expected 'YYYY-MM-DD HH:MM', got {when!r}") from exc
    if tz.upper() == "UTC":
        return utc.localize(dt)
    try:
        local_tz = timezone(tz)
    except UnknownTimeZoneError as exc:
        raise InvalidQueryError(f"Unknown timezone: {tz}") from exc
    try:
        return local_tz.localize(dt, is_dst=None)
    except InvalidTimeError as exc:
        raise InvalidQueryError(f"{when} is ambiguous or skipped in {tz}") from exc


def run(
    query: QueryInput,
    engine: SkyEngine | None = None,
    width: float = 800,
    height: float = 600,
) -> SkyFrame:
    """Top-level entry point: takes a QueryInput and returns a SkyFrame.

    Raises:
        InvalidQueryError: Unparseable time, unknown zone, or a half-specified observer.
    """
    when = parse_when(query.when, query.tz)
    if (query.lat is None) != (query.lng is None):
        raise InvalidQueryError("Latitude and longitude must be given together")
    observer = None
    if query.lat is not None and query.lng is not None:
        if not -90.0 <= query.lat <= 90.0:
            raise InvalidQueryError(f"Latitude out of range: {query.lat}")
        observer = GeoCoordinate(lat=query.lat, lng=query.lng)
    engine = engine or SkyEngine()
    return engine.compute_frame(when, observer=observer, width=width, height=height)
