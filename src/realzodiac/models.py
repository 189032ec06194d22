"""Data model definitions: explicit boundaries between time input, position models, and renderers."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    when: str  # "YYYY-MM-DD HH:MM" wall-clock time
    tz: str = "UTC"  # IANA zone name the wall-clock time is in
    lat: float | None = None  # Observer latitude; horizon is skipped when None
    lng: float | None = None  # Observer longitude


class BodyId(str, Enum):
    """Closed set of bodies the engine knows how to place."""

    SUN = "sun"
    MOON = "moon"
    MERCURY = "mercury"
    VENUS = "venus"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"
    PLUTO = "pluto"
    CHIRON = "chiron"
    NORTH_NODE = "north_node"
    LILITH = "lilith"


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer location. Only the horizon transform uses it."""

    lat: float  # Latitude (decimal degrees, north positive)
    lng: float  # Longitude (decimal degrees, east positive)


@dataclass(frozen=True)
class OrbitalElements:
    """Mean-element constants for one body. Never mutated."""

    period_days: float  # Orbital period; negative for retrograde motion (lunar node)
    mean_longitude_at_epoch: float  # Mean longitude at J2000 (degrees)
    inclination_deg: float  # Amplitude of the declination sinusoid (degrees)


@dataclass(frozen=True)
class EquatorialPosition:
    """Display coordinates of a body. Produced fresh per query."""

    ra_deg: float  # Ecliptic-longitude-like angle, (-180, 180]
    dec_deg: float  # Angle above/below the ecliptic (degrees)


@dataclass(frozen=True)
class ZodiacSegment:
    """Half-open range [start_deg, end_deg) assigned to one constellation."""

    start_deg: float
    end_deg: float
    code: str  # IAU abbreviation ("Ari", "Oph", ...)

    def contains(self, ra_deg: float) -> bool:
        return self.start_deg <= ra_deg < self.end_deg


@dataclass(frozen=True)
class ProjectedPoint:
    """Viewport coordinates for a single body."""

    x: float  # Pixels from the left edge
    y: float  # Pixels from the top edge
    visible: bool  # Within 100° of the Sun


@dataclass(frozen=True)
class HorizonPosition:
    """Local Sun position for an observer."""

    altitude_deg: float  # Degrees above the horizon
    azimuth_deg: float  # Degrees from north through east, [0, 360)


@dataclass(frozen=True)
class BodyStyle:
    """Display metadata handed to renderers alongside each body."""

    name: str
    symbol: str
    color: str  # Hex colour ("#fbbf24")
    size: float  # Marker radius in pixels
    category: str  # "luminary", "personal", "social", "outer", "special", "nodes"
    rulership: tuple[str, ...] = ()
    description: str = ""
    has_rings: bool = False
    is_node: bool = False


@dataclass(frozen=True)
class ZodiacComparison:
    """The astrology-vs-astronomy verdict for one instant."""

    tropical_sign: str  # IAU code of the tropical sign ("Ari")
    constellation: str  # IAU code of the constellation behind the Sun ("Psc")
    sun_ra_deg: float

    @property
    def agrees(self) -> bool:
        return self.tropical_sign == self.constellation


@dataclass(frozen=True)
class BodyPlacement:
    """One body's computed position and its projection."""

    body: BodyId
    position: EquatorialPosition
    point: ProjectedPoint


@dataclass(frozen=True)
class SkyFrame:
    """The sole input to renderers. Fully computed state for one instant."""

    when: datetime
    width: float  # Viewport width (pixels)
    height: float  # Viewport height (pixels)
    sun_ra_deg: float
    constellation: str  # IAU code the Sun is in
    tropical_sign: str
    moon_phase: float  # [0, 1); 0 = new, 0.5 = full
    moon_phase_name: str
    placements: tuple[BodyPlacement, ...]  # All bodies, BodyId order
    observer: GeoCoordinate | None = None
    horizon: HorizonPosition | None = None  # Only when an observer is given
    provider_name: str = "analytic"

    def placement(self, body: BodyId) -> BodyPlacement:
        for p in self.placements:
            if p.body is body:
                return p
        raise KeyError(body)

    def visible_bodies(self) -> tuple[BodyPlacement, ...]:
        return tuple(p for p in self.placements if p.point.visible)
