"""Body constants: mean orbital elements and display metadata."""

from types import MappingProxyType

from realzodiac.models import BodyId, BodyStyle, OrbitalElements

# Mean elements at J2000. Read-only for the life of the process.
ORBITAL_ELEMENTS: "MappingProxyType[BodyId, OrbitalElements]" = MappingProxyType(
    {
        BodyId.MERCURY: OrbitalElements(87.97, 252.25, 7.0),
        BodyId.VENUS: OrbitalElements(224.70, 181.98, 3.4),
        BodyId.MARS: OrbitalElements(686.98, 355.45, 1.9),
        BodyId.JUPITER: OrbitalElements(4332.59, 34.35, 1.3),
        BodyId.SATURN: OrbitalElements(10759.22, 50.08, 2.5),
        BodyId.URANUS: OrbitalElements(30688.5, 314.05, 0.8),
        BodyId.NEPTUNE: OrbitalElements(60182.0, 304.35, 1.8),
        BodyId.PLUTO: OrbitalElements(90560.0, 238.93, 17.0),
        BodyId.CHIRON: OrbitalElements(18513.0, 120.5, 6.9),
        # Regresses once every ~18.6 years; lies on the ecliptic by definition
        BodyId.NORTH_NODE: OrbitalElements(-6798.0, 180.0, 0.0),
        # No closed-form model; ±5° placeholder declination
        BodyId.LILITH: OrbitalElements(3232.6, 45.0, 5.0),
    }
)

DEFAULT_INCLINATION_DEG = 2.0

MAJOR_PLANETS: tuple[BodyId, ...] = (
    BodyId.MERCURY,
    BodyId.VENUS,
    BodyId.MARS,
    BodyId.JUPITER,
    BodyId.SATURN,
    BodyId.URANUS,
    BodyId.NEPTUNE,
    BodyId.PLUTO,
)

SPECIAL_POINTS: tuple[BodyId, ...] = (BodyId.CHIRON, BodyId.NORTH_NODE, BodyId.LILITH)

LUMINARIES: tuple[BodyId, ...] = (BodyId.SUN, BodyId.MOON)

BODY_STYLES: "MappingProxyType[BodyId, BodyStyle]" = MappingProxyType(
    {
        BodyId.SUN: BodyStyle("Sun", "☉", "#fbbf24", 12, "luminary"),
        BodyId.MOON: BodyStyle("Moon", "☽", "#f1f5f9", 10, "luminary"),
        BodyId.MERCURY: BodyStyle("Mercury", "☿", "#9ca3af", 4, "personal", ("Gemini", "Virgo")),
        BodyId.VENUS: BodyStyle("Venus", "♀", "#fbbf24", 7, "personal", ("Taurus", "Libra")),
        BodyId.MARS: BodyStyle("Mars", "♂", "#ef4444", 5, "personal", ("Aries", "Scorpio")),
        BodyId.JUPITER: BodyStyle("Jupiter", "♃", "#f59e0b", 11, "social", ("Sagittarius", "Pisces")),
        BodyId.SATURN: BodyStyle(
            "Saturn", "♄", "#eab308", 9, "social", ("Capricorn", "Aquarius"), has_rings=True
        ),
        BodyId.URANUS: BodyStyle("Uranus", "♅", "#06b6d4", 7, "outer", ("Aquarius",)),
        BodyId.NEPTUNE: BodyStyle("Neptune", "♆", "#3b82f6", 7, "outer", ("Pisces",)),
        BodyId.PLUTO: BodyStyle("Pluto", "♇", "#8b5cf6", 4, "outer", ("Scorpio",)),
        BodyId.CHIRON: BodyStyle("Chiron", "⚷", "#ec4899", 5, "special", description="Wounded Healer"),
        BodyId.NORTH_NODE: BodyStyle(
            "North Node", "☊", "#10b981", 6, "nodes", description="Dragon's Head", is_node=True
        ),
        BodyId.LILITH: BodyStyle("Lilith", "⚸", "#7c3aed", 5, "special", description="Black Moon"),
    }
)


_ALIASES: dict[str, BodyId] = {
    "node": BodyId.NORTH_NODE,
    "northnode": BodyId.NORTH_NODE,
}


def coerce_body(body: "BodyId | str") -> BodyId | None:
    """Resolve a body id, its string value, or a known alias. Unknown values give None."""
    if isinstance(body, BodyId):
        return body
    key = str(body).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return BodyId(key)
    except ValueError:
        return None
