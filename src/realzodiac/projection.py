"""Sun-centred orthographic projection into viewport pixels."""

import math

from realzodiac.angles import wrap_degrees
from realzodiac.models import EquatorialPosition, ProjectedPoint

# Degrees of sky spanned by the shorter viewport side
FIELD_OF_VIEW_DEG = 120.0
# Bodies further than this from the Sun are off-chart
VISIBILITY_LIMIT_DEG = 100.0


def project_radec(ra_deg: float, dec_deg: float, sun_ra_deg: float, width: float, height: float) -> ProjectedPoint:
    """Map (RA, Dec) to screen coordinates with the Sun at the centre.

    RA grows to the left, declination grows upward; visibility is strict
    (exactly 100° from the Sun is hidden).
    """
    adjusted_ra = wrap_degrees(ra_deg - sun_ra_deg)
    scale = min(width, height) / FIELD_OF_VIEW_DEG
    return ProjectedPoint(
        x=width / 2.0 - adjusted_ra * scale,
        y=height / 2.0 - dec_deg * scale,
        visible=abs(adjusted_ra) < VISIBILITY_LIMIT_DEG,
    )


def project(position: EquatorialPosition, sun_ra_deg: float, width: float, height: float) -> ProjectedPoint:
    return project_radec(position.ra_deg, position.dec_deg, sun_ra_deg, width, height)


def horizon_disc(altitude_deg: float, azimuth_deg: float, width: float, height: float) -> tuple[float, float, float]:
    """Centre and radius of the ground disc drawn under the Sun.

    The disc rises toward the viewport centre as the Sun sinks and slides
    sideways with azimuth. Returns (x, y, radius) in pixels.
    """
    radius = min(width, height) * 3.0
    vertical_offset = radius * (1.0 + altitude_deg / 90.0)
    horizontal_offset = math.sin(math.radians(azimuth_deg - 180.0)) * radius * 0.3
    return width / 2.0 + horizontal_offset, height / 2.0 + vertical_offset, radius
