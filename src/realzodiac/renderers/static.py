"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from realzodiac.bodies import BODY_STYLES
from realzodiac.models import BodyId, SkyFrame
from realzodiac.projection import horizon_disc, project_radec
from realzodiac.zodiac import CONSTELLATION_NAMES, ELEMENT_COLORS, constellation_midpoints

_ROOT = Path(__file__).parent.parent.parent.parent
_BG = "#050a1a"


def _rgba(css: str) -> tuple[float, float, float, float]:
    """Convert "rgba(r, g, b, a)" to a matplotlib colour tuple."""
    r, g, b, a = (float(v) for v in css[css.index("(") + 1 : css.index(")")].split(","))
    return r / 255, g / 255, b / 255, a


def render_static_chart(frame: SkyFrame, dpi: int = 100) -> Figure:
    """Render a SkyFrame as a static matplotlib image.

    Args:
        frame: Fully computed sky frame.
        dpi: Pixels per inch; figure size is the frame viewport divided by dpi.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(frame.width / dpi, frame.height / dpi), dpi=dpi)
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    if frame.horizon is not None:
        cx, cy, r = horizon_disc(
            frame.horizon.altitude_deg, frame.horizon.azimuth_deg, frame.width, frame.height
        )
        ax.add_patch(
            Circle((cx, cy), r, facecolor=(251 / 255, 191 / 255, 36 / 255, 0.5), edgecolor="#fbbf24", zorder=0)
        )

    ax.axhline(frame.height / 2, color="#334466", linewidth=0.8, linestyle=":", zorder=1)

    for code, mid_ra in constellation_midpoints().items():
        point = project_radec(mid_ra, 0.0, frame.sun_ra_deg, frame.width, frame.height)
        if not point.visible:
            continue
        current = code == frame.constellation
        ax.text(
            point.x,
            point.y - 40,
            CONSTELLATION_NAMES[code],
            color=_rgba(ELEMENT_COLORS[code]["glow" if current else "color"]),
            fontsize=13 if current else 9,
            ha="center",
            zorder=2,
        )

    visible = [p for p in frame.visible_bodies() if p.body is not BodyId.SUN]
    x_vals = np.array([p.point.x for p in visible])
    y_vals = np.array([p.point.y for p in visible])
    sizes = np.array([BODY_STYLES[p.body].size for p in visible]) ** 2
    colors = [BODY_STYLES[p.body].color for p in visible]
    ax.scatter(x_vals, y_vals, s=sizes, c=colors, linewidths=0, zorder=3)
    for p in visible:
        style = BODY_STYLES[p.body]
        ax.text(p.point.x + style.size + 6, p.point.y + 4, style.name, color=style.color, fontsize=8, zorder=4)

    sun = BODY_STYLES[BodyId.SUN]
    ax.scatter([frame.width / 2], [frame.height / 2], s=(sun.size * 2) ** 2, c=sun.color, zorder=5)

    ax.set_xlim(0, frame.width)
    ax.set_ylim(frame.height, 0)
    ax.axis("off")

    return fig


def save_static_chart(frame: SkyFrame, output_path: Path | None = None) -> Path:
    """Save a SkyFrame as a PNG file.

    Args:
        frame: Fully computed sky frame.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = frame.when.strftime("%Y_%m_%d_%H_%M")
        output_path = _ROOT / "results" / f"{frame.constellation}__{when_str}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(frame)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
