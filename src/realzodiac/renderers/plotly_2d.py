"""Plotly 2D interactive zodiac chart renderer.

Draws a SkyFrame in viewport pixel coordinates: the Sun at the centre, the
ecliptic as a horizontal line, constellation labels along it, and every
visible body as a labelled marker.
Supports wheel zoom and drag panning.
"""

import plotly.graph_objects as go

from realzodiac.bodies import BODY_STYLES
from realzodiac.i18n import t
from realzodiac.models import BodyId, SkyFrame
from realzodiac.projection import horizon_disc, project_radec
from realzodiac.zodiac import ELEMENT_COLORS, constellation_midpoints

_BG = "#050a1a"
_ECLIPTIC_COLOR = "#334466"
_EARTH_FILL = "rgba(251, 191, 36, 0.5)"
_EARTH_LINE = "rgba(251, 191, 36, 0.9)"


def _constellation_annotations(frame: SkyFrame, lang: str) -> list[dict]:
    annotations: list[dict] = []
    for code, mid_ra in constellation_midpoints().items():
        point = project_radec(mid_ra, 0.0, frame.sun_ra_deg, frame.width, frame.height)
        if not point.visible:
            continue
        current = code == frame.constellation
        colors = ELEMENT_COLORS[code]
        annotations.append(
            dict(
                x=point.x,
                y=point.y - 40,
                text=t(code, lang),
                showarrow=False,
                font=dict(
                    color=colors["glow"] if current else colors["color"],
                    size=16 if current else 12,
                ),
            )
        )
    return annotations


def render_plotly_chart(frame: SkyFrame, lang: str = "en") -> go.Figure:
    """Render a SkyFrame as a Plotly 2D interactive chart.

    Only bodies within the visibility window are drawn. The node is drawn as a
    diamond, everything else as a circle.

    Args:
        frame: Fully computed sky frame.
        lang: Language code for constellation labels.

    Returns:
        Plotly Figure object.
    """
    visible = [p for p in frame.visible_bodies() if p.body is not BodyId.SUN]

    # Sun is always the centre of the chart
    sun_style = BODY_STYLES[BodyId.SUN]
    sun_trace = go.Scatter(
        x=[frame.width / 2],
        y=[frame.height / 2],
        mode="markers",
        marker=dict(size=sun_style.size * 2, color=sun_style.color),
        hovertext=[f"{sun_style.symbol} {sun_style.name}"],
        hoverinfo="text",
        name="sun",
    )

    body_trace = go.Scatter(
        x=[p.point.x for p in visible],
        y=[p.point.y for p in visible],
        mode="markers+text",
        marker=dict(
            size=[BODY_STYLES[p.body].size * 2 for p in visible],
            color=[BODY_STYLES[p.body].color for p in visible],
            symbol=["diamond" if BODY_STYLES[p.body].is_node else "circle" for p in visible],
            line=dict(width=0),
        ),
        text=[f"{BODY_STYLES[p.body].symbol} {BODY_STYLES[p.body].name}" for p in visible],
        textposition="middle right",
        textfont=dict(color=[BODY_STYLES[p.body].color for p in visible], size=11),
        hoverinfo="text",
        name="bodies",
    )

    shapes: list[dict] = [
        dict(
            type="line",
            x0=0,
            x1=frame.width,
            y0=frame.height / 2,
            y1=frame.height / 2,
            line=dict(color=_ECLIPTIC_COLOR, width=1, dash="dot"),
        )
    ]
    if frame.horizon is not None:
        cx, cy, r = horizon_disc(
            frame.horizon.altitude_deg, frame.horizon.azimuth_deg, frame.width, frame.height
        )
        shapes.append(
            dict(
                type="circle",
                x0=cx - r,
                x1=cx + r,
                y0=cy - r,
                y1=cy + r,
                fillcolor=_EARTH_FILL,
                line=dict(color=_EARTH_LINE, width=3),
                layer="below",
            )
        )

    fig = go.Figure(data=[sun_trace, body_trace])
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=frame.width,
        height=frame.height,
        dragmode="pan",
        # Screen coordinates: y grows downward
        xaxis=dict(visible=False, range=[0, frame.width], autorange=False),
        yaxis=dict(visible=False, range=[frame.height, 0], autorange=False),
        shapes=shapes,
        annotations=_constellation_annotations(frame, lang),
    )

    # st.plotly_chart call also requires config={"scrollZoom": True}
    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]

    return fig
