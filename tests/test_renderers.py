"""Smoke tests for the Plotly and matplotlib renderers."""

from datetime import datetime

import matplotlib

matplotlib.use("Agg")

from pytz import utc  # noqa: E402

from realzodiac.compute import SkyEngine  # noqa: E402
from realzodiac.models import BodyId, GeoCoordinate  # noqa: E402
from realzodiac.renderers.plotly_2d import render_plotly_chart  # noqa: E402
from realzodiac.renderers.static import render_static_chart, save_static_chart  # noqa: E402

WHEN = datetime(2001, 12, 5, 12, 0, tzinfo=utc)


def test_plotly_chart_layout():
    """The figure uses screen coordinates with y pointing down."""
    frame = SkyEngine().compute_frame(WHEN, width=1000, height=600)
    fig = render_plotly_chart(frame)
    assert len(fig.data) == 2
    assert tuple(fig.layout.xaxis.range) == (0, 1000)
    assert tuple(fig.layout.yaxis.range) == (600, 0)
    sun_trace, body_trace = fig.data
    assert tuple(sun_trace.x) == (500.0,)
    expected = sum(1 for p in frame.visible_bodies() if p.body is not BodyId.SUN)
    assert len(body_trace.x) == expected


def test_plotly_chart_highlights_current_constellation():
    """The current constellation label is drawn larger, in the requested language."""
    frame = SkyEngine().compute_frame(WHEN)
    fig = render_plotly_chart(frame, lang="ko")
    labels = {a.text: a.font.size for a in fig.layout.annotations}
    assert labels["뱀주인자리"] == 16


def test_plotly_chart_draws_ground_with_observer():
    """An observer adds the ground disc shape."""
    frame = SkyEngine().compute_frame(WHEN, observer=GeoCoordinate(lat=40.0, lng=-74.0))
    fig = render_plotly_chart(frame)
    kinds = [s.type for s in fig.layout.shapes]
    assert kinds == ["line", "circle"]


def test_static_chart_saves_png(tmp_path):
    """The static renderer writes a non-empty PNG."""
    frame = SkyEngine().compute_frame(WHEN, width=400, height=300)
    fig = render_static_chart(frame)
    assert fig.get_size_inches().tolist() == [4.0, 3.0]

    path = save_static_chart(frame, tmp_path / "chart.png")
    assert path.exists()
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
