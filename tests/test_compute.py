"""Tests for the engine facade and the query entry point."""

from datetime import datetime, timedelta

import pytest
from pytz import utc

import realzodiac.compute as compute
from realzodiac.astronomy import moon_position, sun_right_ascension
from realzodiac.compute import SkyEngine, build_provider, parse_when, run
from realzodiac.config import EngineSettings
from realzodiac.errors import InvalidQueryError
from realzodiac.models import BodyId, EquatorialPosition, GeoCoordinate, QueryInput
from realzodiac.planets import AnalyticPlanetProvider

EQUINOX = datetime(2000, 3, 20, 12, 0, tzinfo=utc)


class RecordingProvider:
    name = "recording"

    def __init__(self):
        self.calls = []

    def position(self, when, body):
        self.calls.append(body)
        return EquatorialPosition(ra_deg=1.0, dec_deg=2.0)


def test_positions_cover_every_body():
    """One position per BodyId, all wrapped."""
    positions = SkyEngine().positions(EQUINOX)
    assert set(positions) == set(BodyId)
    for pos in positions.values():
        assert -180.0 < pos.ra_deg <= 180.0


def test_luminaries_are_always_analytic():
    """Sun and Moon never reach the planet provider."""
    provider = RecordingProvider()
    engine = SkyEngine(provider)
    assert engine.position(EQUINOX, BodyId.SUN).ra_deg == sun_right_ascension(EQUINOX)
    assert engine.position(EQUINOX, "moon") == moon_position(EQUINOX)
    assert provider.calls == []

    engine.positions(EQUINOX)
    assert BodyId.SUN not in provider.calls
    assert BodyId.MOON not in provider.calls
    assert len(provider.calls) == 11


def test_unknown_body_position():
    """An unknown id gives the origin instead of raising."""
    assert SkyEngine().position(EQUINOX, "vulcan") == EquatorialPosition(0.0, 0.0)


def test_compute_frame_equinox():
    """At the equinox the Sun is centred, in Pisces, with no horizon."""
    frame = SkyEngine().compute_frame(EQUINOX, width=1200, height=600)
    assert len(frame.placements) == 13
    sun = frame.placement(BodyId.SUN)
    assert (sun.point.x, sun.point.y) == pytest.approx((600.0, 300.0), abs=1e-6)
    assert sun.point.visible
    assert frame.constellation == "Psc"
    assert frame.horizon is None
    assert frame.provider_name == "analytic"
    assert 0.0 <= frame.moon_phase < 1.0
    assert all(p.point.visible for p in frame.visible_bodies())


def test_compute_frame_with_observer():
    """An observer adds the solar horizon position."""
    frame = SkyEngine().compute_frame(EQUINOX, observer=GeoCoordinate(lat=51.5, lng=0.0))
    assert frame.horizon is not None
    assert 0.0 <= frame.horizon.azimuth_deg < 360.0


def test_compute_frame_is_idempotent():
    """Recomputing the same instant gives an equal frame."""
    engine = SkyEngine()
    when = datetime(1969, 7, 20, 20, 17, tzinfo=utc)
    assert engine.compute_frame(when) == engine.compute_frame(when)


def test_compute_frame_uses_provider_name():
    """The frame records which planet provider produced it."""
    frame = SkyEngine(RecordingProvider()).compute_frame(EQUINOX)
    assert frame.provider_name == "recording"
    assert frame.placement(BodyId.MARS).position == EquatorialPosition(1.0, 2.0)


def test_build_provider_analytic():
    """The default settings select the analytic provider."""
    assert isinstance(build_provider(EngineSettings()), AnalyticPlanetProvider)


def test_build_provider_skyfield(monkeypatch):
    """The skyfield setting constructs the skyfield provider with the configured kernel."""
    seen = {}

    class FakeSkyfield:
        name = "skyfield"

        def __init__(self, ephemeris_dir, ephemeris_file):
            seen["args"] = (ephemeris_dir, ephemeris_file)

    monkeypatch.setattr(compute, "SkyfieldPlanetProvider", FakeSkyfield)
    settings = EngineSettings(planet_provider="skyfield", ephemeris_dir="eph", ephemeris_file="de440s.bsp")
    provider = build_provider(settings)
    assert isinstance(provider, FakeSkyfield)
    assert seen["args"] == ("eph", "de440s.bsp")


def test_parse_when_utc_and_zone():
    """Wall-clock strings are localized to the requested zone."""
    assert parse_when("2000-03-20 12:00") == EQUINOX
    seoul = parse_when("2000-03-20 21:00", "Asia/Seoul")
    assert seoul.hour == 21
    assert seoul - EQUINOX == timedelta(0)


@pytest.mark.parametrize(
    "when, tz",
    [
        ("20-03-2000", "UTC"),
        ("2000-03-20 12:00", "Mars/Olympus_Mons"),
        # Skipped by the spring-forward transition
        ("2021-03-14 02:30", "America/New_York"),
    ],
)
def test_parse_when_rejects_bad_input(when, tz):
    """Malformed times, unknown zones and non-existent local times are rejected."""
    with pytest.raises(InvalidQueryError):
        parse_when(when, tz)


def test_run_without_observer():
    """run() parses the query and computes a frame."""
    frame = run(QueryInput(when="2001-12-05 12:00"))
    assert frame.constellation == "Oph"
    assert frame.tropical_sign == "Sgr"
    assert frame.horizon is None


def test_run_with_observer():
    """Latitude and longitude together produce a horizon position."""
    frame = run(QueryInput(when="2001-06-21 12:00", lat=45.0, lng=7.0))
    assert frame.horizon is not None
    assert frame.horizon.altitude_deg > 60.0


@pytest.mark.parametrize(
    "query",
    [
        QueryInput(when="2001-06-21 12:00", lat=45.0),
        QueryInput(when="2001-06-21 12:00", lng=45.0),
        QueryInput(when="2001-06-21 12:00", lat=95.0, lng=0.0),
    ],
)
def test_run_rejects_bad_observer(query):
    """Half-specified or out-of-range observers are rejected."""
    with pytest.raises(InvalidQueryError):
        run(query)
