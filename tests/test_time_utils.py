"""Tests for rms-julian time wrappers, Delta-T providers and sidereal time."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from solar_ephemeris import time_utils
from solar_ephemeris.errors import MalformedInputError


def test_ensure_leapsecs_sets_spice_ut_model(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leap-second init selects the SPICE UT model before loading the kernel."""

    calls: list[tuple[str, tuple[object, ...]]] = []

    def _set_ut_model(model: str, future: object = None) -> None:
        del future
        calls.append(('set_ut_model', (model,)))

    def _load_lsk(path: str = '') -> None:
        calls.append(('load_lsk', (path,)))

    monkeypatch.setattr('julian.set_ut_model', _set_ut_model)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('solar_ephemeris.time_utils.get_leapsecs_path', lambda: 'dummy.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert calls == [('set_ut_model', ('SPICE',)), ('load_lsk', ('dummy.tls',))]


def test_ensure_leapsecs_falls_back_to_bundled_kernel(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unreadable configured kernel falls back to rms-julian's bundled LSK."""

    paths: list[str] = []

    def _load_lsk(path: str = '') -> None:
        paths.append(path)
        if path:
            raise FileNotFoundError(path)

    monkeypatch.setattr('julian.set_ut_model', lambda model, future=None: None)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('solar_ephemeris.time_utils.get_leapsecs_path', lambda: '/missing.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert paths == ['/missing.tls', '']
    assert time_utils._leapsecs_loaded is True


def test_parse_datetime_accepts_iso_z_suffix() -> None:
    """ISO-8601 trailing Z parses as UTC like the same timestamp without Z."""

    with_z = time_utils.parse_datetime('2023-11-06T22:00:00Z')
    without_z = time_utils.parse_datetime('2023-11-06T22:00:00')

    assert with_z is not None
    assert with_z == without_z
    assert with_z[1] == pytest.approx(22 * 3600.0)


def test_parse_datetime_accepts_year_hms_form() -> None:
    """'YYYY HH:MM:SS' parses as January 1st at the given time."""

    assert time_utils.parse_datetime('2020 01:01:01') == time_utils.parse_datetime('2020-01-01 01:01:01')


def test_parse_datetime_rejects_garbage() -> None:
    """Unparseable text returns None rather than raising."""
    assert time_utils.parse_datetime('not a date') is None


def test_jd_from_day_sec_reference_points() -> None:
    """Day 0 is 2000-01-01 00:00, half a day before J2000."""
    assert time_utils.jd_from_day_sec(0, 0.0) == 2451544.5
    assert time_utils.jd_from_day_sec(0, 43200.0) == 2451545.0
    assert time_utils.day_sec_from_jd(2451545.25) == (0, pytest.approx(64800.0))


def test_jd_from_calendar_fractional_day() -> None:
    """Fractional days of month carry the time of day."""
    assert time_utils.jd_from_calendar(2023, 9, 13) == 2460200.5
    assert time_utils.jd_from_calendar(2025, 7, 13.1576) == pytest.approx(2460869.6576, abs=1e-9)


def test_jd_from_calendar_rejects_bad_month() -> None:
    """Month 13 is a malformed date."""
    with pytest.raises(MalformedInputError):
        time_utils.jd_from_calendar(2023, 13, 1.0)


def test_leap_second_delta_t_2023() -> None:
    """TT - UTC in 2023 is 37 leap seconds plus 32.184 s."""
    assert time_utils.leap_second_delta_t(2460126.0) == pytest.approx(69.184)


def test_observation_time_from_datetime_and_string_agree() -> None:
    """datetime, string and Julian-date inputs name the same instant."""
    provider = time_utils.ConstantDeltaT(69.184)
    from_dt = time_utils.observation_time(datetime(2023, 7, 1, 12, 0, 0), provider)
    from_str = time_utils.observation_time('2023-07-01T12:00:00Z', provider)
    from_jd = time_utils.observation_time(2460127.0, provider)

    assert from_dt.jd_utc == pytest.approx(2460127.0, abs=1e-9)
    assert from_str.jd_utc == pytest.approx(from_dt.jd_utc, abs=1e-9)
    assert from_jd == from_dt
    assert from_dt.jd_tt == pytest.approx(2460127.0 + 69.184 / 86400.0, abs=1e-12)


def test_observation_time_converts_aware_datetime_to_utc() -> None:
    """Timezone-aware datetimes are converted to UTC first."""
    provider = time_utils.ConstantDeltaT(0.0)
    local = datetime(2023, 7, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert time_utils.observation_time(local, provider).jd_utc == pytest.approx(2460127.0, abs=1e-9)


def test_observation_time_uses_injected_provider() -> None:
    """The Delta-T provider is called with the UTC Julian date."""
    seen: list[float] = []

    def _provider(jd_utc: float) -> float:
        seen.append(jd_utc)
        return 60.0

    t = time_utils.observation_time(2451545.0, _provider)
    assert seen == [2451545.0]
    assert t.delta_t == 60.0


def test_observation_time_rejects_bad_string() -> None:
    """Unparseable strings raise MalformedInputError."""
    with pytest.raises(MalformedInputError):
        time_utils.observation_time('yesterday-ish')


def test_gast_at_j2000() -> None:
    """GAST at J2000.0 is GMST 18.6974 h plus a small equation of the equinoxes."""
    t = time_utils.ObservationTime(2451545.0, 64.184)
    assert time_utils.greenwich_apparent_sidereal_time(t) == pytest.approx(18.6971, abs=2e-4)


def test_local_sidereal_time_wraps() -> None:
    """Local sidereal time adds east longitude and wraps into [0, 24)."""
    t = time_utils.ObservationTime(2451545.0, 64.184)
    gast = time_utils.greenwich_apparent_sidereal_time(t)
    lst = time_utils.local_sidereal_time(t, 90.0)
    assert lst == pytest.approx((gast + 6.0) % 24.0)
    assert 0.0 <= lst < 24.0
