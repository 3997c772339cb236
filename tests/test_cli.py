"""Tests for the solar-ephemeris command line."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import Any

import pytest

from solar_ephemeris.cli import main as cli_main

CERES_JPL_LINE = (
    '     1 Ceres             60200  2.7672544 0.07891253  10.58688  73.42180  80.254'
    '98  60.0787728  3.33  0.12 JPL 48'
)


def test_cli_position_astrometric() -> None:
    """The position subcommand prints RA, Dec and distance for a named body."""
    out = io.StringIO()
    rc = cli_main.main(['position', 'venus', '2023-07-01T12:00:00Z'], out=out)
    assert rc == 0
    text = out.getvalue()
    assert text.startswith('Venus: RA  09h 33m')
    assert 'Dist 0.49' in text


def test_cli_position_reads_sys_argv(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    """Without explicit argv the command line comes from sys.argv."""
    captured: dict[str, Any] = {}

    def _fake_position(args, out):  # type: ignore[no-untyped-def]
        captured['args'] = args
        return 0

    monkeypatch.setattr(
        sys,
        'argv',
        [
            'solar-ephemeris',
            'position',
            'moon',
            '2023-07-01 12:00',
            '--flavor',
            'altaz',
            '--latitude',
            '51:04:43',
            '--longitude=-00:17:40',
            '--height',
            '80',
            '--refraction',
        ],
    )
    monkeypatch.setattr('solar_ephemeris.cli.main._position_cmd', _fake_position)
    rc = cli_main.main()
    assert rc == 0
    args = captured['args']
    assert args.body == 'moon'
    assert args.flavor == 'altaz'
    assert args.latitude == pytest.approx(51.078611, abs=1e-6)
    assert args.longitude == pytest.approx(-0.294444, abs=1e-6)
    assert args.refraction is True


def test_cli_position_altaz_with_site() -> None:
    """Horizontal output includes azimuth and altitude."""
    out = io.StringIO()
    rc = cli_main.main(
        [
            'position',
            'venus',
            '2023-07-01T12:00:00Z',
            '--flavor',
            'altaz',
            '--latitude',
            '51:04:43',
            '--longitude=-00:17:40',
            '--height',
            '80',
        ],
        out=out,
    )
    assert rc == 0
    assert 'Az 118.88' in out.getvalue()
    assert 'Alt 39.15' in out.getvalue()


def test_cli_position_from_catalog_line() -> None:
    """--elements with --dialect observes a minor planet."""
    out = io.StringIO()
    rc = cli_main.main(
        [
            'position',
            '2023-01-08T05:22:12Z',
            '--elements',
            CERES_JPL_LINE,
            '--dialect',
            'jpl_numbered_asteroid',
        ],
        out=out,
    )
    assert rc == 0
    assert out.getvalue().startswith('1 Ceres: RA  12h 35m')


def test_cli_heliocentric_state() -> None:
    """Heliocentric flavor prints a Cartesian state."""
    out = io.StringIO()
    rc = cli_main.main(['position', 'earth', '2023-11-09T12:00:00Z', '--flavor', 'heliocentric'], out=out)
    assert rc == 0
    assert 'Dist 0.990624' in out.getvalue()


def test_cli_topocentric_without_site_fails(caplog: pytest.LogCaptureFixture) -> None:
    """Missing site information is reported and exits 1."""
    out = io.StringIO()
    rc = cli_main.main(['position', 'mars', '2023-07-01T12:00:00Z', '--flavor', 'topocentric'], out=out)
    assert rc == 1
    assert out.getvalue() == ''
    assert 'Site has not been set' in caplog.text


def test_cli_unknown_body_fails() -> None:
    """Unknown body names exit 1."""
    assert cli_main.main(['position', 'vulcan', '2023-07-01T12:00:00Z'], out=io.StringIO()) == 1


def test_cli_requires_body_or_elements(caplog: pytest.LogCaptureFixture) -> None:
    """A time alone is not enough."""
    with caplog.at_level(logging.ERROR, logger='solar_ephemeris.cli.main'):
        assert cli_main.main(['position', '2023-07-01T12:00:00Z'], out=io.StringIO()) == 1
    assert 'A body name or --elements is required' in caplog.text


def test_cli_elements_need_dialect(caplog: pytest.LogCaptureFixture) -> None:
    """An element line without its dialect is reported through the logger."""
    argv = ['position', '2023-07-01T12:00:00Z', '--elements', CERES_JPL_LINE]
    with caplog.at_level(logging.ERROR, logger='solar_ephemeris.cli.main'):
        assert cli_main.main(argv, out=io.StringIO()) == 1
    assert '--elements requires --dialect' in caplog.text


def test_cli_bad_angle_is_usage_error() -> None:
    """Malformed sexagesimal input is rejected by argparse."""
    with pytest.raises(SystemExit):
        cli_main.main(['position', 'venus', '2023-07-01T12:00:00Z', '--latitude', '51:99:00'])


def test_cli_elements_file(tmp_path: Path) -> None:
    """The elements subcommand parses every non-blank line of a file."""
    path = tmp_path / 'elements.txt'
    path.write_text(CERES_JPL_LINE + '\n\n' + CERES_JPL_LINE + '\n')
    out = io.StringIO()
    rc = cli_main.main(['elements', 'jpl_numbered_asteroid', str(path)], out=out)
    assert rc == 0
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("AsteroidElements(name='1 Ceres'")


def test_cli_elements_reports_bad_line(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A malformed line stops parsing with its line number."""
    path = tmp_path / 'elements.txt'
    path.write_text(CERES_JPL_LINE + '\nshort line\n')
    rc = cli_main.main(['elements', 'jpl_numbered_asteroid', str(path)], out=io.StringIO())
    assert rc == 1
    assert 'line 2' in caplog.text
