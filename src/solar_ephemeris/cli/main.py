"""CLI entry point: solar-ephemeris position|elements subcommands."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn, TextIO

from solar_ephemeris.angle_utils import dms_string, parse_angle
from solar_ephemeris.bodies import Body
from solar_ephemeris.catalogs import CatalogDialect, parse_orbit
from solar_ephemeris.ephemeris import BodyPositionVelocity, Coordinates, SolarSystemBody
from solar_ephemeris.errors import EphemerisError
from solar_ephemeris.site import Site

logger = logging.getLogger(__name__)

FLAVORS = ('astrometric', 'topocentric', 'altaz', 'heliocentric', 'geocentric')


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or SOLAR_EPHEMERIS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('SOLAR_EPHEMERIS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _angle(text: str) -> float:
    """argparse type for sexagesimal or decimal angles."""
    value = parse_angle(text)
    if value is None:
        raise argparse.ArgumentTypeError(f'invalid angle: {text!r}')
    return value


def _site_from_args(args: argparse.Namespace) -> Site | None:
    fields = (args.latitude, args.longitude, args.height, args.temperature, args.pressure)
    if all(v is None for v in fields):
        return None
    return Site(
        latitude=args.latitude,
        longitude=args.longitude,
        height=args.height,
        temperature=args.temperature,
        pressure=args.pressure,
    )


def format_coordinates(coords: Coordinates) -> str:
    """One-line text rendering of a Coordinates value."""
    text = (
        f'RA {dms_string(coords.right_ascension, "hms", 3)}  '
        f'Dec {dms_string(coords.declination, "dms", 2)}  '
        f'Dist {coords.distance:.9f} AU'
    )
    if coords.azimuth is not None and coords.altitude is not None:
        text += f'  Az {coords.azimuth:.5f}  Alt {coords.altitude:.5f}'
    return text


def format_state(state: BodyPositionVelocity) -> str:
    """One-line text rendering of a Cartesian state."""
    return (
        f'X {state.x:.10f}  Y {state.y:.10f}  Z {state.z:.10f} AU  '
        f'VX {state.vx:.10f}  VY {state.vy:.10f}  VZ {state.vz:.10f} AU/d  '
        f'Dist {state.distance:.10f} AU'
    )


def _position_cmd(args: argparse.Namespace, out: TextIO) -> int:
    """Run the position subcommand.

    Parameters:
        args: Parsed arguments (body, time, flavor, site, elements).
        out: Output stream.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    if args.elements is not None:
        if args.dialect is None:
            logger.error('--elements requires --dialect')
            return 1
        target = SolarSystemBody.from_catalog_line(args.dialect, args.elements)
    else:
        if args.body is None:
            logger.error('A body name or --elements is required')
            return 1
        target = SolarSystemBody(Body.from_name(args.body))
    target.site = _site_from_args(args)
    target.refraction = args.refraction
    if args.flavor == 'astrometric':
        line = format_coordinates(target.astrometric_coordinates(args.time))
    elif args.flavor == 'topocentric':
        line = format_coordinates(target.topocentric_coordinates(args.time))
    elif args.flavor == 'altaz':
        line = format_coordinates(target.altaz_coordinates(args.time))
    elif args.flavor == 'heliocentric':
        line = format_state(target.heliocentric_position(args.time))
    else:
        line = format_state(target.geocentric_position(args.time))
    print(f'{target.name}: {line}', file=out)
    return 0


def _elements_cmd(args: argparse.Namespace, out: TextIO) -> int:
    """Parse catalog lines from a file (or stdin) and print the element records."""
    stream = open(args.file) if args.file not in (None, '-') else sys.stdin
    try:
        for lineno, line in enumerate(stream, start=1):
            if not line.strip():
                continue
            try:
                elements = parse_orbit(args.dialect, line)
            except EphemerisError as e:
                logger.error('line %d: %s', lineno, e)
                return 1
            print(repr(elements), file=out)
    finally:
        if stream is not sys.stdin:
            stream.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='solar-ephemeris',
        description='Positions of the Sun, Moon, planets, comets and minor planets.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    pos = subparsers.add_parser('position', help='Compute one position')
    pos.add_argument('body', nargs='?', default=None, help='Major body name (e.g. venus, moon)')
    pos.add_argument('time', help='UTC time, e.g. 2023-07-01T12:00:00Z')
    pos.add_argument('--flavor', choices=FLAVORS, default='astrometric')
    pos.add_argument('--latitude', type=_angle, default=None, help='Site latitude (deg, +north)')
    pos.add_argument('--longitude', type=_angle, default=None, help='Site longitude (deg, +east)')
    pos.add_argument('--height', type=float, default=None, help='Site height (m)')
    pos.add_argument('--pressure', type=float, default=None, help='Pressure (mbar)')
    pos.add_argument('--temperature', type=float, default=None, help='Temperature (deg C)')
    pos.add_argument('--refraction', action='store_true', help='Apply refraction (altaz)')
    pos.add_argument('--elements', default=None, help='Catalog element line instead of a body')
    pos.add_argument(
        '--dialect',
        type=CatalogDialect.from_name,
        default=None,
        help='Catalog dialect of --elements: ' + ', '.join(d.name.lower() for d in CatalogDialect),
    )
    pos.set_defaults(func=_position_cmd)

    elem = subparsers.add_parser('elements', help='Parse catalog element lines')
    elem.add_argument('dialect', type=CatalogDialect.from_name, help='Catalog dialect')
    elem.add_argument('file', nargs='?', default=None, help='Input file (default stdin)')
    elem.set_defaults(func=_elements_cmd)
    return parser


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Entry point for the solar-ephemeris CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return int(args.func(args, out if out is not None else sys.stdout))
    except EphemerisError as e:
        logger.error('%s', e)
        return 1


def cli_main() -> NoReturn:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
