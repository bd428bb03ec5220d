# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the ephemeris.

Usage:
    # Apparent positions of all bodies, now
    sphera positions

    # True positions of a few bodies at a given moment
    sphera positions --date 1984-08-29T12:00 --bodies sun moon mars --true

    # Export to CSV or JSON
    sphera positions --djd 30921.5 --format csv --output positions.csv
    sphera positions --djd 30921.5 --format json --output positions.json

    # Moon, lunar phases and seasons
    sphera moon --date 1965-02-01
    sphera phase --quarter full --date 1984-09-01
    sphera season --year 2000 --event june
"""
import argparse
import logging
import sys
from datetime import datetime, timezone

from sphera.domain import moon
from sphera.domain.errors import EphemerisError
from sphera.domain.lunar_phases import Quarter, find_closest_phase
from sphera.domain.positions import compute_positions
from sphera.domain.solstices import SolEquType, sol_equ
from sphera.domain.time_systems import CalDate, datetime_to_djd, djd_to_datetime
from sphera.adapters.csv_exporter import CsvPositionExporter
from sphera.adapters.json_exporter import JsonPositionExporter

logger = logging.getLogger(__name__)

_QUARTERS = {
    'new': Quarter.NEW_MOON,
    'first': Quarter.FIRST_QUARTER,
    'full': Quarter.FULL_MOON,
    'last': Quarter.LAST_QUARTER,
}

_EVENTS = {
    'march': SolEquType.MARCH_EQUINOX,
    'june': SolEquType.JUNE_SOLSTICE,
    'september': SolEquType.SEPTEMBER_EQUINOX,
    'december': SolEquType.DECEMBER_SOLSTICE,
}

_EXPORTERS = {
    'csv': CsvPositionExporter,
    'json': JsonPositionExporter,
}


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO date/time: {value!r}") from None


def _resolve_djd(args: argparse.Namespace) -> float:
    """Epoch from --djd, --date, or the current UTC time."""
    if args.djd is not None:
        return args.djd
    if args.date is not None:
        return datetime_to_djd(args.date)
    return datetime_to_djd(datetime.now(tz=timezone.utc))


def _format_time(djd: float) -> str:
    return djd_to_datetime(djd).strftime('%Y-%m-%d %H:%M:%S UTC')


def run_positions(args: argparse.Namespace) -> None:
    djd = _resolve_djd(args)
    positions = compute_positions(djd, bodies=args.bodies, apparent=not args.true)

    if args.format == 'table':
        print(f"DJD {djd:.6f}  ({_format_time(djd)})")
        print(f"{'body':<10}{'longitude':>14}{'latitude':>12}{'distance':>14}")
        for pos in positions:
            print(
                f"{pos.body:<10}{pos.longitude:>14.6f}"
                f"{pos.latitude:>12.6f}{pos.distance:>14.8f}"
            )
        return

    if not args.output:
        raise EphemerisError(f"--output is required with --format {args.format}")
    n = _EXPORTERS[args.format]().export(positions, args.output, djd)
    print(f"Exported {n} positions to {args.output}")


def run_moon(args: argparse.Namespace) -> None:
    djd = _resolve_djd(args)
    pos = moon.true_position(djd) if args.true else moon.apparent(djd)
    print(f"DJD {djd:.6f}  ({_format_time(djd)})")
    print(f"longitude   {pos.longitude:.6f}")
    print(f"latitude    {pos.latitude:.6f}")
    print(f"distance    {pos.distance:.8f} AU")
    print(f"parallax    {pos.parallax:.6f}")
    print(f"motion      {pos.motion:.6f} deg/day")
    print(f"true node   {moon.lunar_node(djd, true_node=True):.6f}")
    print(f"mean node   {moon.lunar_node(djd, true_node=False):.6f}")


def run_phase(args: argparse.Namespace) -> None:
    dt = args.date if args.date is not None else datetime.now(tz=timezone.utc)
    date = CalDate(dt.year, dt.month, float(dt.day))
    quarter = _QUARTERS[args.quarter]
    djd = find_closest_phase(quarter, date)
    print(f"{quarter}: DJD {djd:.6f}  ({_format_time(djd)})")


def run_season(args: argparse.Namespace) -> None:
    kind = _EVENTS[args.event]
    event = sol_equ(args.year, kind)
    label = kind.name.replace('_', ' ').title()
    print(f"{label} {args.year}: DJD {event.djd:.6f}  ({_format_time(event.djd)})")


def _add_epoch_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '--date', type=_parse_datetime,
        help="UTC date/time in ISO format (default: now)"
    )
    group.add_argument(
        '--djd', type=float,
        help="Days since 1900 January 0.5 (JD - 2415020)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sphera',
        description="Low-precision ephemeris of the Sun, Moon and planets"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    p_pos = subparsers.add_parser('positions', help="Geocentric ecliptic positions")
    _add_epoch_arguments(p_pos)
    p_pos.add_argument(
        '--bodies', nargs='+', metavar='BODY',
        help="Bodies to compute (default: Sun, Moon and all planets)"
    )
    p_pos.add_argument(
        '--true', action='store_true', default=False,
        help="True geometric positions instead of apparent ones"
    )
    p_pos.add_argument(
        '--format', choices=('table', 'csv', 'json'), default='table',
        help="Output format (default: table)"
    )
    p_pos.add_argument('--output', '-o', help="Output file for csv/json")
    p_pos.set_defaults(func=run_positions)

    p_moon = subparsers.add_parser('moon', help="Moon position and lunar node")
    _add_epoch_arguments(p_moon)
    p_moon.add_argument(
        '--true', action='store_true', default=False,
        help="True position instead of the apparent one"
    )
    p_moon.set_defaults(func=run_moon)

    p_phase = subparsers.add_parser('phase', help="Closest principal lunar phase")
    p_phase.add_argument('--quarter', choices=tuple(_QUARTERS), required=True)
    p_phase.add_argument(
        '--date', type=_parse_datetime,
        help="Civil date near the wanted phase (default: today)"
    )
    p_phase.set_defaults(func=run_phase)

    p_season = subparsers.add_parser('season', help="Equinox or solstice")
    p_season.add_argument('--year', type=int, required=True)
    p_season.add_argument('--event', choices=tuple(_EVENTS), required=True)
    p_season.set_defaults(func=run_season)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        args.func(args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except EphemerisError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
