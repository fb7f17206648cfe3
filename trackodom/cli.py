"""Command-line front end that runs the estimators over CSV input."""

from __future__ import annotations

import argparse
import csv
import sys
from typing import Iterable, Iterator, Sequence, TextIO

from .gps_odometer import WGS84_SEMI_MAJOR, WGS84_SEMI_MINOR, GpsOdometer
from .odometer import BicycleOdometer
from .sector_times import SectorTimer


def _rows(stream: TextIO) -> Iterator[tuple[int, list[str]]]:
    for number, row in enumerate(csv.reader(stream), start=1):
        cells = [cell.strip() for cell in row]
        if cells and cells[0] and not cells[0].startswith("#"):
            yield number, cells


def _floats(cells: Iterable[str], count: int) -> list[float]:
    values = [float(cell) for cell in cells]
    if len(values) != count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return values


def _run_gps(args: argparse.Namespace, stream: TextIO, out: TextIO) -> None:
    odometer = GpsOdometer(args.semi_major_axis, args.semi_minor_axis)
    for number, cells in _rows(stream):
        lat, lon, alt = _parse(number, cells, 3)
        odom = odometer.update(lat, lon, alt)
        out.write(f"{odom.x:.6f},{odom.y:.6f},{odom.orientation.yaw():.6f}\n")


def _run_odom(args: argparse.Namespace, stream: TextIO, out: TextIO) -> None:
    odometer = BicycleOdometer(args.wheelbase, args.steering_factor, start_time=args.start_time)
    for number, cells in _rows(stream):
        stamp, steer, speed = _parse(number, cells, 3)
        odom = odometer.update(steer, speed, stamp)
        out.write(
            f"{stamp:.6f},{odom.x:.6f},{odom.y:.6f},{odometer.theta:.6f},"
            f"{odom.linear_velocity:.6f},{odom.angular_velocity:.6f}\n"
        )


def _run_sectors(args: argparse.Namespace, stream: TextIO, out: TextIO) -> None:
    timer = SectorTimer(start_time=args.start_time)
    for number, cells in _rows(stream):
        kind, rest = cells[0].lower(), cells[1:]
        if kind == "speed":
            (speed,) = _parse(number, rest, 1)
            timer.update_speed(speed)
        elif kind == "gps":
            stamp, lat, lon = _parse(number, rest, 3)
            report = timer.update_gps(lat, lon, stamp)
            out.write(f"{report.sector},{report.time:.6f},{report.mean_speed:.6f}\n")
        else:
            raise _InputError(f"line {number}: unknown record type {cells[0]!r}")


class _InputError(Exception):
    pass


def _parse(number: int, cells: Sequence[str], count: int) -> list[float]:
    try:
        return _floats(cells, count)
    except ValueError as exc:
        raise _InputError(f"line {number}: {exc}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trackodom", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    gps = commands.add_parser("gps", help="odometry from lat,lon,alt fixes")
    gps.add_argument("--semi-major-axis", type=float, default=WGS84_SEMI_MAJOR)
    gps.add_argument("--semi-minor-axis", type=float, default=WGS84_SEMI_MINOR)
    gps.set_defaults(run=_run_gps)

    odom = commands.add_parser("odom", help="odometry from stamp,steer,speed rows")
    odom.add_argument("--wheelbase", type=float, default=1.765)
    odom.add_argument("--steering-factor", type=float, default=32.0)
    odom.add_argument("--start-time", type=float, default=0.0)
    odom.set_defaults(run=_run_odom)

    sectors = commands.add_parser(
        "sectors", help="sector times from 'speed,v' and 'gps,stamp,lat,lon' rows"
    )
    sectors.add_argument("--start-time", type=float, default=0.0)
    sectors.set_defaults(run=_run_sectors)

    for sub in (gps, odom, sectors):
        sub.add_argument("input", nargs="?", default="-", help="CSV file, or - for stdin")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.input == "-":
            args.run(args, sys.stdin, sys.stdout)
        else:
            with open(args.input, newline="", encoding="utf-8") as stream:
                args.run(args, stream, sys.stdout)
    except (_InputError, OSError) as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())