"""Command line interface for sun and moon calculations.

Usage:
    helioluna sun      Sun position and phase times
    helioluna moon     Moon position, illumination and rise/set
    helioluna report   Both of the above

Latitude/longitude default to HELIOLUNA_LATITUDE / HELIOLUNA_LONGITUDE.
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from .config import settings
from .formulas.calendar import as_utc
from .schemas.astronomy import (
    AstronomyReport,
    MoonData,
    MoonIlluminationData,
    MoonPositionData,
    MoonTimesData,
    SunData,
    SunPositionData,
    SunTimesData,
)
from .services import moon, sun

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_when(value: str) -> datetime:
    """Parse an ISO date or datetime; naive values are taken as UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date/time: {value!r}") from None


def heading(msg: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {msg}")
    print(f"{'=' * 60}\n")


def line(label: str, value) -> None:
    print(f"  {label:<18}: {'--' if value is None else value}")


def _fmt_time(dt: Optional[datetime]) -> Optional[str]:
    return dt.strftime("%Y-%m-%d %H:%M:%S UTC") if dt is not None else None


# ---------------------------------------------------------------------------
# Report building
# ---------------------------------------------------------------------------


def build_sun(args: argparse.Namespace) -> SunData:
    return SunData(
        position=SunPositionData.from_result(sun.get_position(args.at, args.lat, args.lng)),
        times=SunTimesData.from_result(sun.get_times(args.at, args.lat, args.lng, args.height)),
    )


def build_moon(args: argparse.Namespace) -> MoonData:
    return MoonData(
        position=MoonPositionData.from_result(moon.get_position(args.at, args.lat, args.lng)),
        illumination=MoonIlluminationData.from_result(moon.get_illumination(args.at)),
        times=MoonTimesData.from_result(moon.get_times(args.at, args.lat, args.lng)),
    )


def build_report(args: argparse.Namespace) -> AstronomyReport:
    report = AstronomyReport(
        at=args.at,
        latitude=args.lat,
        longitude=args.lng,
        height=getattr(args, "height", 0.0),
    )
    if args.command in ("sun", "report"):
        report.sun = build_sun(args)
    if args.command in ("moon", "report"):
        report.moon = build_moon(args)
    return report


def print_text(report: AstronomyReport) -> None:
    """Print a short human-readable listing of a report."""
    print(f"Location: lat {report.latitude:.6f}, lon {report.longitude:.6f}")
    print(f"Instant:  {_fmt_time(report.at)}")

    if report.sun is not None:
        heading("Sun")
        pos = report.sun.position
        line("Azimuth", f"{pos.azimuth_deg:.2f} deg")
        line("Altitude", f"{pos.altitude_deg:.2f} deg")
        times = report.sun.times
        for name in (
            "night_end", "nautical_dawn", "dawn", "sunrise", "sunrise_end",
            "golden_hour_end", "solar_noon", "golden_hour", "sunset_start",
            "sunset", "dusk", "nautical_dusk", "night", "nadir",
        ):
            line(name.replace("_", " ").capitalize(), _fmt_time(getattr(times, name)))

    if report.moon is not None:
        heading("Moon")
        pos = report.moon.position
        line("Azimuth", f"{pos.azimuth_deg:.2f} deg")
        line("Altitude", f"{pos.altitude_deg:.2f} deg")
        line("Distance", f"{pos.distance:.0f} km")
        illum = report.moon.illumination
        line("Illumination", f"{illum.fraction * 100.0:.1f}%")
        line("Phase", illum.phase_name)
        times = report.moon.times
        if times.always_up:
            line("Rise/set", "always up")
        elif times.always_down:
            line("Rise/set", "always down")
        else:
            line("Moonrise", _fmt_time(times.rise))
            line("Moonset", _fmt_time(times.set))


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helioluna",
        description="Sun and moon positions, phases and rise/set times",
    )
    sub = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--lat", type=float, default=settings.latitude,
                        help="observer latitude in degrees (positive north)")
    common.add_argument("--lng", type=float, default=settings.longitude,
                        help="observer longitude in degrees (positive east)")
    common.add_argument("--at", type=parse_when, default=None,
                        help="ISO date or datetime, UTC unless an offset is given (default: now)")
    common.add_argument("--text", action="store_true",
                        help="print a readable listing instead of JSON")

    with_height = argparse.ArgumentParser(add_help=False)
    with_height.add_argument("--height", type=float, default=settings.height_m,
                             help="observer height in meters (sun times only)")

    sub.add_parser("sun", parents=[common, with_height], help="Sun position and phase times")
    sub.add_parser("moon", parents=[common], help="Moon position, illumination and rise/set")
    sub.add_parser("report", parents=[common, with_height], help="Sun and moon together")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s:     %(name)s - %(message)s",
    )
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.at is None:
        args.at = datetime.now(timezone.utc)
    logger.debug("Computing %s for lat=%s lng=%s at %s", args.command, args.lat, args.lng, args.at)

    report = build_report(args)
    if args.text:
        print_text(report)
    else:
        print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
