"""Command line entry point: compute an envelope and export it.

Example:
    $ dispersim --lat -23.5505 --lon -46.6333 --bearing 30 --html envelope.html
"""

from __future__ import annotations

import argparse
import json
import logging

from rich.logging import RichHandler

from dispersim import config
from dispersim.envelope import FiringParameters, ImpactType, MunitionType, compute_envelope
from dispersim.report import CONSOLE, print_report
from dispersim.unit import Degree

logger = logging.getLogger("dispersim")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dispersim",
        description="Ballistic dispersion envelope on a map",
    )
    loc = parser.add_argument_group("location")
    loc.add_argument("--lat", type=float, default=config.DEFAULT_LATITUDE, help="firing point latitude (°)")
    loc.add_argument("--lon", type=float, default=config.DEFAULT_LONGITUDE, help="firing point longitude (°)")
    loc.add_argument(
        "--bearing", type=float, default=config.DEFAULT_FIRING_BEARING.to(Degree), help="firing bearing (°)"
    )

    env = parser.add_argument_group("envelope")
    env.add_argument(
        "--dispersion", type=float, default=config.DEFAULT_DISPERSION_ANGLE.to(Degree), help="dispersion angle (°)"
    )
    env.add_argument("--range", dest="range_distance", type=float, default=float(config.DEFAULT_RANGE_DISTANCE),
                     help="distance X (m)")
    env.add_argument("--angle-p", type=float, default=config.DEFAULT_ANGLE_P.to(Degree), help="angle P (°)")
    env.add_argument("--w", dest="distance_w", type=float, default=float(config.DEFAULT_DISTANCE_W),
                     help="distance W (m)")
    env.add_argument("--a", dest="distance_a", type=float, default=float(config.DEFAULT_DISTANCE_A),
                     help="distance A (m)")
    env.add_argument("--b", dest="distance_b", type=float, default=float(config.DEFAULT_DISTANCE_B),
                     help="distance B (m)")
    env.add_argument("--munition", choices=[m.value for m in MunitionType], default=MunitionType.EXPLOSIVE.value)
    env.add_argument("--impact", choices=[i.value for i in ImpactType], default=ImpactType.EARTH.value)
    env.add_argument("--max-height", type=float, default=float(config.DEFAULT_MAX_HEIGHT), help="max height (m)")

    out = parser.add_argument_group("output")
    out.add_argument("--html", help="write an interactive folium map")
    out.add_argument("--png", help="write a static matplotlib figure")
    out.add_argument("--csv", help="write the tessellated points")
    out.add_argument("--json", help="write parameters, constructions and derived values")
    out.add_argument("-q", "--quiet", action="store_true", help="do not print the report")
    out.add_argument("-v", "--verbose", action="store_true", help="log guard fallbacks")
    return parser


def params_from_args(args: argparse.Namespace) -> FiringParameters:
    return FiringParameters.from_values(
        args.lat,
        args.lon,
        firing_bearing=args.bearing,
        dispersion_angle=args.dispersion,
        range_distance=args.range_distance,
        angle_p=args.angle_p,
        distance_w=args.distance_w,
        distance_a=args.distance_a,
        distance_b=args.distance_b,
        munition=args.munition,
        impact=args.impact,
        max_height=args.max_height,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=CONSOLE, show_path=False)],
    )

    try:
        params = params_from_args(args)
    except ValueError as exc:
        logger.error("invalid parameters: %s", exc)
        return 2

    envelope = compute_envelope(params)
    if not args.quiet:
        print_report(envelope)

    if args.html:
        from dispersim.render import FoliumOverlayRenderer

        renderer = FoliumOverlayRenderer()
        renderer.replace_all(envelope)
        renderer.save(args.html)
        logger.info("map saved to %s", args.html)
    if args.png:
        from dispersim.render import MatplotlibOverlayRenderer

        renderer = MatplotlibOverlayRenderer()
        renderer.replace_all(envelope)
        renderer.save(args.png)
        logger.info("figure saved to %s", args.png)
    if args.csv:
        envelope.to_frame().to_csv(args.csv, index=False)
        logger.info("points saved to %s", args.csv)
    if args.json:
        with open(args.json, "w", encoding="utf-8") as f:
            json.dump(envelope.to_dict(), f, indent=2)
        logger.info("envelope saved to %s", args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
