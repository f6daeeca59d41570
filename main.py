from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from vellum_plot import PlotConfig, extrema, load_config, render_line, reverse, sample
from vellum_plot.sources import read_points


LOGGER = logging.getLogger("vellum")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="vellum")
    sub = parser.add_subparsers(dest="command", required=True)

    plot = sub.add_parser("plot", help="Render a CSV/JSON point file as an SVG line plot.")
    plot.add_argument("input", help="CSV or JSON point file, or - for CSV on stdin.")
    plot.add_argument("-o", "--output", type=Path, default=None, help="SVG output path. Default: stdout.")
    plot.add_argument("--width", type=float, default=None, help="Canvas width in pixels. Default: 640.")
    plot.add_argument("--height", type=float, default=None, help="Canvas height in pixels. Default: 360.")
    plot.add_argument("--sample", type=int, default=None, help="Keep every n-th point. Default: 1.")
    plot.add_argument("--reverse", action="store_true", help="Reverse point order before plotting.")
    plot.add_argument("--config", type=Path, default=None, help="TOML file with a [plot] table.")
    plot.add_argument("--log-level", default=None, help="Logging level on stderr. Default: WARNING.")

    ext = sub.add_parser("extrema", help="Print min_x min_y max_x max_y of a point file.")
    ext.add_argument("input", help="CSV or JSON point file, or - for CSV on stdin.")
    ext.add_argument("--log-level", default=None, help="Logging level on stderr. Default: WARNING.")

    args = parser.parse_args(argv)

    try:
        config = load_config(getattr(args, "config", None))
        config = config.with_overrides(
            width=getattr(args, "width", None),
            height=getattr(args, "height", None),
            sample=getattr(args, "sample", None),
            log_level=args.log_level,
        )
        logging.basicConfig(
            level=config.log_level,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

        if args.command == "plot":
            return _run_plot(args, config)
        if args.command == "extrema":
            points = read_points(args.input)
            print(" ".join(repr(v) for v in extrema(points)))
            return 0
    except (ValueError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    raise RuntimeError(f"unsupported command: {args.command}")


def _run_plot(args: argparse.Namespace, config: PlotConfig) -> int:
    points = read_points(args.input)
    if args.reverse:
        reverse(points)
    points = sample(points, config.sample)
    LOGGER.info("plotting %d point(s) at %sx%s", len(points), config.width, config.height)
    canvas = render_line(points, config.width, config.height)
    if args.output is None:
        canvas.encode(sys.stdout)
        sys.stdout.write("\n")
    else:
        target = canvas.write(args.output)
        LOGGER.info("wrote %s", target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
