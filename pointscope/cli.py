"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pointscope.averaging import MAX_POINTS, MIN_POINTS, average_directory, save_points
from pointscope.scene import build_scene, load_directory, render_scene_svg


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pointscope",
        description="Average measurement files and draw the measured points.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    commands = parser.add_subparsers(dest="command", required=True)

    plot = commands.add_parser("plot", help="draw the points of a directory as SVG")
    plot.add_argument("directory", type=Path)
    plot.add_argument("-o", "--output", type=Path, help="SVG file; stdout if omitted")

    average = commands.add_parser("average", help="average raw files into points")
    average.add_argument("directory", type=Path)
    average.add_argument(
        "-p",
        "--points",
        type=int,
        default=MIN_POINTS,
        help=f"number of points ({MIN_POINTS}-{MAX_POINTS})",
    )
    average.add_argument(
        "--save", action="store_true", help="write point files to the '2' subfolder"
    )
    return parser


def _plot(args: argparse.Namespace) -> None:
    svg = render_scene_svg(build_scene(load_directory(args.directory)))
    if args.output is None:
        print(svg)
    else:
        args.output.write_text(svg + "\n", encoding="utf-8")


def _average(args: argparse.Namespace) -> None:
    storage = average_directory(args.directory, args.points)
    for index, row in enumerate(storage, start=1):
        values = " ".join(f"{value:g}" for value in row)
        print(f"point {index}: {values}")
    if args.save:
        target = save_points(storage, args.directory)
        print(f"saved to {target}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        if args.command == "plot":
            _plot(args)
        else:
            _average(args)
    except (OSError, ValueError) as error:
        print(f"pointscope: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())