"""Command line entry point.

Subcommands:
    split    cut an SVG drawing into a tile pyramid
    compile  resolve room outlines, areas and centers into map JSON
    draw     overlay compiled room outlines on a floor's SVG
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from indoor_map.config import settings
from indoor_map.errors import IndoorMapError
from indoor_map.geometry.types import BoundingSquare, Point
from indoor_map.map_data import CompiledMapData, UncompiledMapData, compile_map_data, draw_floor
from indoor_map.svg.scene import from_svg_data
from indoor_map.tiles.layer import Layer, generate_pyramid, write_pyramid

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging for the command line tools."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def split(args: argparse.Namespace) -> None:
    root = from_svg_data(args.svg.read_text(encoding="utf-8"))
    if args.edge_length is None:
        bounds = settings.layer_bounds(root.bounding_box)
    else:
        bounds = BoundingSquare(Point(args.top_left_x, args.top_left_y), args.edge_length)
    layer = Layer(root, bounds)
    tiles = generate_pyramid(layer, args.min_zoom, args.max_zoom, args.workers)
    write_pyramid(tiles, args.output_dir)


def compile_(args: argparse.Namespace) -> None:
    map_data = UncompiledMapData.from_json(args.input.read_text(encoding="utf-8"))
    compiled = compile_map_data(map_data, args.input.parent)
    args.output.write_text(compiled.to_json(), encoding="utf-8")
    logger.info("Wrote compiled map data to %s", args.output)


def draw(args: argparse.Namespace) -> None:
    compiled = CompiledMapData.from_json(args.input.read_text(encoding="utf-8"))
    svg = draw_floor(compiled, args.floor, args.input.parent)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    output = args.output_dir / "base.svg"
    output.write_text(svg, encoding="utf-8")
    logger.info("Wrote floor %s outlines to %s", args.floor, output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="indoor-map", description=__doc__.splitlines()[0])
    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser("split", help="cut an SVG drawing into a tile pyramid")
    split_parser.add_argument("svg", type=Path, help="SVG drawing to split")
    split_parser.add_argument("-o", "--output-dir", type=Path, default=settings.tile_output_dir)
    split_parser.add_argument(
        "-m", "--min-zoom", type=int, default=settings.min_zoom,
        help="minimum zoom level to create tiles for (no less than 0)",
    )
    split_parser.add_argument("-M", "--max-zoom", type=int, default=settings.max_zoom)
    split_parser.add_argument(
        "--edge-length", type=float, default=None,
        help="edge length of the zoom level 0 square (default: the drawing's larger dimension)",
    )
    split_parser.add_argument("--top-left-x", type=float, default=settings.layer_top_left_x)
    split_parser.add_argument("--top-left-y", type=float, default=settings.layer_top_left_y)
    split_parser.add_argument("-w", "--workers", type=int, default=settings.max_workers)
    split_parser.set_defaults(handler=split)

    compile_parser = subparsers.add_parser("compile", help="compile map JSON against floor SVGs")
    compile_parser.add_argument("input", type=Path, metavar="INPUT_JSON")
    compile_parser.add_argument("output", type=Path, metavar="OUTPUT_JSON")
    compile_parser.set_defaults(handler=compile_)

    draw_parser = subparsers.add_parser("draw", help="draw room outlines over a floor's SVG")
    draw_parser.add_argument(
        "input", type=Path, metavar="COMPILED_JSON",
        help="path to compiled JSON to use for the drawing",
    )
    draw_parser.add_argument(
        "output_dir", type=Path, metavar="OUTPUT_DIRECTORY",
        help="directory to write drawn SVGs to",
    )
    draw_parser.add_argument("floor", metavar="FLOOR", help="floor number to draw maps of")
    draw_parser.set_defaults(handler=draw)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a subcommand, returning the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (IndoorMapError, OSError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    return 0


def run() -> None:
    """Entry point for the ``indoor-map`` script."""
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
