"""Command line entry point: render a diagram source to SVG."""

from __future__ import annotations

import argparse
import logging
import sys

from .sources import SourceError, load_sources
from .view import DiagramView

logger = logging.getLogger("flowplot")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowplot",
        description="Render a hub-and-spoke flow diagram to SVG.",
    )
    parser.add_argument("sources", help="Path to a JSON file with diagram sources")
    parser.add_argument("--list", action="store_true", help="List available diagrams and exit")
    parser.add_argument("--id", dest="identifier", help="Identifier of the diagram to render (default: first)")
    parser.add_argument("--output", default="diagram", help="Output filename without extension (default: diagram)")
    parser.add_argument("--zoom-in", type=int, default=0, help="Number of zoom-in steps to apply")
    parser.add_argument("--zoom-out", type=int, default=0, help="Number of zoom-out steps to apply")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        sources = load_sources(args.sources)
    except SourceError as exc:
        logger.error("%s", exc)
        return 1

    view = DiagramView(sources)
    if args.list:
        for identifier, name in view.choices():
            print(f"{identifier}\t{name}")
        return 0

    if not sources:
        logger.error("No diagram sources in %s", args.sources)
        return 1

    try:
        view.select(args.identifier or sources[0].identifier)
    except SourceError as exc:
        logger.error("%s", exc)
        return 1

    for _ in range(args.zoom_in):
        view.viewport.zoom_in()
    for _ in range(args.zoom_out):
        view.viewport.zoom_out()

    view.save(args.output)
    logger.info(
        "Saved %s.svg (%s, zoom %d%%)",
        args.output,
        view.selected.display_name,
        view.viewport.zoom_percent,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
