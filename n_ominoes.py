"""
Command line entry point: print every fixed n-omino for a square count.
"""

import logging
import sys
from argparse import ArgumentError, ArgumentParser

from ascii_render import render_shapes_flow
from nomino import InvalidSquareCount, generate, generate_shapes
from omino_types import MAX_SQUARES

USAGE = f"Usage: n_ominoes <1-{MAX_SQUARES}>"


class QuietArgumentParser(ArgumentParser):
    """Raises on bad arguments instead of printing argparse's own usage."""

    def error(self, message: str):  # type: ignore[override]
        raise ArgumentError(None, message)


def build_parser() -> ArgumentParser:
    parser = QuietArgumentParser(
        prog="n_ominoes",
        description="Enumerate fixed polyominoes (translations merged, rotations kept).",
        add_help=True,
    )
    parser.add_argument("n", type=int, help=f"squares per shape (1-{MAX_SQUARES})")
    parser.add_argument("--flow", action="store_true", help="lay shapes out side by side")
    parser.add_argument("--color", action="store_true", help="colorize shapes (with --flow)")
    parser.add_argument("--browse", action="store_true", help="step through shapes interactively")
    parser.add_argument("-v", "--verbose", action="store_true", help="log run statistics")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError:
        print(USAGE)
        return 1
    except SystemExit as e:
        # --help
        return 0 if e.code in (0, None) else 1

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    if args.flow or args.browse:
        try:
            shapes = generate_shapes(args.n)
        except InvalidSquareCount:
            print(USAGE)
            return 1

        if args.browse:
            from interactive_browser import ShapeBrowser

            ShapeBrowser(shapes, args.n).run()
        else:
            print(f"n_ominoes = {len(shapes)}")
            print()
            print(render_shapes_flow(shapes, color=args.color))
        return 0

    if not generate(args.n):
        print(USAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
