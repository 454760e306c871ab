from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .aggregate import smallest_dir_at_least, sum_of_dirs_at_most, summarize
from .errors import AdventAtlasError
from .inputs import ask_demo_mode, get_input, puzzle_dir, read_text
from .markers import find_markers
from .terminal import build_tree, find_dir, render_listing, render_tree

logger = logging.getLogger("adventatlas")

EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _add_input_args(p: argparse.ArgumentParser):
    p.add_argument("--input", default=None, help="read this file instead of the puzzle directory")
    p.add_argument("--dir", default=None, help="puzzle directory holding input.txt / demo-input.txt")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--demo", action="store_true", default=None, help="use demo-input.txt")
    mode.add_argument("--ask", action="store_true", help='prompt for "DEMO" mode')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="adventatlas", description="Day 6 and day 7 puzzle solvers.")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    mk = sub.add_parser("marker", help="first position after W distinct characters (day 6)")
    size = mk.add_mutually_exclusive_group()
    size.add_argument("--window", type=int, default=config.DEFAULT_WINDOW)
    size.add_argument("--message", action="store_const", dest="window", const=config.START_OF_MESSAGE,
                      default=config.DEFAULT_WINDOW,
                      help=f"start-of-message marker ({config.START_OF_MESSAGE} characters)")
    _add_input_args(mk)

    dk = sub.add_parser("disk", help="directory sizes from a terminal trace (day 7)")
    dk.add_argument("--threshold", type=int, default=None)
    dk.add_argument("--capacity", type=int, default=None)
    dk.add_argument("--required", type=int, default=None)
    dk.add_argument("--tree", action="store_true", help="print the reconstructed tree")
    dk.add_argument("--ls", metavar="PATH", default=None, help="print `ls -l` of a directory, e.g. /a/e")
    dk.add_argument("--gui", action="store_true", help="open the treemap viewer")
    _add_input_args(dk)

    return parser.parse_args(argv)


def load_text(args: argparse.Namespace, day: int) -> str:
    if args.input:
        return read_text(args.input)
    demo = ask_demo_mode() if args.ask else args.demo
    return get_input(args.dir or puzzle_dir(day), demo=demo)


def run_marker(args: argparse.Namespace) -> int:
    results = find_markers(load_text(args, 6), args.window)
    for pos in results:
        print(pos if pos is not None else "not found")
    if results and all(pos is None for pos in results):
        return EXIT_NOT_FOUND
    return 0


def run_disk(args: argparse.Namespace) -> int:
    threshold = args.threshold if args.threshold is not None else config.threshold()
    capacity = args.capacity if args.capacity is not None else config.capacity()
    required = args.required if args.required is not None else config.required()

    if args.gui and not (args.input or args.demo or args.ask):
        from .viewer import run as run_viewer
        return run_viewer(dirname=args.dir or puzzle_dir(7),
                          threshold=threshold, capacity=capacity, required=required)

    root = build_tree(load_text(args, 7))
    report = summarize(root)
    logger.info("%d files in %d directories, %d bytes", report.files, report.dirs, report.bytes_total)

    if args.tree:
        print(render_tree(root))
    if args.ls is not None:
        print(render_listing(find_dir(root, args.ls), sizes=True))
    print(sum_of_dirs_at_most(root, threshold))
    print(smallest_dir_at_least(root, capacity, required).size)

    if args.gui:
        from .viewer import run as run_viewer
        return run_viewer(root, threshold=threshold, capacity=capacity, required=required)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "marker":
            return run_marker(args)
        return run_disk(args)
    except AdventAtlasError as e:
        logger.error("%s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
