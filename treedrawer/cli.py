import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .builders import from_html, from_path, random_tree
from .drawing_components import STYLE_NAMES, Tree, stringify
from .errors import TreeDrawerError

DEFAULT_LAYERS = 4


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="treedrawer",
        description="Draw a tree as boxes joined by box-drawing connectors",
    )
    parser.add_argument(
        "-l",
        "--layers",
        type=int,
        default=DEFAULT_LAYERS,
        help="Max number of layers in the random tree",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random tree")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--path", type=Path, default=None, help="Draw the directory tree below PATH")
    source.add_argument("--html", type=Path, default=None, help="Draw the element tree of an HTML file")
    parser.add_argument(
        "--hidden",
        action="store_true",
        help="Include hidden entries when drawing a directory",
    )
    parser.add_argument(
        "--style",
        choices=list(STYLE_NAMES),
        default="rounded",
        help="Box drawing style",
    )
    return parser.parse_args(argv)


def build_tree(args: argparse.Namespace) -> Tree:
    if args.path is not None:
        return from_path(args.path, include_hidden=args.hidden)
    if args.html is not None:
        try:
            markup = args.html.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TreeDrawerError(f"Cannot read {args.html}: {exc}") from exc
        return from_html(markup)
    return random_tree(args.layers, random.Random(args.seed))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    console = Console()
    errors = Console(stderr=True)

    try:
        canvas = stringify(build_tree(args), style=args.style)
    except TreeDrawerError as exc:
        errors.print(f"[bold red]error:[/bold red] {escape(str(exc))}", highlight=False)
        return 1

    if canvas.display_width() > console.width:
        errors.print(
            f"[yellow]warning:[/yellow] the tree is {canvas.display_width()} columns wide, "
            f"the terminal has {console.width}.",
            highlight=False,
        )
    console.print(canvas.render(), markup=False, emoji=False, highlight=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
