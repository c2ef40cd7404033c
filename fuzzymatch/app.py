"""Command-line front end for fuzzymatch.

Usage:
    fuzzymatch hm HTML haml html5          # rank the given candidates
    ls | fuzzymatch rdm                    # rank lines read from stdin
    fuzzymatch --style rich cfg config.py  # render bold in the terminal

Weights are read from $FUZZYMATCH_CONFIG_DIR/config.json, falling back
to ~/.config/fuzzymatch/config.json.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console

from fuzzymatch import __version__
from fuzzymatch.models.exceptions import FuzzyMatchError
from fuzzymatch.services.config import ConfigManager
from fuzzymatch.services.fuzzy import Matcher
from fuzzymatch.services.markup import MarkupStyle
from fuzzymatch.services.ranking import rank_labels

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzymatch",
        description="Rank candidate strings by how well they match an abbreviation.",
    )
    parser.add_argument("abbreviation", help="what the user typed")
    parser.add_argument(
        "candidates",
        nargs="*",
        help="strings to rank (read one per line from stdin if omitted)",
    )
    parser.add_argument("-n", "--limit", type=_positive_int, default=None, help="show at most N results")
    parser.add_argument(
        "--style",
        choices=[s.value for s in MarkupStyle],
        default=None,
        help="markup style for matched characters (default: from config, else html)",
    )
    parser.add_argument("--config-dir", type=Path, default=None, help="directory holding config.json")
    parser.add_argument("--max-length", type=int, default=None, help="reject inputs longer than this")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_candidates(args: argparse.Namespace) -> list[str]:
    if args.candidates:
        return list(args.candidates)
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip()]


def run(args: argparse.Namespace, console: Console) -> int:
    """Rank and print. Returns the process exit status."""
    config = ConfigManager(config_dir=args.config_dir)
    override_kwargs: dict = {}
    if args.style:
        override_kwargs["markup_style"] = MarkupStyle(args.style)
    if args.max_length is not None:
        override_kwargs["max_input_length"] = args.max_length
    settings = replace(config.settings, **override_kwargs)
    logger.debug("Resolved settings: %s", settings.to_dict())

    matcher = Matcher(settings)
    ranked = rank_labels(
        args.abbreviation,
        _read_candidates(args),
        matcher=matcher,
        limit=args.limit,
    )
    if not ranked:
        console.print(f"no matches for {args.abbreviation!r}", markup=False, highlight=False)
        return 1

    render_markup = settings.markup_style is MarkupStyle.RICH
    for item in ranked:
        console.print(f"{item.score:.4f}  ", end="", markup=False, highlight=False)
        console.print(item.markup, markup=render_markup, highlight=False, soft_wrap=True)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the fuzzymatch console script."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console(highlight=False, emoji=False)
    try:
        status = run(args, console)
    except FuzzyMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    sys.exit(status)


if __name__ == "__main__":
    main()
