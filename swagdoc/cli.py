"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

from swagdoc.formatter import FormatError, Formatter

logger = logging.getLogger(__name__)


@dataclass
class FormatConfig:
    """Where to look for sources to format."""

    search_dir: str = "./"
    excludes: str = ""
    main_file: str = "main.go"


def run_format(config: FormatConfig) -> None:
    """Format the swag comments under the configured directories."""
    logger.info("Formating code.... ")
    Formatter().format_api(config.search_dir, config.excludes, config.main_file)


def build_parser() -> argparse.ArgumentParser:
    """The argument parser with its ``fmt`` command."""
    parser = argparse.ArgumentParser(prog="swag", description="Automatically generate RESTful API documentation.")
    commands = parser.add_subparsers(dest="command", required=True)
    fmt = commands.add_parser("fmt", aliases=["f"], help="format swag comments")
    fmt.add_argument(
        "-d",
        "--dir",
        default="./",
        help="Directories you want to parse,comma separated and general-info file must be in the first one",
    )
    fmt.add_argument("--exclude", default="", help="Exclude directories and files when searching, comma separated")
    fmt.add_argument(
        "-g",
        "--generalInfo",
        dest="general_info",
        default="main.go",
        help="Go file path in which 'swagger general API Info' is written",
    )
    return parser


def main(argv=None) -> int:
    """Run the command line; returns the exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        run_format(FormatConfig(args.dir, args.exclude, args.general_info))
    except (FormatError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())