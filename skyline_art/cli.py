"""
skyline-art - print procedural pixel art to the terminal.

Usage:
    skyline-art [--seed N] [-v] [columns] [rows]
    skyline-art [--seed N] [-v] version <N> [args...]

Without a ``version`` keyword the default art version is drawn. Every numeric
argument is optional: missing or unparseable values use the version's
defaults, and out-of-range values are clamped.

Examples:
    skyline-art
    skyline-art 120 30
    skyline-art version 5 66 8 12
    python -m skyline_art --seed 42 100 25
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from skyline_art import __version__
from skyline_art.config import DEFAULT_VERSION
from skyline_art.sources import all_art_sources, find_art_source

logger = logging.getLogger(__name__)

VERSION_KEYWORD = "version"


def _versions_help() -> str:
    lines = ["art versions:"]
    for source in all_art_sources():
        default = " (default)" if source.version == DEFAULT_VERSION else ""
        lines.append(f"  {source.version}  {source.name}{default}: {source.usage}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser ready to parse sys.argv.
    """
    parser = argparse.ArgumentParser(
        prog="skyline-art",
        description="Print procedural pixel art using terminal colors.",
        epilog=_versions_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="numeric arguments, optionally preceded by 'version N'",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for a reproducible image"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log generation details to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def split_version(args: Sequence[str]) -> Tuple[str, List[str]]:
    """Split raw positionals into ``(art version, remaining arguments)``."""
    if args and args[0].lower() == VERSION_KEYWORD:
        version = args[1] if len(args) > 1 else DEFAULT_VERSION
        return version, list(args[2:])
    return DEFAULT_VERSION, list(args)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    configure_logging(args.verbose)

    version, values = split_version(args.args)
    source = find_art_source(version)
    if source is None:
        logger.warning("Unknown art version %r, nothing to draw", version)
        sys.exit(0)

    config = source.build_config(values, args.seed)
    logger.debug("Drawing version %s with %r", version, config)
    print(source.render(config))
    sys.exit(0)
