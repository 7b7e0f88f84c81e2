"""Command-line front door for indexgen.

Parses options, merges them over persisted user defaults, configures logging
and runs the generation pipeline. Every ``IndexGenError`` ends up here and is
reported once before exiting non-zero.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import PRODUCT_NAME, PRODUCT_URL, __version__
from .config import DEFAULT_BASE, DEFAULT_OUTPUT_NAME, GeneratorConfig, load_user_defaults
from .errors import IndexGenError
from .generator import generate
from .icon_catalog import DEFAULT_ICONSET
from .render import DEFAULT_THEME, available_theme_names

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def _non_negative_int(value: str) -> int:
    """argparse type for depth values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PRODUCT_NAME,
        description="Generate static HTML directory listings for a filesystem tree.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to index.")
    parser.add_argument("-V", "--version", action="store_true", help="Print version information and quit.")
    parser.add_argument(
        "-t",
        "--theme",
        default=None,
        help=f"Builtin theme used to generate html ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("-T", "--template", metavar="PATH", default=None, help="Custom template directory.")
    parser.add_argument("--no-recursive", action="store_true", help="Do not generate recursively.")
    parser.add_argument("-n", "--name", metavar="NAME", default=None, help="Output filename (default: index.html).")
    parser.add_argument("-P", "--print", dest="print_output", action="store_true", help="Also print pages to stdout.")
    parser.add_argument("-d", "--depth", metavar="NUMBER", type=_non_negative_int, default=None, help="Cutoff depth.")
    parser.add_argument("-r", "--root", metavar="PATH", default=None, help="Base root dir shown in page titles.")
    parser.add_argument("--human", action="store_true", default=None, help="Make sizes human readable.")
    parser.add_argument("--iconset", metavar="ICON", default=None, help="Iconset name (default: papirus).")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log progress details to stderr.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Attach a stderr handler to the ``indexgen`` logger hierarchy."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    package_logger = logging.getLogger(PRODUCT_NAME)
    package_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def config_from_args(args: argparse.Namespace, defaults: dict[str, object]) -> GeneratorConfig:
    """Merge parsed flags over persisted defaults into a run configuration."""
    max_depth = 1 if args.no_recursive else args.depth
    human = args.human if args.human is not None else bool(defaults.get("human", False))
    return GeneratorConfig(
        path=Path(args.path),
        theme=args.theme or str(defaults.get("theme", DEFAULT_THEME)),
        template_dir=Path(args.template) if args.template else None,
        output_name=args.name or str(defaults.get("name", DEFAULT_OUTPUT_NAME)),
        print_output=args.print_output,
        max_depth=max_depth,
        base=args.root if args.root is not None else str(defaults.get("root", DEFAULT_BASE)),
        human=human,
        iconset=args.iconset or str(defaults.get("iconset", DEFAULT_ICONSET)),
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and generate listings; return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(" ".join(part for part in (PRODUCT_NAME, __version__, PRODUCT_URL) if part))
        return 0
    if args.path is None:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose, quiet=args.quiet)
    config = config_from_args(args, load_user_defaults())
    try:
        generate(config)
    except IndexGenError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
