"""Command-line driver for rst2mdx."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rst2mdx import __version__
from rst2mdx.config import RST2MDX_WRAP_WIDTH, SOURCE_SUFFIX
from rst2mdx.conversion import ConversionOptions, convert_path
from rst2mdx.exceptions import ConversionError, InputNotFoundError, Rst2mdxError
from rst2mdx.output_formatter import format_summary
from rst2mdx.parser import parse_rst
from rst2mdx.schemas import dump_nodes
from rst2mdx.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rst2mdx",
        description="Convert reStructuredText documents to MDX.",
    )
    parser.add_argument("input", type=Path, help="Input .rst file or directory")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output directory (defaults to the input's directory)",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Process subdirectories of an input directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=RST2MDX_WRAP_WIDTH,
        metavar="WIDTH",
        help=f"Maximum line width; 0 disables wrapping (default: {RST2MDX_WRAP_WIDTH})",
    )
    parser.add_argument(
        "--dump-nodes",
        action="store_true",
        help="Print the parsed nodes of a single file as JSON instead of converting",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    logger.debug("Input: %s", args.input)
    logger.debug("Output: %s", args.output or "(same as input)")
    logger.debug("Wrap width: %d, recursive: %s", args.width, args.recursive)

    try:
        if args.dump_nodes:
            return _dump_nodes(args.input)

        if args.input.is_file() and args.input.suffix.lower() != SOURCE_SUFFIX:
            logger.warning("Skipping %s: not a reStructuredText file", args.input)
            return 0

        converted = convert_path(
            args.input,
            args.output,
            recursive=args.recursive,
            options=ConversionOptions(wrap_width=args.width),
        )
    except Rst2mdxError as exc:
        logger.error("%s", exc)
        return 1

    for item in converted:
        logger.debug("Summary:\n%s", format_summary(item))
    logger.info("Converted %d file(s)", len(converted))
    return 0


def _dump_nodes(input_path: Path) -> int:
    if not input_path.exists():
        raise InputNotFoundError(f"Input not found: {input_path}")
    if not input_path.is_file():
        logger.error("--dump-nodes expects a single file: %s", input_path)
        return 1
    try:
        source = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionError(f"Failed to read {input_path}: {exc}") from exc

    document = parse_rst(source)
    json.dump(dump_nodes(document.nodes), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
