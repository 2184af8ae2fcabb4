"""Conversion pipeline for reStructuredText -> MDX."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rst2mdx.config import RST2MDX_WRAP_WIDTH, SOURCE_SUFFIX, TARGET_SUFFIX
from rst2mdx.exceptions import ConversionError, InputNotFoundError, UnsupportedInputError
from rst2mdx.parser import parse_rst
from rst2mdx.renderer import render_mdx
from rst2mdx.schemas import ConversionResult
from rst2mdx.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ConversionOptions:
    """Options for document conversion.

    Attributes:
        wrap_width: Maximum line width for paragraphs and list items. 0 or a
            negative value leaves lines unwrapped.
    """

    wrap_width: int = field(default_factory=lambda: RST2MDX_WRAP_WIDTH)


@dataclass
class ConvertedFile:
    """Paths and result of one converted file."""

    input_path: Path
    output_path: Path
    input_size: int
    result: ConversionResult


def convert_rst_to_mdx(source: str, *, options: ConversionOptions | None = None) -> ConversionResult:
    """Parse reStructuredText and render it as MDX.

    Diagnostics from parsing and rendering are logged at WARNING and returned
    on the result; they never abort the conversion.
    """
    opts = options or ConversionOptions()
    document = parse_rst(source)
    content, render_diagnostics = render_mdx(document.nodes, wrap_width=opts.wrap_width)
    diagnostics = document.diagnostics + render_diagnostics

    for diagnostic in diagnostics:
        logger.warning("%s: %s", diagnostic.message, diagnostic.text)

    return ConversionResult(
        content=content,
        node_count=len(document.nodes),
        node_kinds=[node.kind for node in document.nodes],
        diagnostics=diagnostics,
    )


def convert_file(
    input_path: Path,
    output_dir: Path,
    *,
    options: ConversionOptions | None = None,
) -> ConvertedFile:
    """Convert one ``.rst`` file into ``<output_dir>/<stem>.mdx``.

    Raises:
        InputNotFoundError: If ``input_path`` does not exist.
        UnsupportedInputError: If ``input_path`` is not a ``.rst`` file.
        ConversionError: If reading the source or writing the output fails.
    """
    input_path = Path(input_path)
    output_dir = Path(output_dir)
    if not input_path.exists():
        raise InputNotFoundError(f"Input not found: {input_path}")
    if not input_path.is_file() or input_path.suffix.lower() != SOURCE_SUFFIX:
        raise UnsupportedInputError(f"Not a reStructuredText file: {input_path}")

    try:
        source = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionError(f"Failed to read {input_path}: {exc}") from exc

    result = convert_rst_to_mdx(source, options=options)
    output_path = output_dir / f"{input_path.stem}{TARGET_SUFFIX}"

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.content, encoding="utf-8")
    except OSError as exc:
        raise ConversionError(f"Failed to write {output_path}: {exc}") from exc

    logger.info("Converted %s -> %s", input_path, output_path)
    return ConvertedFile(
        input_path=input_path,
        output_path=output_path,
        input_size=len(source.encode("utf-8")),
        result=result,
    )


def convert_path(
    input_path: Path,
    output_dir: Path | None = None,
    *,
    recursive: bool = False,
    options: ConversionOptions | None = None,
) -> list[ConvertedFile]:
    """Convert a file or every ``.rst`` file in a directory.

    Args:
        input_path: Source file or directory.
        output_dir: Destination directory. Defaults to the file's parent, or
            to the input directory itself.
        recursive: If True, descend into subdirectories and mirror their
            layout under ``output_dir``.
        options: Conversion options shared by every file.

    Returns:
        Converted files in processing order.

    Raises:
        InputNotFoundError: If ``input_path`` does not exist.
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise InputNotFoundError(f"Input not found: {input_path}")

    if input_path.is_file():
        target = Path(output_dir) if output_dir is not None else input_path.parent
        return [convert_file(input_path, target, options=options)]

    target = Path(output_dir) if output_dir is not None else input_path
    return _convert_directory(input_path, target, recursive=recursive, options=options)


def _convert_directory(
    directory: Path,
    output_dir: Path,
    *,
    recursive: bool,
    options: ConversionOptions | None,
) -> list[ConvertedFile]:
    converted: list[ConvertedFile] = []
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise ConversionError(f"Failed to list {directory}: {exc}") from exc

    for entry in entries:
        if entry.is_dir():
            if recursive:
                converted.extend(
                    _convert_directory(
                        entry,
                        output_dir / entry.name,
                        recursive=recursive,
                        options=options,
                    )
                )
            continue
        if entry.suffix.lower() == SOURCE_SUFFIX:
            converted.append(convert_file(entry, output_dir, options=options))
        else:
            logger.debug("Skipping non-reStructuredText file %s", entry)
    return converted
