"""Reflow rendered text to a maximum line width."""

from __future__ import annotations

import re
import textwrap

# Lines that carry Markdown/MDX structure and must keep their line breaks.
_STRUCTURAL_LINE_RE = re.compile(r"^(?:[*+-]\s|\d+\.\s|```|:::|<|\{/\*|\*/\}|#{1,6}\s|>)")
_BLOCK_SEPARATOR_RE = re.compile(r"\n[ \t]*\n")

# Words that open a list, heading, quote, fence or setext underline when they
# start a line.
_BLOCK_MARKER_WORD_RE = re.compile(r"^(?:[*+=-]+|\d+[.)]|#{1,6}|>.*|```.*|:::.*)$")

# Joins a marker word to the word before it. textwrap only splits on ASCII
# whitespace, so the pair is never broken across lines.
_WORD_JOINER = "\ue000"


def fill(text: str, width: int, prefix: str = "") -> str:
    """Fill ``text`` as one flowing block of at most ``width`` columns.

    Whitespace, line breaks included, is collapsed first. A line is never
    broken right before a word that Markdown would read as block syntax
    (``-``, ``2.``, ``#``, ``>``...); such a word stays on the line of the
    word preceding it. Continuation lines are indented by ``len(prefix)``.
    A ``width`` of 0 or less only prepends ``prefix``.
    """
    if width <= 0:
        return prefix + text
    words = text.split()
    if not words:
        return prefix.rstrip()

    units = [words[0]]
    for word in words[1:]:
        if _BLOCK_MARKER_WORD_RE.match(word):
            units[-1] = f"{units[-1]}{_WORD_JOINER}{word}"
        else:
            units.append(word)

    filled = textwrap.fill(
        " ".join(units),
        width=width,
        initial_indent=prefix,
        subsequent_indent=" " * len(prefix),
        break_long_words=False,
        break_on_hyphens=False,
    )
    return filled.replace(_WORD_JOINER, " ")


def reflow(text: str, width: int) -> str:
    """Re-flow plain text blocks of ``text`` to ``width`` columns.

    Blocks are separated by blank lines. A block made only of unindented
    prose lines is filled with :func:`fill`; any other block is kept
    verbatim. A ``width`` of 0 or less returns ``text`` unchanged.
    """
    if width <= 0:
        return text
    blocks = _BLOCK_SEPARATOR_RE.split(text.strip("\n"))
    return "\n\n".join(_reflow_block(block, width) for block in blocks if block.strip())


def reflow_with_prefix(text: str, width: int, prefix: str) -> str:
    """Fill ``text`` behind a list marker, indenting continuation lines under it."""
    if not text:
        return prefix.rstrip()
    return fill(text, width, prefix)


def _reflow_block(block: str, width: int) -> str:
    lines = block.split("\n")
    if any(line[:1].isspace() or _STRUCTURAL_LINE_RE.match(line) for line in lines):
        return block
    return fill(block, width)
