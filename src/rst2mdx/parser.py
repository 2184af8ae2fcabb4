"""Parse reStructuredText source into a flat sequence of block nodes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from rst2mdx.inline import process_inline
from rst2mdx.schemas import (
    AdmonitionNode,
    CodeBlockNode,
    Diagnostic,
    DirectiveNode,
    HeadingNode,
    ImageNode,
    ListItemNode,
    Node,
    OrderedListNode,
    ParagraphNode,
    UnorderedListNode,
)

logger = logging.getLogger(__name__)

_REFERENCE_TARGET_RE = re.compile(r"^\.\.\s+_[a-z0-9_]+:")
_UNDERLINE_RE = re.compile(r"^[=\-`~:'\"^_*+#<>]{3,}$")
_DIRECTIVE_RE = re.compile(r"^\.\.\s+(\w[\w-]*)::(.*)")
_FIELD_OPTION_RE = re.compile(r"^:([^:]+):\s*(.*)")
_BULLET_RE = re.compile(r"^[*\-+]\s")
_ENUMERATED_RE = re.compile(r"^\d+\.\s")
_LITERAL_INDENT = "    "

# Both characters of a pair map to the same level.
_HEADING_LEVELS = {
    "=": 1,
    "-": 2,
    "`": 3,
    "~": 3,
    ":": 4,
    "*": 4,
    "'": 5,
    "+": 5,
    '"': 6,
    "^": 6,
}
_DEFAULT_HEADING_LEVEL = 2

_CODE_DIRECTIVES = {"code-block", "code"}
_ADMONITION_DIRECTIVES = {"note", "warning", "danger", "tip"}


@dataclass
class ParsedDocument:
    """Block nodes and inline diagnostics extracted from a source document."""

    nodes: list[Node] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class _Cursor:
    """Position in the line buffer plus whether the last consumed line was blank."""

    lines: list[str]
    index: int = 0
    last_blank: bool = True

    def at_end(self) -> bool:
        return self.index >= len(self.lines)

    def current(self) -> str:
        return self.lines[self.index]

    def peek(self, offset: int = 1) -> str | None:
        position = self.index + offset
        if position < len(self.lines):
            return self.lines[position]
        return None

    def move_to(self, index: int) -> None:
        index = min(index, len(self.lines))
        if index > self.index:
            self.last_blank = not self.lines[index - 1].strip()
            self.index = index


def heading_level(underline_char: str) -> int:
    """Map a section underline character to a heading level (1-6)."""
    return _HEADING_LEVELS.get(underline_char, _DEFAULT_HEADING_LEVEL)


def parse_rst(source: str) -> ParsedDocument:
    """Scan ``source`` once and return its block nodes.

    Recognizers are tried in a fixed order at every position: blank line,
    section heading, directive, bullet list, enumerated list, literal block
    and finally paragraph. Malformed constructs degrade to paragraphs; this
    function does not raise for any input text.
    """
    cursor = _Cursor(source.split("\n"))
    document = ParsedDocument()

    while not cursor.at_end() and (
        not cursor.current().strip() or _REFERENCE_TARGET_RE.match(cursor.current().strip())
    ):
        cursor.move_to(cursor.index + 1)

    while not cursor.at_end():
        raw_line = cursor.current()
        line = raw_line.strip()

        if not line:
            cursor.move_to(cursor.index + 1)
            continue

        underline = cursor.peek()
        if underline is not None and _UNDERLINE_RE.match(underline.strip()):
            level = heading_level(underline.strip()[0])
            document.nodes.append(HeadingNode(text=line, level=level))
            cursor.move_to(cursor.index + 2)
            continue

        if line.startswith(".. ") and "::" in line:
            document.nodes.append(_parse_directive(cursor))
            continue

        if _BULLET_RE.match(line):
            document.nodes.append(_parse_list(cursor, _BULLET_RE, document.diagnostics))
            continue

        if _ENUMERATED_RE.match(line):
            document.nodes.append(_parse_list(cursor, _ENUMERATED_RE, document.diagnostics))
            continue

        if cursor.last_blank and raw_line.startswith(_LITERAL_INDENT):
            document.nodes.append(_parse_literal_block(cursor))
            continue

        document.nodes.append(_parse_paragraph(cursor, document.diagnostics))

    logger.debug("Parsed %d nodes", len(document.nodes))
    return document


def _parse_directive(cursor: _Cursor) -> Node:
    line = cursor.current().strip()
    match = _DIRECTIVE_RE.match(line)
    if not match:
        cursor.move_to(cursor.index + 1)
        return ParagraphNode(text=line)

    name = match.group(1)
    argument = match.group(2).strip()
    lines = cursor.lines

    position = cursor.index + 1
    while position < len(lines) and not lines[position].strip():
        position += 1

    indentation = _leading_whitespace(lines[position]) if position < len(lines) else 0
    if indentation == 0:
        cursor.move_to(position)
        return _directive_node(name, argument, [])

    content: list[str] = []
    while position < len(lines):
        current = lines[position]
        if not current.strip():
            following = position + 1
            while following < len(lines) and not lines[following].strip():
                following += 1
            if following < len(lines) and _leading_whitespace(lines[following]) < indentation:
                break
            content.append("")
            position += 1
            continue
        if _leading_whitespace(current) < indentation:
            break
        content.append(current[indentation:])
        position += 1

    cursor.move_to(position)
    return _directive_node(name, argument, content)


def _directive_node(name: str, argument: str, content: list[str]) -> Node:
    if name in _CODE_DIRECTIVES:
        return CodeBlockNode(
            code=_trim_block(_strip_leading_options(content)),
            language=argument or "text",
        )
    if name == "image":
        return ImageNode(src=argument, attributes=_parse_field_options(content))
    if name in _ADMONITION_DIRECTIVES:
        body = _trim_block(content)
        if argument:
            body = f"{argument}\n\n{body}" if body else argument
        return AdmonitionNode(admonition_kind=name, body=body)
    return DirectiveNode(name=name, argument=argument, body=_trim_block(content))


def _parse_field_options(content: list[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    for line in content:
        match = _FIELD_OPTION_RE.match(line.strip())
        if match:
            options[match.group(1).strip()] = match.group(2).strip()
    return options


def _strip_leading_options(content: list[str]) -> list[str]:
    position = 0
    while position < len(content) and _FIELD_OPTION_RE.match(content[position].strip()):
        position += 1
    return content[position:]


def _parse_list(cursor: _Cursor, pattern: re.Pattern[str], diagnostics: list[Diagnostic]) -> Node:
    lines = cursor.lines
    items: list[ListItemNode] = []
    position = cursor.index

    while position < len(lines):
        line = lines[position].strip()
        if not line or not pattern.match(line):
            following = position
            while following < len(lines) and not lines[following].strip():
                following += 1
            if following < len(lines) and pattern.match(lines[following].strip()):
                position = following
                continue
            break

        text, item_diagnostics = process_inline(pattern.sub("", line, count=1).strip())
        diagnostics.extend(item_diagnostics)
        items.append(ListItemNode(text=text))
        position += 1

    cursor.move_to(position)
    if pattern is _ENUMERATED_RE:
        return OrderedListNode(items=tuple(items))
    return UnorderedListNode(items=tuple(items))


def _parse_literal_block(cursor: _Cursor) -> CodeBlockNode:
    lines = cursor.lines
    content: list[str] = []
    position = cursor.index

    while position < len(lines) and (
        lines[position].startswith(_LITERAL_INDENT) or not lines[position].strip()
    ):
        current = lines[position]
        content.append(current[len(_LITERAL_INDENT):] if current.strip() else "")
        position += 1

    cursor.move_to(position)
    return CodeBlockNode(code=_trim_block(content), language="text")


def _parse_paragraph(cursor: _Cursor, diagnostics: list[Diagnostic]) -> ParagraphNode:
    lines = cursor.lines
    parts: list[str] = []
    position = cursor.index

    while position < len(lines) and lines[position].strip():
        parts.append(lines[position].strip())
        position += 1

    # The terminating blank line belongs to the paragraph.
    cursor.move_to(position + 1)
    text, paragraph_diagnostics = process_inline(" ".join(parts))
    diagnostics.extend(paragraph_diagnostics)
    return ParagraphNode(text=text)


def _leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


def _trim_block(lines: list[str]) -> str:
    """Join lines, dropping surrounding blank lines but keeping indentation."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(line.rstrip() for line in lines[start:end])
