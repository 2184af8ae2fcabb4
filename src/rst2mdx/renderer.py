"""Serialize parsed nodes into an MDX document."""

from __future__ import annotations

import json
import re
from typing import Iterable

from rst2mdx.config import ALLOWED_ADMONITION_KINDS, DEFAULT_ADMONITION_KIND
from rst2mdx.schemas import (
    AdmonitionNode,
    CodeBlockNode,
    Diagnostic,
    DiagnosticKind,
    DirectiveNode,
    HeadingNode,
    ImageNode,
    ListItemNode,
    Node,
    OrderedListNode,
    ParagraphNode,
    UnknownNode,
    UnorderedListNode,
)
from rst2mdx.wrap import fill, reflow, reflow_with_prefix

_YAML_INDICATORS = "-?:,[]{}#&*!|>'\"%@`"
_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def render_mdx(nodes: Iterable[Node], *, wrap_width: int = 0) -> tuple[str, list[Diagnostic]]:
    """Render nodes into MDX text.

    The first heading becomes the frontmatter title; every later node,
    headings included, is rendered in document order. Blocks are separated
    by one blank line and the result is trimmed.

    Args:
        nodes: Nodes in document order. They are read, never modified.
        wrap_width: Maximum line width for prose; 0 or negative disables
            wrapping.

    Returns:
        Tuple of (MDX text, diagnostics for nodes that had no rendering rule).
    """
    blocks: list[str] = []
    diagnostics: list[Diagnostic] = []
    title_emitted = False

    for node in nodes:
        if isinstance(node, HeadingNode) and not title_emitted:
            blocks.append(render_frontmatter(node.text))
            title_emitted = True
            continue
        blocks.append(_render_block(node, wrap_width=wrap_width, diagnostics=diagnostics))

    return "\n\n".join(block for block in blocks if block).strip(), diagnostics


def render_frontmatter(title: str) -> str:
    """Render the frontmatter block carrying the document title."""
    return f"---\ntitle: {_yaml_scalar(title)}\n---"


def _render_block(node: Node, *, wrap_width: int, diagnostics: list[Diagnostic]) -> str:
    if isinstance(node, HeadingNode):
        return f"{'#' * node.level} {node.text}"

    if isinstance(node, (ParagraphNode, ListItemNode)):
        return fill(node.text, wrap_width)

    if isinstance(node, UnorderedListNode):
        return "\n".join(
            reflow_with_prefix(item.text, wrap_width, "- ") for item in node.items
        )

    if isinstance(node, OrderedListNode):
        return "\n".join(
            reflow_with_prefix(item.text, wrap_width, f"{index}. ")
            for index, item in enumerate(node.items, start=1)
        )

    if isinstance(node, CodeBlockNode):
        return f"```{node.language}\n{node.code}\n```"

    if isinstance(node, ImageNode):
        alt = node.attributes.get("alt") or _alt_from_source(node.src)
        return f"![{alt}]({node.src})"

    if isinstance(node, AdmonitionNode):
        return _render_admonition(node, wrap_width=wrap_width)

    if isinstance(node, DirectiveNode):
        return _render_directive(node, wrap_width=wrap_width)

    raw_kind = node.raw_kind if isinstance(node, UnknownNode) else str(getattr(node, "kind", ""))
    diagnostics.append(
        Diagnostic(
            kind=DiagnosticKind.UNKNOWN_NODE,
            message=f"Unknown node type: {raw_kind}",
            text=node.content,
        )
    )
    return reflow(node.content, wrap_width)


def _render_admonition(node: AdmonitionNode, *, wrap_width: int) -> str:
    kind = node.admonition_kind
    if kind not in ALLOWED_ADMONITION_KINDS:
        kind = DEFAULT_ADMONITION_KIND
    body = reflow(node.body, wrap_width)
    if not body:
        return f":::{kind}\n:::"
    return f":::{kind}\n\n{body}\n\n:::"


def _render_directive(node: DirectiveNode, *, wrap_width: int) -> str:
    if node.name == "include":
        return f"{{/* Include: {node.argument} */}}"
    if node.name == "toctree":
        return "{/* Table of Contents */}"
    # "*/" inside the body would close the comment early.
    body = reflow(node.body, wrap_width).replace("*/", "*\\/")
    return (
        "{/*\n"
        f"Directive: {node.name}\n"
        f"Argument: {node.argument}\n"
        "Content:\n"
        f"{body}\n"
        "*/}"
    )


def _alt_from_source(src: str) -> str:
    filename = src.rsplit("/", 1)[-1]
    alt = _EXTENSION_RE.sub("", filename)
    alt = re.sub(r"[_-]", " ", alt)
    return alt[:1].upper() + alt[1:]


def _yaml_scalar(value: str) -> str:
    needs_quotes = (
        not value
        or value[0] in _YAML_INDICATORS
        or value != value.strip()
        or ": " in value
        or " #" in value
        or value.endswith(":")
    )
    if needs_quotes:
        return json.dumps(value, ensure_ascii=False)
    return value
