"""Shared schemas for rst2mdx."""

from rst2mdx.schemas.conversion import ConversionResult
from rst2mdx.schemas.diagnostics import Diagnostic, DiagnosticKind
from rst2mdx.schemas.nodes import (
    NODE_KINDS,
    AdmonitionNode,
    CodeBlockNode,
    DirectiveNode,
    HeadingNode,
    ImageNode,
    ListItemNode,
    Node,
    OrderedListNode,
    ParagraphNode,
    UnknownNode,
    UnorderedListNode,
    dump_nodes,
    load_nodes,
)

__all__ = [
    "NODE_KINDS",
    "AdmonitionNode",
    "CodeBlockNode",
    "ConversionResult",
    "Diagnostic",
    "DiagnosticKind",
    "DirectiveNode",
    "HeadingNode",
    "ImageNode",
    "ListItemNode",
    "Node",
    "OrderedListNode",
    "ParagraphNode",
    "UnknownNode",
    "UnorderedListNode",
    "dump_nodes",
    "load_nodes",
]
