"""Tests for node models and node loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rst2mdx.parser import parse_rst
from rst2mdx.renderer import render_mdx
from rst2mdx.schemas import (
    HeadingNode,
    ListItemNode,
    ParagraphNode,
    UnknownNode,
    UnorderedListNode,
    dump_nodes,
    load_nodes,
)


class TestNodeModels:
    """Tests for node model constraints."""

    def test_nodes_are_frozen(self) -> None:
        """Nodes cannot be mutated after construction."""
        node = ParagraphNode(text="Body.")

        with pytest.raises(ValidationError):
            node.text = "Changed."

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_bounds(self, level: int) -> None:
        """Heading levels outside 1-6 are rejected."""
        with pytest.raises(ValidationError):
            HeadingNode(text="Bad", level=level)

    def test_generic_view(self) -> None:
        """Lists expose their items as children."""
        node = UnorderedListNode(items=(ListItemNode(text="a"),))

        assert node.content == ""
        assert node.children == (ListItemNode(text="a"),)
        assert node.options == {}


class TestLoadNodes:
    """Tests for load_nodes and dump_nodes."""

    def test_dump_then_load_preserves_nodes(self) -> None:
        """Dumped nodes validate back into equal nodes."""
        nodes = parse_rst("Title\n=====\n\n- a\n- b\n\n.. image:: a.png\n   :alt: A\n").nodes

        assert load_nodes(dump_nodes(nodes)) == nodes

    def test_unknown_kind_becomes_unknown_node(self) -> None:
        """Mappings with an unrecognized kind are kept as unknown nodes."""
        nodes = load_nodes([{"kind": "table", "content": "| a |"}])

        assert nodes == [UnknownNode(raw_kind="table", text="| a |")]

    def test_unknown_kind_rendered_with_diagnostic(self) -> None:
        """Loaded unknown nodes still reach the output."""
        nodes = load_nodes([{"kind": "heading", "text": "T", "level": 1}, {"kind": "table", "text": "cells"}])

        output, diagnostics = render_mdx(nodes)

        assert output == "---\ntitle: T\n---\n\ncells"
        assert len(diagnostics) == 1

    def test_malformed_known_kind_raises(self) -> None:
        """A known kind with invalid fields is rejected."""
        with pytest.raises(ValidationError):
            load_nodes([{"kind": "heading", "level": 1}])
