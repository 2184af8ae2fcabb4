"""Document node models.

Each block kind is its own frozen model carrying only the payload it needs.
The ``kind`` literal discriminates the union. Every model also exposes the
generic ``content`` / ``children`` / ``options`` view used by logging and
by callers that inspect a tree without caring about the concrete type.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterable, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _BaseNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def content(self) -> str:
        return ""

    @property
    def children(self) -> tuple["ListItemNode", ...]:
        return ()

    @property
    def options(self) -> dict[str, str]:
        return {}


class HeadingNode(_BaseNode):
    """A section title."""

    kind: Literal["heading"] = "heading"
    text: str
    level: int = Field(2, ge=1, le=6)

    @property
    def content(self) -> str:
        return self.text

    @property
    def options(self) -> dict[str, str]:
        return {"level": str(self.level)}


class ParagraphNode(_BaseNode):
    """A run of text lines joined into one block."""

    kind: Literal["paragraph"] = "paragraph"
    text: str

    @property
    def content(self) -> str:
        return self.text


class ListItemNode(_BaseNode):
    """A single entry of a bullet or enumerated list."""

    kind: Literal["list_item"] = "list_item"
    text: str

    @property
    def content(self) -> str:
        return self.text


class UnorderedListNode(_BaseNode):
    """A bullet list."""

    kind: Literal["unordered_list"] = "unordered_list"
    items: tuple[ListItemNode, ...] = ()

    @property
    def children(self) -> tuple[ListItemNode, ...]:
        return self.items


class OrderedListNode(_BaseNode):
    """An enumerated list."""

    kind: Literal["ordered_list"] = "ordered_list"
    items: tuple[ListItemNode, ...] = ()

    @property
    def children(self) -> tuple[ListItemNode, ...]:
        return self.items


class CodeBlockNode(_BaseNode):
    """A literal block or ``code-block`` directive."""

    kind: Literal["code_block"] = "code_block"
    code: str = ""
    language: str = "text"

    @property
    def content(self) -> str:
        return self.code

    @property
    def options(self) -> dict[str, str]:
        return {"language": self.language}


class ImageNode(_BaseNode):
    """An ``image`` directive; ``attributes`` holds its field-list options."""

    kind: Literal["image"] = "image"
    src: str
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def content(self) -> str:
        return self.src

    @property
    def options(self) -> dict[str, str]:
        return dict(self.attributes)


class AdmonitionNode(_BaseNode):
    """A note/warning/danger/tip call-out."""

    kind: Literal["admonition"] = "admonition"
    admonition_kind: str = "note"
    body: str = ""

    @property
    def content(self) -> str:
        return self.body

    @property
    def options(self) -> dict[str, str]:
        return {"kind": self.admonition_kind}


class DirectiveNode(_BaseNode):
    """Any directive without a dedicated node type."""

    kind: Literal["directive"] = "directive"
    name: str
    argument: str = ""
    body: str = ""

    @property
    def content(self) -> str:
        return self.body

    @property
    def options(self) -> dict[str, str]:
        return {"name": self.name, "argument": self.argument}


class UnknownNode(_BaseNode):
    """A node of a kind the renderer has no rule for."""

    kind: Literal["unknown"] = "unknown"
    raw_kind: str = ""
    text: str = ""

    @property
    def content(self) -> str:
        return self.text


Node = Annotated[
    Union[
        HeadingNode,
        ParagraphNode,
        ListItemNode,
        UnorderedListNode,
        OrderedListNode,
        CodeBlockNode,
        ImageNode,
        AdmonitionNode,
        DirectiveNode,
        UnknownNode,
    ],
    Field(discriminator="kind"),
]

NODE_KINDS = frozenset(
    {
        "heading",
        "paragraph",
        "list_item",
        "unordered_list",
        "ordered_list",
        "code_block",
        "image",
        "admonition",
        "directive",
        "unknown",
    }
)

_NODE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Node)


def load_nodes(data: Iterable[Mapping[str, Any]]) -> list[Node]:
    """Validate JSON-compatible mappings into nodes.

    Mappings whose ``kind`` is not a known node kind become ``UnknownNode``
    instances so they still reach the renderer.

    Raises:
        pydantic.ValidationError: If a mapping of a known kind is malformed.
    """
    nodes: list[Node] = []
    for item in data:
        kind = str(item.get("kind", ""))
        if kind not in NODE_KINDS:
            text = item.get("content", item.get("text", ""))
            nodes.append(UnknownNode(raw_kind=kind, text=str(text or "")))
            continue
        nodes.append(_NODE_ADAPTER.validate_python(dict(item)))
    return nodes


def dump_nodes(nodes: Iterable[_BaseNode]) -> list[dict[str, Any]]:
    """Serialize nodes into JSON-compatible mappings."""
    return [node.model_dump(mode="json") for node in nodes]
