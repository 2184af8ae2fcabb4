"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from rst2mdx.schemas.diagnostics import Diagnostic


class ConversionResult(BaseModel):
    """Final conversion output."""

    content: str
    node_count: int
    node_kinds: list[str] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
