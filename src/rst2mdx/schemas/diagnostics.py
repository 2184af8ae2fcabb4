"""Diagnostic records returned alongside parser and renderer output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DiagnosticKind(str, Enum):
    """Enumeration of non-fatal problems the converter reports."""

    UNKNOWN_NODE = "unknown_node"
    UNPARSED_REFERENCE = "unparsed_reference"


class Diagnostic(BaseModel):
    """A non-fatal problem found while converting a document.

    Attributes:
        kind: What went wrong.
        message: Human readable description.
        text: The offending raw text.
    """

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    message: str
    text: str
