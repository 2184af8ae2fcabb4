"""Local configuration for rst2mdx."""

from __future__ import annotations

import os


DEFAULT_WRAP_WIDTH = 80
DEFAULT_LOG_LEVEL = "INFO"

SOURCE_SUFFIX = ".rst"
TARGET_SUFFIX = ".mdx"

# Target of :ref:`Name <class_Name>` links.
CLASS_REFERENCE_BASE_URL = "/engine/classes"

DEFAULT_ADMONITION_KIND = "note"
ALLOWED_ADMONITION_KINDS = frozenset({"note", "tip", "info", "warning", "danger", "caution"})

# Maximum line width for paragraphs; 0 or negative disables wrapping.
RST2MDX_WRAP_WIDTH = int(os.getenv("RST2MDX_WRAP_WIDTH", str(DEFAULT_WRAP_WIDTH)))
RST2MDX_LOG_LEVEL = os.getenv("RST2MDX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
