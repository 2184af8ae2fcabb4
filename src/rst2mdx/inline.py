"""Convert reStructuredText inline markup into MDX inline syntax."""

from __future__ import annotations

import re

from rst2mdx.config import CLASS_REFERENCE_BASE_URL
from rst2mdx.schemas import Diagnostic, DiagnosticKind

_EXTERNAL_LINK_RE = re.compile(r"`([^`<>]+)\s+<([^>]+)>`(__?)")
_REFERENCE_LINK_RE = re.compile(r"`([^`]+)`_")
_STRONG_RE = re.compile(r"\*\*([^*]+)\*\*")
_EMPHASIS_RE = re.compile(r"\*([^*]+)\*")
_DOUBLE_LITERAL_RE = re.compile(r"``([^`]+)``")
# Spans starting with "_" are link placeholders.
_LITERAL_RE = re.compile(r"`([^`_][^`]*)`")
_ROLE_RE = re.compile(r":([a-z-]+):`([^`]+)`")
_CLASS_REFERENCE_RE = re.compile(r"^(.*?)\s*<\s*(class_[^>]+)\s*>\s*(.*)$", re.IGNORECASE)
_ANGLE_GROUP_RE = re.compile(r"<.*?>")


def slugify(text: str) -> str:
    """Lowercase ``text`` and replace whitespace runs with hyphens."""
    return re.sub(r"\s+", "-", text.strip().lower())


def process_inline(text: str) -> tuple[str, list[Diagnostic]]:
    """Rewrite inline markup of a paragraph or list item.

    Link spans are swapped for placeholder tokens before any other rule runs
    and restored last, so emphasis and code rules never touch link labels or
    targets.

    Args:
        text: Inline text with reStructuredText markup.

    Returns:
        Tuple of (converted text, diagnostics). Diagnostics are reported for
        class references that do not have the ``Name <class_Name>`` shape.
    """
    diagnostics: list[Diagnostic] = []
    placeholders: list[tuple[str, str]] = []
    prefix = _placeholder_prefix(text)

    def _protect(rendered: str) -> str:
        placeholder = f"{prefix}{len(placeholders)}__"
        placeholders.append((placeholder, rendered))
        return placeholder

    def _external_link(match: re.Match[str]) -> str:
        label, url = match.group(1).strip(), match.group(2).strip()
        return _protect(f"[{label}]({url})")

    def _reference_link(match: re.Match[str]) -> str:
        label = match.group(1).strip()
        return _protect(f"[{label}](#{slugify(label)})")

    def _role(match: re.Match[str]) -> str:
        return _render_role(match.group(1), match.group(2), diagnostics)

    result = _EXTERNAL_LINK_RE.sub(_external_link, text)
    result = _REFERENCE_LINK_RE.sub(_reference_link, result)
    result = _STRONG_RE.sub(r"**\1**", result)
    result = _EMPHASIS_RE.sub(r"*\1*", result)
    result = _DOUBLE_LITERAL_RE.sub(r"`\1`", result)
    result = _LITERAL_RE.sub(r"`\1`", result)
    result = _ROLE_RE.sub(_role, result)

    for placeholder, rendered in placeholders:
        result = result.replace(placeholder, rendered, 1)

    return result, diagnostics


def format_class_reference(content: str) -> tuple[str, Diagnostic | None]:
    """Render ``Display <class_Name> trailing`` as a link to the class page.

    Returns:
        Tuple of (markdown, diagnostic). The diagnostic is set when the text
        does not have the expected shape and a plain anchor link was built
        instead.
    """
    match = _CLASS_REFERENCE_RE.match(content.strip())
    if match:
        display, identifier, trailing = (part.strip() for part in match.groups())
        if not display:
            display = identifier[len("class_"):]
        link = f"[{display}]({CLASS_REFERENCE_BASE_URL}/{identifier.lower()})"
        return (f"{link} {trailing}" if trailing else link), None

    diagnostic = Diagnostic(
        kind=DiagnosticKind.UNPARSED_REFERENCE,
        message="Could not parse class reference format",
        text=content,
    )
    fallback = _ANGLE_GROUP_RE.sub("", content).strip()
    return f"[{fallback}](#{slugify(fallback)})", diagnostic


def _render_role(role: str, content: str, diagnostics: list[Diagnostic]) -> str:
    if role in {"code", "literal"}:
        return f"`{content}`"
    if role in {"em", "emphasis"}:
        return f"*{content}*"
    if role == "strong":
        return f"**{content}**"
    if role == "math":
        return f"${content}$"
    if role == "ref":
        if "<class_" in content:
            rendered, diagnostic = format_class_reference(content)
            if diagnostic:
                diagnostics.append(diagnostic)
            return rendered
        return f"[{content}](#{slugify(content)})"
    if role == "doc":
        return f"[{content}]({content})"
    return f'<span className="{role}">{content}</span>'


def _placeholder_prefix(text: str) -> str:
    marker = "LINK"
    while f"__{marker}_" in text:
        marker += "X"
    return f"__{marker}_"
