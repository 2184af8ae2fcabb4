"""Format per-file conversion summaries."""

from __future__ import annotations

from collections import Counter

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from rst2mdx.conversion import ConvertedFile


def format_summary(converted: ConvertedFile) -> str:
    """Create the detail block logged for one converted file."""
    result = converted.result
    output_size = len(result.content.encode("utf-8"))

    summary_lines = [
        f"Input: {converted.input_path} ({format_size(converted.input_size)})",
        f"Output: {converted.output_path} ({format_size(output_size)})",
        f"Nodes: {result.node_count}",
    ]
    kinds = Counter(result.node_kinds)
    if kinds:
        summary_lines.append(
            "Node kinds: " + ", ".join(f"{kind}={count}" for kind, count in sorted(kinds.items()))
        )
    summary_lines.append(f"Diagnostics: {len(result.diagnostics)}")

    token_estimate = _format_token_count(result.content)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    return "\n".join(summary_lines)


def format_size(size: int) -> str:
    """Render a byte count as B/KB/MB."""
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MB"
    if size >= 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size} B"


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
