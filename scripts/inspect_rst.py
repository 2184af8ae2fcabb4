"""Inspect reStructuredText constructs to see what the converter will meet."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from pathlib import Path

import httpx

from rst2mdx.parser import parse_rst

_DIRECTIVE_RE = re.compile(r"^\s*\.\.\s+(\w[\w-]*)::")
_ROLE_RE = re.compile(r":([a-z-]+):`")


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect reStructuredText nodes, directives, and roles.")
    parser.add_argument("--url", help="URL of a raw .rst document")
    parser.add_argument("--file", help="Local .rst file path")
    parser.add_argument("--diagnostics", action="store_true", help="Also list conversion diagnostics")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    source = load_rst(url=args.url, file_path=args.file)
    nodes, directives, roles = collect_stats(source)

    print("Nodes:")
    for name, count in nodes.most_common():
        print(f"{name}: {count}")

    print("\nDirectives:")
    for name, count in directives.most_common():
        print(f"{name}: {count}")

    print("\nRoles:")
    for name, count in roles.most_common():
        print(f"{name}: {count}")

    if args.diagnostics:
        print("\nDiagnostics:")
        for diagnostic in parse_rst(source).diagnostics:
            print(f"{diagnostic.kind.value}: {diagnostic.text}")


def load_rst(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"reStructuredText file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(source: str) -> tuple[Counter, Counter, Counter]:
    nodes = Counter(node.kind for node in parse_rst(source).nodes)
    directives = Counter()
    roles = Counter()

    for line in source.splitlines():
        match = _DIRECTIVE_RE.match(line)
        if match:
            directives[match.group(1)] += 1
        for role in _ROLE_RE.findall(line):
            roles[role] += 1
    return nodes, directives, roles


if __name__ == "__main__":
    main()
