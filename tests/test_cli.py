"""Tests for the command-line driver."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from rst2mdx import __version__
from rst2mdx.cli import build_parser, main


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo the root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestBuildParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """Options default to no output, no recursion, and width 80."""
        args = build_parser().parse_args(["docs"])

        assert args.input == Path("docs")
        assert args.output is None
        assert args.recursive is False
        assert args.verbose is False
        assert args.width == 80
        assert args.dump_nodes is False

    def test_short_flags(self) -> None:
        """Short flags map to their options."""
        args = build_parser().parse_args(["docs", "-o", "out", "-r", "-v", "-w", "0"])

        assert args.output == Path("out")
        assert args.recursive is True
        assert args.verbose is True
        assert args.width == 0

    def test_width_long_form(self) -> None:
        """--width is the long form of -w."""
        args = build_parser().parse_args(["docs", "--width", "100"])

        assert args.width == 100

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints the package version."""
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--version"])

        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Tests for main function."""

    def test_converts_file(self, tmp_path: Path) -> None:
        """A single file is converted into the output directory."""
        source = tmp_path / "intro.rst"
        source.write_text("Intro\n=====\n\nHello.\n", encoding="utf-8")
        output_dir = tmp_path / "out"

        assert main([str(source), "-o", str(output_dir)]) == 0
        assert (output_dir / "intro.mdx").read_text(encoding="utf-8") == (
            "---\ntitle: Intro\n---\n\nHello."
        )

    def test_converts_directory_recursively(self, tmp_path: Path) -> None:
        """Directories are walked when -r is given."""
        nested = tmp_path / "docs" / "guide"
        nested.mkdir(parents=True)
        (tmp_path / "docs" / "index.rst").write_text("Index.\n", encoding="utf-8")
        (nested / "page.rst").write_text("Page.\n", encoding="utf-8")

        assert main([str(tmp_path / "docs"), "-r", "-v"]) == 0
        assert (tmp_path / "docs" / "index.mdx").exists()
        assert (nested / "page.mdx").exists()

    def test_wrap_option(self, tmp_path: Path) -> None:
        """-w sets the wrap width."""
        source = tmp_path / "p.rst"
        source.write_text("one two three four five six\n", encoding="utf-8")

        assert main([str(source), "-w", "10"]) == 0
        assert (tmp_path / "p.mdx").read_text(encoding="utf-8") == "one two\nthree four\nfive six"

    def test_missing_input_exits_one(self, tmp_path: Path) -> None:
        """A missing input is an error."""
        assert main([str(tmp_path / "missing.rst")]) == 1

    def test_non_rst_file_is_skipped(self, tmp_path: Path) -> None:
        """Other file types are skipped without failing."""
        source = tmp_path / "notes.txt"
        source.write_text("text", encoding="utf-8")

        assert main([str(source)]) == 0
        assert not (tmp_path / "notes.mdx").exists()

    def test_dump_nodes(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--dump-nodes prints JSON nodes and writes nothing."""
        source = tmp_path / "doc.rst"
        source.write_text("Doc\n===\n\n- a\n", encoding="utf-8")

        assert main([str(source), "--dump-nodes"]) == 0

        nodes = json.loads(capsys.readouterr().out)
        assert [node["kind"] for node in nodes] == ["heading", "unordered_list"]
        assert nodes[0] == {"kind": "heading", "text": "Doc", "level": 1}
        assert not (tmp_path / "doc.mdx").exists()

    def test_dump_nodes_rejects_directory(self, tmp_path: Path) -> None:
        """--dump-nodes needs a single file."""
        assert main([str(tmp_path), "--dump-nodes"]) == 1
