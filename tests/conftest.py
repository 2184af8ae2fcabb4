"""Test setup for rst2mdx."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_rst() -> str:
    """A small document touching every block construct."""
    return "\n".join(
        [
            "Player",
            "======",
            "",
            "The **player** moves with `WASD <https://example.com/keys>`_.",
            "",
            "Movement",
            "--------",
            "",
            "- Walk",
            "- Run",
            "",
            ".. note::",
            "",
            "   Speed depends on :ref:`Enemy <class_Enemy>` count.",
            "",
            ".. code-block:: python",
            "",
            "   speed = 10",
            "",
        ]
    )
