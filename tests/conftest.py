"""Test setup for generate_summary."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def write_tree(base: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``base``."""
    for relative, content in files.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return base


@pytest.fixture
def book_src(tmp_path: Path) -> Path:
    """Sample book: a ``guide`` directory chapter and an ``intro`` file chapter."""
    return write_tree(
        tmp_path / "src",
        {
            "intro.md": "# Introduction\n\nWelcome.\n",
            "guide/README.md": "# The Guide\n",
            "guide/setup.md": "# Setting Up\n\nInstall things.\n",
        },
    )
