"""Test setup for mdindex."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str | None]], Path]:
    """Build a file tree under ``tmp_path``.

    Keys are POSIX paths relative to the root; a ``None`` value creates an
    empty directory instead of a file.
    """

    def _make(files: dict[str, str | None]) -> Path:
        for relative, content in files.items():
            path = tmp_path.joinpath(*relative.split("/"))
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
