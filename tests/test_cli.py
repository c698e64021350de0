"""Tests for the command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from mdindex.cli import main


class TestMain:
    """Tests for main function."""

    def test_indexes_given_path(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("# Root\n")
        (tmp_path / "a.md").write_text("# A\n")

        assert main([str(tmp_path)]) == 0

        assert "<!-- BEGIN NAV -->" in (tmp_path / "a.md").read_text()
        assert "- [A](a.md)" in (tmp_path / "README.md").read_text()

    def test_defaults_to_current_directory(self) -> None:
        with patch("mdindex.cli.index_path", AsyncMock(return_value=[])) as mock_index:
            assert main([]) == 0

        mock_index.assert_awaited_once_with(".")

    def test_failure_exits_nonzero_and_logs(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="mdindex.cli"):
            assert main([str(tmp_path / "missing")]) == 1

        assert "Indexing" in caplog.text
        assert "failed" in caplog.text
