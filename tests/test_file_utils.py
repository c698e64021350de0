"""Tests for async filesystem helpers."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from mdindex.file_utils import (
    file_exists_async,
    list_dir_async,
    read_text_async,
    write_text_async,
)


class TestReadTextAsync:
    """Tests for read_text_async function."""

    @pytest.mark.asyncio
    async def test_reads_text_content(self, tmp_path: Path) -> None:
        path = tmp_path / "test.md"
        path.write_text("Hello, World!", encoding="utf-8")

        assert await read_text_async(path) == "Hello, World!"

    @pytest.mark.asyncio
    async def test_keeps_crlf_line_endings(self, tmp_path: Path) -> None:
        """Line endings are not translated on read."""
        path = tmp_path / "test.md"
        path.write_bytes(b"a\r\nb\r\n")

        assert await read_text_async(path) == "a\r\nb\r\n"


class TestWriteTextAsync:
    """Tests for write_text_async function."""

    @pytest.mark.asyncio
    async def test_writes_text_content(self, tmp_path: Path) -> None:
        path = tmp_path / "test.md"

        await write_text_async(path, "Café\n")

        assert path.read_bytes() == "Café\n".encode("utf-8")

    @pytest.mark.asyncio
    async def test_round_trips_bytes_exactly(self, tmp_path: Path) -> None:
        path = tmp_path / "test.md"
        path.write_bytes(b"a\r\nb\nc")

        await write_text_async(path, await read_text_async(path))

        assert path.read_bytes() == b"a\r\nb\nc"


class TestListDirAsync:
    """Tests for list_dir_async function."""

    @pytest.mark.asyncio
    async def test_lists_names(self, tmp_path: Path) -> None:
        (tmp_path / "a.md").write_text("")
        (tmp_path / "sub").mkdir()

        assert sorted(await list_dir_async(tmp_path)) == ["a.md", "sub"]


class TestFileExistsAsync:
    """Tests for file_exists_async function."""

    @pytest.mark.asyncio
    async def test_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "README.md"
        path.write_text("")

        assert await file_exists_async(path)

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        assert not await file_exists_async(tmp_path / "README.md")

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, tmp_path: Path) -> None:
        with patch(
            "mdindex.file_utils.stat_async",
            AsyncMock(side_effect=PermissionError("denied")),
        ):
            with pytest.raises(PermissionError):
                await file_exists_async(tmp_path / "README.md")
