"""Unit tests for the local filesystem adapter and protocol conformance."""

from __future__ import annotations

import os

import pytest

from source_mirror.capabilities import FileSystem, VersionControl
from source_mirror.fs import LocalFileSystem
from source_mirror.git_client import GitClient


@pytest.mark.unit
class TestLocalFileSystem:

    @pytest.mark.asyncio
    async def test_exists(self, tmp_path):
        fs = LocalFileSystem()

        assert await fs.exists(tmp_path) is True
        assert await fs.exists(tmp_path / "missing") is False

    @pytest.mark.asyncio
    async def test_remove_directory_tree(self, tmp_path):
        target = tmp_path / "Tasmota"
        (target / "lib" / "default").mkdir(parents=True)
        (target / "lib" / "default" / "core.h").write_text("#pragma once\n")

        await LocalFileSystem().remove(target)

        assert not target.exists()

    @pytest.mark.asyncio
    async def test_remove_file(self, tmp_path):
        target = tmp_path / "stray"
        target.write_text("x")

        await LocalFileSystem().remove(str(target))

        assert not target.exists()

    @pytest.mark.asyncio
    async def test_path_below_a_file_does_not_exist(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        assert await LocalFileSystem().exists(blocker / "Tasmota") is False

    @pytest.mark.asyncio
    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
    async def test_failed_remove_leaves_directory_in_place(self, tmp_path):
        target = tmp_path / "Tasmota"
        target.mkdir()
        (target / "platformio.ini").write_text("[env]\n")
        target.chmod(0o500)
        try:
            with pytest.raises(OSError):
                await LocalFileSystem().remove(target)
            assert (target / "platformio.ini").exists()
        finally:
            target.chmod(0o700)

    @pytest.mark.asyncio
    async def test_remove_missing_path_raises(self, tmp_path):
        with pytest.raises(OSError):
            await LocalFileSystem().remove(tmp_path / "missing")


@pytest.mark.unit
class TestProtocols:

    def test_local_filesystem_is_filesystem(self):
        assert isinstance(LocalFileSystem(), FileSystem)

    def test_git_client_is_version_control(self, tmp_path):
        assert isinstance(GitClient(tmp_path), VersionControl)

    @pytest.mark.asyncio
    async def test_git_client_plain_directory_is_not_repo(self, tmp_path):
        assert await GitClient(tmp_path).is_repo() is False

    @pytest.mark.asyncio
    async def test_git_client_missing_directory_is_not_repo(self, tmp_path):
        assert await GitClient(tmp_path / "missing").is_repo() is False
