"""Shared fixtures: mirror config and AsyncMock-backed capabilities."""

from __future__ import annotations

import os

# Let GitPython import on machines without a git binary; the integration
# tests skip themselves there.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from unittest.mock import AsyncMock, Mock

import pytest

from source_mirror.models import MirrorConfig
from source_mirror.mirror import RepoMirror

ORIGIN_URL = "https://github.com/arendst/Tasmota.git"
REPO_PATH = "/srv/build/Tasmota"
MIN_VERSION = "v1.0.0"
EDGE_BRANCH = "development"


@pytest.fixture
def config() -> MirrorConfig:
    return MirrorConfig(
        origin_url=ORIGIN_URL,
        repo_path=REPO_PATH,
        min_version=MIN_VERSION,
        edge_branch=EDGE_BRANCH,
    )


@pytest.fixture
def calls() -> Mock:
    """Parent mock recording fs and git calls in the order they happen."""
    return Mock()


@pytest.fixture
def fake_fs(calls: Mock) -> AsyncMock:
    fs = AsyncMock()
    fs.exists.return_value = True
    calls.attach_mock(fs, "fs")
    return fs


@pytest.fixture
def fake_git(calls: Mock) -> AsyncMock:
    git = AsyncMock()
    git.is_repo.return_value = True
    git.tags.return_value = [MIN_VERSION]
    git.branch_local.return_value = {"main"}
    git.head_info.return_value = {"branch": "main", "commit": "a" * 40, "tags": []}
    calls.attach_mock(git, "git")
    return git


@pytest.fixture
def mirror(config: MirrorConfig, fake_git: AsyncMock, fake_fs: AsyncMock) -> RepoMirror:
    return RepoMirror(config, git=fake_git, fs=fake_fs)
