"""GitPython-backed version-control client for the mirror working copy."""

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Set

from git import Repo, GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from .capabilities import PathLike
from .logging import get_logger

logger = get_logger(__name__)


class GitClient:
    """Implementation of the VersionControl protocol on top of GitPython.

    The client is bound to one working-copy path. Every call opens the
    repository afresh, so a clone or a removal between calls is picked up
    without any cached state. GitPython errors (``GitCommandError`` and
    friends) are not caught here; the mirror translates them.

    Example:
        client = GitClient("/srv/build/Tasmota")
        if await client.is_repo():
            tags = await client.tags()
    """

    def __init__(self, repo_path: PathLike, remote: str = "origin"):
        """
        Initialize GitClient.

        Args:
            repo_path: Working copy this client operates on
            remote: Name of the remote to pull from and track
        """
        self.repo_path = Path(repo_path)
        self.remote = remote

    def _open(self) -> Repo:
        return Repo(str(self.repo_path))

    async def is_repo(self) -> bool:
        """Check if the working copy path is a git repository."""
        try:
            await asyncio.to_thread(self._open)
        except (InvalidGitRepositoryError, NoSuchPathError):
            return False
        return True

    async def tags(self) -> List[str]:
        """List tag names."""
        def _tags() -> List[str]:
            return [tag.name for tag in self._open().tags]

        return await asyncio.to_thread(_tags)

    async def clone(self, origin_url: str, dest_path: PathLike) -> None:
        """
        Clone a repository.

        Args:
            origin_url: Remote URL to clone from
            dest_path: Directory to clone into
        """
        logger.info("Starting git clone", url=origin_url, target=str(dest_path))
        await asyncio.to_thread(Repo.clone_from, origin_url, str(dest_path))

    async def pull(self) -> None:
        """
        Pull from the remote, including tags.

        A branch without an upstream (one created from a tag) cannot be
        pulled, so refs and tags are only fetched in that case.
        """
        def _pull() -> None:
            repo = self._open()
            remote = repo.remote(self.remote)
            tracking = None
            if not repo.head.is_detached:
                tracking = repo.active_branch.tracking_branch()
            if tracking is None:
                logger.debug("No upstream for HEAD, fetching only", remote=self.remote)
                remote.fetch(tags=True)
            else:
                remote.pull(tags=True)

        await asyncio.to_thread(_pull)

    async def reset(self, mode: str = "hard") -> None:
        """Reset the working copy, e.g. ``git reset --hard``."""
        await asyncio.to_thread(lambda: self._open().git.reset(f"--{mode}"))

    async def clean(self) -> None:
        """Remove untracked files and directories."""
        await asyncio.to_thread(lambda: self._open().git.clean("-f", "-d"))

    async def branch_local(self) -> Set[str]:
        """Get the names of local branches."""
        def _heads() -> Set[str]:
            return {head.name for head in self._open().heads}

        return await asyncio.to_thread(_heads)

    async def checkout_branch(self, new_local_name: str, remote_ref: str) -> None:
        """
        Create a local branch from a remote reference and check it out.

        Remote branches are tracked; anything else (a tag) is used as the
        start point of an untracked branch.

        Args:
            new_local_name: Name of the branch to create
            remote_ref: Remote branch or tag to start from
        """
        def _checkout_branch() -> None:
            repo = self._open()
            remote_heads = {ref.remote_head for ref in repo.remote(self.remote).refs}
            if remote_ref in remote_heads:
                repo.git.checkout("--track", "-b", new_local_name, f"{self.remote}/{remote_ref}")
            else:
                repo.git.checkout("-b", new_local_name, remote_ref)

        await asyncio.to_thread(_checkout_branch)

    async def checkout(self, existing_local_name: str) -> None:
        """Check out an existing local branch."""
        await asyncio.to_thread(lambda: self._open().git.checkout(existing_local_name))

    async def head_info(self) -> Dict[str, Any]:
        """
        Describe HEAD.

        Returns:
            Dictionary with ``branch`` ("HEAD" when detached), ``commit``
            and ``tags`` pointing at HEAD
        """
        def _head_info() -> Dict[str, Any]:
            repo = self._open()
            branch = "HEAD" if repo.head.is_detached else repo.active_branch.name
            try:
                tags_output = repo.git.tag("--points-at", "HEAD")
            except GitCommandError:
                tags_output = ""
            return {
                "branch": branch,
                "commit": repo.head.commit.hexsha,
                "tags": [t.strip() for t in tags_output.splitlines() if t.strip()],
            }

        return await asyncio.to_thread(_head_info)
