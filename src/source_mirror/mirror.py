# File: src/source_mirror/mirror.py
from __future__ import annotations

from typing import Iterable, Optional, Set

from packaging.version import InvalidVersion, Version

from .capabilities import FileSystem, VersionControl
from .errors import (
    BranchListFailure,
    CheckoutFailure,
    CleanFailure,
    CloneFailure,
    RepairFailure,
    ResetFailure,
    SyncFailure,
    UnavailableError,
)
from .fs import LocalFileSystem
from .git_client import GitClient
from .logging import get_logger
from .models.mirror_config import MirrorConfig
from .models.mirror_status import MirrorStatus

logger = get_logger(__name__)


def _parse_version(tag: str) -> Optional[Version]:
    try:
        return Version(tag)
    except InvalidVersion:
        return None


def filter_tags(tags: Iterable[str], min_version: str) -> Set[str]:
    """
    Drop version tags older than min_version. Tags that are not versions
    are kept, and nothing is dropped when min_version is not a version.
    """
    floor = _parse_version(min_version)
    if floor is None:
        return set(tags)
    kept = set()
    for tag in tags:
        version = _parse_version(tag)
        if version is None or version >= floor:
            kept.add(tag)
    return kept


class RepoMirror:
    """
    Local mirror of one remote repository used as a build ingredient.

    Callers must serialize access: there is no locking, and running two
    operations against the same path at once is undefined.
    """

    def __init__(
        self,
        config: MirrorConfig,
        git: Optional[VersionControl] = None,
        fs: Optional[FileSystem] = None,
    ):
        self.config = config
        self.git = git if git is not None else GitClient(config.repo_path)
        self.fs = fs if fs is not None else LocalFileSystem()
        self.log = logger.bind(path=str(config.repo_path))

    @property
    def path(self) -> str:
        return str(self.config.repo_path)

    async def is_available(self) -> bool:
        """
        True if the mirror path holds a repository. A directory that exists
        but is not a repository is removed so a later clone can succeed.
        """
        try:
            present = await self.fs.exists(self.path)
        except Exception as e:
            # any stat failure means nothing usable is there
            self.log.debug("Mirror directory cannot be inspected", error=str(e))
            present = False
        if not present:
            self.log.debug("Mirror directory not present")
            return False

        if await self.git.is_repo():
            return True

        self.log.warning("Mirror directory is not a git repository, removing it")
        try:
            await self.fs.remove(self.path)
        except Exception as e:
            self.log.error("Removing mirror directory failed", error=str(e))
            raise RepairFailure(f"Cannot remove directory {self.path}", data={"path": self.path}) from e
        return False

    async def get_tags(self) -> Set[str]:
        """Tags of the mirror plus the minimum-version and edge sentinels."""
        if not await self.is_available():
            raise UnavailableError("unable to get tags: repository is not available", data={"path": self.path})

        try:
            raw_tags = await self.git.tags()
        except Exception as e:
            self.log.error("Listing tags failed", error=str(e))
            raise UnavailableError(f"unable to get tags: {e}", data={"path": self.path}) from e

        if self.config.drop_tags_below_min:
            tags = filter_tags(raw_tags, self.config.min_version)
        else:
            tags = set(raw_tags)
        tags.update((self.config.min_version, self.config.edge_branch))
        return tags

    async def ensure_cloned(self) -> Set[str]:
        """Clone the origin unless a repository is already there, then return its tags."""
        if not await self.is_available():
            self.log.info("Cloning mirror", origin=self.config.origin_url)
            try:
                await self.git.clone(self.config.origin_url, self.path)
            except Exception as e:
                self.log.error("Clone failed", origin=self.config.origin_url, error=str(e))
                raise CloneFailure(
                    f"unable to clone {self.config.origin_url}: {e}",
                    data={"origin": self.config.origin_url, "path": self.path},
                ) from e
        return await self.get_tags()

    async def sync_repo(self) -> Set[str]:
        """Pull the latest changes, cloning first when there is nothing to pull into."""
        if not await self.is_available():
            return await self.ensure_cloned()

        await self._pull()
        return await self.get_tags()

    async def _pull(self) -> None:
        self.log.info("Pulling mirror")
        try:
            await self.git.pull()
        except Exception as e:
            self.log.error("Pull failed", error=str(e))
            raise SyncFailure(f"unable to pull: {e}", data={"path": self.path}) from e

    async def switch_to(self, reference: str) -> str:
        """
        Discard local changes and check out reference.

        A reference that is not yet a local branch is created from the
        remote branch or tag of the same name. Returns reference unchanged.
        """
        log = self.log.bind(reference=reference)

        try:
            await self.git.reset("hard")
        except Exception as e:
            log.error("Reset failed", error=str(e))
            raise ResetFailure(f"unable to reset: {e}", data={"reference": reference, "stage": "reset"}) from e

        try:
            await self.git.clean()
        except Exception as e:
            log.error("Clean failed", error=str(e))
            raise CleanFailure(f"unable to clean: {e}", data={"reference": reference, "stage": "clean"}) from e

        try:
            local_branches = await self.git.branch_local()
        except Exception as e:
            log.error("Listing local branches failed", error=str(e))
            raise BranchListFailure(
                f"cannot get the list of local branches: {e}",
                data={"reference": reference, "stage": "branch_local"},
            ) from e

        is_local = reference in local_branches
        stage = "checkout" if is_local else "checkout_branch"
        log.info("Checking out reference", local=is_local)
        try:
            if is_local:
                await self.git.checkout(reference)
            else:
                await self.git.checkout_branch(reference, reference)
        except Exception as e:
            log.error("Checkout failed", stage=stage, error=str(e))
            raise CheckoutFailure(
                f"switching to branch {reference} failed: {e}",
                data={"reference": reference, "stage": stage},
            ) from e

        return reference

    async def describe(self) -> MirrorStatus:
        """Branch, commit and tags of the current working copy."""
        if not await self.is_available():
            raise UnavailableError("unable to describe: repository is not available", data={"path": self.path})

        try:
            head = await self.git.head_info()
        except Exception as e:
            self.log.error("Reading HEAD failed", error=str(e))
            raise UnavailableError(f"unable to describe: {e}", data={"path": self.path}) from e

        return MirrorStatus(
            origin=self.config.origin_url,
            path=self.path,
            branch=head["branch"],
            commit=head["commit"],
            tags=head.get("tags") or None,
        )

    async def prepare(self, reference: str) -> MirrorStatus:
        """Bring the mirror up to date and onto reference, ready for a build."""
        await self.sync_repo()
        await self.switch_to(reference)
        # an existing local branch may lag its upstream until pulled
        await self._pull()
        status = await self.describe()
        self.log.info("Mirror prepared", reference=reference, commit=status.commit)
        return status
