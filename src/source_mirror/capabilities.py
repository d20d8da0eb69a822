"""Capability protocols consumed by the mirror."""

from pathlib import Path
from typing import Any, Dict, List, Protocol, Set, Union, runtime_checkable

PathLike = Union[str, Path]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem primitives the mirror relies on."""

    async def exists(self, path: PathLike) -> bool:
        """Return True if something exists at path."""
        ...

    async def remove(self, path: PathLike) -> None:
        """Remove path recursively; raise OSError on failure."""
        ...


@runtime_checkable
class VersionControl(Protocol):
    """Protocol for a version-control client bound to one working copy."""

    async def is_repo(self) -> bool:
        """Return True if the working copy path is a valid repository."""
        ...

    async def tags(self) -> List[str]:
        """Return the names of all tags."""
        ...

    async def clone(self, origin_url: str, dest_path: PathLike) -> None:
        """Clone origin_url into dest_path."""
        ...

    async def pull(self) -> None:
        """Pull the current branch and tags from origin."""
        ...

    async def reset(self, mode: str = "hard") -> None:
        """Reset the working copy."""
        ...

    async def clean(self) -> None:
        """Remove untracked files and directories."""
        ...

    async def branch_local(self) -> Set[str]:
        """Return the names of local branches."""
        ...

    async def checkout_branch(self, new_local_name: str, remote_ref: str) -> None:
        """Create new_local_name from remote_ref and check it out."""
        ...

    async def checkout(self, existing_local_name: str) -> None:
        """Check out an existing local branch."""
        ...

    async def head_info(self) -> Dict[str, Any]:
        """Return branch, commit and tags pointing at HEAD."""
        ...
