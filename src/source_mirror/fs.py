"""Filesystem primitives for the mirror working copy."""

import asyncio
import shutil
from pathlib import Path

from .capabilities import PathLike
from .logging import get_logger

logger = get_logger(__name__)


class LocalFileSystem:
    """Local disk implementation of the FileSystem protocol.

    Blocking calls run in a worker thread so the event loop stays free
    while large working copies are removed.
    """

    async def exists(self, path: PathLike) -> bool:
        """Check whether anything exists at a path.

        Args:
            path: Path to stat

        Returns:
            True if the path exists, False if it is missing or cannot be
            reached (a file in a parent position, no permission)
        """
        try:
            await asyncio.to_thread(Path(path).stat)
        except OSError:
            return False
        return True

    async def remove(self, path: PathLike) -> None:
        """Remove a directory tree or a single file.

        Args:
            path: Path to remove

        Raises:
            OSError: If the path cannot be removed. Permission and
                existence problems on the top-level path surface before
                anything is deleted; a failure deeper in a tree can leave
                it partially removed.
        """
        target = Path(path)
        logger.debug("Removing path", path=str(target))
        if target.is_dir() and not target.is_symlink():
            await asyncio.to_thread(shutil.rmtree, target)
        else:
            await asyncio.to_thread(target.unlink)
