"""Error definitions for source mirror operations."""

from typing import Optional, Dict, Any


class MirrorError(Exception):
    """Base exception for mirror failures."""

    code = "mirror_error"

    def __init__(
        self,
        message: str,
        data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for logs and callers."""
        error = {
            "code": self.code,
            "message": self.message,
        }

        if self.data:
            error["data"] = self.data

        return error


class RepairFailure(MirrorError):
    """The mirror directory is not a repository and cannot be removed."""

    code = "repair_failure"


class UnavailableError(MirrorError):
    """No usable repository, or reading from it failed."""

    code = "unavailable"


class CloneFailure(MirrorError):
    """Cloning the origin failed."""

    code = "clone_failure"


class SyncFailure(MirrorError):
    """Pulling from the origin failed."""

    code = "sync_failure"


class ResetFailure(MirrorError):
    """Hard reset of the working copy failed."""

    code = "reset_failure"


class CleanFailure(MirrorError):
    """Removing untracked files failed."""

    code = "clean_failure"


class BranchListFailure(MirrorError):
    """Listing local branches failed."""

    code = "branch_list_failure"


class CheckoutFailure(MirrorError):
    """Checking out the requested reference failed."""

    code = "checkout_failure"
