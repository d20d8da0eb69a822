"""Local mirror of a remote source repository for firmware builds."""

from .errors import (
    BranchListFailure,
    CheckoutFailure,
    CleanFailure,
    CloneFailure,
    MirrorError,
    RepairFailure,
    ResetFailure,
    SyncFailure,
    UnavailableError,
)
from .fs import LocalFileSystem
from .git_client import GitClient
from .mirror import RepoMirror, filter_tags
from .models import MirrorConfig, MirrorStatus
from .settings import Settings

__version__ = "0.1.0"

__all__ = [
    "BranchListFailure",
    "CheckoutFailure",
    "CleanFailure",
    "CloneFailure",
    "GitClient",
    "LocalFileSystem",
    "MirrorConfig",
    "MirrorError",
    "MirrorStatus",
    "RepairFailure",
    "RepoMirror",
    "ResetFailure",
    "Settings",
    "SyncFailure",
    "UnavailableError",
    "filter_tags",
]
