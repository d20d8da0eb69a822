from .mirror_config import MirrorConfig
from .mirror_status import MirrorStatus

__all__ = ["MirrorConfig", "MirrorStatus"]
