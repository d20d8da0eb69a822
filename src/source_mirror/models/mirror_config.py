# File: src/source_mirror/models/mirror_config.py
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class MirrorConfig(BaseModel):
    """
    Static inputs of a mirror, fixed for the process lifetime:
      - origin_url: Remote Git URL to clone from
      - repo_path: Local directory holding the working copy
      - min_version: Oldest version identifier offered to callers; always reported
      - edge_branch: Development branch name; always reported
      - drop_tags_below_min: Hide version tags older than min_version
    """

    model_config = ConfigDict(frozen=True)

    origin_url: str = Field(min_length=1)
    repo_path: Path
    min_version: str = Field(min_length=1)
    edge_branch: str = Field(min_length=1)
    drop_tags_below_min: bool = False
