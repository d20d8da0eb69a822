# File: src/source_mirror/models/mirror_status.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class MirrorStatus(BaseModel):
    """
    State of the working copy as handed to the build step.
    """
    origin: str = Field(min_length=1, description="Remote URL the mirror follows")
    path: str = Field(min_length=1, description="Filesystem path of the working copy")
    branch: str = Field(min_length=1, description="Active branch, or HEAD when detached")
    commit: str = Field(min_length=1)
    tags: Optional[List[str]] = None
