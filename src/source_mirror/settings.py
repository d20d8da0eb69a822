# File: src/source_mirror/settings.py
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import configure_logging, get_logger
from .models.mirror_config import MirrorConfig

log = get_logger("source_mirror.settings")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MIRROR_",
        env_file=".env",
        extra="ignore",
    )

    # repository
    ORIGIN_URL: str = Field(default="https://github.com/arendst/Tasmota.git", min_length=1)
    REPO_PATH: str = Field(default="./Tasmota", min_length=1)

    # version sentinels always reported alongside the tags
    MIN_VERSION: str = Field(default="v9.1.0", min_length=1)
    EDGE_BRANCH: str = Field(default="development", min_length=1)
    DROP_TAGS_BELOW_MIN: bool = Field(default=False)

    # logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=True)

    def __init__(self, **data):
        super().__init__(**data)
        log.debug(
            "Mirror settings loaded",
            origin=self.ORIGIN_URL,
            path=self.REPO_PATH,
            min_version=self.MIN_VERSION,
            edge_branch=self.EDGE_BRANCH,
        )

    def to_config(self) -> MirrorConfig:
        return MirrorConfig(
            origin_url=self.ORIGIN_URL,
            repo_path=self.REPO_PATH,
            min_version=self.MIN_VERSION,
            edge_branch=self.EDGE_BRANCH,
            drop_tags_below_min=self.DROP_TAGS_BELOW_MIN,
        )

    def setup_logging(self) -> None:
        configure_logging(self.LOG_LEVEL, service_name="source-mirror", structured=self.LOG_JSON)
