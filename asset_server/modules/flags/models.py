"""Runtime flag values published as immutable snapshots."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["debug", "info", "warn", "error"]
StorageLocation = Literal["local", "bucket"]


class FlagSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Kill switch: reject everything except the health checks.
    offline: bool = False
    log_level: LogLevel = Field(default="info", alias="logLevel")
    image_storage_location: StorageLocation = Field(default="local", alias="imageStorageLocation")

    def to_public(self) -> dict:
        return self.model_dump(by_alias=True)
