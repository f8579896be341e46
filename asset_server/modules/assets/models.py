"""Domain models for served assets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolvedAsset:
    path: str
    data: bytes
    content_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.data)
