"""File backed source of dynamic flag values."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from .exceptions import FlagSourceError
from .models import FlagSnapshot


class FileFlagSource:
    """Reads flag overrides from a JSON document such as a mounted ConfigMap.

    Keys use the public names (``offline``, ``logLevel``, ``imageStorageLocation``);
    keys that are missing keep their default value. A missing file means defaults.
    """

    def __init__(self, path: Path, defaults: FlagSnapshot | None = None) -> None:
        self.path = Path(path)
        self.defaults = defaults or FlagSnapshot()

    def load(self) -> FlagSnapshot:
        payload = self._read()
        if payload is None:
            return self.defaults
        merged: Dict[str, Any] = {**self.defaults.to_public(), **payload}
        try:
            return FlagSnapshot.model_validate(merged)
        except ValidationError as exc:
            raise FlagSourceError(f"invalid flag values in {self.path}: {exc}") from exc

    def _read(self) -> Dict[str, Any] | None:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise FlagSourceError(f"read {self.path}: {exc}") from exc

        if not raw.strip():
            return None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise FlagSourceError(f"parse JSON in {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise FlagSourceError(f"flag document {self.path} must be a JSON object")
        return payload
