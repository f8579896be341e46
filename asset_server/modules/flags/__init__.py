"""Dynamic flag exports."""

from .exceptions import FlagSourceError
from .models import FlagSnapshot
from .source import FileFlagSource
from .store import FlagStore
from .watcher import FlagWatcher

__all__ = [
    "FileFlagSource",
    "FlagSnapshot",
    "FlagSourceError",
    "FlagStore",
    "FlagWatcher",
]
