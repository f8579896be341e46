"""Database infrastructure helpers (engine, readiness ping)."""

from .dsn import normalize_dsn, redact_dsn
from .session import (
    DatabaseUnavailableError,
    build_engine,
    ping_database,
    wait_for_database,
)

__all__ = [
    "DatabaseUnavailableError",
    "build_engine",
    "normalize_dsn",
    "ping_database",
    "redact_dsn",
    "wait_for_database",
]
