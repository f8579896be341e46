"""Connection string helpers for the readiness database."""

from __future__ import annotations

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

ASYNC_POSTGRES_DRIVER = "postgresql+psycopg"
_POSTGRES_BACKENDS = {"postgres", "postgresql"}


def normalize_dsn(raw: str, username: str | None = None, password: str | None = None) -> str:
    """Turn a JDBC or libpq style URL into an async SQLAlchemy URL.

    Accepts ``jdbc:postgresql://...``, ``postgres://...``, ``postgresql://...`` or a bare
    ``host:port/db``. Credentials passed in explicitly replace the ones embedded in the
    URL, and ``sslmode=disable`` is added unless the URL already names a mode.
    """
    value = (raw or "").strip()
    if not value:
        raise ValueError("database url is empty")

    if value.lower().startswith("jdbc:"):
        value = value[len("jdbc:"):]
    if "://" not in value:
        value = f"postgresql://{value}"

    try:
        url = make_url(value)
    except (ArgumentError, ValueError) as exc:
        raise ValueError("cannot parse database url") from exc

    if username:
        url = URL.create(
            drivername=url.drivername,
            username=username,
            password=password or None,
            host=url.host,
            port=url.port,
            database=url.database,
            query=url.query,
        )

    if url.get_backend_name() in _POSTGRES_BACKENDS:
        url = url.set(drivername=ASYNC_POSTGRES_DRIVER)
        if "sslmode" not in url.query:
            url = url.update_query_dict({"sslmode": "disable"})

    return url.render_as_string(hide_password=False)


def redact_dsn(url: str | URL) -> str:
    """Render ``url`` with its password masked, for logs."""
    try:
        parsed = make_url(url)
    except (ArgumentError, ValueError):
        return "<unparseable url>"
    return parsed.render_as_string(hide_password=True)


__all__ = ["ASYNC_POSTGRES_DRIVER", "normalize_dsn", "redact_dsn"]
