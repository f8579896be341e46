"""Run the asset server with uvicorn."""

import uvicorn

from asset_server.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "asset_server.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level="info",
        # RequestLoggingMiddleware writes the access lines.
        access_log=False,
    )


if __name__ == "__main__":
    main()
