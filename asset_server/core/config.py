"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./asset-server.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    pool_recycle: Optional[int] = None
    connect_timeout: float = 2.0
    startup_timeout: float = 40.0


class AssetSettings(BaseModel):
    url_prefix: str = "/assets"
    cache_control: str = "public, max-age=31536000"


class FlagSettings(BaseModel):
    path: Path = Path("/app/config/flags.json")
    refresh_interval: float = Field(default=5.0, gt=0)

    # Used until the flag document says otherwise.
    offline: bool = False
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    image_storage_location: Literal["local", "bucket"] = "local"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Asset Server"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    assets: AssetSettings = AssetSettings()
    flags: FlagSettings = FlagSettings()

    # Deployment variables shared with the chart and the database secret.
    assets_base_path: Path = Path("./assets")
    auth_db_url: Optional[str] = None
    auth_db_user: Optional[str] = None
    auth_db_password: Optional[str] = None

    @property
    def database_url(self) -> str:
        if self.auth_db_url and self.auth_db_url.strip():
            from asset_server.infrastructure.database.dsn import normalize_dsn

            return normalize_dsn(self.auth_db_url, self.auth_db_user, self.auth_db_password)
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def asset_root(self) -> Path:
        return self.assets_base_path.expanduser().resolve()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
