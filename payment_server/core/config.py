"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8556
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./payments.db", alias="url")
    echo: bool = False


class MirrorSettings(BaseModel):
    path: Path = Field(default=Path("payments.json"))
    enabled: bool = True


class CorsSettings(BaseModel):
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    allow_methods: list[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE"])


class WebSocketSettings(BaseModel):
    path: str = "/ws"


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


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
    project_name: str = "Payment Sync Server"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    mirror: MirrorSettings = MirrorSettings()
    cors: CorsSettings = CorsSettings()
    websocket: WebSocketSettings = WebSocketSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def mirror_path(self) -> Path:
        return self.mirror.path

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else self.logging.level


@lru_cache()
def get_settings() -> Settings:
    return Settings()
