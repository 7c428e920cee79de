from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    The date engine itself needs nothing beyond an optional ``TIMEZONE``;
    the remaining fields control how the MCP server is hosted and logged.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # IANA zone name used for "today" (e.g. "America/New_York").
    # Unset means the host's local wall clock.
    timezone: str | None = None

    # Remote hosting: transport and bind address
    mcp_transport: str = "stdio"
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8000

    # Paths & logging: default is <project_root>/data so it works
    # regardless of the process working directory.
    data_dir: Path = Path(__file__).resolve().parent.parent / "data"
    log_level: str = "INFO"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached Settings singleton. Created on first call."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached settings. Used in tests."""
    global _settings  # noqa: PLW0603
    _settings = None
