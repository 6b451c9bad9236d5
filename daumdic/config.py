"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/daumdic.log if not set."""
        return self.log_file_path or self.data_dir / "daumdic.log"

    # Daum dictionary
    dictionary_url: str = "https://dic.daum.net/search.do"
    request_timeout: float = 10.0  # seconds
    user_agent: str = "Mozilla/5.0 (compatible; daumdic/0.1.0)"

    # HTTP API
    api_host: str = "127.0.0.1"
    api_port: int = 8000


settings = Settings()
