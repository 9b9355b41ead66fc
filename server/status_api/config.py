"""Configuration settings for the Navigator status server."""

from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "public"


def _find_env_file() -> str:
    """Find .env file - check current dir, then parent (repo root)."""
    current = Path.cwd()

    # Check current directory
    if (current / ".env").exists():
        return str(current / ".env")

    # Check parent directory (when running from server/)
    if (current.parent / ".env").exists():
        return str(current.parent / ".env")

    # Default to current directory
    return ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    port: int = 11080
    host: str = "0.0.0.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    # Probe cache
    cache_ttl: int = 20  # seconds
    cache_max: int = 100

    # Probe executor (seconds)
    probe_connect_timeout: float = 2.0
    probe_timeout: float = 3.0
    # Off on purpose: monitored home-network services often use self-signed certs
    probe_verify_tls: bool = False

    # Request bounds
    max_url_bytes: int = 255
    batch_max: int = 50

    # Static files
    static_root: str = ""  # empty: the repo's public/ directory
    index_document: str = "index.html"
    services_document: str = "services.json"
    static_max_age: int = 86400
    max_static_path: int = 100

    class Config:
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def static_dir(self) -> Path:
        """Get the static root as an absolute Path."""
        if not self.static_root:
            return DEFAULT_STATIC_DIR
        return Path(self.static_root).resolve()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
