import logging

from pydantic_settings import BaseSettings

from .. import __version__

class Settings(BaseSettings):
    # API
    api_title: str = "WireGuard keygen API"
    api_version: str = __version__

    # Server
    host: str = "127.0.0.1"
    port: int = 8086
    reload: bool = False

    # Logging
    log_level: str = "INFO"

    # Key handling
    expose_private_keys: bool = True

    class Config:
        env_prefix = "WG_KEYGEN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

settings = Settings()
