"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Host process
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8765
    log_level: str = "INFO"

    # Live Client Data API (served by the game process while a match runs)
    live_client_base_url: str = "https://127.0.0.1:2999"
    # Path to Riot's root certificate; empty skips verification on loopback
    live_client_ca_bundle: str = ""
    request_timeout: float = 5.0

    # Adaptive polling (seconds)
    in_game_poll_interval: float = 2.0
    offline_poll_interval: float = 30.0

    # Per-subscriber buffer for the status stream
    subscriber_queue_size: int = 16

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
