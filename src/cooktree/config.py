"""Library configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with ``COOKTREE_``."""

    model_config = SettingsConfigDict(
        env_prefix="COOKTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = ""  # "json", "text" or empty for auto-detect
    log_file: str | None = None

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def json_logs(self) -> bool | None:
        """Explicit log format choice, or None to auto-detect."""
        if not self.log_format:
            return None
        return self.log_format.lower() == "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
