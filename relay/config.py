"""Pydantic Settings: loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}

    host: str = "0.0.0.0"
    port: int = 5000

    user_agent: str = "Mozilla/5.0 (compatible; ChatApp/1.0)"
    search_url: str = "https://duckduckgo.com/html/?q={query}"
    max_search_results: int = 10
    fetch_timeout_seconds: float = 15.0

    cors_allow_origins: str = "*"
    log_level: str = "INFO"

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
