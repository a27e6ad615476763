from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://swop.cx/graphql"


class Settings(BaseSettings):
    """Client settings loaded from environment with defaults.

    Environment variables use the SWOP_ prefix (e.g. SWOP_API_KEY, SWOP_FREE_TIER,
    SWOP_CACHE_TTL_SECONDS). A local .env file is read when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWOP_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Basic app metadata (gateway only)
    app_name: str = "Swop Rates Gateway"
    debug: bool = False
    version: str = "0.1.0"

    # Remote service
    api_key: Optional[str] = None
    endpoint: AnyHttpUrl = DEFAULT_ENDPOINT  # type: ignore[assignment]
    http_timeout_seconds: float = 10.0

    # Query defaults
    base_currency: Optional[str] = None
    # Free tier rejects an explicit baseCurrency argument
    free_tier: bool = False

    # Response caching; 0 disables it
    cache_ttl_seconds: int = 0

    def dict_for_logging(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json")
        if data.get("api_key"):
            data["api_key"] = "***"
        return data


@lru_cache
def get_settings() -> Settings:
    return Settings()
