"""Centralized configuration: all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.log_level: str = os.getenv("GODEX_LOG_LEVEL", "WARNING").upper()

        # PokeAPI
        self.pokeapi_base_url: str = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/")
        self.http_timeout_seconds: float = float(os.getenv("GODEX_HTTP_TIMEOUT_SECONDS", "10"))

        # Response cache: one interval is both the max entry age and the sweep period
        self.cache_ttl_seconds: float = float(os.getenv("GODEX_CACHE_TTL_SECONDS", "300"))

        self.page_size: int = int(os.getenv("GODEX_PAGE_SIZE", "20"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return a list of settings that hold unusable values."""
        problems = []
        for var, attr in _POSITIVE_SETTINGS.items():
            if getattr(self, attr) <= 0:
                problems.append(f"{var} must be positive")
        return problems


_POSITIVE_SETTINGS = {
    "GODEX_CACHE_TTL_SECONDS": "cache_ttl_seconds",
    "GODEX_HTTP_TIMEOUT_SECONDS": "http_timeout_seconds",
    "GODEX_PAGE_SIZE": "page_size",
}

settings = Settings()
