"""Cart Client Configuration"""

from functools import lru_cache

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://pos-candy-kush.vercel.app/api"


class Settings(BaseSettings):
    """Client settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="POS_CART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cart API
    base_url: str = DEFAULT_BASE_URL

    # Timeouts in seconds
    connect_timeout: float = 10.0
    read_timeout: float = 10.0
    write_timeout: float = 10.0
    pool_timeout: float = 10.0

    # Monitor
    poll_interval: float = 2.0

    def timeout(self) -> httpx.Timeout:
        """Build the httpx timeout for cart API requests"""
        return httpx.Timeout(
            connect=self.connect_timeout,
            read=self.read_timeout,
            write=self.write_timeout,
            pool=self.pool_timeout,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
