from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JYOTISH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # ─── App ──────────────────────────────
    APP_NAME: str = "Jyotish Engine API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # ─── Chart ────────────────────────────
    ASPECT_ORB: float = 0.0     # degrees; 0 = exact separations only
    TRANSIT_ORB: float = 10.0   # degrees


@lru_cache
def get_settings() -> Settings:
    return Settings()
