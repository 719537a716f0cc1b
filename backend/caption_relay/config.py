from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Caption provider
    TIMEDTEXT_URL: str = "https://video.google.com/timedtext"
    HTTP_TIMEOUT: float = 10.0

    # Query defaults
    DEFAULT_VIDEO_ID: str = "dL5oGKNlR6I"
    DEFAULT_LANG: str = "de"

    # System
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
