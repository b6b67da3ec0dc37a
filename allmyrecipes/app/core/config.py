import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124 Safari/537.36",
        alias="SCRAPER_USER_AGENT",
    )
    scraper_cookies: str | None = Field(None, alias="SCRAPER_COOKIES")
    fetch_timeout_seconds: float = Field(15.0, alias="FETCH_TIMEOUT_SECONDS")
    fetch_connect_timeout_seconds: float = Field(5.0, alias="FETCH_CONNECT_TIMEOUT_SECONDS")
    html_max_items: int = Field(200, alias="HTML_MAX_ITEMS")
    ocr_language: str = Field("eng", alias="OCR_LANGUAGE")
    ocr_max_images: int = Field(8, alias="OCR_MAX_IMAGES")
    ocr_max_image_bytes: int = Field(10 * 1024 * 1024, alias="OCR_MAX_IMAGE_BYTES")
    ocr_max_side: int = Field(2000, alias="OCR_MAX_SIDE")
    cors_allow_origins: str = Field("*", alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
