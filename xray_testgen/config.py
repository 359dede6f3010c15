"""
Configuration settings for the X-ray Test Case Generator
"""
from typing import Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


API_KEY_PLACEHOLDER = "your_openai_api_key_here"
API_KEY_PREFIX = "sk-"


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", extra="allow")

    # Application
    APP_NAME: str = "X-ray Test Case Generator"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    PROJECT_NAME: str = "X-ray Test Cases"

    # Remote model settings
    USE_AI: bool = True
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_MAX_TOKENS: int = 2000
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_TIMEOUT: Optional[float] = None  # seconds, None = transport default
    OPENAI_MAX_RETRIES: int = 0

    # Upload settings
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    ALLOWED_IMAGE_EXTENSIONS: Tuple[str, ...] = (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp")


settings = Settings()
