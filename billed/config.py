"""Application Configuration"""

from typing import Annotated, Any, List
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Billed"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # Remote bills API
    API_URL: str = "http://localhost:5678"
    API_TIMEOUT: float = 30.0

    # Receipts (comma-separated in the environment: "jpg,jpeg,png")
    ALLOWED_RECEIPT_EXTENSIONS: Annotated[List[str], NoDecode] = ["jpg", "jpeg", "png"]

    # New bill form
    DEFAULT_VAT_PCT: int = 20

    # Receipt preview (share of the modal width given to the image)
    PREVIEW_WIDTH_RATIO: float = 0.5

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("ALLOWED_RECEIPT_EXTENSIONS", mode="before")
    @classmethod
    def parse_extensions(cls, v: Any) -> List[str]:
        """Accept a comma-separated string or a list; normalise to bare lower-case extensions"""
        items = v.split(",") if isinstance(v, str) else v
        return [str(ext).strip().lstrip(".").lower() for ext in items if str(ext).strip()]


# Global settings instance
settings = Settings()
