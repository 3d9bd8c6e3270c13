"""Configuration management for the execution timer demo."""
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    """Application settings with environment variable fallbacks."""

    # Application settings
    APP_NAME: str = Field(default="Execution Timer Demo")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="text")

    # API settings
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8080)
    CORS_ALLOWED_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # Demo service settings
    ORDER_PROCESSING_DELAY_MS: int = Field(default=3000)  # simulated work

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

    @field_validator("ORDER_PROCESSING_DELAY_MS")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        if v < 0:
            raise ValueError("ORDER_PROCESSING_DELAY_MS must be >= 0")
        return v

# Create settings instance
settings = Settings()

def get_config() -> Settings:
    """Get the current configuration."""
    return settings

def update_config(**kwargs) -> None:
    """Update configuration settings."""
    for key, value in kwargs.items():
        if hasattr(settings, key):
            setattr(settings, key, value)
