"""
Application Settings
Load from environment variables
"""

from decimal import Decimal
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # ======================
    # Reference data
    # ======================
    CONFIG_DIR: Path = Path(__file__).resolve().parents[2] / "config"

    # ======================
    # Risk limits
    # ======================
    MAX_POSITION_LOTS: Decimal = Decimal("2")
    MIN_POSITION_LOTS: Decimal = Decimal("0.01")
    CUSTOM_PIP_VALUE_MIN: Decimal = Decimal("0.10")
    CUSTOM_PIP_VALUE_MAX: Decimal = Decimal("100.00")

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
