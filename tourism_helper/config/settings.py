"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass
class Config:
    """Application-wide configuration."""

    APP_TITLE: str = "Turizm Helper"

    # Backend data provider
    # Store in environment variable or .env file: TOURISM_API_URL
    API_BASE_URL: str = os.environ.get("TOURISM_API_URL", "http://localhost:8000").rstrip("/")
    API_PREFIX: str = "/api"

    # Connection pool size for the shared aiohttp session
    CONNECTION_LIMIT: int = 8

    # Country shown before the user picks one
    DEFAULT_COUNTRY: str = os.environ.get("TOURISM_DEFAULT_COUNTRY", "TR")

    # Speech parameters (relative to the voice's normal rate/pitch)
    SPEECH_RATE: float = 0.8
    SPEECH_PITCH: float = 1.0

    # Theme preference
    THEME_KEY: str = "theme"
    DEFAULT_THEME: str = "dark"

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of tourism_helper/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()

    MEDIA_DIR: str = str(BASE_DIR / "media")
    SETTINGS_FILE: str = str(BASE_DIR / "data" / "settings.json")
