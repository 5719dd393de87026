"""Configuration via environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings

from wellnest.data.schemas import TrendWindow


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    # Store
    data_path: Path = Path("data/wellnest.json")

    # Locale
    timezone: str = "UTC"

    # Mood trends
    trend_window: TrendWindow = TrendWindow.WEEK

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
