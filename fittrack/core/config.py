"""
Application configuration.
All values loaded from environment variables or a local .env file.
"""
import os
from pathlib import Path
from typing import List, Literal, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Storage
    DATA_DIR: str = os.path.join(Path.home(), ".fittrack")
    DATABASE_URL: Optional[str] = None  # Overrides the SQLite file under DATA_DIR

    # What to do when a persisted collection cannot be decoded:
    # "reset" treats it as empty, "raise" surfaces CorruptDataError
    CORRUPT_DATA_POLICY: Literal["reset", "raise"] = "reset"

    # Analytics windows
    FREQUENCY_WINDOW_DAYS: int = 30
    WEEKLY_ROLLUP_WEEKS: int = 8
    RECENT_WINDOW_DAYS: int = 7

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console

    def get_database_url(self) -> str:
        """SQLite URL of the durable key-value store."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        db_path = os.path.join(os.path.expanduser(self.DATA_DIR), "fittrack.db")
        return f"sqlite:///{db_path}"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
