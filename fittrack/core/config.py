"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "FitTrack — training plans, gamification and nutrition targets."
    VERSION: str = "0.1.0"
    PROJECT_URL: str = "http://localhost:8000/docs"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "fittrack"

    # Full URL override (e.g. ``sqlite:///./fittrack.db`` for local runs)
    DATABASE_URL: Optional[str] = None

    # Planner
    DEFAULT_WORKOUTS_PER_WEEK: int = 4
    PLANNER_RANDOM_SEED: Optional[int] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def database_url(self) -> str:
        """Return ``DATABASE_URL`` if set, otherwise build the Postgres URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
