# app/core/config.py

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from environment variables; the defaults below are enough
    # to run both applications and the test-suite locally.
    model_config = SettingsConfigDict(extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str = "local"

    # --- Database ---
    DATABASE_URL_LOCAL: str = "sqlite:///./conference_planner.db"
    DATABASE_URL_PROD: str = "sqlite:///./conference_planner.db"

    # --- Auth ---
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"

    # --- Front-end -> back-end API ---
    API_BASE_URL: str = "http://localhost:8000/api"
    API_TIMEOUT_SECONDS: float = 10.0

    # --- Sign-up gate ---
    # Paths an authenticated but not-yet-registered caller may still reach.
    SIGNUP_EXEMPT_PATHS: List[str] = ["/welcome", "/login", "/logout"]
    WELCOME_PATH: str = "/welcome"
    HOME_PATH: str = "/"

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # --- Dynamic Properties ---
    @property
    def DATABASE_URL(self) -> str:
        return (
            self.DATABASE_URL_LOCAL if self.ENV == "local" else self.DATABASE_URL_PROD
        )


# Create a single instance of the settings
settings = Settings()
