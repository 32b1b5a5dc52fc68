"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, ge=1, le=65535)
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # ── Logging ───────────────────────────────
    LOG_JSON: bool = False

    # ── Validation ────────────────────────────
    # Where the business profile sits inside each endpoint's request body
    PROFILE_ROOT: str = "businessProfile"
    PRODUCT_PROFILE_ROOT: str = "businessProfile"
    # Optional JSON rule table; empty means the built-in table
    RULES_FILE: str = ""

    @property
    def LOG_LEVEL(self) -> str:
        return "DEBUG" if self.APP_ENV == "development" else "INFO"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
