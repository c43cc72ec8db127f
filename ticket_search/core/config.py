"""
Application configuration — all settings loaded from environment variables.
"""

from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from .env / environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_parse_none_str="",
    )

    # ── Simulated search backend ────────────────────────
    SEARCH_DELAY_SECONDS: float = Field(default=1.5, ge=0)
    TICKET_CATALOG_PATH: str = "ticket_catalog.yaml"

    # ── Simulated summarizer ────────────────────────────
    SUMMARY_DELAY_SECONDS: float = Field(default=2.0, ge=0)
    SUMMARY_PREVIEW_CHARS: int = Field(default=80, ge=0)
    SUMMARY_MODEL_NAME: str = Field(
        default="gpt-4o-mini",
        description="Model named in the placeholder summary text",
    )

    # ── Sessions ────────────────────────────────────────
    MAX_SESSIONS: int = Field(
        default=1000,
        ge=1,
        description="Oldest sessions are discarded beyond this many",
    )

    # ── App ─────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000"

    # ── Derived helpers ─────────────────────────────────
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()


def load_ticket_catalog() -> dict:
    """Load the YAML ticket catalog override, if one exists."""
    path = Path(settings.TICKET_CATALOG_PATH)
    if not path.exists():
        return {}
    with path.open() as f:
        return yaml.safe_load(f) or {}
