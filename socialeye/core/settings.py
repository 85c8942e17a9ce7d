"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps host/port, CORS and the Gemini expansion backend tunable without code changes.
"""

from typing import List, Optional
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")

    # CORS
    cors_allow_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:9002"],
        description="Allowed origins for browser apps"
    )

    # ---- AI query expansion (Gemini) ----
    # Comes from env (.env or shell): GOOGLE_API_KEY. Absent key = expansion skipped.
    google_api_key: Optional[str] = None
    gemini_model: str = Field(default="gemini-2.0-flash")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_timeout_seconds: float = Field(default=20.0)

    # ---- Logging ----
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)    # false -> human-readable console lines

    def resolved_google_api_key(self) -> Optional[str]:
        """Settings value first, then the raw process env (both spellings)."""
        key = self.google_api_key or os.getenv("GOOGLE_API_KEY") or os.getenv("google_api_key")
        return key.strip() if key and key.strip() else None

    @property
    def ai_expansion_available(self) -> bool:
        return self.resolved_google_api_key() is not None

settings = Settings()
