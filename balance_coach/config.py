"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    balance_coach_env: str = "development"
    balance_coach_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Coach feedback model
    model_feedback: str = "claude-haiku-4-5-20251001"
    feedback_max_tokens: int = 512

    # Default artboard for new sessions
    board_width: int = 800
    board_height: int = 600

    # In-memory board sessions kept before the oldest is evicted
    max_sessions: int = 256

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
