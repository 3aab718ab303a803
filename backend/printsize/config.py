"""
PrintSize Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Environment variables:
    HOST, PORT          Bind address for the standalone server
    LOG_LEVEL           DEBUG, INFO, WARNING, ERROR, CRITICAL
    CORS_ORIGINS        Comma-separated allowed origins ("*" for any)
    MAX_FILE_SIZE       Upload limit in bytes
    REQUIRE_IMAGE_MIME  Reject parts whose declared type is not image/*
    MAX_IMAGE_PIXELS    Optional pixel-count ceiling for decoded headers
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that work for local development and for
    serverless deployments, where no .env file is present.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── CORS ──────────────────────────────────────────────────────────────
    # Responses are consumed by browser front-ends on arbitrary origins
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def cors_allow_origin(self) -> str:
        """Value for the Access-Control-Allow-Origin header on every response."""
        origins = self.cors_origins_list
        if not origins or "*" in origins:
            return "*"
        return origins[0]

    # ── Uploads ───────────────────────────────────────────────────────────
    # Default: 10MB = 10 * 1024 * 1024
    max_file_size: int = Field(default=10_485_760, ge=1_024, le=104_857_600)

    require_image_mime: bool = Field(default=True)

    # Pixel-count ceiling passed to Pillow's decompression-bomb check.
    # None disables it: only image headers are read, never pixel data.
    max_image_pixels: Optional[int] = Field(default=None, ge=1)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
