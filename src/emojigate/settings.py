"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the emojigate command line.

    Values are read from ``EMOJIGATE_*`` environment variables and from a
    ``.env`` file in the working directory. Command line flags take
    precedence.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMOJIGATE_",
        extra="ignore",
    )

    log_level: str = "WARNING"
    workflows_dir: str = ".github/workflows"
    output_format: Literal["text", "json"] = "text"
