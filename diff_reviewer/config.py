"""Runtime configuration for a review run."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from diff_reviewer.prompts import STRUCTURED_CRITIQUE_PROMPT

OPENAI_API_KEY_ENV_VAR = "OPENAI_API_KEY"
OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_REVIEW_MODEL = "gpt-3.5-turbo"


@dataclass(frozen=True, slots=True)
class ReviewConfig:
    """Model and prompt used for the review request."""

    model: str = DEFAULT_REVIEW_MODEL
    prompt_template: str = STRUCTURED_CRITIQUE_PROMPT
    api_url: str = OPENAI_CHAT_COMPLETIONS_URL


@dataclass(frozen=True, slots=True)
class Settings:
    """Process-wide settings, built once at startup and passed down explicitly."""

    api_key: str | None
    api_key_source: str | None = None
    review: ReviewConfig = field(default_factory=ReviewConfig)
    strict_stderr: bool = True


def load_settings(*, env_file: Path | None = None) -> Settings:
    """Load settings from a local .env file (if present) and the environment."""
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env", override=False)

    api_key = os.getenv(OPENAI_API_KEY_ENV_VAR)
    if api_key:
        return Settings(api_key=api_key, api_key_source=OPENAI_API_KEY_ENV_VAR)
    return Settings(api_key=None)
