"""Demo configuration — env-driven via pydantic-settings.

Reads VIEWGUARD_* environment variables and an optional .env file.  The
defaults reproduce the canonical demonstration data.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DemoConfig(BaseSettings):
    """Inputs for both demonstrations plus logging verbosity.

    Examples
    --------
    Override via environment (list values are JSON)::

        export VIEWGUARD_LOG_LEVEL=DEBUG
        export VIEWGUARD_APPENDED_WORDS='["really", "fun"]'
        export VIEWGUARD_LATE_FRIEND="Ann Camilleri"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VIEWGUARD_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Unmodifiable view demo
    initial_words: list[str] = Field(default_factory=lambda: ["Java", "is"])
    appended_words: list[str] = Field(default_factory=lambda: ["the", "best"])

    # Builder mutation demo
    person_name: str = "Albert Attard"
    friends: list[str] = Field(default_factory=lambda: ["John White", "Mary Vella"])
    late_friend: str = "Joe Borg"


# Module-level singleton — import as `from viewguard.config import config`
config = DemoConfig()
