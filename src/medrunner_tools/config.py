"""Configuration management for Medrunner Tools."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MEDRUNNER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Display labels
    lead_label: str = "You (Lead)"
    currency_label: str = "aUEC"

    # Saved ship assignments exported by the roster tool
    roster_path: Path = Path.home() / ".medrunner_tools" / "ship_assignments.json"


def load_settings() -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings()
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load settings. Check the MEDRUNNER_* variables in your "
            f"environment or .env file.\n"
            f"Error: {e}"
        ) from e
