"""Configuration management for iptv-manager."""

from dataclasses import dataclass, field
from pathlib import Path

from iptv_manager.exceptions import ConfigurationError
from iptv_manager.storage.repository import STORAGE_KEY

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


def default_data_file() -> Path:
    """Location of the key-value file when none is configured."""
    return Path.home() / ".iptv_manager" / "storage.json"


@dataclass
class StorageConfig:
    """Local persistence configuration."""

    data_file: Path = field(default_factory=default_data_file)
    storage_key: str = STORAGE_KEY


@dataclass
class AssistantConfig:
    """Text-generation service configuration.

    Any OpenAI-compatible endpoint works; the default points at Gemini.
    """

    api_key: str | None = None
    base_url: str = GEMINI_OPENAI_BASE_URL
    model: str = "gemini-2.5-flash"
    temperature: float | None = None

    @property
    def is_configured(self) -> bool:
        """True when a non-blank API key is present."""
        return bool(self.api_key and self.api_key.strip())


@dataclass
class AppConfig:
    """Main configuration for iptv-manager."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    assistant: AssistantConfig = field(default_factory=AssistantConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        import os

        data_file = os.getenv("IPTV_DATA_FILE")
        storage = StorageConfig(
            data_file=Path(data_file).expanduser() if data_file else default_data_file(),
            storage_key=os.getenv("IPTV_STORAGE_KEY", STORAGE_KEY),
        )

        temperature = os.getenv("IPTV_AI_TEMPERATURE")
        try:
            parsed_temperature = float(temperature) if temperature else None
        except ValueError:
            raise ConfigurationError(f"IPTV_AI_TEMPERATURE must be a number, got {temperature!r}") from None

        assistant = AssistantConfig(
            api_key=os.getenv("IPTV_AI_API_KEY") or os.getenv("API_KEY"),
            base_url=os.getenv("IPTV_AI_BASE_URL", GEMINI_OPENAI_BASE_URL),
            model=os.getenv("IPTV_AI_MODEL", "gemini-2.5-flash"),
            temperature=parsed_temperature,
        )

        return cls(
            storage=storage,
            assistant=assistant,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
