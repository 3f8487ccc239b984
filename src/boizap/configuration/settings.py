"""
Application settings and configuration.

Values come from environment variables (a .env file is loaded by the CLI
entry point before settings are built).
"""
import os
from dataclasses import dataclass, field
from typing import Optional


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        quote_api_url: Base URL of the market quote API; empty means no
            external provider (every valuation uses the fallback estimate
            unless a static quote is configured)
        quote_api_token: Bearer token for the quote API
        quote_timeout: HTTP timeout in seconds for one quote lookup
        log_level: Root logging level name
    """
    quote_api_url: str = field(default_factory=lambda: os.environ.get("BOIZAP_QUOTE_API_URL", ""))
    quote_api_token: Optional[str] = field(default_factory=lambda: os.environ.get("BOIZAP_QUOTE_API_TOKEN") or None)
    quote_timeout: float = field(default_factory=lambda: _env_float("BOIZAP_QUOTE_TIMEOUT", 10.0))
    log_level: str = field(default_factory=lambda: os.environ.get("BOIZAP_LOG_LEVEL", "WARNING"))

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls()


# Global settings instance
settings = Settings()


def reload_settings() -> Settings:
    """Re-read settings from the environment into the global instance"""
    fresh = Settings.from_env()
    settings.quote_api_url = fresh.quote_api_url
    settings.quote_api_token = fresh.quote_api_token
    settings.quote_timeout = fresh.quote_timeout
    settings.log_level = fresh.log_level
    return settings
