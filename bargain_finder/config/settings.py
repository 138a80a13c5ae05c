"""Application configuration settings for the bargain finder."""

from dataclasses import dataclass
from typing import List, Optional
import os


@dataclass
class RepliersConfig:
    """Listings provider configuration."""
    api_key: Optional[str] = None
    base_url: str = "https://api.repliers.io"
    province: str = "ON"
    status: str = "A"
    timeout_seconds: float = 30.0

    @property
    def api_key_configured(self) -> bool:
        """Whether a non-empty provider credential is present."""
        return bool(self.api_key)


@dataclass
class AppSettings:
    """Main application configuration settings."""
    log_level: str = "INFO"
    cors_allow_origins: List[str] = None
    repliers: RepliersConfig = None

    def __post_init__(self):
        """Initialize nested configs if not provided."""
        if self.cors_allow_origins is None:
            self.cors_allow_origins = ["*"]
        if self.repliers is None:
            self.repliers = RepliersConfig()

    @property
    def api_key_configured(self) -> bool:
        return self.repliers.api_key_configured


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_app_config() -> dict:
    """
    Read configuration values from the process environment.

    The environment is read on every call so that a ``.env`` file loaded at
    startup, or variables patched in tests, are always picked up.

    Returns:
        Nested dictionary of configuration values
    """
    return {
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        "cors_allow_origins": _split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        "repliers": {
            "api_key": os.getenv("REPLIERS_API_KEY") or None,
            "base_url": os.getenv("REPLIERS_BASE_URL", "https://api.repliers.io").rstrip("/"),
            "province": os.getenv("REPLIERS_PROVINCE", "ON"),
            "status": os.getenv("REPLIERS_STATUS", "A"),
            "timeout_seconds": float(os.getenv("REPLIERS_TIMEOUT_SECONDS", "30")),
        },
    }


# Configuration as read at import time
APP_CONFIG = load_app_config()


def get_settings() -> AppSettings:
    """Get application settings from the current environment."""
    config = load_app_config()
    return AppSettings(
        log_level=config["log_level"],
        cors_allow_origins=config["cors_allow_origins"],
        repliers=RepliersConfig(**config["repliers"]),
    )
