"""Application settings.

Reads configuration from environment variables, loading a `.env` file at the
repository root first when one exists:
- HOLDED_API_KEY: Holded API key (required for a successful fetch)
- HOLDED_BASE_URL: Holded API root (optional)
- HOLDED_TIMEOUT_SECONDS: total request timeout (default 30)
- LOG_LEVEL: logging level name (default INFO)
- LOG_JSON: "true" for JSON log lines (default false)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from connectors.erp_base import ERPConfig
from connectors.holded.holded_client import DEFAULT_BASE_URL

env_path = Path(__file__).resolve().parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Process configuration for the dashboard."""
    holded_api_key: Optional[str] = None
    holded_base_url: str = DEFAULT_BASE_URL
    holded_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, INFO when the name is not recognized."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.INFO

    def erp_config(self) -> ERPConfig:
        """Build the connector configuration for Holded."""
        return ERPConfig(
            connector_type="holded",
            base_url=self.holded_base_url,
            api_key=self.holded_api_key,
            timeout_seconds=self.holded_timeout_seconds,
        )


def load_settings() -> Settings:
    """Read settings from the environment.

    A missing API key is not an error here; it surfaces as an
    authentication failure when contacts are fetched.

    Raises:
        ValueError: If HOLDED_TIMEOUT_SECONDS is not a number
    """
    timeout_raw = os.getenv("HOLDED_TIMEOUT_SECONDS", "30")
    try:
        timeout = float(timeout_raw)
    except ValueError:
        raise ValueError(
            f"HOLDED_TIMEOUT_SECONDS must be a number of seconds, got {timeout_raw!r}"
        )

    return Settings(
        holded_api_key=os.getenv("HOLDED_API_KEY") or None,
        holded_base_url=os.getenv("HOLDED_BASE_URL") or DEFAULT_BASE_URL,
        holded_timeout_seconds=timeout,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "").strip().lower() in _TRUE_VALUES,
    )
