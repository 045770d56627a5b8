"""
Runtime configuration, read from the environment (and a ``.env`` file).

Environment variables:
    OPENAI_API_KEY / LLM_API_KEY -- live model credential (unset = scripted only)
    LLM_BASE_URL                 -- OpenAI-compatible API base URL
    LLM_MODEL                    -- model name
    MIRAE_LIVE_TIMEOUT           -- live call budget in seconds (default 5)
    MIRAE_LIVE_ENABLED           -- "0", "false", "no" or "off" disables live calls
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_LIVE_TIMEOUT = 5.0

_FALSE_VALUES = ("0", "false", "no", "off")


def load_dotenv() -> None:
    """Load .env file into os.environ (only vars not already set)."""
    for parent in [Path.cwd()] + list(Path(__file__).resolve().parents):
        env_path = parent / ".env"
        if env_path.exists():
            for line in env_path.read_text().splitlines():
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    key, value = line.split("=", 1)
                    key, value = key.strip(), value.strip()
                    if key and key not in os.environ:
                        os.environ[key] = value
            break  # only load the first .env found


def load_api_key() -> str:
    """First non-empty credential variable, or "" when none is set."""
    for env_var in ("OPENAI_API_KEY", "LLM_API_KEY"):
        key = os.environ.get(env_var, "").strip()
        if key:
            return key
    return ""


@dataclass
class Settings:
    """Engine settings that are not specific to the HTTP client."""
    live_timeout: float = DEFAULT_LIVE_TIMEOUT
    live_enabled: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        raw_timeout = os.environ.get("MIRAE_LIVE_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_LIVE_TIMEOUT
        except ValueError:
            logger.warning(f"[Settings] Ignoring invalid MIRAE_LIVE_TIMEOUT={raw_timeout!r}")
            timeout = DEFAULT_LIVE_TIMEOUT
        if timeout <= 0:
            timeout = DEFAULT_LIVE_TIMEOUT
        enabled = os.environ.get("MIRAE_LIVE_ENABLED", "1").strip().lower() not in _FALSE_VALUES
        return cls(live_timeout=timeout, live_enabled=enabled)
