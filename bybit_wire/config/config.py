"""
Configuration management for the wire layer.
Loads settings from environment variables with sensible defaults.

Only the collaborators around the models (logging, response unwrapping) are
configurable. Field naming and enum tokens are fixed per model and never
read from configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PAYLOAD_PREVIEW_CHARS,
    ENV_LOG_DECODE_FAILURES,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    ENV_LOG_TO_FILE,
    ENV_PAYLOAD_PREVIEW_CHARS,
    VALID_LOG_LEVELS,
)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = DEFAULT_LOG_LEVEL
    log_dir: str = DEFAULT_LOG_DIR
    log_to_file: bool = False


@dataclass
class DecodeConfig:
    """
    How the response adapter reports payloads it could not decode.

    log_failures: emit a WARNING with the error and a payload preview
    payload_preview_chars: truncate the preview to this many characters
        (0 = no truncation)
    """
    log_failures: bool = True
    payload_preview_chars: int = DEFAULT_PAYLOAD_PREVIEW_CHARS


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables (and a .env file when
    present) and provides typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()
        self.decode = self._load_decode_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"{ENV_LOG_LEVEL}={level!r} is not one of {', '.join(VALID_LOG_LEVELS)}"
            )
        return LogConfig(
            level=level,
            log_dir=os.getenv(ENV_LOG_DIR, DEFAULT_LOG_DIR),
            log_to_file=_env_bool(ENV_LOG_TO_FILE, False),
        )

    def _load_decode_config(self) -> DecodeConfig:
        """Load response-decoding configuration from environment."""
        raw = os.getenv(ENV_PAYLOAD_PREVIEW_CHARS, str(DEFAULT_PAYLOAD_PREVIEW_CHARS))
        try:
            preview_chars = int(raw)
        except ValueError:
            raise ValueError(f"{ENV_PAYLOAD_PREVIEW_CHARS} must be an integer, got {raw!r}")
        if preview_chars < 0:
            raise ValueError(f"{ENV_PAYLOAD_PREVIEW_CHARS} must be >= 0, got {preview_chars}")
        return DecodeConfig(
            log_failures=_env_bool(ENV_LOG_DECODE_FAILURES, True),
            payload_preview_chars=preview_chars,
        )


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the global config so the next get_config() re-reads the environment."""
    Config._instance = None
