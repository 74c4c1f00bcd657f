"""
Main configuration class that composes all configs.
"""

import logging
import os

from dotenv import load_dotenv

from src.core.config.logging_config import VALID_LOG_LEVELS, LoggingConfig
from src.core.config.server_config import ServerConfig

# Load environment variables from a .env file
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.server = ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int_env("PORT", 8000),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            format=os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)8s %(message)s"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not 1 <= self.server.port <= 65535:
            errors.append(f"PORT must be between 1 and 65535, got {self.server.port}")

        if self.logging.level not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}, got {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
