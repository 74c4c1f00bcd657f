"""
Logging configuration.
"""

from dataclasses import dataclass

VALID_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)8s %(message)s"

    @property
    def effective_level(self) -> str:
        """The configured level, or INFO when it is unknown. Config.validate() reports the bad value."""
        return self.level if self.level in VALID_LOG_LEVELS else "INFO"
