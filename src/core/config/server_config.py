"""
Server configuration.
"""

from dataclasses import dataclass


@dataclass
class ServerConfig:
    """Bind address for the bundled uvicorn runner."""

    host: str = "0.0.0.0"
    port: int = 8000
