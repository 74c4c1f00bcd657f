# API endpoints package

from src.api.relay import get_upstream_client, router

__all__ = [
    "get_upstream_client",
    "router",
]
