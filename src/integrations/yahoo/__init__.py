"""
Yahoo Finance API adapter.

This package forwards allow-listed requests to the Yahoo Finance API.
"""

from src.integrations.yahoo.client import YahooFinanceClient, build_passthrough_response, yahoo_client

__all__ = [
    "YahooFinanceClient",
    "build_passthrough_response",
    "yahoo_client",
]
