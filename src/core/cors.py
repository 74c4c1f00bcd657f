"""
CORS header set attached to every response the relay emits.
"""

from collections.abc import Iterable
from types import MappingProxyType

CORS_HEADERS = MappingProxyType(
    {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "*",
        "Vary": "Origin",
    }
)


def cors_headers() -> dict[str, str]:
    """Return a fresh, mutable copy of the CORS header set."""
    return dict(CORS_HEADERS)


def merge_cors(headers: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    """
    Copy a header list and overwrite any CORS header it already carries.

    Names are compared case-insensitively. Repeated headers that do not
    collide (e.g. several ``set-cookie`` lines) are kept in order.
    """
    overridden = {name.lower() for name in CORS_HEADERS}
    merged = [(name, value) for name, value in headers if name.lower() not in overridden]
    merged.extend(CORS_HEADERS.items())
    return merged
