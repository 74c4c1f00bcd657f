"""
Shared utilities.
"""

from src.core.utils.logging import log_operation

__all__ = [
    "log_operation",
]
