"""
Structured logging utilities.

Provides a context manager for timing an operation and logging its
outcome with metadata.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

logger = logging.getLogger(__name__)


@asynccontextmanager
async def log_operation(operation: str, **context: Any) -> Any:  # AsyncGenerator[None, None]
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.
    Exceptions are logged and re-raised unchanged.

    Args:
        operation: Name of the operation being performed
        **context: Additional context to include in logs

    Example:
        async with log_operation("upstream_fetch", target_url=url):
            response = await client.get(url)
    """
    start_time = time.monotonic()
    log_context = {"operation": operation, **context}

    logger.debug(f"Starting {operation}", extra=log_context)

    try:
        yield
    except Exception as e:
        latency_ms = int((time.monotonic() - start_time) * 1000)
        logger.warning(
            f"{operation} failed after {latency_ms}ms: {e!r}",
            extra={**log_context, "error": str(e), "latency_ms": latency_ms},
        )
        raise
    else:
        latency_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            f"{operation} completed in {latency_ms}ms",
            extra={**log_context, "latency_ms": latency_ms},
        )
