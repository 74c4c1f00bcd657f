import httpx
import structlog
from fastapi import Response

from src.core.constants import UPSTREAM_REQUEST_HEADERS
from src.core.cors import merge_cors
from src.core.errors import UpstreamFetchError
from src.core.utils.logging import log_operation

logger = structlog.get_logger(__name__)

# Framing headers stop being valid once httpx has decoded the body; content-length is recomputed.
# date and server are set by the ASGI server itself.
_DROPPED_HEADERS = frozenset(
    {"content-encoding", "content-length", "transfer-encoding", "connection", "date", "server"}
)


def build_passthrough_response(upstream: httpx.Response) -> Response:
    """
    Rebuild an upstream response for the caller.

    Status and body are kept as-is. Headers are a fresh copy of the
    upstream ones with the CORS set laid over them; the upstream response
    object itself is never modified.
    """
    upstream_headers = [
        (name, value) for name, value in upstream.headers.multi_items() if name.lower() not in _DROPPED_HEADERS
    ]

    response = Response(content=upstream.content, status_code=upstream.status_code)
    for name, value in merge_cors(upstream_headers):
        response.headers.append(name, value)
    return response


class YahooFinanceClient:
    """
    Forwards allow-listed GET requests to Yahoo Finance.

    A fresh ``httpx.AsyncClient`` is opened per call, so concurrent
    requests share no connection state. Only the fixed outbound headers
    are sent; nothing from the caller's request is forwarded. There is no
    retry and the httpx default timeout applies.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def fetch(self, target_url: str) -> httpx.Response:
        """GET ``target_url``. Any exception raised by the call is wrapped in UpstreamFetchError."""
        async with log_operation("upstream_fetch", target_url=target_url):
            try:
                async with httpx.AsyncClient(transport=self._transport) as client:
                    response = await client.get(target_url, headers=UPSTREAM_REQUEST_HEADERS)
            except Exception as e:
                raise UpstreamFetchError(target_url, e) from e

        if response.is_error:
            # Not an error for the relay; passed through untouched.
            logger.info("Upstream returned error status", target_url=target_url, status_code=response.status_code)
        return response

    async def forward(self, target_url: str) -> Response:
        """Fetch ``target_url`` and return the upstream response with CORS headers attached."""
        upstream = await self.fetch(target_url)
        return build_passthrough_response(upstream)


# Global instance
yahoo_client = YahooFinanceClient()
