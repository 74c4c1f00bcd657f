import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse

from src.api.allowlist import match_route
from src.api.errors import (
    HealthResponse,
    json_response,
    method_not_allowed,
    unsupported_path,
    upstream_fetch_failed,
)
from src.core.constants import HEALTH_PATHS, INFO_PATHS
from src.core.cors import cors_headers
from src.core.errors import UpstreamFetchError
from src.integrations.yahoo.client import YahooFinanceClient, yahoo_client
from src.presentation.info_page import render_info_page

logger = logging.getLogger(__name__)
router = APIRouter()

# Every method lands in the relay so the branch order below decides the response.
# Anything not listed hits the framework 405, which main.py rewrites to the same body.
RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_upstream_client() -> YahooFinanceClient:
    """Returns the shared YahooFinanceClient instance."""
    return yahoo_client


def _wire_path(request: Request) -> str:
    """The request path as sent by the client, percent-encoding intact and without the query."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        # Some ASGI transports include the query string in raw_path.
        return raw_path.decode("latin-1").split("?", 1)[0]
    return request.url.path


def _query_string(request: Request) -> str:
    return request.scope.get("query_string", b"").decode("latin-1")


@router.api_route("/{full_path:path}", methods=RELAY_METHODS, include_in_schema=False)
async def relay(
    request: Request,
    full_path: str,
    client: YahooFinanceClient = Depends(get_upstream_client),
) -> Response:
    """
    Single entry point for all inbound traffic.

    - OPTIONS on any path is answered as a CORS preflight.
    - Methods other than GET are rejected.
    - The usage page and health checks are answered locally.
    - Allow-listed paths are forwarded upstream; everything else is rejected.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=cors_headers())

    if request.method != "GET":
        logger.info(f"Rejected {request.method} {request.url.path}")
        return method_not_allowed()

    path = _wire_path(request)

    if path in INFO_PATHS:
        base_url = f"{request.url.scheme}://{request.url.netloc}"
        return HTMLResponse(render_info_page(base_url), headers=cors_headers())

    if path in HEALTH_PATHS:
        return json_response(HealthResponse())

    match = match_route(path, _query_string(request))
    if match is None:
        logger.info(f"Rejected unsupported path: {path}")
        return unsupported_path(path)

    logger.debug(f"Forwarding {match.route.name} request to {match.target_url}")
    try:
        return await client.forward(match.target_url)
    except UpstreamFetchError as e:
        return upstream_fetch_failed(str(e))
