import logging

import uvicorn
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.errors import ErrorResponse, json_response, method_not_allowed
from src.api.relay import router as relay_router
from src.core.config import Config, config

# --- Application Setup ---


def configure_logging(cfg: Config) -> None:
    """Set up root logging. An unknown LOG_LEVEL falls back to INFO and is left for cfg.validate() to report."""
    logging.basicConfig(
        level=cfg.logging.effective_level,
        format=cfg.logging.format,
    )


configure_logging(config)

logger = logging.getLogger(__name__)

# Docs routes are disabled: every path belongs to the relay's allow-list logic.
app = FastAPI(
    title="Yahoo Finance CORS Relay",
    description="Allow-listed Yahoo Finance proxy with permissive CORS.",
    version="1.0.0",
    debug=config.debug,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# --- Error Handling ---


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Give framework-raised HTTP errors the relay's JSON body and CORS headers."""
    if exc.status_code == 405:
        logger.info(f"Rejected {request.method} {request.url.path}")
        return method_not_allowed()
    return json_response(ErrorResponse(error=str(exc.detail)), status_code=exc.status_code)


# --- Include Routers ---

app.include_router(relay_router)


def run() -> None:
    """Serve the relay with uvicorn on the configured host and port."""
    config.validate()
    logger.info(f"Yahoo Finance relay starting on {config.server.host}:{config.server.port} ({config.environment})")
    uvicorn.run(
        "src.main:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
