"""Response bodies emitted by the relay itself, plus the JSON response helper."""

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.core.constants import JSON_MEDIA_TYPE
from src.core.cors import cors_headers


class ErrorResponse(BaseModel):
    """Error body. Optional fields are omitted from the JSON when unset."""

    error: str
    path: str | None = None
    message: str | None = None


class HealthResponse(BaseModel):
    ok: bool = True


def json_response(body: BaseModel, status_code: int = 200) -> JSONResponse:
    """Serialize a model as compact UTF-8 JSON with the CORS header set attached."""
    return JSONResponse(
        body.model_dump(exclude_none=True),
        status_code=status_code,
        headers=cors_headers(),
        media_type=JSON_MEDIA_TYPE,
    )


def method_not_allowed() -> JSONResponse:
    return json_response(ErrorResponse(error="Method Not Allowed"), status_code=405)


def unsupported_path(path: str) -> JSONResponse:
    return json_response(ErrorResponse(error="Unsupported path", path=path), status_code=400)


def upstream_fetch_failed(message: str) -> JSONResponse:
    return json_response(ErrorResponse(error="Upstream fetch failed", message=message), status_code=502)
