"""Response builders and application-wide exception handlers."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogapi.core.response.schemas import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def success_response(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Render the bare resource; fields the caller never set are left out."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(data, exclude_unset=True),
    )


def no_content_response() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=[ErrorDetail(**d) for d in details or []],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _field_name(loc) -> str:
    # ("body", "title") -> "title"; ("path", "item_id") -> "item_id"
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    return ".".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Turn request validation failures into 400 responses."""
    details = [
        {
            "field": _field_name(err.get("loc", ())),
            "code": str(err.get("type", "invalid")).upper(),
            "message": err.get("msg", "Invalid value"),
            "target": str(err["loc"][0]) if err.get("loc") else None,
        }
        for err in exc.errors()
    ]
    logger.warning(
        "Rejected %s %s: %s", request.method, request.url.path,
        ", ".join(d["field"] or d["message"] for d in details),
    )
    return error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=status.HTTP_400_BAD_REQUEST,
        details=details,
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
