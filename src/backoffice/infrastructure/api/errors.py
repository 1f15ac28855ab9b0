"""Mapping from the domain error taxonomy to JSON error responses.

Every error body has the shape ``{"message", "code", "details"?}``; only
validation failures carry ``details``.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backoffice.domain.exceptions import DomainException, InternalError, ValidationError

logger = structlog.get_logger(__name__)


def error_body(exc: DomainException) -> dict:
    body: dict = {"message": exc.message, "code": exc.code}
    if isinstance(exc, ValidationError):
        body["details"] = exc.details
    return body


def _describe(error: dict) -> str:
    # loc is e.g. ("body", "items", 0, "qty"); drop the request part.
    parts = [str(p) for p in error.get("loc", ())[1:]]
    field = ".".join(parts) if parts else "body"
    return f"{field}: {error.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
        if isinstance(exc, InternalError):
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                code=exc.code,
                error=exc.message,
            )
        return JSONResponse(status_code=exc.http_status, content=error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [_describe(e) for e in exc.errors()]
        return JSONResponse(
            status_code=400,
            content={"message": "VALIDATION_ERROR", "code": "VALIDATION_ERROR", "details": details},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unhandled_error",
            method=request.method,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"message": "INTERNAL_ERROR", "code": "INTERNAL_ERROR"},
        )
