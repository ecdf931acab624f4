"""
Error Handling Middleware

Maps domain exceptions and framework validation errors to JSON responses,
and turns anything unhandled into a generic 500 without leaking details.
"""

import logging
from typing import Callable, Dict, Any
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from sqlalchemy.exc import SQLAlchemyError

from ewaste_api.services.error_handler import (
    error_handler,
    ErrorCategory,
    ErrorSeverity,
    EwasteError,
)

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.AUTHENTICATION: 401,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.CONFLICT: 409,
    ErrorCategory.DATABASE: 500,
    ErrorCategory.SYSTEM: 500,
}


def _request_context(request: Request) -> Dict[str, Any]:
    return {
        "method": request.method,
        "url": str(request.url),
        "client_ip": request.client.host if request.client else None,
    }


def _error_response(status_code: int, message: str, report: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "category": report["category"],
            "error_id": report["error_id"],
        },
        headers={"X-Error-ID": report["error_id"]},
    )


async def ewaste_error_handler(request: Request, exc: EwasteError) -> JSONResponse:
    report = error_handler.handle_error(
        error=exc,
        category=exc.category,
        severity=exc.severity,
        context=_request_context(request),
        operation=f"{request.method} {request.url.path}",
    )
    return _error_response(STATUS_CODES.get(exc.category, 500), exc.message, report)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed body, form or path fields are a 400, not 422."""
    report = error_handler.handle_error(
        error=exc,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        context=_request_context(request),
        operation=f"{request.method} {request.url.path}",
    )
    missing = any(err.get("type") == "missing" for err in exc.errors())
    message = "All fields are required!" if missing else "Invalid input"
    return _error_response(400, message, report)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for handling unhandled exceptions."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            category = ErrorCategory.DATABASE if isinstance(e, SQLAlchemyError) else ErrorCategory.SYSTEM
            report = error_handler.handle_error(
                error=e,
                category=category,
                severity=ErrorSeverity.HIGH,
                context=_request_context(request),
                operation=f"{request.method} {request.url.path}",
            )
            return _error_response(500, "Internal Server Error", report)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EwasteError, ewaste_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_middleware(ErrorHandlingMiddleware)
