"""
ContentOps API Response Utilities
Standardized error envelope and exception handlers
"""
from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from typing import Any, Dict, Optional
import traceback

from .exceptions import AppError
from .logging_config import api_logger
from .timeutils import utcnow


def _timestamp() -> str:
    return utcnow().isoformat().replace("+00:00", "Z")


def error_body(message: str, error_code: str, details: Optional[Dict[str, Any]] = None) -> Dict:
    """Build the error payload shared by every failure response"""
    return {
        "ok": False,
        "error": message,
        "error_code": error_code,
        "details": details,
        "timestamp": _timestamp(),
    }


# ============================================================
# EXCEPTION HANDLERS
# ============================================================

async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map domain errors raised by services to their HTTP status"""
    api_logger.warning(
        f"API Error: {exc.message}",
        status_code=exc.status_code,
        error_code=exc.error_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.error_code, exc.details),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Store constraint violations are passed through with the driver's message"""
    message = str(exc.orig) if exc.orig is not None else str(exc)
    api_logger.warning(
        f"Integrity Error: {message}",
        status_code=409,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=409,
        content=error_body(message, "CONFLICT"),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unexpected errors"""
    api_logger.error(
        f"Unexpected error: {exc}",
        error=exc,
        path=request.url.path,
        traceback=traceback.format_exc(),
    )
    return JSONResponse(
        status_code=500,
        content=error_body("An unexpected error occurred", "INTERNAL_ERROR"),
    )
