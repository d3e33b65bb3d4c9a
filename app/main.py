"""
ContentOps API - FastAPI application entry point.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import IntegrityError

from .config import get_settings
from .database import engine, Base
from .exceptions import AppError
from .limiter import limiter
from .logging_config import api_logger, log_request
from .middleware import SecurityHeadersMiddleware
from .responses import app_error_handler, integrity_error_handler, unhandled_error_handler
from .routes import (
    users_router,
    content_router,
    approvals_router,
    calendar_router,
    workflows_router,
    analytics_router,
)
from . import models  # noqa: F401  registers tables on Base.metadata

settings = get_settings()

# Create tables (in production, use Alembic migrations instead)
Base.metadata.create_all(bind=engine)


app = FastAPI(
    title=settings.app_name,
    description="Content operations backend: drafting, review workflows, approval and scheduling",
    version="1.0.0",
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Error envelope
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(IntegrityError, integrity_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# Security headers middleware
app.add_middleware(SecurityHeadersMiddleware)

# Request logging middleware (only in debug mode)
if settings.debug:
    app.add_middleware(log_request(api_logger))

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    max_age=3600,
)

# Routes
app.include_router(users_router)
app.include_router(content_router)
app.include_router(approvals_router)
app.include_router(calendar_router)
app.include_router(workflows_router)
app.include_router(analytics_router)


@app.get("/api/health")
def health_check():
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "version": "1.0.0",
    }
