"""
FastAPI application entry point for the Career Recommender backend.

This module creates the FastAPI app instance, configures CORS and error
handlers, and registers all routers.
"""

import logging
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from career_backend.config import settings
from career_backend.routes.health import router as health_router
from career_backend.routes.recommendations import router as recommendations_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

# Headers the web client sends with Supabase-authenticated calls
CORS_ALLOWED_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]
CORS_ALLOWED_METHODS = ["POST", "GET", "OPTIONS"]


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins.

    Pre-flight requests are answered permissively: any origin is allowed
    unless CORS_ALLOWED_ORIGINS narrows it to an explicit list.

    Returns:
        List of allowed origin URLs, or ["*"].
    """
    origins = settings.CORS_ALLOWED_ORIGINS
    if origins:
        logger.info(f"CORS configured with {len(origins)} allowed origins")
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


def _missing_user_id(errors: list) -> bool:
    for error in errors:
        if "userId" not in error.get("loc", ()):
            continue
        if error.get("type") in ("missing", "string_too_short", "value_error"):
            return True
        # userId: null
        if error.get("type") == "string_type" and error.get("input") is None:
            return True
    return False


# Create FastAPI app
app = FastAPI(
    title="Career Recommender API",
    description="Backend service generating AI career recommendations from resumes and quiz answers",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Map request validation errors onto the 400 error contract.

    Request bodies are not logged: they may carry resume-derived data.
    """
    errors = exc.errors()
    logger.error(
        f"Validation error on {request.method} {request.url.path}: "
        f"{[e.get('loc') for e in errors]}"
    )

    error = "Missing userId" if _missing_user_id(errors) else "invalid_request"
    details = "; ".join(
        f"{'.'.join(str(part) for part in e.get('loc', ()))}: {e.get('msg')}"
        for e in errors
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": error, "details": details}
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Flatten {"error", "details"} HTTPException payloads to the top level."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = {"error": str(exc.detail)}

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=CORS_ALLOWED_METHODS,
    allow_headers=CORS_ALLOWED_HEADERS,
)

# Register routers
app.include_router(health_router)
app.include_router(recommendations_router)

logger.info("FastAPI app initialized successfully")
