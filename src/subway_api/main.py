"""FastAPI application entry point."""

import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import DataError, IntegrityError, OperationalError

from subway_api.config import settings
from subway_api.domain import (
    DisconnectedSectionError,
    DuplicateStationsError,
    IllegalChainStateError,
    InvalidDistanceError,
    InvalidPlacementError,
    InvalidSectionRemovalError,
    SameStationsError,
    SectionError,
    SectionRemovalTooShortError,
)
from subway_api.routes import lines_router, stations_router

logger = logging.getLogger(__name__)

# HTTP status for each section chain error
SECTION_ERROR_STATUS: dict[type[SectionError], int] = {
    DuplicateStationsError: status.HTTP_409_CONFLICT,
    SameStationsError: status.HTTP_409_CONFLICT,
    DisconnectedSectionError: status.HTTP_400_BAD_REQUEST,
    InvalidDistanceError: status.HTTP_400_BAD_REQUEST,
    InvalidPlacementError: status.HTTP_400_BAD_REQUEST,
    InvalidSectionRemovalError: status.HTTP_400_BAD_REQUEST,
    SectionRemovalTooShortError: status.HTTP_400_BAD_REQUEST,
    IllegalChainStateError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def setup_logging() -> None:
    """Configure logging for the API."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


setup_logging()

app = FastAPI(
    title="Subway API",
    description="Subway lines, stations, and the sections that connect them",
    version="0.1.0",
)

# CORS middleware - allow frontend origins
origins = list(settings.cors_origins)
if settings.frontend_url and settings.frontend_url not in origins:
    origins.append(settings.frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(stations_router)
app.include_router(lines_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "subway-api"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.exception_handler(SectionError)
async def section_error_handler(request: Request, exc: SectionError):
    """Handle section chain errors raised by the line aggregate.

    Rejected changes are client errors (400/409). A corrupted chain is a
    server fault (500).
    """
    status_code = SECTION_ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.error("Section chain fault on %s %s: %s", request.method, request.url, exc)
    else:
        logger.warning(
            "Section change rejected on %s %s: %s", request.method, request.url, exc
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Handle database integrity errors (unique constraint, foreign key violations).

    Returns 409 Conflict for constraint violations.
    """
    logger.warning(
        "Database integrity error on %s %s: %s", request.method, request.url, exc.orig
    )
    error_msg = str(exc.orig) if exc.orig else str(exc)

    if "foreign key" in error_msg.lower():
        detail = "Referenced resource does not exist"
    elif "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
        detail = "Resource already exists"
    else:
        detail = "Database constraint violation"

    return JSONResponse(
        status_code=409,
        content={"detail": detail, "error_type": "IntegrityError"},
    )


@app.exception_handler(OperationalError)
async def operational_error_handler(request: Request, exc: OperationalError):
    """Handle database operational errors (connection issues, timeouts).

    Returns 503 Service Unavailable for database connectivity issues.
    """
    logger.error(
        "Database operational error on %s %s", request.method, request.url, exc_info=exc
    )
    return JSONResponse(
        status_code=503,
        content={
            "detail": "Database temporarily unavailable",
            "error_type": "OperationalError",
        },
    )


@app.exception_handler(DataError)
async def data_error_handler(request: Request, exc: DataError):
    """Handle database data errors (invalid data types, out of range values).

    Returns 400 Bad Request for invalid data.
    """
    logger.warning("Database data error on %s %s: %s", request.method, request.url, exc.orig)
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Invalid data format for database field",
            "error_type": "DataError",
        },
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised outside request parsing."""
    logger.warning("Validation error on %s %s: %s", request.method, request.url, exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Data validation failed",
            "errors": exc.errors(),
            "error_type": "ValidationError",
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled errors and return a consistent JSON 500 response."""
    logger.error(
        "Unhandled exception on %s %s", request.method, request.url, exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )
