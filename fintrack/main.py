"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fintrack.config import settings
from fintrack.api.router import api_router
from fintrack.database import init_db
from fintrack.exceptions import (
    AuthorizationError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    logger.info(f"{settings.app_name} started")
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="Personal finance tracker with transaction listings and summaries",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(ValidationError)
def validation_error_handler(_: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.message, "field": exc.field})


@app.exception_handler(NotFoundError)
def not_found_handler(_: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": "Transaction not found"})


@app.exception_handler(AuthorizationError)
def authorization_error_handler(_: Request, exc: AuthorizationError):
    return JSONResponse(status_code=401, content={"detail": str(exc)})


@app.exception_handler(StoreUnavailableError)
def store_unavailable_handler(_: Request, exc: StoreUnavailableError):
    return JSONResponse(status_code=503, content={"detail": "Transaction store unavailable"})


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/api/v1/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app_name": settings.app_name
    }
