"""ComplianceIQ — GxP document validation service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
import redis.asyncio as aioredis
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from complianceiq.config import get_settings
from complianceiq.api.router import api_router
from complianceiq.services.document_service import DocumentService, DocumentValidationFailed
from complianceiq.services.document_store import DocumentStore
from complianceiq.validators import ProcessingFailureError

# Configure structured logging
_log_level = logging.getLevelName(get_settings().LOG_LEVEL.upper())

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if get_settings().DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        _log_level if isinstance(_log_level, int) else logging.INFO
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    # Initialize Redis
    try:
        app.state.redis = aioredis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            encoding="utf-8",
        )
        await app.state.redis.ping()
        logger.info("redis_connected", url=settings.REDIS_URL)
    except Exception as e:
        logger.error("redis_connection_failed", error=str(e))
        # App can still start, stateless validation keeps working
        app.state.redis = None

    # Initialize document records + upload pipeline
    app.state.document_service = DocumentService(DocumentStore(app.state.redis))

    logger.info("app_started")

    yield

    # ── Shutdown ──
    logger.info("app_shutting_down")

    if app.state.redis:
        await app.state.redis.close()
        logger.info("redis_disconnected")

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="ComplianceIQ",
    description=(
        "GxP document validation service. "
        "Scores SOP documents against structural, metadata and content rules "
        "and reports every violation found."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle invalid input, including InvalidInputError from the engine."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


@app.exception_handler(DocumentValidationFailed)
async def document_validation_failed_handler(request: Request, exc: DocumentValidationFailed):
    """Evaluation could not run. Distinct from a document with a low score."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "validation_failed",
            "document_id": exc.document_id,
            "message": str(exc),
        },
    )


@app.exception_handler(ProcessingFailureError)
async def processing_failure_handler(request: Request, exc: ProcessingFailureError):
    """Engine crashed on otherwise valid text. No partial result is returned."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "processing_failure",
            "validator": exc.validator,
            "message": str(exc),
        },
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "ComplianceIQ",
        "version": "1.0.0",
        "description": "GxP document validation service",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
