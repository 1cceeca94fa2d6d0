"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit, security headers, CORS)
4. Exception handlers mapping errors onto the response envelope
5. Startup/shutdown logging

Run with: uvicorn src.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from src.core.config import get_settings
from src.core.exceptions import BFHLException, InternalError, ValidationError
from src.core.logging_config import get_logger, setup_logging
from src.api.routes import bfhl_router, health_router
from src.models.envelope import NotFoundResponse


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir, settings.log_to_file)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the effective configuration on startup. There are no
    connections or resources to release on shutdown.
    """
    current = get_settings()
    logger.info(f"Starting {current.app_name} in {current.app_env} mode on port {current.port}")
    logger.info(f"Official Email: {current.official_email}")
    logger.info(f"Gemini API: {'Configured' if current.ai_enabled else 'NOT CONFIGURED'}")

    yield  # Application runs here

    logger.info(f"Shutting down {current.app_name}")


app = FastAPI(
    title="BFHL Operations API",
    description="""
    A single endpoint that runs one of five operations per request.

    ## Operations

    - **fibonacci**: first n Fibonacci numbers
    - **prime**: prime members of an array
    - **lcm**: lowest common multiple of an array
    - **hcf**: highest common factor of an array
    - **AI**: single-word answer to a question (Gemini, with a lookup fallback)
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

app.add_middleware(SecurityHeadersMiddleware)

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# Exception Handlers
# ============================================================

def _error_response(exc: BFHLException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(get_settings().official_email),
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    logger.info(f"Validation failed: {exc.message} ({exc.details or 'body'})")
    return _error_response(exc)


@app.exception_handler(BFHLException)
async def bfhl_exception_handler(request: Request, exc: BFHLException):
    """Handle all custom application exceptions."""
    if exc.status_code >= 500:
        logger.error(f"Request failed: {exc.message} {exc.details or ''}")
    return _error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handle routing errors.

    Unknown paths and unsupported methods on known paths both
    answer with the not-found envelope.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content=NotFoundResponse().model_dump(),
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "is_success": False,
            "official_email": get_settings().official_email,
            "error": str(exc.detail),
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Details are logged but never sent to the client.
    """
    logger.exception(f"Unhandled exception: {exc}")
    return _error_response(InternalError(details=str(exc)))


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(bfhl_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development()
    )
