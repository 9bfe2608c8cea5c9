"""
BileMo API

Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bilemo.config import settings
from bilemo.database import engine, AsyncSessionLocal
from bilemo.api.v1.router import router as api_router
from bilemo.core.exceptions import AppException, InternalException
from bilemo.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# LIFESPAN MANAGEMENT
# ═══════════════════════════════════════════════════════════════════════════════


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Startup: check the database connection, log configuration
    - Shutdown: dispose the engine
    """
    logger.info(
        "Starting up",
        app=settings.app_name,
        env=settings.app_env,
        debug=settings.debug,
        api_prefix=settings.api_prefix,
    )

    # Test database connection on startup
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
        logger.info("Database connection successful")
    except SQLAlchemyError as e:
        # Let the app start anyway so /health still answers
        logger.error("Database connection failed", error=str(e))

    yield

    logger.info("Shutting down, disposing DB engine")
    await engine.dispose()


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS
# ═══════════════════════════════════════════════════════════════════════════════


def error_body(status_code: int, message: str, **extra) -> dict:
    return {
        "success": False,
        "error": message,
        "status_code": status_code,
        **extra,
    }


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle custom application exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed or incomplete payloads as 400 with field details."""
        errors = []
        for error in exc.errors():
            # Build field path (e.g., "body.firstname")
            field_path = ".".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field_path,
                "message": error["msg"],
                "type": error["type"],
            })

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                status.HTTP_400_BAD_REQUEST,
                "Validation error",
                errors=errors,
            ),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        """Store failures surface as 500 without leaking SQL."""
        logger.error(
            "Database error",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        internal = InternalException()
        return JSONResponse(
            status_code=internal.status_code,
            content=error_body(internal.status_code, internal.detail),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=f"{type(exc).__name__}: {exc}",
            exc_info=True,
        )

        if settings.debug:
            import traceback
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    str(exc),
                    type=type(exc).__name__,
                    traceback=traceback.format_exc(),
                ),
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                InternalException().detail,
            ),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTER REGISTRATION
# ═══════════════════════════════════════════════════════════════════════════════


def register_routers(app: FastAPI) -> None:
    """Register all API routers."""

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health Check",
        description="Basic health check - returns OK if the application is running.",
        response_model=dict,
    )
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "environment": settings.app_env,
            "version": "1.0.0",
        }

    @app.get(
        "/ready",
        tags=["Health"],
        summary="Readiness Check",
        description="Checks if the application is ready to serve requests (including database).",
        response_model=dict,
    )
    async def readiness_check() -> dict:
        """
        Readiness check endpoint.

        Verifies the application can reach the database.
        """
        checks = {
            "database": "unknown",
        }

        try:
            async with AsyncSessionLocal() as session:
                await session.execute(text("SELECT 1"))
            checks["database"] = "connected"
        except SQLAlchemyError as e:
            checks["database"] = f"error: {str(e)}"

        all_healthy = all(state == "connected" for state in checks.values())

        return {
            "status": "ready" if all_healthy else "not_ready",
            "checks": checks,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API Root",
        description="Welcome endpoint with API information.",
    )
    async def root() -> dict:
        return {
            "message": f"Welcome to {settings.app_name}",
            "documentation": "/docs" if settings.debug else "Documentation disabled in production",
            "health": "/health",
            "ready": "/ready",
            "api": settings.api_prefix,
        }

    app.include_router(
        api_router,
        prefix=settings.api_prefix,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION FACTORY
# ═══════════════════════════════════════════════════════════════════════════════


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application instance with:
    - Metadata and documentation
    - CORS middleware
    - Exception handlers
    - Route registration

    Returns:
        Configured FastAPI application instance
    """
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="""
## BileMo API

Multi-tenant catalogue API. Every user and product belongs to exactly one
enterprise, addressed by its UUID.

### API Structure

- **`/api/enterprise`** - Enterprise creation, lookup and deletion
- **`/api/users`**, **`/api/user`** - Users of an enterprise
- **`/api/products`**, **`/api/product`** - Products of an enterprise
- **`/health`** - Health check
- **`/ready`** - Readiness check (includes DB)
        """,
        version="1.0.0",
        # Disable docs in production
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routers(app)

    return app


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION INSTANCE
# ═══════════════════════════════════════════════════════════════════════════════

app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bilemo.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        reload_dirs=["bilemo"] if settings.debug else None,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )
