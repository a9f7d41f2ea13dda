"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from fabtrack.api.dependencies import get_db
from fabtrack.api.middleware import LoggingMiddleware, RequestIdMiddleware
from fabtrack.api.routes import router as api_router
from fabtrack.core.config import settings
from fabtrack.core.errors import UNAUTHORIZED_MESSAGE, AppError
from fabtrack.core.logging import configure_logging
from fabtrack.core.responses import app_error_response, error_response
from fabtrack.utils.health import check_database

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    from fabtrack.models.database import async_session_factory, close_db, init_db
    from fabtrack.services.auth import AuthService

    # Startup
    configure_logging(settings.log_level, settings.log_format)

    if settings.database.create_tables:
        await init_db()

    if settings.auth.seed_demo_users:
        async with async_session_factory() as session:
            await AuthService(session).seed_demo_users()
            await session.commit()

    logger.info(
        "app.startup",
        version=settings.app_version,
        environment=settings.environment,
    )

    yield

    # Shutdown
    await close_db()
    logger.info("app.shutdown")


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as ``{success: false, error}``."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("request.failed", path=request.url.path, error=exc.error)
        return app_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        field_errors: dict[str, list[str]] = {}
        for error in exc.errors():
            key = str(error["loc"][-1]) if error["loc"] else "body"
            field_errors.setdefault(key, []).append(error["msg"])
        return error_response(field_errors, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else UNAUTHORIZED_MESSAGE
        return error_response(message, exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler."""
        logger.exception("request.unhandled", path=request.url.path)
        return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Middleware (last added is outermost)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(api_router, prefix="/api")

    register_exception_handlers(app)

    # Health checks
    @app.get("/health")
    async def health_check():
        """Quick health check endpoint (for load balancers)."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    @app.get("/health/detailed")
    async def health_check_detailed(db: AsyncSession = Depends(get_db)):
        """Health check with database status; 503 when the database is down."""
        database = await check_database(db)
        return JSONResponse(
            content={
                "status": database.status,
                "version": settings.app_version,
                "environment": settings.environment,
                "components": {"database": database.to_dict()},
            },
            status_code=(
                status.HTTP_200_OK
                if database.available
                else status.HTTP_503_SERVICE_UNAVAILABLE
            ),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fabtrack.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers,
    )
