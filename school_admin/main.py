from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from school_admin.api.v1.router import api_router
from school_admin.config.settings import settings
from school_admin.core.error_handlers import register_exception_handlers
from school_admin.core.logging import configure_logging, get_logger
from school_admin.core.middleware import register_middlewares
from school_admin.db.init_db import init_db

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version and debug mode from Settings.
    - Registers CORS, core middleware and exception handlers.
    - Includes the versioned API router under /api/v1.
    """
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Credentials cannot be combined with a wildcard origin
    allow_any = not settings.CORS_ORIGINS or settings.CORS_ORIGINS == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_any else settings.CORS_ORIGINS,
        allow_credentials=not allow_any,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.on_event("startup")
    async def on_startup() -> None:
        # Schema creation for dev/demo; production databases are migrated separately
        if not settings.is_production():
            init_db()
        logger.info(
            f"{settings.APP_NAME} started",
            extra={"environment": settings.ENVIRONMENT, "timezone": settings.TIMEZONE},
        )

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "school_admin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_config=None,
    )


if __name__ == "__main__":
    run()
