"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import profiles
from app.core.config import Settings, settings as default_settings
from app.core.logging import get_logger, setup_logging
from app.validation.service import build_services


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Rule tables and identifier policies are resolved here, once, so a bad
    RULES_FILE fails at startup instead of on the first request.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown lifecycle hooks."""
        setup_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
        logger = get_logger("startup")
        logger.info(
            "Application starting",
            env=settings.APP_ENV,
            policies=sorted(app.state.validation_services),
        )
        yield
        logger.info("Application shutting down")

    app = FastAPI(
        title="Business Profile Validation API",
        description="Field-path validation of nested business profile records",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.validation_services = build_services(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(profiles.router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Public health-check endpoint."""
        return {"status": "ok", "env": settings.APP_ENV}

    return app


app = create_app()
