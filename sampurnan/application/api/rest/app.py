import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sampurnan.application.api.v1.errors import map_error
from sampurnan.application.api.v1.routes import (
    admin_blog,
    admin_guestbook,
    admin_manuscripts,
    blog,
    folders,
    guestbook,
    health,
    highlights,
    manuscripts,
)
from sampurnan.application.di import create_container
from sampurnan.config import Config, configure_logging
from sampurnan.domain.shared.authorization.startup import validate_all_handlers
from sampurnan.domain.shared.error import SampurnanError
from sampurnan.infrastructure.persistence.migrate import run_migrations
from sampurnan.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)
    if not config.admin.token:
        logger.warning("No admin token configured: admin endpoints will reject every request")

    # Fail fast on handlers without an __auth__ declaration
    validate_all_handlers()

    if config.database.auto_migrate:
        run_migrations(config.database.url)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    if config.cors.allowed_origins:
        app_instance.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(manuscripts.router, prefix="/api/v1")
    app_instance.include_router(blog.router, prefix="/api/v1")
    app_instance.include_router(guestbook.router, prefix="/api/v1")
    app_instance.include_router(highlights.router, prefix="/api/v1")
    app_instance.include_router(folders.router, prefix="/api/v1")
    app_instance.include_router(admin_manuscripts.router, prefix="/api/v1")
    app_instance.include_router(admin_blog.router, prefix="/api/v1")
    app_instance.include_router(admin_guestbook.router, prefix="/api/v1")

    @app_instance.exception_handler(SampurnanError)
    async def sampurnan_error_handler(request: Request, exc: SampurnanError):
        http_exc = map_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
            headers=http_exc.headers,
        )

    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app_instance
