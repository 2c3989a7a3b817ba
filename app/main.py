"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and content)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Content facades over the SQL database and the media filesystem

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.application.content.content_facade import ContentFacade
from app.application.content.language_resolver import LanguageResolver
from app.application.content.store_facade import StoreFacade
from app.core.config import Settings, settings
from app.infrastructure.content.bootstrap import build_engine, init_content_schema
from app.infrastructure.content.filesystem_storage import FilesystemContentStorage
from app.infrastructure.content.sql_content_repository import SqlContentRepository
from app.infrastructure.content.sql_store_repository import SqlStoreRepository
from app.interfaces.content.router import router as content_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare schema, default store and media root."""
    cfg: Settings = app.state.settings
    Path(cfg.media_root).mkdir(parents=True, exist_ok=True)
    init_content_schema(
        app.state.engine,
        default_store_code=cfg.default_store_code,
        default_languages=cfg.default_store_languages,
    )
    logger.info("Content service ready (store=%s)", cfg.default_store_code)

    yield

    app.state.engine.dispose()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware, and
    builds the content facades. This is the composition root of the
    application.

    Args:
        app_settings: Settings override; the module-level settings
            are used when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    cfg = app_settings or settings
    configure_logging(level=cfg.log_level)

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.version,
        docs_url="/docs" if cfg.debug else None,
        redoc_url="/redoc" if cfg.debug else None,
        lifespan=lifespan,
    )

    # --- Content facades ---
    engine = build_engine(cfg.database_url)
    app.state.settings = cfg
    app.state.engine = engine
    app.state.content_facade = ContentFacade(
        content_repo=SqlContentRepository(engine),
        file_storage=FilesystemContentStorage(Path(cfg.media_root)),
        public_url_prefix=cfg.public_files_url,
    )
    app.state.store_facade = StoreFacade(SqlStoreRepository(engine))
    app.state.language_resolver = LanguageResolver()

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(cfg.rate_limit_default, cfg.rate_limit_enabled)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(content_router, prefix=API_PREFIX)

    return app


app = create_app()
