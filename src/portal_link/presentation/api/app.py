"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with uvicorn in factory mode:
    uvicorn portal_link.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from portal_link.application.factories import RepositoryFactory
from portal_link.infrastructure.persistence.memory import InMemoryRepositoryFactory
from portal_link.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
    create_engine,
    create_session_maker,
    create_tables,
)
from portal_link.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from portal_link.presentation.api.routers import (
    auth_router,
    portal_pages_router,
    public_pages_router,
)
from portal_link_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for portal_link modules and WARNING for noisy third-party libraries.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("portal_link").setLevel(log_level)
    logging.getLogger("portal_link_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "User",
        "description": """Sign-up and sign-in.

- Passwords are hashed with bcrypt
- Both endpoints return a signed bearer token (valid 24h by default)
""",
    },
    {
        "name": "Portal Pages",
        "description": """Manage your own portal pages.

**Links are replaced on update:** the `links` sent with a `PUT` become the
page's complete set. Links with a known `id` are updated, links without
one are created, and links that are not resent are deleted.
""",
    },
    {
        "name": "Public",
        "description": "Public lookup of portal pages by slug.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Portal Link API v%s...", API_VERSION)
    engine: Optional[AsyncEngine] = app.state.engine
    if engine is not None:
        await _init_database_schema(engine, app.state.settings)
    yield

    if engine is not None:
        logger.info("Shutting down Portal Link API...")
        await engine.dispose()
        logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine, settings: Settings) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine, settings.database_schema)
    except OSError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/user", tags=["User"])
    v1_router.include_router(
        portal_pages_router,
        prefix="/me/portal-pages",
        tags=["Portal Pages"],
    )
    v1_router.include_router(
        public_pages_router,
        prefix="/portal-pages",
        tags=["Public"],
    )

    return v1_router


def _build_repository_factory(
    settings: Settings,
) -> tuple[RepositoryFactory, Optional[AsyncEngine]]:
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage (data is lost on restart)")
        return InMemoryRepositoryFactory(), None

    engine = create_engine(settings)
    return SQLAlchemyRepositoryFactory(create_session_maker(engine)), engine


def create_app(
    settings: Optional[Settings] = None,
    repository_factory: Optional[RepositoryFactory] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    repository_factory
        Optional repository factory. When given, no database engine is
        created and ``storage_backend`` is ignored.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    engine: Optional[AsyncEngine] = None
    if repository_factory is None:
        repository_factory, engine = _build_repository_factory(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Link-in-bio pages: one public page with your links.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.repository_factory = repository_factory
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "user": f"{API_V1_PREFIX}/user",
                "my_portal_pages": f"{API_V1_PREFIX}/me/portal-pages",
                "portal_pages": f"{API_V1_PREFIX}/portal-pages",
            },
        }

    return app
