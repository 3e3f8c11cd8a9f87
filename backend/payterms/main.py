"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.api.v1.router import api_router
from payterms.core.config import settings
from payterms.core.exceptions import setup_exception_handlers
from payterms.core.logging import setup_logging
from payterms.core.observability import setup_observability
from payterms.db.session import get_db, init_db, close_db
from payterms.deps.di_container import Container
from payterms.schemas.health import HealthResponse
import payterms.deps.di_container as di_module


# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Initializes logging, the payment term store and the DI container.
    """
    # Startup
    setup_logging()
    setup_observability()

    await init_db()

    container = Container()
    container.config.from_dict({
        "database_url": settings.DATABASE_URL,
    })
    app.state.container = container
    di_module._container = container

    yield

    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Payment terms, due dates and early-settlement discounts for bills and invoices",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting middleware
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    # Root-level health endpoint for load balancers
    from payterms.api.v1.endpoints.health import get_health

    @app.get("/health", response_model=HealthResponse, include_in_schema=False)
    async def root_health(db: AsyncSession = Depends(get_db)):
        """Root-level health check endpoint."""
        return await get_health(db)

    setup_exception_handlers(app)

    return app


app = create_app()
