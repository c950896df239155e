"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from clarity_compass.api.middleware import RequestIDMiddleware, MetricsMiddleware
from clarity_compass.api.v1 import advice, calculations, history
from clarity_compass.infrastructure.database.session import init_db
from clarity_compass.infrastructure.observability.logging import setup_logging
from clarity_compass.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the history table on startup"""
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Clarity Compass",
        description="Decision support: AI advice, financing calculators and weighted ranking",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculations.router, prefix="/v1", tags=["calculations"])
    app.include_router(advice.router, prefix="/v1", tags=["advice"])
    app.include_router(history.router, prefix="/v1", tags=["history"])

    return app


app = create_app()
