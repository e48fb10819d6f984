"""
FastAPI application entry point.
Mount routes, middleware, metrics and error handlers.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from thingful import __version__
from thingful.api.router import api_router
from thingful.config import get_settings
from thingful.core.errors import register_exception_handlers
from thingful.core.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Thingful user registration API.",
        version=__version__,
    )

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    logger.debug("Application %s created", settings.app_name)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run("thingful.main:app", host=settings.host, port=settings.port, log_config=None)
