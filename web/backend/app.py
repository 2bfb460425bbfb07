#!/usr/bin/env python3
"""
Job Assistant API - FastAPI Application

Chat assistant and resume match scoring for the job dashboard, with
automatic API documentation.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:3001/docs - API Documentation (Swagger UI)
    - http://localhost:3001/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException

from core.app_context import AppContext
from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import assistant_router, jobs_router
from .routers.assistant import add_rate_limit_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the application context at startup and close it at shutdown."""
    if getattr(app.state, "context", None) is None:
        app.state.context = AppContext.build(get_config())
        logger.info("Application context built")
    try:
        yield
    finally:
        app.state.context.close()


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        context: Pre-built application context; built from config at startup if omitted.
    """
    app = FastAPI(
        title="Job Assistant API",
        description="Chat assistant and resume match scoring for the job dashboard",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.context = context

    # Configure rate limiting
    add_rate_limit_handlers(app)

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(assistant_router)
    app.include_router(jobs_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "job-assistant"}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Job Assistant API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
