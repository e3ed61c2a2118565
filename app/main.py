# =============================================================================
# File: main.py
# Description: FastAPI application entry point with startup configuration checks
# Author: Goutam Malakar
# Date: 2026-10-19
# Version: 1.0.0
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import signal
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import Response

from app.app_init import APP_LOGGER, APP_SETTINGS
from app.config.startup_validator import validate_startup_config
from app.logger import get_logger
from app.routers import health
from app.utils.log_sanitizer import sanitize_for_log

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager for startup and shutdown operations.

    Args:
        app (FastAPI): The FastAPI application instance

    Yields:
        None: Control back to the application during runtime
    """
    # Validate configuration before serving requests
    validate_startup_config(mode=APP_SETTINGS.app.mode)
    APP_LOGGER.success(f"{APP_SETTINGS.app.name} started with NODE_ENV={APP_SETTINGS.app.mode!r}")

    yield

    APP_LOGGER.info("Shutting down")


app = FastAPI(
    title="Env Guard API",
    description="Bootstrap helper that refuses to serve with unsafe configuration",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["Health"])


@app.get("/")
def root() -> dict:
    """Root endpoint for health check."""
    return {"message": f"{APP_SETTINGS.app.name} is running"}


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    """Return empty favicon to prevent 404 errors in browsers."""
    return Response(status_code=204)


def signal_handler(signum: int, frame) -> None:
    """
    Handle shutdown signals gracefully.

    Args:
        signum (int): Signal number received
        frame: Current stack frame (unused)
    """
    logger.info(
        f"Received signal {sanitize_for_log(signum)}, shutting down gracefully..."
    )
    sys.exit(0)


def run_server() -> None:
    """
    Start the FastAPI server with uvicorn.

    Validates configuration, registers signal handlers, and starts the server
    with appropriate settings based on environment.
    """
    # Validate configuration before starting server
    validate_startup_config(mode=APP_SETTINGS.app.mode)

    # Register signal handlers for graceful shutdown
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    logger.info(
        f"Starting server: uvicorn on {sanitize_for_log(APP_SETTINGS.server.host)}:{APP_SETTINGS.server.port}"
    )

    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=APP_SETTINGS.server.host,
        port=APP_SETTINGS.server.port,
        reload=APP_SETTINGS.app.is_development,
        log_level="debug" if APP_SETTINGS.app.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    try:
        run_server()
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
    except (OSError, PermissionError) as e:
        logger.error(f"Server startup error: {str(e)}")
        sys.exit(1)
    except Exception as e:
        logger.error("Fatal error:", exc_info=e)
        sys.exit(1)

# Run Instruction
# Set Env: export NODE_ENV=development
# Unit Test : python -m pytest
# Run for terminal: python -m app.main
