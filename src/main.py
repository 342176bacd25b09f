"""FastAPI application entry point."""

import logging
import logging.config

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from simplefin_rotki.api.routes import bridge, health, setup_page
from simplefin_rotki.core.config import settings
from simplefin_rotki.core.constants import BridgeConstants
from simplefin_rotki.core.exceptions import AppException, app_exception_handler
from simplefin_rotki.core.middleware import RequestLoggingMiddleware

# Configure logging
logging.config.dictConfig(settings.LOGGING_CONFIG)
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)

# Middleware is applied in reverse order, so this will be the outermost layer
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(setup_page.router, tags=["setup"])
app.include_router(bridge.router, prefix=BridgeConstants.TOKEN_PATH_PREFIX, tags=["simplefin"])


def run() -> None:
    """Serve the application with uvicorn."""
    logger.info(f"Listening on {settings.HOST}:{settings.PORT}, public URL {settings.PUBLIC_URL}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=settings.LOGGING_CONFIG,
    )


if __name__ == "__main__":
    run()
