"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from authdemo.api import auth, pages
from authdemo.api.errors import register_error_handlers
from authdemo.config import get_settings
from authdemo.database import init_db
from authdemo.middleware import AccessGateMiddleware
from authdemo.services.tokens import get_token_service

settings = get_settings()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging(settings.log_level)
    init_db()
    logger.info(f"Starting in {settings.environment} mode")
    yield


app = FastAPI(
    title="Auth Demo API",
    description="Email/password registration, login and cookie sessions",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    AccessGateMiddleware,
    tokens=get_token_service(),
    cookie_name=settings.session_cookie_name,
)

register_error_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(pages.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
