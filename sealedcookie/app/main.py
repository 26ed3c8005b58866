"""FastAPI application bootstrap for sealedcookie."""
import logging
from typing import Optional

from fastapi import FastAPI

from .config import CookieSettings, build_session_cookie
from .infra.clock import Clock
from .routers import debug, session

logger = logging.getLogger(__name__)


def create_app(settings: Optional[CookieSettings] = None, clock: Optional[Clock] = None) -> FastAPI:
    """Build the app; bad or missing keys raise ConfigurationError here, not per request."""
    settings = settings or CookieSettings.from_env()
    app = FastAPI(title="sealedcookie API", version="0.1.0")
    app.state.session_cookie = build_session_cookie(settings, clock=clock)
    logger.info(
        "session cookie %r ready (valid for %ss, secure=%s)",
        settings.name,
        settings.valid_for_seconds,
        settings.secure,
    )

    app.include_router(session.router, prefix="/session", tags=["session"])
    app.include_router(debug.router, prefix="/debug", tags=["debug"])

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app
