# hoptrace/main.py

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from hoptrace.api.middleware import AccessLogMiddleware, CorrelationIdMiddleware
from hoptrace.api.routers import health, trace
from hoptrace.application.trace_service import TraceService
from hoptrace.config.logging import configure_logging
from hoptrace.config.settings import AppSettings, get_settings
from hoptrace.infrastructure.http.downstream_client import DownstreamClient

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    downstream: Optional[DownstreamClient] = None,
) -> FastAPI:
    """Build the responder. Settings are read once here and threaded into the handlers."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.version)
    app.state.settings = settings
    app.state.trace_service = TraceService(
        settings=settings,
        downstream=downstream or DownstreamClient(settings.downstream_timeout_seconds),
    )

    # Middleware order: last added runs first (outermost). Request flow: CorrelationId -> AccessLog.
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request, exc: Exception):
        logger.error("unhandled_error", exc_info=exc, extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # Health first: the trace router is a catch-all.
    app.include_router(health.router)
    app.include_router(trace.router)
    return app
