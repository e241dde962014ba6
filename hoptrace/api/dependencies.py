"""FastAPI dependency injection: settings and trace service built once by create_app."""

from fastapi import Request

from hoptrace.application.trace_service import TraceService
from hoptrace.config.settings import AppSettings


def get_app_settings(request: Request) -> AppSettings:
    """Return the settings the running app was created with."""
    return request.app.state.settings


def get_trace_service(request: Request) -> TraceService:
    """Return the app-wide TraceService (stateless; safe to share across requests)."""
    return request.app.state.trace_service
