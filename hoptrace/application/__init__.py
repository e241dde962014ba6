# Application layer: services that orchestrate the domain and the downstream client.

from hoptrace.application.exceptions import (
    ApplicationError,
    DownstreamCallError,
    DownstreamError,
    DownstreamShapeError,
)

__all__ = [
    "ApplicationError",
    "DownstreamCallError",
    "DownstreamError",
    "DownstreamShapeError",
]
