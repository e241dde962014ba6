"""Trace router: every path except the health check captures a hop and extends the chain."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from hoptrace.api.dependencies import get_app_settings, get_trace_service
from hoptrace.api.routers.health import ANY_METHOD
from hoptrace.application.self_descriptor import build_self_hop
from hoptrace.application.trace_service import TraceService
from hoptrace.config.settings import AppSettings
from hoptrace.domain.schemas.hop import HOP_CHAIN, dump_chain

router = APIRouter()


@router.api_route("/{path:path}", methods=ANY_METHOD)
async def trace(
    request: Request,
    settings: Annotated[AppSettings, Depends(get_app_settings)],
    trace_service: Annotated[TraceService, Depends(get_trace_service)],
):
    """200 with the hop chain, or 502 with the error and a chain holding only this hop."""
    self_hop = build_self_hop(request, settings)
    result = await trace_service.trace(self_hop)
    if result.degraded:
        return JSONResponse(
            status_code=502,
            content={"error": result.error, "chain": dump_chain(result.chain)},
        )
    return Response(content=HOP_CHAIN.dump_json(result.chain), media_type="application/json")
