# hoptrace/api/routers/health.py

from fastapi import APIRouter

HEALTH_PATH = "/healthz"

# Every method the trace route answers; the health path must shadow all of them.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter()


@router.api_route(HEALTH_PATH, methods=ANY_METHOD)
async def health():
    """Liveness only. Never traces and never calls the downstream, whatever the method."""
    return {"status": "ok"}
