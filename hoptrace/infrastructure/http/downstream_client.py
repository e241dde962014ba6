# hoptrace/infrastructure/http/downstream_client.py

import logging

import httpx
from pydantic import ValidationError

from hoptrace.application.exceptions import DownstreamCallError, DownstreamShapeError
from hoptrace.core.context import correlation_id_ctx
from hoptrace.domain.schemas.hop import HOP_CHAIN, HopChain

CORRELATION_HEADER = "X-Correlation-ID"

logger = logging.getLogger(__name__)


class DownstreamClient:
    """
    Calls another responder and decodes its hop chain. One AsyncClient per call so
    concurrent requests share nothing; connection and body are released on every path.
    """

    def __init__(
        self,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        correlation_id = correlation_id_ctx.get()
        if correlation_id:
            return {CORRELATION_HEADER: correlation_id}
        return {}

    async def fetch_chain(self, url: str) -> HopChain:
        """GET url and return its chain exactly as received. HTTP status is not inspected."""
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers=self._headers())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DownstreamCallError(e) from e

        try:
            chain = HOP_CHAIN.validate_json(response.content)
        except ValidationError as e:
            logger.debug(
                "downstream_shape_invalid",
                extra={"url": url, "status_code": response.status_code, "errors": e.error_count()},
            )
            raise DownstreamShapeError() from e
        return chain
