"""Chain aggregation: capture self, optionally extend through the downstream, report partial failure."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional

from hoptrace.application.exceptions import DownstreamCallError, DownstreamError
from hoptrace.config.settings import AppSettings
from hoptrace.domain.exceptions import EmptyTargetError
from hoptrace.domain.schemas.hop import HopChain, HopRecord
from hoptrace.domain.target import normalize_target_url
from hoptrace.infrastructure.http.downstream_client import DownstreamClient


@dataclass(frozen=True)
class TraceResult:
    """Outcome of one trace. error is set only on the degraded path, where chain is [self]."""

    chain: HopChain
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None


class TraceService:
    """
    Application-layer orchestration only. No HTTP response building.
    Failure policy: a failed downstream is reported once, never retried, and the
    caller always keeps its own hop.
    """

    def __init__(
        self,
        settings: AppSettings,
        downstream: DownstreamClient,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings
        self._downstream = downstream
        self._logger = logger or logging.getLogger(__name__)

    async def _extend(self, target: str) -> HopChain:
        url = normalize_target_url(target)
        self._logger.info("downstream_call_started", extra={"target": url})
        try:
            return await asyncio.wait_for(
                self._downstream.fetch_chain(url),
                timeout=self._settings.trace_deadline_seconds,
            )
        except asyncio.TimeoutError as e:
            raise DownstreamCallError("deadline exceeded") from e

    async def trace(self, self_hop: HopRecord) -> TraceResult:
        """Return the chain ending in self_hop, or [self_hop] plus the failure description."""
        if not self._settings.has_downstream:
            self._logger.info("trace_terminus")
            return TraceResult(chain=[self_hop])

        target = self._settings.call_service
        started = time.monotonic()
        try:
            chain = await self._extend(target)
        except (EmptyTargetError, DownstreamError) as e:
            self._logger.warning(
                "downstream_call_failed",
                extra={
                    "target": target,
                    "error": e.message,
                    "duration_ms": round((time.monotonic() - started) * 1000, 3),
                },
            )
            return TraceResult(chain=[self_hop], error=e.message)

        self._logger.info(
            "downstream_call_succeeded",
            extra={
                "target": target,
                "hops": len(chain),
                "duration_ms": round((time.monotonic() - started) * 1000, 3),
            },
        )
        return TraceResult(chain=[*chain, self_hop])
