"""Hop record wire contract. Shared by the inbound trace route and the downstream client."""

import time
from datetime import datetime, timezone
from typing import Dict, List, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter

HeaderMap = Dict[str, Tuple[str, ...]]


def format_timestamp(ns: int) -> str:
    """Render epoch nanoseconds as UTC RFC 3339 with a fixed 9-digit fraction."""
    seconds, nanos = divmod(ns, 1_000_000_000)
    stamp = datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    return f"{stamp}.{nanos:09d}Z"


def utc_timestamp() -> str:
    return format_timestamp(time.time_ns())


class HopRecord(BaseModel):
    """
    One responder's view of a traced request. Frozen; header values are tuples so a
    captured record is independent of the live request it was built from.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    node_name: str
    pod_name: str
    hostname: str
    # Older responders emit *_addr; accept both, always emit *_ip.
    request_source_ip: str = Field(
        validation_alias=AliasChoices("request_source_ip", "request_source_addr"),
    )
    request_destination_ip: str = Field(
        validation_alias=AliasChoices("request_destination_ip", "request_destination_addr"),
    )
    request_url: str
    incoming_headers: HeaderMap
    ts: str


# Ordered farthest downstream first, self last.
HopChain = List[HopRecord]

HOP_CHAIN: TypeAdapter[HopChain] = TypeAdapter(HopChain)


def dump_chain(chain: HopChain) -> list:
    """JSON-ready representation of a chain, order preserved."""
    return HOP_CHAIN.dump_python(chain, mode="json")
