"""Pydantic schemas for the hop-chain protocol."""

from hoptrace.domain.schemas.hop import (
    HOP_CHAIN,
    HeaderMap,
    HopChain,
    HopRecord,
    dump_chain,
    format_timestamp,
    utc_timestamp,
)

__all__ = [
    "HOP_CHAIN",
    "HeaderMap",
    "HopChain",
    "HopRecord",
    "dump_chain",
    "format_timestamp",
    "utc_timestamp",
]
