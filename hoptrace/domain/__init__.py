"""Domain layer: hop record contract, target normalization, exceptions."""

from hoptrace.domain.exceptions import DomainError, EmptyTargetError
from hoptrace.domain.schemas import HOP_CHAIN, HopChain, HopRecord
from hoptrace.domain.target import normalize_target_url

__all__ = [
    "DomainError",
    "EmptyTargetError",
    "HOP_CHAIN",
    "HopChain",
    "HopRecord",
    "normalize_target_url",
]
