"""Shared fixtures: settings and hop record builders."""

import pytest

from hoptrace.config.settings import AppSettings
from hoptrace.domain.schemas.hop import HopRecord


def _hop(name: str, **overrides) -> HopRecord:
    fields = {
        "node_name": f"node-{name}",
        "pod_name": f"pod-{name}",
        "hostname": f"host-{name}",
        "request_source_ip": "10.0.0.1",
        "request_destination_ip": "10.0.0.2:8080",
        "request_url": f"http://{name}:8080/",
        "incoming_headers": {"Accept": ("*/*",)},
        "ts": "2024-01-01T00:00:00.000000000Z",
    }
    fields.update(overrides)
    return HopRecord(**fields)


@pytest.fixture
def make_hop():
    """Factory: make_hop("b") -> HopRecord with node-b / pod-b / host-b."""
    return _hop


@pytest.fixture
def make_settings():
    """Factory for AppSettings with explicit values; environment defaults otherwise."""

    def _make(**overrides) -> AppSettings:
        values = {"node_name": "node-a", "pod_name": "pod-a", "call_service": ""}
        values.update(overrides)
        return AppSettings(**values)

    return _make
