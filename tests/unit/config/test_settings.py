"""AppSettings: environment variable names, defaults, validation."""

import pytest
from pydantic import ValidationError

from hoptrace.config.settings import AppSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("NODE_NAME", "POD_NAME", "PORT", "IP_MODE", "CALL_SERVICE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = AppSettings(_env_file=None)
    assert s.node_name == ""
    assert s.pod_name == ""
    assert s.port == 8080
    assert s.ip_mode == ""
    assert s.call_service == ""
    assert s.downstream_timeout_seconds == 5.0
    assert s.trace_deadline_seconds == 6.0
    assert s.has_downstream is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("NODE_NAME", "worker-3")
    monkeypatch.setenv("POD_NAME", "hoptrace-7d9f")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("IP_MODE", "ipv6")
    monkeypatch.setenv("CALL_SERVICE", "backend:443")
    s = AppSettings(_env_file=None)
    assert s.node_name == "worker-3"
    assert s.pod_name == "hoptrace-7d9f"
    assert s.port == 9090
    assert s.ip_mode == "ipv6"
    assert s.call_service == "backend:443"
    assert s.has_downstream is True


def test_blank_call_service_has_no_downstream():
    assert AppSettings(_env_file=None, call_service="  ").has_downstream is False


def test_timeouts_must_be_positive():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, trace_deadline_seconds=0)


def test_invalid_port_rejected():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, port=70000)
