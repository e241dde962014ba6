"""Downstream target normalization: turn a configured address into a callable URL."""

from hoptrace.domain.exceptions import EmptyTargetError

_EXPLICIT_SCHEMES = ("http://", "https://")
_TLS_PORT = "443"


def _port_of(host_port: str) -> str | None:
    """Port of a bare host:port, or None if it is not structurally host:port."""
    host, sep, port = host_port.rpartition(":")
    if not sep or ":" in host:
        return None
    return port


def normalize_target_url(raw: str) -> str:
    """
    Return an absolute URL for raw. Explicit http(s) URLs pass through unchanged.
    Schemeless targets get https only when the port is literally 443, else http.
    IPv6 literals ([...]) always get http.
    """
    if not raw or not raw.strip():
        raise EmptyTargetError()
    if raw.lower().startswith(_EXPLICIT_SCHEMES):
        return raw

    scheme = "http"
    host_port = raw.split("/", 1)[0]
    if ":" in host_port and not host_port.startswith("["):
        if _port_of(host_port) == _TLS_PORT:
            scheme = "https"
    return f"{scheme}://{raw}"
