"""Build the HopRecord describing this responder's handling of the current request."""

import socket

from starlette.requests import Request

from hoptrace.config.settings import AppSettings
from hoptrace.domain.schemas.hop import HeaderMap, HopRecord, utc_timestamp

FORWARDED_FOR_HEADER = "x-forwarded-for"
FORWARDED_PROTO_HEADER = "x-forwarded-proto"
_TLS_SCHEMES = frozenset({"https", "wss"})


def canonical_header_name(name: str) -> str:
    """MIME-canonical form: x-forwarded-for -> X-Forwarded-For."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def copy_headers(raw_headers: list[tuple[bytes, bytes]]) -> HeaderMap:
    """Group raw ASGI headers by canonical name, values in arrival order."""
    grouped: dict[str, list[str]] = {}
    for raw_name, raw_value in raw_headers:
        name = canonical_header_name(raw_name.decode("latin-1"))
        grouped.setdefault(name, []).append(raw_value.decode("latin-1"))
    return {name: tuple(values) for name, values in grouped.items()}


def format_address(address: tuple | list | None) -> str:
    """host:port for an ASGI (host, port) pair; IPv6 hosts are bracketed."""
    if not address:
        return ""
    host, port = address[0], address[1] if len(address) > 1 else None
    if port is None:
        return str(host)
    if ":" in str(host):
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def resolve_source(request: Request) -> str:
    forwarded = request.headers.get(FORWARDED_FOR_HEADER)
    if forwarded:
        return forwarded.split(",", 1)[0].strip()
    client = request.scope.get("client")
    if not client:
        return ""
    return str(client[0])


def resolve_destination(request: Request) -> str:
    return format_address(request.scope.get("server"))


def detect_scheme(request: Request) -> str:
    if request.scope.get("scheme") in _TLS_SCHEMES:
        return "https"
    proto = request.headers.get(FORWARDED_PROTO_HEADER)
    if proto:
        return proto.lower()
    return "http"


def full_request_url(request: Request) -> str:
    """Rebuild the URL as seen here; upstream rewrites are invisible to this responder."""
    host = request.headers.get("host") or resolve_destination(request)
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.scope.get("path", "/")
    query = request.scope.get("query_string", b"")
    if query:
        path = f"{path}?{query.decode('latin-1')}"
    return f"{detect_scheme(request)}://{host}{path}"


def local_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def build_self_hop(request: Request, settings: AppSettings) -> HopRecord:
    """Capture this hop. Never raises; undeterminable fields are empty strings."""
    return HopRecord(
        node_name=settings.node_name,
        pod_name=settings.pod_name,
        hostname=local_hostname(),
        request_source_ip=resolve_source(request),
        request_destination_ip=resolve_destination(request),
        request_url=full_request_url(request),
        incoming_headers=copy_headers(request.scope.get("headers", [])),
        ts=utc_timestamp(),
    )
