"""Process entry point: pick the address family, bind the listener, serve with uvicorn."""

import errno
import logging
import socket
import sys
from typing import Optional

import uvicorn

from hoptrace.config.logging import configure_logging
from hoptrace.config.settings import AppSettings, get_settings
from hoptrace.main import create_app

logger = logging.getLogger(__name__)

IP_MODE_IPV4 = "ipv4"
IP_MODE_IPV6 = "ipv6"
IP_MODE_DUAL = "dual"

_LISTEN_BACKLOG = 2048
_NO_IPV6 = (errno.EAFNOSUPPORT, errno.EADDRNOTAVAIL)


class ListenerBindError(OSError):
    """Raised when the listening socket cannot be created or bound. Fatal at startup."""


def resolve_ip_mode(ip_mode: Optional[str]) -> str:
    """ipv4 / ipv6 are recognized case-insensitively; anything else means dual-stack."""
    mode = (ip_mode or "").strip().lower()
    if mode in (IP_MODE_IPV4, IP_MODE_IPV6):
        return mode
    return IP_MODE_DUAL


def _bind(family: int, address: tuple, v6only: Optional[bool]) -> socket.socket:
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if v6only is not None:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, int(v6only))
        sock.bind(address)
        sock.listen(_LISTEN_BACKLOG)
    except OSError:
        sock.close()
        raise
    sock.setblocking(False)
    return sock


def _bind_dual_stack(port: int) -> socket.socket:
    if not socket.has_ipv6:
        return _bind(socket.AF_INET, ("0.0.0.0", port), None)
    try:
        return _bind(socket.AF_INET6, ("::", port), False)
    except OSError as e:
        # IPv6 compiled in but disabled on this host.
        if e.errno not in _NO_IPV6:
            raise
    return _bind(socket.AF_INET, ("0.0.0.0", port), None)


def select_listener(ip_mode: Optional[str], port: int) -> socket.socket:
    """
    Bind a listening socket for the requested family:
    ipv4 -> 0.0.0.0, ipv6 -> [::] v6-only, otherwise [::] accepting both
    (0.0.0.0 when the host has no IPv6).
    """
    mode = resolve_ip_mode(ip_mode)
    try:
        if mode == IP_MODE_IPV4:
            sock = _bind(socket.AF_INET, ("0.0.0.0", port), None)
        elif mode == IP_MODE_IPV6:
            sock = _bind(socket.AF_INET6, ("::", port), True)
        else:
            sock = _bind_dual_stack(port)
    except OSError as e:
        raise ListenerBindError(f"failed to start {mode} listener on port {port}: {e}") from e
    logger.info(
        "listener_bound",
        extra={"ip_mode": mode, "address": sock.getsockname()[0], "port": sock.getsockname()[1]},
    )
    return sock


def run(settings: Optional[AppSettings] = None) -> None:
    """Serve until shutdown. A bind failure exits the process with status 1."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    try:
        sock = select_listener(settings.ip_mode, settings.port)
    except ListenerBindError as e:
        logger.error("listener_bind_failed", extra={"error": str(e), "port": settings.port})
        sys.exit(1)

    config = uvicorn.Config(
        create_app(settings),
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    server.run(sockets=[sock])
