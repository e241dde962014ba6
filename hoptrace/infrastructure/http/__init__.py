from hoptrace.infrastructure.http.downstream_client import DownstreamClient

__all__ = ["DownstreamClient"]
