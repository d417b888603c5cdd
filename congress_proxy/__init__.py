"""Congress proxy package: caching JSON:API front end for the ProPublica Congress API."""

from .config import CACHE_TTL_SECONDS, PROPUBLICA_API_BASE_URL
from .errors import AggregationError, ProxyError, UpstreamError

__all__ = [
    "CACHE_TTL_SECONDS",
    "PROPUBLICA_API_BASE_URL",
    "AggregationError",
    "ProxyError",
    "UpstreamError",
]
