"""Services backing the proxy: the TTL cache, the upstream client and the orchestrator."""

from .cache import TTLCache
from .propublica_api import ProPublicaAPI
from .orchestrator import CongressOrchestrator

__all__ = [
    "TTLCache",
    "ProPublicaAPI",
    "CongressOrchestrator",
]
