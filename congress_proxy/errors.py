"""Exceptions raised by the proxy services."""

from __future__ import annotations

from typing import Sequence


class ProxyError(RuntimeError):
    """Base class for failures surfaced to proxy clients."""


class UpstreamError(ProxyError):
    """Raised when the ProPublica API cannot satisfy a request."""


class AggregationError(ProxyError):
    """Raised when any branch of a fan-out fetch fails.

    The message is taken from the first failing branch in request order and
    ``errors`` keeps every branch failure in that same order.
    """

    def __init__(self, errors: Sequence[BaseException]) -> None:
        if not errors:
            raise ValueError("AggregationError requires at least one error")
        super().__init__(str(errors[0]))
        self.errors = tuple(errors)
