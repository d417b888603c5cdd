"""Cache-aside access to the ProPublica API plus the house/senate fan-out."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from .. import config
from ..errors import AggregationError
from ..metrics import AppMetrics, metrics as default_metrics
from ..models import Bill, Representative, Statement, UpcomingBill
from .cache import Seconds, TTLCache
from .propublica_api import ProPublicaAPI


log = logging.getLogger(__name__)

T = TypeVar("T")


class CongressOrchestrator:
    """Serves every query type through one shared :class:`TTLCache`.

    Cache keys are the upstream endpoint URLs, so each query type owns a
    distinct key space and a key always maps to one payload type. The cache
    itself is untyped (`TTLCache[Any]`); each accessor below is annotated with
    the payload type its key space holds, and only that accessor writes there.
    Sequence payloads are stored as tuples and copied into a fresh list on the
    way out.
    """

    def __init__(
        self,
        cache: TTLCache[Any],
        client: ProPublicaAPI,
        ttl: Seconds | None = None,
        metrics: AppMetrics | None = None,
    ) -> None:
        self._cache = cache
        self._client = client
        self._ttl = config.CACHE_TTL_SECONDS if ttl is None else ttl
        self._metrics = metrics or default_metrics

    def fetch_through(self, key: str, fetch: Callable[[], T], ttl: Optional[Seconds] = None) -> T:
        """Return the cached value for ``key`` or fetch, store and return it.

        Exceptions from ``fetch`` propagate untouched and leave the cache as it
        was. The lock is never held while ``fetch`` runs.
        """

        value, found = self._cache.get(key)
        if found:
            log.debug("Cache hit for %s", key)
            self._metrics.record_cache_hit()
            return value

        log.debug("Cache miss for %s", key)
        self._metrics.record_cache_miss()
        result = fetch()
        self._cache.set(key, result, self._ttl if ttl is None else ttl)
        return result

    # ------------------------------------------------------------------
    # Accessors

    def upcoming_bills(self, chamber: str) -> List[UpcomingBill]:
        key = self._client.upcoming_bills_endpoint(chamber)
        return list(self.fetch_through(key, lambda: self._client.get_upcoming_bills(chamber)))

    def bill_cosponsors(self, congress: int, bill_id: str) -> List[Representative]:
        key = self._client.cosponsors_endpoint(congress, bill_id)
        return list(self.fetch_through(key, lambda: self._client.get_bill_cosponsors(congress, bill_id)))

    def bill_statements(self, congress: int, bill_slug: str) -> List[Statement]:
        key = self._client.statements_endpoint(congress, bill_slug)
        return list(self.fetch_through(key, lambda: self._client.get_bill_statements(congress, bill_slug)))

    def bill(self, congress: int, bill_slug: str) -> Bill:
        key = self._client.bill_endpoint(congress, bill_slug)
        return self.fetch_through(key, lambda: self._client.get_bill(congress, bill_slug))

    def all_upcoming_bills(self, chambers: Sequence[str] = config.UPCOMING_CHAMBERS) -> List[UpcomingBill]:
        """Fetch every chamber concurrently and concatenate in ``chambers`` order.

        Both branches always run to completion. If any failed, an
        :class:`AggregationError` is raised whose message and cause come from
        the first failing chamber in ``chambers`` order.
        """

        if not chambers:
            return []

        with ThreadPoolExecutor(max_workers=len(chambers), thread_name_prefix="upcoming") as executor:
            futures = [executor.submit(self.upcoming_bills, chamber) for chamber in chambers]

        combined: List[UpcomingBill] = []
        errors: List[BaseException] = []
        for chamber, future in zip(chambers, futures):
            error = future.exception()
            if error is not None:
                log.warning("Upcoming bills fetch failed for %s: %s", chamber, error)
                errors.append(error)
                continue
            combined.extend(future.result())

        if errors:
            raise AggregationError(errors) from errors[0]
        return combined
