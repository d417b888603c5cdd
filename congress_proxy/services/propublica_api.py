"""ProPublica Congress API client performing the upstream round trips."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Tuple

import requests

from .. import config
from ..errors import UpstreamError
from ..metrics import AppMetrics, metrics as default_metrics
from ..models import Bill, Representative, Statement, UpcomingBill


log = logging.getLogger(__name__)

EXPECTED_STATUS = "OK"
NO_DATA_MESSAGE = "No data returned from ProPublica API"
BAD_STATUS_MESSAGE = "Bad status reported from ProPublica API: {status}"


class ProPublicaAPI:
    """Fetches and validates payloads from the ProPublica Congress API.

    Each ``get_*`` method performs exactly one HTTP request and either returns
    typed records or raises :class:`UpstreamError`. No caching happens here.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
        metrics: AppMetrics | None = None,
    ) -> None:
        self._api_key = config.PROPUBLICA_API_KEY if api_key is None else api_key
        self._base = (base_url or config.PROPUBLICA_API_BASE_URL).rstrip("/")
        self._session = session or requests.Session()
        self._timeout = config.UPSTREAM_TIMEOUT_SECONDS if timeout is None else timeout
        self._metrics = metrics or default_metrics

    def endpoint(self, *parts: Any) -> str:
        """Build the absolute ``.json`` URL for the given path segments."""

        path = "/".join(str(part).strip("/") for part in parts)
        return f"{self._base}/{path}.json"

    # ------------------------------------------------------------------
    # Query types

    def upcoming_bills_endpoint(self, chamber: str) -> str:
        return self.endpoint("bills", "upcoming", chamber)

    def get_upcoming_bills(self, chamber: str) -> Tuple[UpcomingBill, ...]:
        first = self._first_result(self.upcoming_bills_endpoint(chamber))
        return tuple(UpcomingBill.from_payload(item) for item in _records(first.get("bills")))

    def cosponsors_endpoint(self, congress: int, bill_id: str) -> str:
        return self.endpoint(congress, "bills", bill_id, "cosponsors")

    def get_bill_cosponsors(self, congress: int, bill_id: str) -> Tuple[Representative, ...]:
        first = self._first_result(self.cosponsors_endpoint(congress, bill_id))
        return tuple(Representative.from_payload(item) for item in _records(first.get("cosponsors")))

    def statements_endpoint(self, congress: int, bill_slug: str) -> str:
        return self.endpoint(congress, "bills", bill_slug, "statements")

    def get_bill_statements(self, congress: int, bill_slug: str) -> Tuple[Statement, ...]:
        # A bill without statements is a valid, empty answer.
        payload = self._validated(self.statements_endpoint(congress, bill_slug))
        return tuple(Statement.from_payload(item) for item in _records(payload.get("results")))

    def bill_endpoint(self, congress: int, bill_slug: str) -> str:
        return self.endpoint(congress, "bills", bill_slug)

    def get_bill(self, congress: int, bill_slug: str) -> Bill:
        return Bill.from_payload(self._first_result(self.bill_endpoint(congress, bill_slug)))

    # ------------------------------------------------------------------
    # Low-level helpers

    def _first_result(self, url: str) -> Dict[str, Any]:
        payload = self._validated(url)
        results = _records(payload.get("results"))
        if not results:
            raise UpstreamError(NO_DATA_MESSAGE)
        return results[0]

    def _validated(self, url: str) -> Dict[str, Any]:
        payload = self._request(url)
        status = payload.get("status")
        if status != EXPECTED_STATUS:
            raise UpstreamError(BAD_STATUS_MESSAGE.format(status=status))
        return payload

    def _request(self, url: str) -> Dict[str, Any]:
        log.info("Calling ProPublica API: %s", url)
        started = time.perf_counter()
        try:
            response = self._session.get(
                url,
                headers={"X-API-Key": self._api_key},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.JSONDecodeError as exc:
            log.warning("Failed decoding ProPublica response from %s: %s", url, exc)
            raise UpstreamError(f"Invalid JSON from ProPublica API: {exc}") from exc
        except requests.RequestException as exc:
            log.warning("ProPublica API request failed: %s", exc)
            raise UpstreamError(f"ProPublica API request failed: {exc}") from exc
        finally:
            self._metrics.add_upstream_call(time.perf_counter() - started)

        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected ProPublica payload type: {type(data).__name__}")
        log.debug("Results from ProPublica API: %s", data)
        return data


def _records(value: Any) -> List[Dict[str, Any]]:
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return []
