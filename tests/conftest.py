"""Shared fixtures for the Congress proxy tests."""

from __future__ import annotations

import os
import sys
import threading
import time
from collections import Counter
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

# Ensure the application package is importable.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from congress_proxy.errors import UpstreamError
from congress_proxy.metrics import AppMetrics
from congress_proxy.models import Bill, Representative, Statement, UpcomingBill
from congress_proxy.services.cache import TTLCache
from congress_proxy.services.orchestrator import CongressOrchestrator
from congress_proxy.services.propublica_api import ProPublicaAPI


BASE_URL = "https://upstream.test/congress/v1"


class FakeClock:
    """Manually advanced clock for deterministic expiry checks."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def upcoming(chamber: str, *bill_ids: str) -> tuple:
    return tuple(
        UpcomingBill(
            bill_id=bill_id,
            description=f"Description of {bill_id}",
            bill_number=bill_id.split("-")[0].upper(),
            bill_slug=bill_id.split("-")[0],
            chamber=chamber,
            congress="115",
            bill_url=f"https://example.com/{bill_id}",
        )
        for bill_id in bill_ids
    )


class StubAPI(ProPublicaAPI):
    """Upstream double with real endpoint keys and scripted results.

    ``responses`` maps a method name (or ``(method, arg)``) to either a value
    or an exception instance, or a list of them consumed one per call.
    """

    def __init__(self, responses: Dict[Any, Any] | None = None, delays: Dict[str, float] | None = None) -> None:
        super().__init__(api_key="test-key", base_url=BASE_URL, session=MagicMock(), metrics=AppMetrics())
        self.responses = dict(responses or {})
        self.delays = dict(delays or {})
        self.calls: Counter = Counter()
        self.finished: List[str] = []
        self._lock = threading.Lock()

    def _respond(self, method: str, arg: Any) -> Any:
        with self._lock:
            self.calls[(method, arg)] += 1
        delay = self.delays.get(arg, 0.0)
        if delay:
            time.sleep(delay)
        scripted = self.responses.get((method, arg), self.responses.get(method))
        if isinstance(scripted, list):
            with self._lock:
                scripted = scripted.pop(0)
        with self._lock:
            self.finished.append(arg)
        if isinstance(scripted, BaseException):
            raise scripted
        if scripted is None:
            raise UpstreamError("No data returned from ProPublica API")
        return scripted

    def get_upcoming_bills(self, chamber: str) -> tuple:
        return self._respond("upcoming", chamber)

    def get_bill_cosponsors(self, congress: int, bill_id: str) -> tuple:
        return self._respond("cosponsors", bill_id)

    def get_bill_statements(self, congress: int, bill_slug: str) -> tuple:
        return self._respond("statements", bill_slug)

    def get_bill(self, congress: int, bill_slug: str) -> Bill:
        return self._respond("bill", bill_slug)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(clock=clock)


@pytest.fixture
def app_metrics() -> AppMetrics:
    return AppMetrics()


@pytest.fixture
def make_orchestrator(cache: TTLCache, app_metrics: AppMetrics):
    def _build(client: StubAPI, ttl: float = 3600) -> CongressOrchestrator:
        return CongressOrchestrator(cache, client, ttl=ttl, metrics=app_metrics)

    return _build


def representatives(*names: str) -> tuple:
    return tuple(
        Representative(cosponsor_id=f"X{idx:03d}", name=name, cosponsor_party="D", cosponsor_state="CA")
        for idx, name in enumerate(names)
    )


def statements(*titles: str) -> tuple:
    return tuple(
        Statement(url=f"https://example.com/statement/{idx}", title=title, type="Press Release", name="Jane Doe")
        for idx, title in enumerate(titles)
    )
