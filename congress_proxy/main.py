"""Entry point for the Congress proxy server."""

from __future__ import annotations

import logging
import time

import uvicorn

from congress_proxy import config
from congress_proxy.metrics import metrics
from congress_proxy.server import create_app
from congress_proxy.services import CongressOrchestrator, ProPublicaAPI, TTLCache


log = logging.getLogger(__name__)


def build_app():
    """Wire one cache, one upstream client and one orchestrator into the app."""

    cache: TTLCache = TTLCache()
    client = ProPublicaAPI(
        api_key=config.PROPUBLICA_API_KEY,
        base_url=config.PROPUBLICA_API_BASE_URL,
        timeout=config.UPSTREAM_TIMEOUT_SECONDS,
        metrics=metrics,
    )
    orchestrator = CongressOrchestrator(cache, client, ttl=config.CACHE_TTL_SECONDS, metrics=metrics)
    return create_app(orchestrator, public_directory=config.PUBLIC_DIRECTORY)


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not config.PROPUBLICA_API_KEY:
        log.warning("PROPUBLICA_API_KEY is not set; upstream requests will be rejected")

    app_start_time = time.time()
    log.info("starting Congress proxy on %s:%s", config.PROXY_HOST, config.PROXY_PORT)
    uvicorn.run(build_app(), host=config.PROXY_HOST, port=config.PROXY_PORT, log_level=config.LOG_LEVEL.lower())

    summary = metrics.snapshot()
    log.info("Total uptime: %.2f seconds.", time.time() - app_start_time)
    log.info(
        "  - Time spent on ProPublica API calls: %.2f seconds across %d call(s).",
        summary["upstream_api_time"],
        summary["upstream_calls"],
    )
    log.info("  - Cache hits: %d, misses: %d.", summary["cache_hits"], summary["cache_misses"])


if __name__ == "__main__":
    main()
