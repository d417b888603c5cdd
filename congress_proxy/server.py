"""FastAPI application exposing the cached ProPublica endpoints."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Tuple

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .errors import ProxyError
from .serializers import JSONAPI_MEDIA_TYPE, to_document
from .services.orchestrator import CongressOrchestrator


log = logging.getLogger(__name__)

_BILL_REFERENCE = re.compile(r"^(?P<bill>[A-Za-z0-9.]+)-(?P<congress>\d+)$")


class JSONAPIResponse(JSONResponse):
    media_type = JSONAPI_MEDIA_TYPE


def split_bill_reference(reference: str) -> Tuple[str, int]:
    """Split ``hr4249-115`` into ``("hr4249", 115)``."""

    match = _BILL_REFERENCE.match(reference)
    if match is None:
        raise HTTPException(status_code=400, detail=f"Malformed bill reference: {reference}")
    return match.group("bill"), int(match.group("congress"))


def create_app(orchestrator: CongressOrchestrator, public_directory: Path | None = None) -> FastAPI:
    app = FastAPI(
        title="congress-proxy",
        description="Caching JSON:API proxy for the ProPublica Congress API",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(ProxyError)
    async def _proxy_error_handler(_: Request, exc: ProxyError) -> PlainTextResponse:
        log.warning("Request failed: %s", exc)
        return PlainTextResponse(str(exc), status_code=500)

    # Handlers are sync so FastAPI runs them on its thread pool; the
    # orchestrator blocks on upstream I/O.

    @app.get("/congress/v1/legislation", response_class=JSONAPIResponse)
    def upcoming_legislation():
        """Upcoming bills from the house followed by the senate."""
        return JSONAPIResponse(to_document(orchestrator.all_upcoming_bills()))

    @app.get("/congress/v1/legislation/{bill_slug}", response_class=JSONAPIResponse)
    def legislation(bill_slug: str):
        bill, congress = split_bill_reference(bill_slug)
        return JSONAPIResponse(to_document(orchestrator.bill(congress, bill)))

    @app.get("/congress/v1/legislation/{bill_reference}/representatives", response_class=JSONAPIResponse)
    def legislation_cosponsors(bill_reference: str):
        bill_id, congress = split_bill_reference(bill_reference)
        return JSONAPIResponse(to_document(orchestrator.bill_cosponsors(congress, bill_id)))

    @app.get(
        "/congress/v1/congress/{congress}/legislation/{bill_slug}/statements",
        response_class=JSONAPIResponse,
    )
    def legislation_statements(congress: int, bill_slug: str):
        return JSONAPIResponse(to_document(orchestrator.bill_statements(congress, bill_slug)))

    if public_directory is not None:
        app.mount("/", StaticFiles(directory=str(public_directory), html=True), name="public")

    return app
