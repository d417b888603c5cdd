"""Centralised configuration for the Congress proxy."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# --- ProPublica Congress API -----------------------------------------------

PROPUBLICA_API_KEY = os.getenv("PROPUBLICA_API_KEY", "")
PROPUBLICA_API_BASE_URL = os.getenv(
    "PROPUBLICA_API_BASE_URL", "https://api.propublica.org/congress/v1"
).rstrip("/")
UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

# --- Cache -----------------------------------------------------------------

CACHE_TTL_SECONDS = float(os.getenv("CACHE_TTL_SECONDS", "86400"))  # 24 hours

# --- HTTP server -----------------------------------------------------------

PROXY_HOST = os.getenv("PROXY_HOST", "0.0.0.0")
PROXY_PORT = int(os.getenv("PROXY_PORT", "8080"))

_public_directory_env = os.getenv("PUBLIC_DIRECTORY")
PUBLIC_DIRECTORY = Path(_public_directory_env).resolve() if _public_directory_env else None

# --- Logging ---------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Chambers combined by the upcoming bills endpoint, in response order.
UPCOMING_CHAMBERS = ("house", "senate")
