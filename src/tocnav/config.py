"""Local configuration for tocnav."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_TOC_URL = "http://localhost:8000/api/toc"
DEFAULT_DATA_PATH = "HelpTOC.json"
DEFAULT_CACHE_DIR = ".tocnav_cache"
DEFAULT_CACHE_TTL_SECONDS = 5 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "tocnav/0.1"
DEFAULT_LOG_LEVEL = "WARNING"

TOCNAV_TOC_URL = os.getenv("TOCNAV_TOC_URL", DEFAULT_TOC_URL)
TOCNAV_DATA_PATH = Path(os.getenv("TOCNAV_DATA_PATH", DEFAULT_DATA_PATH)).expanduser()
# Local-only cache directory for fetched datasets.
TOCNAV_CACHE_PATH = Path(os.getenv("TOCNAV_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
TOCNAV_CACHE_TTL_SECONDS = int(os.getenv("TOCNAV_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
TOCNAV_FETCH_TIMEOUT_S = float(os.getenv("TOCNAV_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
TOCNAV_FETCH_MAX_RETRIES = int(os.getenv("TOCNAV_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
TOCNAV_FETCH_BACKOFF_S = float(os.getenv("TOCNAV_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
TOCNAV_USER_AGENT = os.getenv("TOCNAV_USER_AGENT", DEFAULT_USER_AGENT)
TOCNAV_LOG_LEVEL = os.getenv("TOCNAV_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
