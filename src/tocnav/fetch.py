"""Fetch the raw TOC dataset over HTTP, with a local JSON cache."""

from __future__ import annotations

import asyncio
import hashlib
import logging
import time
from pathlib import Path
from typing import Final

import httpx

from tocnav.config import (
    TOCNAV_CACHE_PATH,
    TOCNAV_CACHE_TTL_SECONDS,
    TOCNAV_FETCH_BACKOFF_S,
    TOCNAV_FETCH_MAX_RETRIES,
    TOCNAV_FETCH_TIMEOUT_S,
    TOCNAV_USER_AGENT,
)
from tocnav.exceptions import FetchError, InvalidTOCDataError, TOCNotAvailableError
from tocnav.loader import parse_toc_data
from tocnav.schemas import TOCData

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_toc_data(
    url: str,
    *,
    use_cache: bool = True,
    client: httpx.AsyncClient | None = None,
) -> TOCData:
    """Fetch the TOC dataset, serving a fresh cached copy when there is one.

    Only payloads that validate as a dataset are written to the cache, so a
    cache hit never needs a second network round trip.

    Args:
        url: Endpoint serving the dataset as JSON.
        use_cache: Whether to use a cached copy younger than
            TOCNAV_CACHE_TTL_SECONDS. A TTL <= 0 keeps copies forever.
        client: Optional httpx.AsyncClient to reuse. If not provided, a new
            client is created for this call.

    Returns:
        The validated dataset.

    Raises:
        TOCNotAvailableError: If the endpoint returns 404.
        FetchError: If the endpoint keeps failing after retries, or answers
            with a non-retryable error status.
        InvalidTOCDataError: If the response is not JSON or not a dataset.
    """
    cache_path = cache_path_for(url)

    if use_cache:
        cached = await asyncio.to_thread(_read_fresh, cache_path, TOCNAV_CACHE_TTL_SECONDS)
        if cached is not None:
            logger.debug("Using cached TOC for %s from %s", url, cache_path)
            return parse_toc_data(cached)

    if client is not None:
        payload = await _download(url, client)
    else:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(TOCNAV_FETCH_TIMEOUT_S),
            headers={"User-Agent": TOCNAV_USER_AGENT, "Accept": "application/json"},
            follow_redirects=True,
            max_redirects=_MAX_REDIRECTS,
        ) as new_client:
            payload = await _download(url, new_client)

    data = parse_toc_data(payload)
    await asyncio.to_thread(_write_atomic, cache_path, payload)
    return data


def cache_path_for(url: str, base_path: Path | None = None) -> Path:
    """Map a dataset URL to its cache file under the cache directory."""
    key = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
    return (base_path or TOCNAV_CACHE_PATH) / f"toc_{key}.json"


async def _download(url: str, client: httpx.AsyncClient) -> str:
    reason: object = None
    attempts = TOCNAV_FETCH_MAX_RETRIES + 1

    for attempt in range(attempts):
        try:
            response = await client.get(url)
        except httpx.TransportError as exc:
            reason = exc
        else:
            if response.status_code == 404:
                raise TOCNotAvailableError(f"Failed to load TOC: {url} returned 404")
            if response.status_code in RETRY_STATUS_CODES:
                reason = f"HTTP {response.status_code}"
            elif response.is_error:
                raise FetchError(f"Failed to load TOC: HTTP {response.status_code} from {url}")
            else:
                content_type = response.headers.get("content-type", "")
                if "json" not in content_type:
                    raise InvalidTOCDataError(f"Expected JSON from {url}, got {content_type or 'no content type'}")
                return response.text

        if attempt + 1 < attempts:
            delay = TOCNAV_FETCH_BACKOFF_S * (2**attempt)
            logger.debug("Fetching %s failed (%s), retrying in %.2fs", url, reason, delay)
            await asyncio.sleep(delay)

    raise FetchError(f"Failed to fetch {url} after {attempts} attempts: {reason}")


def _read_fresh(path: Path, ttl_seconds: int) -> str | None:
    try:
        age = time.time() - path.stat().st_mtime
    except FileNotFoundError:
        return None
    if ttl_seconds > 0 and age > ttl_seconds:
        return None
    return path.read_text(encoding="utf-8")


def _write_atomic(path: Path, payload: str) -> None:
    # Readers see either the old file or the complete new one.
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(".tmp")
    tmp_path.write_text(payload, encoding="utf-8")
    tmp_path.replace(path)
