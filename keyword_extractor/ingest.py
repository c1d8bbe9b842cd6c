import logging
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from urllib.parse import urlparse

import requests

from config import FETCH_MAX_BACKOFF, FETCH_RETRIES, FETCH_TIMEOUT
from utils import strip_html

logger = logging.getLogger(__name__)


class IngestError(RuntimeError):
    """Raised when a text source cannot be turned into text."""


# ───────────────────────────────── Helpers ───────────────────────────────── #

def _check_url(url: str) -> str:
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise IngestError(f"Not an http(s) URL: {url or '(empty)'}")
    return url


def retry_after_seconds(value, default: int) -> int:
    """
    Seconds to wait for a Retry-After header (delta-seconds or HTTP-date).
    Unparseable values fall back to `default`; always within 0..FETCH_MAX_BACKOFF.
    """
    if value is None:
        return min(default, FETCH_MAX_BACKOFF)
    try:
        secs = int(str(value).strip())
    except ValueError:
        try:
            when = parsedate_to_datetime(str(value))
        except (TypeError, ValueError, IndexError):
            when = None
        if when is None:
            return min(default, FETCH_MAX_BACKOFF)
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        secs = int((when - datetime.now(timezone.utc)).total_seconds())
    return max(0, min(secs, FETCH_MAX_BACKOFF))


def get_text(url):
    """
    GET with retry/backoff. Handles 429 rate limits.
    Returns (body, content_type).
    """
    backoff = 2
    for _ in range(FETCH_RETRIES):
        try:
            r = requests.get(url, timeout=FETCH_TIMEOUT)
        except requests.RequestException as e:
            raise IngestError(f"Could not reach {url}: {e}") from e
        if r.status_code == 429:
            sleep_for = retry_after_seconds(r.headers.get("Retry-After"), backoff)
            logger.warning("Rate limited by %s, retrying in %ss", url, sleep_for)
            time.sleep(sleep_for)
            backoff = min(backoff * 2, FETCH_MAX_BACKOFF)
            continue
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            raise IngestError(f"{url} answered HTTP {r.status_code}") from e
        return r.text, r.headers.get("Content-Type", "")
    raise IngestError(f"Too many retries (rate limited by {url}).")


# ──────────────────────────────── Sources ──────────────────────────────── #

def text_from_upload(data: bytes) -> str:
    """Decode an uploaded plain-text file; undecodable bytes become U+FFFD."""
    if not data:
        return ""
    text = data.decode("utf-8", errors="replace")
    # Editors on Windows like to prepend a BOM
    return text.lstrip("\ufeff")


def text_from_url(url: str) -> str:
    """
    Fetch a web page and reduce it to readable text:
      - HTML pages lose tags, <script> and <style> blocks, and entities
      - plain-text responses are returned as-is
    """
    url = _check_url(url)
    body, content_type = get_text(url)
    if "html" in content_type.lower() or body.lstrip().startswith("<"):
        text = strip_html(body)
    else:
        text = body.strip()
    if not text:
        raise IngestError(f"No text found at {url}")
    logger.info("Fetched %d characters from %s", len(text), url)
    return text
