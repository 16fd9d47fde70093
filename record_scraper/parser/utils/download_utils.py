from typing import Optional
from urllib.parse import urlparse

import requests

from ..config import FETCH_TIMEOUT
from .logger_instance import logger
from .user_agents import random_user_agent


class FetchError(RuntimeError):
    """Raised when a page cannot be retrieved."""

    def __init__(self, message, url=None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class InvalidURLError(FetchError):
    """Raised before any request when the URL is not absolute http(s)."""
    pass


def validate_url(url):
    """Reject anything that is not an absolute http(s) URL."""
    parsed = urlparse((url or "").strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError(f"Unsupported URL: {url!r}", url=url)
    return parsed.geturl()


def fetch_page(url, timeout=None, session=None):
    """
    Fetch a page and return its HTML text.
    Raises FetchError on network failures and non-2xx responses.
    """
    url = validate_url(url)
    http = session or requests
    headers = {"User-Agent": random_user_agent(), "Accept": "text/html,application/xhtml+xml"}
    try:
        response = http.get(url, headers=headers, timeout=timeout or FETCH_TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"[DOWNLOAD] Failed to fetch {url}: {e}")
        raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e
    if not response.ok:
        logger.error(f"[DOWNLOAD] {url} returned HTTP {response.status_code}")
        raise FetchError(f"{url} returned HTTP {response.status_code}", url=url, status_code=response.status_code)
    logger.info(f"[DOWNLOAD] Fetched {url} ({len(response.content)} bytes)")
    return response.text
