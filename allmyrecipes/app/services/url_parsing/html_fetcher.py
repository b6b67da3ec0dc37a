"""HTML fetching and URL validation utilities."""

import ipaddress
import logging
from urllib.parse import urlparse

import httpx

from allmyrecipes.app.core.config import get_settings

logger = logging.getLogger(__name__)


class InvalidUrlError(ValueError):
    """The URL is not an absolute http(s) URL or points at a disallowed host."""


def is_private_host(host: str) -> bool:
    """Check if a host is private/localhost."""
    hostname = host.split(":")[0]
    try:
        ip = ipaddress.ip_address(hostname)
        return ip.is_private or ip.is_loopback
    except ValueError:
        return hostname.lower() in {"localhost"}


def validate_url(url: str | None) -> str:
    """Return the stripped URL or raise ``InvalidUrlError``."""
    candidate = (url or "").strip()
    parsed = urlparse(candidate)
    if parsed.scheme.lower() not in {"http", "https"} or not parsed.netloc:
        raise InvalidUrlError("URL must be an absolute http(s) URL")
    if is_private_host(parsed.hostname or ""):
        raise InvalidUrlError("URL points to a private or disallowed host")
    return candidate


async def fetch_html(url: str) -> str:
    """Fetch a page with a single GET; any transport error or non-2xx status propagates."""
    url = validate_url(url)
    settings = get_settings()
    headers = {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }
    if settings.scraper_cookies:
        headers["Cookie"] = settings.scraper_cookies
    timeout = httpx.Timeout(
        settings.fetch_timeout_seconds,
        connect=settings.fetch_connect_timeout_seconds,
    )

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, headers=headers) as client:
        response = await client.get(url)
    response.raise_for_status()
    logger.info(
        "Fetched %s: status=%d, content-type=%s, %d bytes",
        url,
        response.status_code,
        response.headers.get("content-type", ""),
        len(response.content),
    )
    return response.text
