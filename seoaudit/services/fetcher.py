"""
Content fetcher.

Performs the single outbound GET of an audit. Failures never propagate:
network errors, timeouts and non-2xx responses are logged and reported
as ``None`` so the caller can decide what to do.
"""

import logging
from dataclasses import dataclass

import httpx

from seoaudit.config import settings

logger = logging.getLogger(__name__)


@dataclass
class FetchedPage:
    url: str
    final_url: str
    status_code: int
    text: str


async def fetch_url_content(
    url: str,
    client: httpx.AsyncClient | None = None,
) -> FetchedPage | None:
    """Fetch raw document text for ``url``.

    Args:
        url: Absolute http(s) URL.
        client: Optional shared client. When omitted a client is created
            for this call and closed afterwards.

    Returns:
        The fetched page, or None on any failure.
    """
    headers = {"User-Agent": settings.FETCH_USER_AGENT}
    timeout = settings.FETCH_TIMEOUT_SECONDS

    try:
        if client is not None:
            response = await client.get(
                url,
                headers=headers,
                timeout=timeout,
                follow_redirects=settings.FETCH_FOLLOW_REDIRECTS,
            )
        else:
            async with httpx.AsyncClient(
                timeout=timeout,
                follow_redirects=settings.FETCH_FOLLOW_REDIRECTS,
                headers=headers,
            ) as own_client:
                response = await own_client.get(url)
    except httpx.TimeoutException:
        logger.warning(f"Timeout fetching {url} after {timeout}s")
        return None
    except Exception as e:
        logger.warning(f"Error fetching URL content for {url}: {type(e).__name__}: {e}")
        return None

    if not response.is_success:
        logger.warning(f"HTTP error fetching {url}: status {response.status_code}")
        return None

    final_url = str(response.url)
    if final_url != url:
        logger.debug(f"Resolved {url} -> {final_url}")

    return FetchedPage(
        url=url,
        final_url=final_url,
        status_code=response.status_code,
        text=response.text,
    )
