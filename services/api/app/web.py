"""Generic web page fetching and HTML-to-text conversion."""

import logging

import httpx

from app.errors import ExtractionFailed
from app.utils import html_to_text

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; DistillBot/0.1; +https://distill.app)"


async def fetch_web_content(
    url: str,
    timeout: float = 20.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Fetch a page and return its readable text.

    Args:
        url: Absolute http(s) URL.
        timeout: Request timeout in seconds.
        transport: Optional transport override, used by tests.

    Returns:
        Whitespace-collapsed page text.

    Raises:
        ExtractionFailed: If the page cannot be reached (500), responds with a
            non-success status (400) or has no readable text (400).
    """
    headers = {"User-Agent": USER_AGENT}
    async with httpx.AsyncClient(
        timeout=timeout, follow_redirects=True, transport=transport
    ) as client:
        try:
            r = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.exception("Web fetch failed for url=%s err_type=%s", url, e.__class__.__name__)
            raise ExtractionFailed(
                "Failed to fetch web content. Please check the URL and try again.",
                status_code=500,
            ) from e

    if not r.is_success:
        logger.info("Web fetch returned status=%s for url=%s", r.status_code, url)
        raise ExtractionFailed(f"Failed to fetch content: {r.reason_phrase or r.status_code}")

    text = html_to_text(r.text)
    if not text:
        raise ExtractionFailed("No readable content found on the webpage")
    return text
