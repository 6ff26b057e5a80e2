"""Content extraction: turn a submission into plain text."""

from typing import Callable

import httpx
from starlette.concurrency import run_in_threadpool

from app.models import Source, TextSource, WebSource, YoutubeSource
from app.utils import classify_source
from app.web import fetch_web_content
from app.youtube import fetch_youtube_transcript


class ContentExtractor:
    """Dispatch a classified source to the right fetcher.

    The transcript fetcher and HTTP transport are injectable so the handler
    can be exercised without network access.
    """

    def __init__(
        self,
        fetch_timeout: float = 20.0,
        transcript_fetcher: Callable[[str], str] = fetch_youtube_transcript,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.fetch_timeout = fetch_timeout
        self.transcript_fetcher = transcript_fetcher
        self.transport = transport

    async def extract(self, content: str, content_type: str) -> str:
        """Classify ``content`` and return its text.

        Raises:
            ValidationError: If a URL is malformed or a YouTube id is missing.
            ExtractionFailed: If the content source cannot be read.
        """
        return await self.extract_source(classify_source(content, content_type))

    async def extract_source(self, source: Source) -> str:
        if isinstance(source, TextSource):
            return source.text
        if isinstance(source, YoutubeSource):
            # youtube-transcript-api is blocking
            return await run_in_threadpool(self.transcript_fetcher, source.video_id)
        if isinstance(source, WebSource):
            return await fetch_web_content(
                source.url, timeout=self.fetch_timeout, transport=self.transport
            )
        raise TypeError(f"Unsupported source: {source!r}")
