"""Summarization handler: validate, extract, truncate, generate."""

import logging

from app.errors import GenerationFailed, NoContent, ValidationError
from app.extract import ContentExtractor
from app.llm import FREQUENCY_PENALTY, PRESENCE_PENALTY, CompletionClient, suggest_hashtags
from app.models import CONTENT_TYPES, SummarizeRequest, SummarizeResult
from app.prompts import get_format_spec
from app.utils import truncate

logger = logging.getLogger(__name__)


class Summarizer:
    def __init__(
        self,
        completions: CompletionClient,
        extractor: ContentExtractor,
        max_content_chars: int = 15000,
    ) -> None:
        self.completions = completions
        self.extractor = extractor
        self.max_content_chars = max_content_chars

    async def handle(self, request: SummarizeRequest) -> SummarizeResult:
        """Turn one submission into a formatted result.

        Every step is a hard gate; the first failure is raised as a
        ``DistillError`` subclass. Only the LinkedIn hashtag step is allowed
        to fail silently.
        """
        if not request.content:
            raise ValidationError("Please provide content to process")
        if request.content_type not in CONTENT_TYPES:
            raise ValidationError("Please select a valid content type")
        spec = get_format_spec(request.output_format)
        if spec is None:
            raise ValidationError("Please select a valid output format")

        text = await self.extractor.extract(request.content, request.content_type)
        if not text.strip():
            raise NoContent("No content could be extracted. Please check your input and try again.")

        original_length = len(text)
        text, truncated = truncate(text, self.max_content_chars)
        if truncated:
            logger.info("Content truncated from %d to %d characters", original_length, self.max_content_chars)

        summary = await self.completions.complete(
            spec.system_prompt,
            text,
            temperature=spec.temperature,
            max_tokens=spec.max_tokens,
            presence_penalty=PRESENCE_PENALTY,
            frequency_penalty=FREQUENCY_PENALTY,
        )
        if not summary:
            raise GenerationFailed("Failed to generate content. Please try again.")

        hashtags = ""
        if spec.id == "linkedin":
            hashtags = await suggest_hashtags(self.completions, text)

        return SummarizeResult(
            summary=summary,
            format=spec.id,
            content_length=len(text),
            truncated=truncated,
            hashtags=hashtags or None,
        )
