"""Chat-completion client and hashtag suggestion helpers."""

import logging

from openai import AsyncOpenAI, AuthenticationError, OpenAIError

from app.errors import ConfigError, GenerationFailed
from app.prompts import build_hashtag_prompt
from app.settings import Settings

logger = logging.getLogger(__name__)

PRESENCE_PENALTY = 0.1
FREQUENCY_PENALTY = 0.1

HASHTAG_TEMPERATURE = 0.3
HASHTAG_MAX_TOKENS = 50


class CompletionClient:
    """Issue single chat-completion requests against the OpenAI API."""

    def __init__(self, client: AsyncOpenAI, model: str) -> None:
        self.client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionClient":
        settings.check()
        client = AsyncOpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout)
        return cls(client, settings.openai_model)

    async def close(self) -> None:
        await self.client.close()

    async def complete(
        self,
        system: str,
        user: str,
        temperature: float,
        max_tokens: int,
        presence_penalty: float = 0.0,
        frequency_penalty: float = 0.0,
    ) -> str:
        """Run one completion and return the stripped message text.

        Args:
            system: System prompt.
            user: User message content.
            temperature: Sampling temperature.
            max_tokens: Output token budget.
            presence_penalty: Penalty for tokens already present.
            frequency_penalty: Penalty proportional to token frequency.

        Returns:
            The generated text, or an empty string if the model returned none.

        Raises:
            ConfigError: If the API rejects the configured credentials.
            GenerationFailed: For any other API failure.
        """
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
                presence_penalty=presence_penalty,
                frequency_penalty=frequency_penalty,
            )
        except AuthenticationError as e:
            logger.error("OpenAI rejected credentials: %s", e)
            raise ConfigError("Server configuration error. Please try again later.") from e
        except OpenAIError as e:
            logger.exception("OpenAI request failed model=%s err_type=%s", self.model, e.__class__.__name__)
            raise GenerationFailed(f"OpenAI API error: {e}") from e

        content = resp.choices[0].message.content if resp.choices and resp.choices[0].message else ""
        return (content or "").strip()


async def suggest_hashtags(completions: CompletionClient, text: str) -> str:
    """Return up to three space-separated hashtags, or "" on any failure."""
    try:
        return await completions.complete(
            build_hashtag_prompt(),
            text,
            temperature=HASHTAG_TEMPERATURE,
            max_tokens=HASHTAG_MAX_TOKENS,
        )
    except Exception:
        logger.exception("Error suggesting hashtags")
        return ""
