"""OpenAI-compatible chat completions client for the AI gateway."""

import logging
from dataclasses import dataclass

from openai import APIStatusError, AsyncOpenAI

from macromate.services.ai import (
    AIGatewayError,
    CompletionClient,
    CreditsExhaustedError,
    RateLimitedError,
)

_logger = logging.getLogger(__name__)

HTTP_PAYMENT_REQUIRED = 402
HTTP_TOO_MANY_REQUESTS = 429


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by the OpenAI chat completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, base_url: str | None = None
    ) -> "OpenAICompletionClient":
        """Create a client for an OpenAI-compatible endpoint."""
        return cls(client=AsyncOpenAI(api_key=api_key, base_url=base_url))

    async def complete(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> str:
        """Send a system and user prompt and return the reply text."""
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
            )
        except APIStatusError as exc:
            raise _map_status_error(exc) from exc
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()


def _map_status_error(exc: APIStatusError) -> AIGatewayError:
    if exc.status_code == HTTP_TOO_MANY_REQUESTS:
        return RateLimitedError("Rate limit exceeded. Please try again later.")
    if exc.status_code == HTTP_PAYMENT_REQUIRED:
        return CreditsExhaustedError(
            "AI credits depleted. Please add credits in settings."
        )
    _logger.error("AI Gateway error: %s %s", exc.status_code, exc.message)
    return AIGatewayError(f"AI Gateway error: {exc.status_code}")
