"""Text completion interface and AI gateway errors."""

from typing import Protocol


class AIGatewayError(RuntimeError):
    """Raised when the AI gateway returns an unexpected error."""


class RateLimitedError(AIGatewayError):
    """Raised when the AI gateway rejects a request due to rate limits."""


class CreditsExhaustedError(AIGatewayError):
    """Raised when the AI gateway reports exhausted credits."""


class CompletionClient(Protocol):
    """Interface for chat-style LLM text completion."""

    async def complete(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> str:
        """Return the raw text of the model's reply."""
