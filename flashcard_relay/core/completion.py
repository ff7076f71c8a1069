from __future__ import annotations

from typing import TYPE_CHECKING, Any

import openai
from openai import AsyncOpenAI

from .errors import UpstreamError
from .logging import get_logger
from .token_estimation import estimate_prompt_tokens, estimate_tokens
from .types import DEFAULT_MODEL_ID, CompletionRequest, CompletionResult, Usage
from .upstream_errors import map_upstream_error

if TYPE_CHECKING:
    from flashcard_relay.config import Settings

logger = get_logger(__name__)


class CompletionGateway:
    """Single-attempt access to the chat completion service.

    One instance is built per application and shared by every request; the
    SDK client it wraps pools HTTP connections internally. Without an API key
    the gateway still constructs, and each call fails with an upstream error.
    """

    def __init__(
        self,
        client: AsyncOpenAI | None,
        *,
        default_model: str = DEFAULT_MODEL_ID,
    ) -> None:
        self._client = client
        self.default_model = default_model

    @classmethod
    def from_settings(cls, settings: "Settings") -> "CompletionGateway":
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set; completion requests will fail")
            return cls(None, default_model=settings.default_model)

        client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            max_retries=0,
        )
        return cls(client, default_model=settings.default_model)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        client = self._require_client()
        model = request.model or self.default_model

        params: dict[str, Any] = {
            "model": model,
            "messages": [message.to_dict() for message in request.messages],
            "temperature": request.temperature,
        }
        if request.max_tokens is not None:
            params["max_tokens"] = request.max_tokens

        try:
            completion = await client.chat.completions.create(**params)
        except openai.OpenAIError as exc:
            raise map_upstream_error(exc) from exc

        text = _first_choice_text(completion)
        return CompletionResult(
            text=text,
            usage=_usage_from(completion, request, text),
            model=getattr(completion, "model", None) or model,
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()

    def _require_client(self) -> AsyncOpenAI:
        if self._client is None:
            raise UpstreamError(
                status_code=500,
                message="Completion service API key is not configured.",
                code="missing_api_key",
            )
        return self._client


def _first_choice_text(completion: Any) -> str:
    choices = getattr(completion, "choices", None) or []
    if not choices:
        raise UpstreamError(
            status_code=500,
            message="Completion service returned no choices.",
            code="empty_completion",
        )

    content = choices[0].message.content
    return content if isinstance(content, str) else ""


def _usage_from(completion: Any, request: CompletionRequest, text: str) -> Usage:
    usage = getattr(completion, "usage", None)
    if usage is None:
        # Some OpenAI-compatible servers omit usage
        return Usage(
            prompt_tokens=estimate_prompt_tokens(request.messages),
            completion_tokens=estimate_tokens(text),
        )

    return Usage(
        prompt_tokens=int(usage.prompt_tokens or 0),
        completion_tokens=int(usage.completion_tokens or 0),
    )
