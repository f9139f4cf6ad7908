"""Azure OpenAI adapter.

Uses the official ``openai`` SDK (``AsyncAzureOpenAI``) for chat completions.
The deployment identifier is sent as the ``model`` of each request.
"""

from __future__ import annotations

from typing import Any

import openai
from openai import AsyncAzureOpenAI

from ..config.settings import ExecutorSettings
from ..domain.errors import CompletionError
from ..observability.logger import get_logger
from .runtime import LLMRequest, LLMResult, LLMRuntime

logger = get_logger(__name__)


class AzureOpenAIAdapter(LLMRuntime):
    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        api_version: str,
        timeout_seconds: float | None = None,
        max_retries: int = 0,
        client: Any = None,
    ):
        """
        Initialize Azure OpenAI adapter.

        Args:
            api_key: Azure OpenAI resource key.
            endpoint: Resource endpoint, e.g. https://my-resource.openai.azure.com.
            api_version: Azure OpenAI REST API version.
            timeout_seconds: Request timeout. None keeps the SDK default.
            max_retries: SDK-level retries. The service default is 0.
            client: Pre-built client (tests). Skips client construction.
        """
        if client is not None:
            self._client = client
            return
        kwargs: dict[str, Any] = {
            "api_key": api_key,
            "azure_endpoint": endpoint,
            "api_version": api_version,
            "max_retries": max_retries,
        }
        if timeout_seconds is not None:
            kwargs["timeout"] = float(timeout_seconds)
        self._client = AsyncAzureOpenAI(**kwargs)

    @classmethod
    def from_settings(cls, settings: ExecutorSettings) -> "AzureOpenAIAdapter":
        return cls(
            api_key=settings.azure_openai_api_key or "",
            endpoint=settings.azure_openai_endpoint or "",
            api_version=settings.azure_openai_api_version,
            timeout_seconds=settings.llm_timeout_seconds,
            max_retries=settings.llm_max_retries,
        )

    async def complete(self, req: LLMRequest) -> LLMResult:
        params: dict[str, Any] = {
            "model": req.model,
            "messages": [m.as_dict() for m in req.messages],
            "temperature": float(req.temperature),
        }
        if req.max_tokens is not None:
            params["max_tokens"] = int(req.max_tokens)

        try:
            completion = await self._client.chat.completions.create(**params)
        except openai.APIStatusError as e:
            raise CompletionError(e.message, detail=_body_detail(e), status=e.status_code) from e
        except openai.APIError as e:
            raise CompletionError(e.message, detail=type(e).__name__) from e

        if not completion.choices:
            raise CompletionError("Completion returned no choices")
        choice = completion.choices[0]
        logger.debug("completion_received", model=completion.model, finish_reason=choice.finish_reason)
        text = choice.message.content
        usage = completion.usage.model_dump() if completion.usage is not None else None
        return LLMResult(text=text, usage=usage)

    async def aclose(self) -> None:
        await self._client.close()


def _body_detail(e: openai.APIStatusError) -> str | None:
    if e.body is None:
        return None
    return str(e.body)[:500]
