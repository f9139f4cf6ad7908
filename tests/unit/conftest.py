from __future__ import annotations

from typing import Any, Optional

import pytest

from ai_executor.config.settings import ExecutorSettings
from ai_executor.llm.runtime import LLMRequest, LLMResult, LLMRuntime

USAGE = {"prompt_tokens": 12, "completion_tokens": 7, "total_tokens": 19}


class FakeRuntime(LLMRuntime):
    """Records requests and answers with a canned completion."""

    def __init__(self, text: Optional[str] = "ok", usage: Optional[dict[str, Any]] = None, error: Exception | None = None):
        self.text = text
        self.usage = USAGE if usage is None else usage
        self.error = error
        self.requests: list[LLMRequest] = []
        self.closed = False

    async def complete(self, req: LLMRequest) -> LLMResult:
        self.requests.append(req)
        if self.error is not None:
            raise self.error
        return LLMResult(text=self.text, usage=self.usage)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> ExecutorSettings:
    return ExecutorSettings(
        _env_file=None,
        azure_openai_api_key="test-key",
        azure_openai_endpoint="https://example.openai.azure.com",
        azure_openai_deployment_id="gpt-4o-mini",
    )


@pytest.fixture
def unconfigured_settings() -> ExecutorSettings:
    return ExecutorSettings(
        _env_file=None,
        azure_openai_api_key=None,
        azure_openai_endpoint=None,
        azure_openai_deployment_id=None,
    )


@pytest.fixture
def fake_runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def make_runtime():
    return FakeRuntime
