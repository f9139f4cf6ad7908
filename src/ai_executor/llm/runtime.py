"""LLM runtime interface.

Handlers talk to the completion provider only through this interface, so
tests and alternative providers can plug in their own runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Role = Literal["system", "user"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class LLMRequest:
    model: str
    messages: tuple[ChatMessage, ...]
    temperature: float
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class LLMResult:
    text: Optional[str]
    usage: Optional[dict[str, Any]] = field(default=None)


class LLMRuntime:
    async def complete(self, req: LLMRequest) -> LLMResult:  # pragma: no cover - interface
        raise NotImplementedError

    async def aclose(self) -> None:
        return None
