"""Request/config/response models for node execution.

Config and response field names follow the camelCase keys the workflow editor
sends and expects. Template fields are typed ``Any``: non-string values pass
through substitution untouched.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 500


class ExecuteRequest(BaseModel):
    type: Any = None
    config: Dict[str, Any] = Field(default_factory=dict)
    input: Any = None

    @field_validator("config", mode="before")
    @classmethod
    def default_config(cls, v: Any) -> Any:
        return {} if v is None else v


def _parse_float(v: Any) -> Optional[float]:
    if v is None or isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


class _NodeConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TextGeneratorConfig(_NodeConfig):
    prompt: Any = ""
    temperature: float = DEFAULT_TEMPERATURE
    maxTokens: int = DEFAULT_MAX_TOKENS

    # Unparseable numbers behave exactly like absent ones.
    @field_validator("temperature", mode="before")
    @classmethod
    def parse_temperature(cls, v: Any) -> float:
        f = _parse_float(v)
        return DEFAULT_TEMPERATURE if f is None else f

    @field_validator("maxTokens", mode="before")
    @classmethod
    def parse_max_tokens(cls, v: Any) -> int:
        f = _parse_float(v)
        return DEFAULT_MAX_TOKENS if f is None else int(f)


class AnalyzerConfig(_NodeConfig):
    text: Any = ""
    analysisType: Any = None


class ChatbotConfig(_NodeConfig):
    systemPrompt: Any = ""
    userMessage: Any = ""
    personality: Any = None


class DataExtractorConfig(_NodeConfig):
    text: Any = ""
    schema_: Any = Field(default="", alias="schema")


class NodeResponse(BaseModel):
    """Base for handler responses; serialized with ``by_alias`` and ``exclude_unset``."""

    model_config = ConfigDict(populate_by_name=True)

    usage: Optional[Dict[str, Any]] = None


class TextGeneratorResponse(NodeResponse):
    generatedText: Optional[str] = None
    model: str


class AnalyzerResponse(NodeResponse):
    analysisType: Any = None
    result: Optional[str] = None


class ChatbotResponse(NodeResponse):
    response: Optional[str] = None
    personality: Any = None


class DataExtractorResponse(NodeResponse):
    extractedData: Any = None
    schema_: Any = Field(default=None, alias="schema")
    note: Optional[str] = None
