"""Framework-agnostic domain models."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class NodeType(str, Enum):
    TEXT_GENERATOR = "textGenerator"
    ANALYZER = "analyzer"
    CHATBOT = "chatbot"
    DATA_EXTRACTOR = "dataExtractor"

    @classmethod
    def resolve(cls, value: object) -> Optional["NodeType"]:
        """Map a request ``type`` (canonical name or ``ai``-prefixed alias) to a member."""
        if not isinstance(value, str):
            return None
        return _NODE_TYPE_LOOKUP.get(value)


# Workflow editors historically sent "aiTextGenerator", "aiChatbot", ...
_NODE_TYPE_LOOKUP = {t.value: t for t in NodeType}
_NODE_TYPE_LOOKUP.update({"ai" + t.value[0].upper() + t.value[1:]: t for t in NodeType})


class AnalysisType(str, Enum):
    SENTIMENT = "sentiment"
    KEYWORDS = "keywords"
    SUMMARY = "summary"


class Personality(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CONCISE = "concise"


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_NODE_TYPE = "UNKNOWN_NODE_TYPE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    COMPLETION_ERROR = "COMPLETION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
