"""Domain-specific errors.

These errors are mapped to HTTP status codes in the transport layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ExecutorDomainError(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class DomainErrorInfo:
    code: str
    message: str
    detail: Optional[str] = None


class ConfigurationError(ExecutorDomainError):
    """Raised when required server-side settings are absent."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="CONFIGURATION_ERROR", message=message, detail=detail)


class InvalidInputError(ExecutorDomainError):
    """Raised when request validation fails."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="INVALID_INPUT", message=message, detail=detail)


class UnknownNodeTypeError(InvalidInputError):
    def __init__(self, node_type: object):
        super().__init__(f"Unknown AI node type: {node_type}")
        self.node_type = node_type
        self.info = DomainErrorInfo(code="UNKNOWN_NODE_TYPE", message=str(self))


class CompletionError(ExecutorDomainError):
    """Raised when the completion provider call fails.

    ``status`` is the provider's HTTP status code, when the failure had one.
    """

    def __init__(self, message: str, detail: str | None = None, status: int | None = None):
        super().__init__(message)
        self.status = status
        self.info = DomainErrorInfo(code="COMPLETION_ERROR", message=message, detail=detail)
