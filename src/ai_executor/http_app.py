"""FastAPI app - Transport layer only.

Responsibilities:
- Parse the execute request body
- Inject settings and the completion runtime factory
- Call the service layer
- Map domain errors to HTTP status codes deterministically

NO business logic should be here.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config.settings import ExecutorSettings, get_settings
from .domain.errors import CompletionError, ExecutorDomainError
from .domain.models import ErrorCode
from .lifespan import lifespan_manager
from .llm.azure_openai_adapter import AzureOpenAIAdapter
from .models.requests import ExecuteRequest
from .observability.logger import get_logger
from .services.executor_service import ExecutorService, RuntimeFactory

logger = get_logger(__name__)

app = FastAPI(title="AI Node Executor", version="0.1.0", lifespan=lifespan_manager)

_STATUS_MAP = {
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.UNKNOWN_NODE_TYPE: 400,
    ErrorCode.CONFIGURATION_ERROR: 500,
    ErrorCode.COMPLETION_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


def get_runtime_factory() -> RuntimeFactory:
    return AzureOpenAIAdapter.from_settings


def _error_body(message: str, status: Optional[int] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": message}
    if status:
        body["details"] = f"Status: {status}"
    return body


def _domain_error_response(exc: ExecutorDomainError) -> JSONResponse:
    info = exc.info
    try:
        code = ErrorCode(info.code)
    except ValueError:
        code = ErrorCode.INTERNAL_ERROR
    http_status = _STATUS_MAP[code]
    provider_status = exc.status if isinstance(exc, CompletionError) else None

    if http_status < 500:
        logger.warning("ai_execution_rejected", error_code=code.value, error=info.message)
    else:
        logger.error(
            "ai_execution_failed",
            error_code=code.value,
            error=info.message,
            detail=info.detail,
            status=provider_status,
            exc_info=exc,
        )
    return JSONResponse(status_code=http_status, content=_error_body(info.message, provider_status))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("ai_execution_rejected", error_code=ErrorCode.INVALID_INPUT.value, errors=str(exc.errors()))
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.post("/api/ai/execute")
async def execute_node(
    payload: ExecuteRequest,
    settings: ExecutorSettings = Depends(get_settings),
    runtime_factory: RuntimeFactory = Depends(get_runtime_factory),
) -> JSONResponse:
    service = ExecutorService(settings=settings, runtime_factory=runtime_factory)
    try:
        result = await service.execute(payload)
    except ExecutorDomainError as exc:
        return _domain_error_response(exc)
    except Exception as exc:
        status = getattr(exc, "status_code", None) or getattr(exc, "status", None)
        logger.exception(
            "ai_execution_failed",
            error_code=ErrorCode.INTERNAL_ERROR.value,
            error=str(exc),
            error_type=type(exc).__name__,
            status=status,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(str(exc) or "AI execution failed", status if isinstance(status, int) else None),
        )

    return JSONResponse(content=result.model_dump(mode="json", by_alias=True, exclude_unset=True))
