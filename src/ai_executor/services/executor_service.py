"""AI node execution service (business logic).

Responsibilities:
- Check that completion credentials are configured before anything else
- Resolve the node type and validate its config
- Substitute ``{{input}}`` placeholders into the configured prompts
- Run exactly one completion call and shape the node-specific response

Errors are not caught here; the transport layer maps them to responses.
"""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable

from ..config.settings import ExecutorSettings
from ..domain.errors import ConfigurationError, UnknownNodeTypeError
from ..domain.models import NodeType
from ..llm.runtime import ChatMessage, LLMRequest, LLMRuntime
from ..models.requests import (
    AnalyzerConfig,
    AnalyzerResponse,
    ChatbotConfig,
    ChatbotResponse,
    DataExtractorConfig,
    DataExtractorResponse,
    ExecuteRequest,
    NodeResponse,
    TextGeneratorConfig,
    TextGeneratorResponse,
)
from ..observability.logger import get_logger
from ..utils.templating import stringify, substitute
from .prompts import (
    DATA_EXTRACTION_INSTRUCTION,
    UNPARSED_EXTRACTION_NOTE,
    analysis_instruction,
    personality_instruction,
)

logger = get_logger(__name__)

RuntimeFactory = Callable[[ExecutorSettings], LLMRuntime]

ANALYZER_TEMPERATURE = 0.3
CHATBOT_TEMPERATURE = 0.7
DATA_EXTRACTOR_TEMPERATURE = 0.1


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return stringify(value)


def _messages(system: str, user: Any) -> tuple[ChatMessage, ...]:
    if system:
        return (ChatMessage("system", system), ChatMessage("user", _as_text(user)))
    return (ChatMessage("user", _as_text(user)),)


class ExecutorService:
    def __init__(self, *, settings: ExecutorSettings, runtime_factory: RuntimeFactory):
        self._settings = settings
        self._runtime_factory = runtime_factory

    async def execute(self, request: ExecuteRequest) -> NodeResponse:
        missing = self._settings.missing_credentials()
        if missing:
            raise ConfigurationError(
                f"Azure OpenAI credentials not configured. Add {', '.join(missing)} to .env",
                detail=",".join(missing),
            )

        node_type = NodeType.resolve(request.type)
        if node_type is None:
            raise UnknownNodeTypeError(request.type)

        handler = self._handlers()[node_type]
        deployment_id = self._settings.azure_openai_deployment_id or ""
        logger.info("node_execution_started", node_type=node_type.value, deployment_id=deployment_id)

        runtime = self._runtime_factory(self._settings)
        try:
            return await handler(runtime, deployment_id, request.config, request.input)
        finally:
            await runtime.aclose()

    def _handlers(
        self,
    ) -> dict[NodeType, Callable[[LLMRuntime, str, dict[str, Any], Any], Awaitable[NodeResponse]]]:
        return {
            NodeType.TEXT_GENERATOR: self.run_text_generator,
            NodeType.ANALYZER: self.run_analyzer,
            NodeType.CHATBOT: self.run_chatbot,
            NodeType.DATA_EXTRACTOR: self.run_data_extractor,
        }

    async def run_text_generator(
        self, runtime: LLMRuntime, deployment_id: str, config: dict[str, Any], input: Any
    ) -> TextGeneratorResponse:
        cfg = TextGeneratorConfig.model_validate(config)
        prompt = _as_text(substitute(cfg.prompt, input))

        logger.info("text_generator_started", deployment_id=deployment_id, prompt=prompt[:50])
        result = await runtime.complete(
            LLMRequest(
                model=deployment_id,
                messages=_messages("", prompt),
                temperature=cfg.temperature,
                max_tokens=cfg.maxTokens,
            )
        )
        logger.info("text_generator_completed", deployment_id=deployment_id)

        return TextGeneratorResponse(generatedText=result.text, model=deployment_id, usage=result.usage)

    async def run_analyzer(
        self, runtime: LLMRuntime, deployment_id: str, config: dict[str, Any], input: Any
    ) -> AnalyzerResponse:
        cfg = AnalyzerConfig.model_validate(config)
        text = substitute(cfg.text, input)
        system = analysis_instruction(cfg.analysisType)
        if not system:
            logger.warning("analyzer_unknown_analysis_type", analysis_type=stringify(cfg.analysisType))

        result = await runtime.complete(
            LLMRequest(
                model=deployment_id,
                messages=_messages(system, text),
                temperature=ANALYZER_TEMPERATURE,
            )
        )
        return AnalyzerResponse(analysisType=cfg.analysisType, result=result.text, usage=result.usage)

    async def run_chatbot(
        self, runtime: LLMRuntime, deployment_id: str, config: dict[str, Any], input: Any
    ) -> ChatbotResponse:
        cfg = ChatbotConfig.model_validate(config)
        system = _as_text(substitute(cfg.systemPrompt, input))
        user = substitute(cfg.userMessage, input)

        style = personality_instruction(cfg.personality)
        if style:
            system = f"{system}\n\n{style}" if system else style

        result = await runtime.complete(
            LLMRequest(
                model=deployment_id,
                messages=_messages(system, user),
                temperature=CHATBOT_TEMPERATURE,
            )
        )
        return ChatbotResponse(response=result.text, personality=cfg.personality, usage=result.usage)

    async def run_data_extractor(
        self, runtime: LLMRuntime, deployment_id: str, config: dict[str, Any], input: Any
    ) -> DataExtractorResponse:
        cfg = DataExtractorConfig.model_validate(config)
        text = substitute(cfg.text, input)
        schema = substitute(cfg.schema_, input)

        result = await runtime.complete(
            LLMRequest(
                model=deployment_id,
                messages=_messages(DATA_EXTRACTION_INSTRUCTION.format(schema=_as_text(schema)), text),
                temperature=DATA_EXTRACTOR_TEMPERATURE,
            )
        )

        raw = result.text
        try:
            parsed = json.loads(raw or "{}")
        except json.JSONDecodeError:
            logger.info("data_extractor_unparsed_output", length=len(raw or ""))
            return DataExtractorResponse(
                extractedData=raw,
                schema_=schema,
                usage=result.usage,
                note=UNPARSED_EXTRACTION_NOTE,
            )
        return DataExtractorResponse(extractedData=parsed, schema_=schema, usage=result.usage)
