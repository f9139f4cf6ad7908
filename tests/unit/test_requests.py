from __future__ import annotations

import pytest

from ai_executor.models.requests import (
    DataExtractorConfig,
    DataExtractorResponse,
    ExecuteRequest,
    TextGeneratorConfig,
)


def test_text_generator_defaults_when_absent() -> None:
    cfg = TextGeneratorConfig.model_validate({"prompt": "hi"})
    assert cfg.temperature == 0.7
    assert cfg.maxTokens == 500


@pytest.mark.parametrize("temperature", [None, "", "warm", "nan", True, [0.2]])
def test_unparseable_temperature_falls_back_to_default(temperature) -> None:
    cfg = TextGeneratorConfig.model_validate({"temperature": temperature})
    assert cfg.temperature == 0.7


def test_numeric_strings_are_parsed() -> None:
    cfg = TextGeneratorConfig.model_validate({"temperature": "0.2", "maxTokens": "128"})
    assert cfg.temperature == 0.2
    assert cfg.maxTokens == 128


def test_fractional_max_tokens_is_truncated() -> None:
    assert TextGeneratorConfig.model_validate({"maxTokens": "500.9"}).maxTokens == 500
    assert TextGeneratorConfig.model_validate({"maxTokens": 64.0}).maxTokens == 64


def test_unparseable_max_tokens_falls_back_to_default() -> None:
    assert TextGeneratorConfig.model_validate({"maxTokens": "lots"}).maxTokens == 500


def test_zero_temperature_is_kept() -> None:
    assert TextGeneratorConfig.model_validate({"temperature": 0}).temperature == 0.0


def test_execute_request_defaults() -> None:
    req = ExecuteRequest.model_validate({"type": "chatbot", "config": None})
    assert req.config == {}
    assert req.input is None


def test_data_extractor_schema_uses_wire_name() -> None:
    cfg = DataExtractorConfig.model_validate({"text": "t", "schema": '{"name": "string"}'})
    assert cfg.schema_ == '{"name": "string"}'

    resp = DataExtractorResponse(extractedData={"x": 1}, schema_="s", usage={})
    body = resp.model_dump(by_alias=True, exclude_unset=True)
    assert body == {"extractedData": {"x": 1}, "schema": "s", "usage": {}}
