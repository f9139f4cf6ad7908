"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


# Environment names of the credentials every request needs.
REQUIRED_CREDENTIALS = (
    ("azure_openai_api_key", "AZURE_OPENAI_API_KEY"),
    ("azure_openai_endpoint", "AZURE_OPENAI_ENDPOINT"),
    ("azure_openai_deployment_id", "AZURE_OPENAI_DEPLOYMENT_ID"),
)


class ExecutorSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service
    service_name: str = "ai-node-executor"

    # FastAPI
    http_host: str = "127.0.0.1"
    http_port: int = 8000

    # Azure OpenAI (checked per request, not at startup)
    azure_openai_api_key: str | None = None
    azure_openai_endpoint: str | None = None
    azure_openai_deployment_id: str | None = None
    azure_openai_api_version: str = "2024-08-01-preview"

    # Completion call. No retries unless explicitly configured.
    llm_timeout_seconds: float | None = None
    llm_max_retries: int = 0

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate(self) -> None:
        if self.http_port <= 0:
            raise ValueError("http_port must be > 0")
        if self.llm_max_retries < 0:
            raise ValueError("llm_max_retries must be >= 0")
        if self.llm_timeout_seconds is not None and self.llm_timeout_seconds <= 0:
            raise ValueError("llm_timeout_seconds must be > 0")

    def missing_credentials(self) -> list[str]:
        return [env for field, env in REQUIRED_CREDENTIALS if not getattr(self, field)]


_settings: ExecutorSettings | None = None


def get_settings() -> ExecutorSettings:
    global _settings
    if _settings is None:
        _settings = ExecutorSettings()
        _settings.validate()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
