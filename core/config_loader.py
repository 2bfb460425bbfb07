import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field


class LlmConfig(BaseModel):
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    # Per-call timeout; the client never retries, so this bounds each model call.
    request_timeout_seconds: float = Field(default=30.0, gt=0)


class AssistantConfig(BaseModel):
    """Configuration for the chat assistant (intent routing + replies)."""
    temperature: float = 0.6
    # Maximum number of turns kept per user (2 turns per exchange).
    history_limit: int = Field(default=10, ge=2)


class MatchingConfig(BaseModel):
    """
    Configuration for resume/job match scoring.
    """
    temperature: float = 0.3
    # Resume characters sent to the model.
    resume_char_limit: int = Field(default=3000, ge=1)
    # Upper bound on concurrent scoring calls in a batch.
    max_concurrency: int = Field(default=5, ge=1)
    # Best-matches view thresholds
    best_match_min_score: int = Field(default=40, ge=0, le=100)
    best_match_limit: int = Field(default=8, ge=1)


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 3001
    chat_rate_limit: str = "30/minute"


class AppConfig(BaseModel):
    llm: LlmConfig = Field(default_factory=LlmConfig)
    assistant: AssistantConfig = Field(default_factory=AssistantConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _set_nested(data: dict, section: str, key: str, value) -> None:
    if section not in data or data[section] is None:
        data[section] = {}
    data[section][key] = value


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try absolute or adjusted path
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    # Allow env var overrides for the LLM connection
    env_api_key = os.environ.get("OPENAI_API_KEY")
    if env_api_key:
        _set_nested(data, 'llm', 'api_key', env_api_key)

    env_llm_base_url = os.environ.get("LLM_BASE_URL")
    if env_llm_base_url:
        _set_nested(data, 'llm', 'base_url', env_llm_base_url)

    env_llm_model = os.environ.get("LLM_MODEL")
    if env_llm_model:
        _set_nested(data, 'llm', 'model', env_llm_model)

    env_llm_timeout = os.environ.get("LLM_TIMEOUT_SECONDS")
    if env_llm_timeout:
        _set_nested(data, 'llm', 'request_timeout_seconds', float(env_llm_timeout))

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        _set_nested(data, 'web', 'host', os.environ['WEB_HOST'])

    if 'WEB_PORT' in os.environ:
        _set_nested(data, 'web', 'port', int(os.environ['WEB_PORT']))

    return AppConfig(**data)
