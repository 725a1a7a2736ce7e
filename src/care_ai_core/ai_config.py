"""
AI Service Configuration

Manages loading from environment variables and default values.
The resulting AIConfig is built once at startup and passed explicitly to
client factories, the responder and the judge.
"""

import os
from dataclasses import dataclass, field, asdict

from care_ai_core.domain.constants import (
    DEFAULT_BATCH_DELAY_SECONDS,
    DEFAULT_BATCH_SIZE,
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_SELECTION_CRITERIA,
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT_SECONDS,
    JUDGE_TEMPERATURE,
)


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_float(key: str, default: float) -> float:
    """Convert an environment variable to float"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a number.")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


def _env_optional_str(key: str) -> str | None:
    """Get an environment variable, treating an empty value as unset"""
    val = os.environ.get(key)
    return val if val else None


@dataclass
class OpenAIConfig:
    """OpenAI (or OpenAI-compatible endpoint) configuration"""
    api_key: str = ""
    model: str = DEFAULT_OPENAI_MODEL
    fine_tuned_model: str | None = None
    base_url: str | None = None
    embedding_model: str = DEFAULT_EMBEDDING_MODEL


@dataclass
class AnthropicConfig:
    """Anthropic Claude configuration"""
    api_key: str = ""
    model: str = DEFAULT_CLAUDE_MODEL


@dataclass
class GeminiConfig:
    """Gemini via Vertex AI configuration"""
    project_id: str = ""
    location: str = "global"


@dataclass
class ResponderConfig:
    """Dual-model responder configuration"""
    primary_model: str = DEFAULT_OPENAI_MODEL
    secondary_model: str = DEFAULT_CLAUDE_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    system_prompt: str = DEFAULT_SYSTEM_PROMPT


@dataclass
class JudgeConfig:
    """Best-of-two judge configuration"""
    model: str = ""  # empty: reuse the primary backend client
    temperature: float = JUDGE_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    criteria: str = DEFAULT_SELECTION_CRITERIA


@dataclass
class BatchConfig:
    """Batch processing configuration"""
    batch_size: int = DEFAULT_BATCH_SIZE
    delay_seconds: float = DEFAULT_BATCH_DELAY_SECONDS


@dataclass
class AIConfig:
    """Overall AI service configuration"""
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    anthropic: AnthropicConfig = field(default_factory=AnthropicConfig)
    gemini: GeminiConfig = field(default_factory=GeminiConfig)
    responder: ResponderConfig = field(default_factory=ResponderConfig)
    judge: JudgeConfig = field(default_factory=JudgeConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)

    def to_dict(self, include_secrets: bool = False) -> dict:
        """Convert to dictionary format (API keys are masked unless requested)"""
        data = asdict(self)
        if not include_secrets:
            for section in ("openai", "anthropic"):
                if data[section]["api_key"]:
                    data[section]["api_key"] = "***"
        return {"ai_config": data}

    @classmethod
    def from_dict(cls, data: dict) -> "AIConfig":
        """Create from dictionary (handles presence/absence of ai_config key)"""
        config_data = data.get("ai_config", data)
        return cls(
            openai=OpenAIConfig(**config_data.get("openai", {})),
            anthropic=AnthropicConfig(**config_data.get("anthropic", {})),
            gemini=GeminiConfig(**config_data.get("gemini", {})),
            responder=ResponderConfig(**config_data.get("responder", {})),
            judge=JudgeConfig(**config_data.get("judge", {})),
            batch=BatchConfig(**config_data.get("batch", {})),
        )


def load_config() -> AIConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        AIConfig
    """
    openai = OpenAIConfig(
        api_key=_env_str("OPENAI_API_KEY", ""),
        model=_env_str("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
        fine_tuned_model=_env_optional_str("OPENAI_FINE_TUNED_MODEL"),
        base_url=_env_optional_str("OPENAI_BASE_URL"),
        embedding_model=_env_str("OPENAI_EMBEDDING_MODEL", DEFAULT_EMBEDDING_MODEL),
    )
    anthropic = AnthropicConfig(
        api_key=_env_str("ANTHROPIC_API_KEY", ""),
        model=_env_str("ANTHROPIC_MODEL", DEFAULT_CLAUDE_MODEL),
    )
    gemini = GeminiConfig(
        project_id=_env_str("GCP_PROJECT_ID", ""),
        location=_env_str("GEMINI_LOCATION", "global"),
    )
    responder = ResponderConfig(
        primary_model=_env_str("RESPONDER_PRIMARY_MODEL", openai.model),
        secondary_model=_env_str("RESPONDER_SECONDARY_MODEL", anthropic.model),
        timeout_seconds=_env_float("RESPONDER_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        temperature=_env_float("RESPONDER_TEMPERATURE", DEFAULT_TEMPERATURE),
        max_tokens=_env_int("RESPONDER_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        system_prompt=_env_str("RESPONDER_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT),
    )
    judge = JudgeConfig(
        model=_env_str("JUDGE_MODEL", ""),
        temperature=_env_float("JUDGE_TEMPERATURE", JUDGE_TEMPERATURE),
        max_tokens=_env_int("JUDGE_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        timeout_seconds=_env_float("JUDGE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        criteria=_env_str("JUDGE_CRITERIA", DEFAULT_SELECTION_CRITERIA),
    )
    batch = BatchConfig(
        batch_size=_env_int("BATCH_SIZE", DEFAULT_BATCH_SIZE),
        delay_seconds=_env_float("BATCH_DELAY_SECONDS", DEFAULT_BATCH_DELAY_SECONDS),
    )
    return AIConfig(
        openai=openai,
        anthropic=anthropic,
        gemini=gemini,
        responder=responder,
        judge=judge,
        batch=batch,
    )
