"""
Model client factory

Creates the appropriate client instance based on the model name.
"""

from __future__ import annotations

from care_ai_core.ai_config import AIConfig
from care_ai_core.infrastructure.model_clients.base import ModelClient
from care_ai_core.infrastructure.model_clients.claude import ClaudeClient
from care_ai_core.infrastructure.model_clients.gemini import GeminiClient
from care_ai_core.infrastructure.model_clients.openai_client import OpenAIClient


def create_client(
    model_name: str,
    config: AIConfig,
    timeout_seconds: float | None = None,
) -> ModelClient:
    """
    Create the appropriate client based on the model name

    Args:
        model_name: Model name
        config: AIConfig built at startup
        timeout_seconds: Per-call timeout (defaults to the responder timeout)

    Returns:
        ModelClient: The appropriate client instance
    """
    if timeout_seconds is None:
        timeout_seconds = config.responder.timeout_seconds

    if model_name.startswith("claude"):
        return ClaudeClient(
            model_name,
            api_key=config.anthropic.api_key or None,
            timeout_seconds=timeout_seconds,
        )
    elif model_name.startswith("gemini"):
        return GeminiClient(
            model_name,
            project_id=config.gemini.project_id or None,
            location=config.gemini.location,
            timeout_seconds=timeout_seconds,
        )
    else:
        return OpenAIClient(
            model_name,
            api_key=config.openai.api_key or None,
            base_url=config.openai.base_url,
            fine_tuned_model=config.openai.fine_tuned_model,
            embedding_model=config.openai.embedding_model,
            timeout_seconds=timeout_seconds,
        )
