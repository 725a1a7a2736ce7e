"""
Model client package

Provides a unified async interface to each LLM provider.
"""

from care_ai_core.infrastructure.model_clients.base import ModelClient
from care_ai_core.infrastructure.model_clients.factory import create_client
from care_ai_core.domain.value_objects import GenerationRequest, GenerationResult

__all__ = ["ModelClient", "GenerationRequest", "GenerationResult", "create_client"]
