"""
Model client base class and timeout mixin

Defines the abstract base class inherited by all model clients
and the TimeoutMixin that bounds every outbound call.
"""

import asyncio
from abc import ABC, abstractmethod

from care_ai_core.domain.value_objects import GenerationRequest, GenerationResult


class TimeoutMixin:
    """Per-call timeout. Subclasses set self.timeout_seconds."""

    timeout_seconds: float | None = None

    async def _with_timeout(self, coro):
        """
        Await a coroutine, bounded by self.timeout_seconds.

        Args:
            coro: The awaitable to run

        Returns:
            The awaitable's result

        Raises:
            ValueError: If timeout_seconds is not positive
            TimeoutError: If the call does not finish in time
        """
        if self.timeout_seconds is None:
            return await coro
        if self.timeout_seconds <= 0:
            coro.close()
            raise ValueError("timeout_seconds must be positive.")
        try:
            return await asyncio.wait_for(coro, timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            raise TimeoutError(f"Request timed out after {self.timeout_seconds}s")


class ModelClient(ABC):
    """Abstract base class for text-generation backends"""

    backend: str
    model_name: str

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Send a request and retrieve the completion"""
        pass
