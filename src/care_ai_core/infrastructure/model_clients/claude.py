"""
Anthropic Claude model client
"""

import logging
import os
import time

from anthropic import AsyncAnthropic

from care_ai_core.domain.constants import BACKEND_CLAUDE
from care_ai_core.domain.value_objects import GenerationRequest, GenerationResult
from care_ai_core.infrastructure.model_clients.base import ModelClient, TimeoutMixin

logger = logging.getLogger(__name__)

# Anthropic accepts temperatures in 0.0-1.0
_MAX_TEMPERATURE = 1.0


class ClaudeClient(TimeoutMixin, ModelClient):
    """Claude client using the Anthropic API"""

    backend = BACKEND_CLAUDE

    def __init__(
        self,
        model_name: str,
        api_key: str | None = None,
        timeout_seconds: float | None = 60,
    ):
        """
        Args:
            model_name: Model name (e.g. claude-3-5-sonnet-20241022)
            api_key: Anthropic API key (falls back to environment variable if not specified)
            timeout_seconds: Per-call timeout in seconds (None disables the bound)
        """
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")

        if not self.api_key:
            raise ValueError("ANTHROPIC_API_KEY is not set")

        self.client = AsyncAnthropic(api_key=self.api_key, max_retries=0)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Send a request and retrieve the completion

        Args:
            request: System prompt, user prompt and sampling options

        Returns:
            GenerationResult: The model's completion

        Raises:
            anthropic.AnthropicError: If the API call fails
            TimeoutError: If the call exceeds timeout_seconds
        """
        model = request.model or self.model_name
        start_time = time.time()
        response = await self._with_timeout(
            self.client.messages.create(
                model=model,
                max_tokens=request.max_tokens,
                temperature=min(request.temperature, _MAX_TEMPERATURE),
                system=request.system_prompt,
                messages=[{"role": "user", "content": request.prompt}],
            )
        )
        latency_ms = int((time.time() - start_time) * 1000)

        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", "text") == "text"
        )

        # Retrieve token usage
        input_tokens = getattr(response.usage, "input_tokens", 0) or 0
        output_tokens = getattr(response.usage, "output_tokens", 0) or 0

        logger.debug("Claude %s completed in %dms", model, latency_ms)
        return GenerationResult(
            content=text,
            backend=self.backend,
            model_name=response.model or model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=response.stop_reason,
            latency_ms=latency_ms,
        )
