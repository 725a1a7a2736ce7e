"""
Gemini (Google GenAI SDK via Vertex AI) model client
"""

import logging
import os
import time

from google import genai
from google.genai.types import GenerateContentConfig, HttpOptions

from care_ai_core.domain.constants import BACKEND_GEMINI
from care_ai_core.domain.value_objects import GenerationRequest, GenerationResult
from care_ai_core.infrastructure.model_clients.base import ModelClient, TimeoutMixin

logger = logging.getLogger(__name__)


class GeminiClient(TimeoutMixin, ModelClient):
    """Model client using Google GenAI SDK (via Vertex AI)"""

    backend = BACKEND_GEMINI

    def __init__(
        self,
        model_name: str,
        project_id: str | None = None,
        location: str | None = None,
        timeout_seconds: float | None = 60,
    ):
        """
        Args:
            model_name: Model name (e.g. gemini-2.5-flash)
            project_id: GCP project ID (falls back to environment variable if not specified)
            location: Region (defaults to "global")
            timeout_seconds: Per-call timeout in seconds (None disables the bound)
        """
        self.model_name = model_name
        self.project_id = project_id or os.environ.get("GCP_PROJECT_ID")
        self.location = location or "global"
        self.timeout_seconds = timeout_seconds

        if not self.project_id:
            raise ValueError("GCP_PROJECT_ID is not set")

        http_options = None
        if timeout_seconds:
            # HttpOptions takes milliseconds
            http_options = HttpOptions(timeout=int(timeout_seconds * 1000))

        self.client = genai.Client(
            vertexai=True,
            project=self.project_id,
            location=self.location,
            http_options=http_options,
        )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Send a request and retrieve the completion

        Raises:
            google.genai.errors.APIError: If the API call fails
            TimeoutError: If the call exceeds timeout_seconds
        """
        model = request.model or self.model_name
        config = GenerateContentConfig(
            system_instruction=request.system_prompt,
            temperature=request.temperature,
            max_output_tokens=request.max_tokens,
        )

        start_time = time.time()
        response = await self._with_timeout(
            self.client.aio.models.generate_content(
                model=model,
                contents=request.prompt,
                config=config,
            )
        )
        latency_ms = int((time.time() - start_time) * 1000)

        # Retrieve token usage
        input_tokens = 0
        output_tokens = 0
        if getattr(response, "usage_metadata", None):
            input_tokens = getattr(response.usage_metadata, "prompt_token_count", 0) or 0
            output_tokens = getattr(response.usage_metadata, "candidates_token_count", 0) or 0

        finish_reason = None
        if response.candidates:
            reason = response.candidates[0].finish_reason
            if reason is not None:
                finish_reason = getattr(reason, "value", str(reason))

        logger.debug("Gemini %s completed in %dms", model, latency_ms)
        return GenerationResult(
            content=response.text or "",
            backend=self.backend,
            model_name=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )
