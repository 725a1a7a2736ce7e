"""
OpenAI (and OpenAI-compatible API) model client
"""

import logging
import os
import time

from openai import AsyncOpenAI

from care_ai_core.domain.constants import BACKEND_OPENAI, DEFAULT_EMBEDDING_MODEL
from care_ai_core.domain.value_objects import GenerationRequest, GenerationResult
from care_ai_core.infrastructure.model_clients.base import ModelClient, TimeoutMixin

logger = logging.getLogger(__name__)


class OpenAIClient(TimeoutMixin, ModelClient):
    """Client using the OpenAI chat completions API"""

    backend = BACKEND_OPENAI

    def __init__(
        self,
        model_name: str,
        api_key: str | None = None,
        base_url: str | None = None,
        fine_tuned_model: str | None = None,
        embedding_model: str = DEFAULT_EMBEDDING_MODEL,
        timeout_seconds: float | None = 60,
    ):
        """
        Args:
            model_name: Default model name (e.g. gpt-4-turbo-preview)
            api_key: OpenAI API key (falls back to OPENAI_API_KEY if not specified)
            base_url: Endpoint for OpenAI-compatible servers (None uses api.openai.com)
            fine_tuned_model: Fine-tuned model that takes precedence over every other model choice
            embedding_model: Model used by create_embedding
            timeout_seconds: Per-call timeout in seconds (None disables the bound)
        """
        self.model_name = model_name
        self.fine_tuned_model = fine_tuned_model
        self.embedding_model = embedding_model
        self.timeout_seconds = timeout_seconds
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY")

        if not self.api_key:
            raise ValueError("OPENAI_API_KEY is not set")

        # Failed calls are recorded, not retried
        self.client = AsyncOpenAI(api_key=self.api_key, base_url=base_url, max_retries=0)

    def resolve_model(self, request: GenerationRequest) -> str:
        # fine-tuned > per-request override > configured default
        return self.fine_tuned_model or request.model or self.model_name

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Send a request and retrieve the completion

        Args:
            request: System prompt, user prompt and sampling options

        Returns:
            GenerationResult: The model's completion

        Raises:
            openai.OpenAIError: If the API call fails
            TimeoutError: If the call exceeds timeout_seconds
        """
        model = self.resolve_model(request)
        start_time = time.time()
        response = await self._with_timeout(
            self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": request.system_prompt},
                    {"role": "user", "content": request.prompt},
                ],
                temperature=request.temperature,
                max_tokens=request.max_tokens,
            )
        )
        latency_ms = int((time.time() - start_time) * 1000)

        choice = response.choices[0]

        # Retrieve token usage
        input_tokens = 0
        output_tokens = 0
        if response.usage:
            input_tokens = response.usage.prompt_tokens or 0
            output_tokens = response.usage.completion_tokens or 0

        logger.debug("OpenAI %s completed in %dms", model, latency_ms)
        return GenerationResult(
            content=choice.message.content or "",
            backend=self.backend,
            model_name=response.model or model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=choice.finish_reason,
            latency_ms=latency_ms,
        )

    async def create_embedding(self, text: str) -> list[float]:
        """
        Create an embedding vector for semantic search

        Raises:
            ValueError: If text is empty
        """
        if not text or not text.strip():
            raise ValueError("text must be a non-empty string")
        response = await self._with_timeout(
            self.client.embeddings.create(model=self.embedding_model, input=text)
        )
        return list(response.data[0].embedding)
