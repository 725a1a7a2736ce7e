"""
Dual Analysis

Sends one prompt to the primary and secondary backends concurrently and,
when both answer, lets the selection judge pick the better response.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from care_ai_core.domain.constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_TEMPERATURE,
)
from care_ai_core.domain.entities import DualAnalysis
from care_ai_core.domain.value_objects import GenerationRequest
from care_ai_core.infrastructure.model_clients.base import ModelClient
from care_ai_core.scoring.selection_judge import SelectionJudge

if TYPE_CHECKING:
    from care_ai_core.ai_config import AIConfig

logger = logging.getLogger(__name__)


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


class DualResponder:
    """
    Dual-model responder

    Each backend call is independent: one backend's failure is recorded
    in DualAnalysis.errors and never blocks or aborts the other call.
    Per-call timeouts are enforced by the clients (TimeoutMixin).
    """

    def __init__(
        self,
        primary: ModelClient,
        secondary: ModelClient,
        judge: SelectionJudge | None = None,
        *,
        default_system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        default_temperature: float = DEFAULT_TEMPERATURE,
        default_max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        """
        Args:
            primary: Backend labeled "A" by the judge
            secondary: Backend labeled "B" by the judge (fallback winner)
            judge: Selection judge (None disables select_best)
            default_system_prompt: System prompt used when the caller passes none
            default_temperature: Temperature used when the caller passes none
            default_max_tokens: Output length used when the caller passes none
        """
        if primary.backend == secondary.backend:
            raise ValueError(
                f"primary and secondary backends must differ (both are '{primary.backend}')"
            )
        self.primary = primary
        self.secondary = secondary
        self.judge = judge
        self.default_system_prompt = default_system_prompt
        self.default_temperature = default_temperature
        self.default_max_tokens = default_max_tokens

    async def analyze(
        self,
        prompt: str,
        system_prompt: str | None = None,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        select_best: bool = False,
        selection_criteria: str | None = None,
        models: dict[str, str] | None = None,
    ) -> DualAnalysis:
        """
        Get responses from both backends and optionally select the best

        Args:
            prompt: User prompt
            system_prompt: System instruction (defaults to default_system_prompt)
            temperature: Sampling temperature, 0-2 (defaults to default_temperature)
            max_tokens: Maximum output length (defaults to default_max_tokens)
            select_best: Ask the judge to pick a winner when both backends succeed
            selection_criteria: Criteria passed to the judge
            models: Optional backend id -> model name overrides for this call

        Returns:
            DualAnalysis with a result or an error for each backend

        Raises:
            ValueError: If the prompt or sampling options are invalid
        """
        system_prompt = system_prompt or self.default_system_prompt
        if temperature is None:
            temperature = self.default_temperature
        if max_tokens is None:
            max_tokens = self.default_max_tokens
        models = models or {}
        requests = {
            client.backend: GenerationRequest(
                system_prompt=system_prompt,
                prompt=prompt,
                temperature=temperature,
                max_tokens=max_tokens,
                model=models.get(client.backend),
            )
            for client in (self.primary, self.secondary)
        }

        start_time = time.time()
        outcomes = await asyncio.gather(
            self.primary.generate(requests[self.primary.backend]),
            self.secondary.generate(requests[self.secondary.backend]),
            return_exceptions=True,
        )
        elapsed = time.time() - start_time

        analysis = DualAnalysis(
            primary_backend=self.primary.backend,
            secondary_backend=self.secondary.backend,
        )
        for client, outcome in zip((self.primary, self.secondary), outcomes):
            if isinstance(outcome, BaseException):
                if isinstance(outcome, asyncio.CancelledError):
                    raise outcome
                message = _error_message(outcome)
                logger.error("%s API error: %s", client.backend, message)
                analysis.errors[client.backend] = message
            else:
                analysis.results[client.backend] = outcome

        logger.info(
            "Dual analysis finished in %.2fs (%s)", elapsed, analysis.status.value
        )

        if select_best and self.judge is not None and analysis.primary and analysis.secondary:
            analysis.selected = await self.judge.select(
                prompt,
                analysis.primary,
                analysis.secondary,
                criteria=selection_criteria,
            )

        return analysis

    async def compare(
        self,
        prompt: str,
        system_prompt: str | None = None,
        **options,
    ) -> DualAnalysis:
        """Side-by-side responses from both backends without judging"""
        options.pop("select_best", None)
        return await self.analyze(prompt, system_prompt, select_best=False, **options)


def create_responder(config: AIConfig, create_client_fn=None) -> DualResponder:
    """
    Build a DualResponder (with judge) from configuration

    Args:
        config: AIConfig built at startup
        create_client_fn: Function (model_name, config, timeout_seconds) -> ModelClient
            (defaults to the model client factory)

    Returns:
        DualResponder
    """
    if create_client_fn is None:
        from care_ai_core.infrastructure.model_clients.factory import create_client
        create_client_fn = create_client

    responder_timeout = config.responder.timeout_seconds
    primary = create_client_fn(config.responder.primary_model, config, timeout_seconds=responder_timeout)
    secondary = create_client_fn(config.responder.secondary_model, config, timeout_seconds=responder_timeout)
    # Judge calls are bounded by the judge timeout, not the responder one
    judge_client = create_client_fn(
        config.judge.model or config.responder.primary_model,
        config,
        timeout_seconds=config.judge.timeout_seconds,
    )
    judge = SelectionJudge.from_config(judge_client, config.judge)

    return DualResponder(
        primary,
        secondary,
        judge,
        default_system_prompt=config.responder.system_prompt,
        default_temperature=config.responder.temperature,
        default_max_tokens=config.responder.max_tokens,
    )
