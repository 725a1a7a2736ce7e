"""
Best-of-two selection judge

Implements SelectionJudge, which asks a model to compare two completions
for the same prompt and pick the better one.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from care_ai_core.ai_config import JudgeConfig
    from care_ai_core.infrastructure.model_clients.base import ModelClient

from care_ai_core.domain.constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_SELECTION_CRITERIA,
    FALLBACK_REASONING,
    JUDGE_SYSTEM_PROMPT,
    JUDGE_TEMPERATURE,
)
from care_ai_core.domain.entities import SelectionOutcome
from care_ai_core.domain.value_objects import GenerationRequest, GenerationResult
from care_ai_core.prompt_builder import build_selection_prompt

logger = logging.getLogger(__name__)

_DISPLAY_NAMES = {"openai": "OpenAI", "claude": "Claude", "gemini": "Gemini"}


class JudgeParseError(Exception):
    """Error raised when the judge's reply is not a usable verdict"""
    pass


class SelectionJudge:
    """
    Judge that uses an LLM to choose between two completions

    Response A always belongs to the primary backend and response B to the
    secondary one. When the judge call fails (including a client timeout)
    or its reply cannot be parsed, B is selected with a fixed reasoning string.
    """

    _CODE_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")

    def __init__(
        self,
        client: ModelClient,
        *,
        temperature: float = JUDGE_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        default_criteria: str = DEFAULT_SELECTION_CRITERIA,
    ) -> None:
        self._client = client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.default_criteria = default_criteria

    @classmethod
    def from_config(cls, client: ModelClient, config: JudgeConfig) -> "SelectionJudge":
        return cls(
            client,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            default_criteria=config.criteria,
        )

    async def select(
        self,
        original_prompt: str,
        result_a: GenerationResult,
        result_b: GenerationResult,
        criteria: str | None = None,
    ) -> SelectionOutcome:
        """
        Have the LLM pick the better of two results

        Args:
            original_prompt: The user prompt both results answer
            result_a: Primary backend result (label "A")
            result_b: Secondary backend result (label "B")
            criteria: Evaluation criteria (defaults to default_criteria)

        Returns:
            SelectionOutcome. Never raises for judge failures; the fallback
            outcome selects result_b.
        """
        prompt = build_selection_prompt(
            original_prompt,
            result_a.content,
            result_b.content,
            label_a=_DISPLAY_NAMES.get(result_a.backend, result_a.backend),
            label_b=_DISPLAY_NAMES.get(result_b.backend, result_b.backend),
            criteria=criteria or self.default_criteria,
        )

        try:
            request = GenerationRequest(
                system_prompt=JUDGE_SYSTEM_PROMPT,
                prompt=prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            evaluation = await self._client.generate(request)
            label, reasoning, scores = self._parse_selection(evaluation.content)
        except Exception as e:
            logger.warning(
                "Response selection failed, defaulting to %s: %s",
                result_b.backend, str(e) or type(e).__name__,
            )
            return self.fallback(result_b)

        winner = result_a if label == "A" else result_b
        logger.info("Judge selected %s (%s)", winner.backend, label)
        return SelectionOutcome(
            winner=winner.backend,
            content=winner.content,
            reasoning=reasoning,
            scores=scores,
        )

    @staticmethod
    def fallback(result_b: GenerationResult) -> SelectionOutcome:
        """Deterministic default verdict: always the secondary backend"""
        return SelectionOutcome(
            winner=result_b.backend,
            content=result_b.content,
            reasoning=FALLBACK_REASONING,
            scores=None,
            is_fallback=True,
        )

    def _parse_selection(self, raw: str) -> tuple[str, str, dict | None]:
        """
        Extract (label, reasoning, scores) from the judge's reply

        Accepts a bare JSON object or one wrapped in a ```json code block.

        Raises:
            JudgeParseError: When the reply is not a JSON object with
                "selected" set to "A" or "B"
        """
        text = (raw or "").strip()
        match = self._CODE_BLOCK_RE.search(text)
        json_text = match.group(1) if match else text

        try:
            data = json.loads(json_text.strip())
        except (json.JSONDecodeError, ValueError, TypeError) as e:
            raise JudgeParseError(f"Judge reply is not valid JSON: {text[:200]}") from e

        if not isinstance(data, dict):
            raise JudgeParseError("Judge reply is not a JSON object")

        label = data.get("selected")
        if label not in ("A", "B"):
            raise JudgeParseError(f"Judge selected an unknown label: {label!r}")

        scores = data.get("scores")
        if scores is not None and not isinstance(scores, dict):
            raise JudgeParseError("Judge scores must be an object keyed by label")

        reasoning = data.get("reasoning")
        return label, str(reasoning) if reasoning is not None else "", scores
