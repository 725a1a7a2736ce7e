"""
Batch Processing

Runs dual analyses for many prompts, a fixed-size group at a time, with a
fixed pause between groups to stay under provider rate limits.
"""

import asyncio
import logging

import pandas as pd

from care_ai_core.domain.constants import DEFAULT_BATCH_DELAY_SECONDS, DEFAULT_BATCH_SIZE
from care_ai_core.domain.entities import DualAnalysis
from care_ai_core.use_cases.dual_analysis import DualResponder

logger = logging.getLogger(__name__)


async def batch_process(
    responder: DualResponder,
    prompts: list[str],
    system_prompt: str | None = None,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    delay_seconds: float = DEFAULT_BATCH_DELAY_SECONDS,
    **options,
) -> list[DualAnalysis]:
    """
    Analyze prompts in groups of batch_size

    Prompts within a group run concurrently. The pause is applied between
    groups only, not after the last one.

    Args:
        responder: Dual responder
        prompts: User prompts
        system_prompt: System instruction shared by every prompt
        batch_size: Number of prompts per group
        delay_seconds: Pause between groups
        **options: Passed through to DualResponder.analyze

    Returns:
        list[DualAnalysis] in the same order as prompts

    Raises:
        ValueError: If batch_size is less than 1 or delay_seconds is negative
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1.")
    if delay_seconds < 0:
        raise ValueError("delay_seconds must be non-negative.")

    results: list[DualAnalysis] = []
    total = len(prompts)
    for start in range(0, total, batch_size):
        group = prompts[start:start + batch_size]
        logger.info("Processing prompts %d-%d of %d", start + 1, start + len(group), total)
        group_results = await asyncio.gather(
            *(responder.analyze(p, system_prompt, **options) for p in group)
        )
        results.extend(group_results)

        if start + batch_size < total and delay_seconds > 0:
            await asyncio.sleep(delay_seconds)

    return results


def results_to_frame(prompts: list[str], analyses: list[DualAnalysis]) -> pd.DataFrame:
    """
    Flatten batch results into one row per prompt

    Columns: prompt, status, <backend>_content, <backend>_model,
    <backend>_tokens and <backend>_error for both backends, winner, selection_reasoning.
    """
    if len(prompts) != len(analyses):
        raise ValueError(
            f"Number of prompts ({len(prompts)}) must match number of analyses ({len(analyses)})"
        )

    rows = []
    for prompt, analysis in zip(prompts, analyses):
        row: dict = {"prompt": prompt, "status": analysis.status.value}
        for backend in (analysis.primary_backend, analysis.secondary_backend):
            result = analysis.results.get(backend)
            row[f"{backend}_content"] = result.content if result else None
            row[f"{backend}_model"] = result.model_name if result else None
            row[f"{backend}_tokens"] = result.total_tokens if result else 0
            row[f"{backend}_error"] = analysis.errors.get(backend)
        row["winner"] = analysis.selected.winner if analysis.selected else None
        row["selection_reasoning"] = analysis.selected.reasoning if analysis.selected else None
        rows.append(row)
    return pd.DataFrame(rows)
