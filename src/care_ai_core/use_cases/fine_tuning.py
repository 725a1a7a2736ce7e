"""
Fine-tuning Dataset

Converts prompt/completion examples into OpenAI chat fine-tuning JSONL.
"""

import json

from care_ai_core.domain.constants import FINE_TUNING_SYSTEM_PROMPT


def build_fine_tuning_jsonl(
    examples: list[dict],
    system_prompt: str = FINE_TUNING_SYSTEM_PROMPT,
) -> str:
    """
    Build a JSONL dataset, one chat transcript per example

    Args:
        examples: Dicts with "prompt" and "completion" keys
        system_prompt: System message placed first in every transcript

    Returns:
        Newline-joined JSON lines (no trailing newline)

    Raises:
        ValueError: If an example is not an object or lacks prompt or completion
    """
    lines = []
    for i, example in enumerate(examples):
        if not isinstance(example, dict):
            raise ValueError(f"Example {i} must be an object with 'prompt' and 'completion'")
        prompt = example.get("prompt")
        completion = example.get("completion")
        if not prompt or not completion:
            raise ValueError(f"Example {i} must have non-empty 'prompt' and 'completion'")
        record = {
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
                {"role": "assistant", "content": completion},
            ]
        }
        lines.append(json.dumps(record, ensure_ascii=False))
    return "\n".join(lines)
