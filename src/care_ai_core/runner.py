"""
care-ai-core CLI Runner

Minimal CLI for running dual analyses against the configured backends.

Usage:
    python -m care_ai_core.runner analyze --prompt "Summarize diabetes care gaps"
    python -m care_ai_core.runner compare --prompt "Draft a flu shot reminder"
    python -m care_ai_core.runner batch --input prompts.txt --output results/batch.csv
    python -m care_ai_core.runner health
    python -m care_ai_core.runner embed --text "type 2 diabetes"
    python -m care_ai_core.runner fine-tune-data --input examples.json --output train.jsonl
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import openai
from dotenv import load_dotenv

from care_ai_core.ai_config import AIConfig, load_config
from care_ai_core.domain.constants import BACKEND_OPENAI
from care_ai_core.domain.entities import AnalysisStatus
from care_ai_core.infrastructure.model_clients.factory import create_client
from care_ai_core.use_cases.batch import batch_process, results_to_frame
from care_ai_core.use_cases.dual_analysis import create_responder
from care_ai_core.use_cases.fine_tuning import build_fine_tuning_jsonl
from care_ai_core.use_cases.health_check import run_health_check


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="care-ai-core: Dual-model analysis with best-of-two selection",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Ask both backends and select the best answer")
    compare = sub.add_parser("compare", help="Ask both backends, side by side, without judging")
    for p in (analyze, compare):
        p.add_argument("--prompt", required=True, help="User prompt")
        p.add_argument("--system-prompt", default=None, help="System instruction")
        p.add_argument("--temperature", type=float, default=None, help="Sampling temperature (0-2)")
        p.add_argument("--max-tokens", type=int, default=None, help="Maximum output tokens")
    analyze.add_argument(
        "--no-select-best",
        action="store_true",
        help="Skip the judge call",
    )
    analyze.add_argument("--criteria", default=None, help="Evaluation criteria for the judge")

    batch = sub.add_parser("batch", help="Analyze one prompt per line of a text file")
    batch.add_argument("--input", required=True, help="Text file with one prompt per line")
    batch.add_argument("--system-prompt", default=None, help="System instruction")
    batch.add_argument(
        "--output",
        default=None,
        help="Output CSV path (default: results/batch_<timestamp>.csv)",
    )
    batch.add_argument("--no-select-best", action="store_true", help="Skip the judge call")

    sub.add_parser("health", help="Check connectivity to every configured backend")

    embed = sub.add_parser("embed", help="Create an embedding with the OpenAI backend")
    embed.add_argument("--text", required=True, help="Text to embed")

    fine_tune = sub.add_parser("fine-tune-data", help="Convert examples to fine-tuning JSONL")
    fine_tune.add_argument("--input", required=True, help="JSON array of {prompt, completion}")
    fine_tune.add_argument("--output", required=True, help="Output JSONL path")

    return parser.parse_args(argv)


def _read_prompts(path: Path) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


async def _run_analyze(args: argparse.Namespace, config: AIConfig) -> int:
    responder = create_responder(config)
    options = {"temperature": args.temperature, "max_tokens": args.max_tokens}
    if args.command == "compare":
        analysis = await responder.compare(args.prompt, args.system_prompt, **options)
    else:
        analysis = await responder.analyze(
            args.prompt,
            args.system_prompt,
            select_best=not args.no_select_best,
            selection_criteria=args.criteria,
            **options,
        )
    print(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
    return 1 if analysis.status is AnalysisStatus.BOTH_FAILED else 0


async def _run_batch(args: argparse.Namespace, config: AIConfig) -> int:
    prompts = _read_prompts(Path(args.input))
    if not prompts:
        print(f"ERROR: No prompts found in {args.input}")
        return 1

    output_path = Path(args.output) if args.output else (
        Path("results") / f"batch_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    )

    print(f"\n=== Running batch: {len(prompts)} prompts ===\n")
    print(f"  Batch size: {config.batch.batch_size}")
    print(f"  Delay: {config.batch.delay_seconds}s")
    print()

    responder = create_responder(config)
    analyses = await batch_process(
        responder,
        prompts,
        args.system_prompt,
        batch_size=config.batch.batch_size,
        delay_seconds=config.batch.delay_seconds,
        select_best=not args.no_select_best,
    )

    df = results_to_frame(prompts, analyses)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    failed = sum(1 for a in analyses if a.status is AnalysisStatus.BOTH_FAILED)
    print("=== Output ===\n")
    print(f"  Results: {output_path}")
    print(f"  Complete failures: {failed}/{len(analyses)}")
    print()
    return 1 if failed == len(analyses) else 0


async def _run_health(config: AIConfig) -> int:
    clients = []
    errors = []
    models = [config.responder.primary_model, config.responder.secondary_model]
    if config.judge.model and config.judge.model not in models:
        models.append(config.judge.model)
    for model_name in models:
        try:
            clients.append(create_client(model_name, config))
        except ValueError as e:
            errors.append(f"{model_name}: {e}")

    for error in errors:
        print(f"  CONFIG ERROR: {error}")
    results = await run_health_check(clients) if clients else []
    return 0 if not errors and all(r.success for r in results) else 1


async def _run_embed(args: argparse.Namespace, config: AIConfig) -> int:
    client = create_client(config.openai.model, config)
    if client.backend != BACKEND_OPENAI:
        print("ERROR: Embeddings require an OpenAI model (set OPENAI_MODEL)")
        return 1
    try:
        embedding = await client.create_embedding(args.text)
    except (openai.OpenAIError, TimeoutError) as e:
        print(f"ERROR: Embedding request failed: {e}")
        return 1
    print(json.dumps({"embedding": embedding, "dimensions": len(embedding)}))
    return 0


def _run_fine_tune_data(args: argparse.Namespace) -> int:
    examples = json.loads(Path(args.input).read_text(encoding="utf-8"))
    if not isinstance(examples, list):
        print("ERROR: Input must be a JSON array of {prompt, completion} objects")
        return 1
    jsonl = build_fine_tuning_jsonl(examples)
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(jsonl + "\n", encoding="utf-8")
    print(f"  Wrote {len(examples)} examples to {output_path}")
    return 0


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load config
    config = load_config()

    try:
        if args.command in ("analyze", "compare"):
            exit_code = asyncio.run(_run_analyze(args, config))
        elif args.command == "batch":
            exit_code = asyncio.run(_run_batch(args, config))
        elif args.command == "health":
            exit_code = asyncio.run(_run_health(config))
        elif args.command == "embed":
            exit_code = asyncio.run(_run_embed(args, config))
        else:
            exit_code = _run_fine_tune_data(args)
    except ValueError as e:
        # Missing API keys and invalid prompts/options
        print(f"ERROR: {e}")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
