"""
Health Check

Performs connectivity checks for the responder's backends and the judge.
"""

import asyncio
import time

from care_ai_core.domain.entities import HealthCheckResult
from care_ai_core.domain.value_objects import GenerationRequest
from care_ai_core.infrastructure.model_clients.base import ModelClient


HEALTH_CHECK_PROMPT = "Reply with only 'OK' if you can read this message."
HEALTH_CHECK_SYSTEM_PROMPT = "You are a connectivity check."


async def health_check_backend(client: ModelClient) -> HealthCheckResult:
    """
    Execute a health check for a single backend.

    Args:
        client: Model client to check

    Returns:
        HealthCheckResult: Health check result
    """
    request = GenerationRequest(
        system_prompt=HEALTH_CHECK_SYSTEM_PROMPT,
        prompt=HEALTH_CHECK_PROMPT,
        temperature=0.0,
        max_tokens=16,
    )
    start_time = time.time()
    try:
        result = await client.generate(request)
    except Exception as e:
        return HealthCheckResult(
            backend=client.backend,
            model_name=client.model_name,
            success=False,
            latency_ms=None,
            error=str(e) or type(e).__name__,
        )

    if not result.content.strip():
        return HealthCheckResult(
            backend=client.backend,
            model_name=client.model_name,
            success=False,
            latency_ms=None,
            error=f"{client.backend} ({client.model_name}) returned an empty response",
        )
    return HealthCheckResult(
        backend=client.backend,
        model_name=result.model_name,
        success=True,
        latency_ms=result.latency_ms or int((time.time() - start_time) * 1000),
        error=None,
    )


async def run_health_check(clients: list[ModelClient]) -> list[HealthCheckResult]:
    """
    Execute health checks for all clients and print a summary.

    Args:
        clients: Model clients to check (checked concurrently)

    Returns:
        list[HealthCheckResult] in the same order as clients
    """
    print("=== Backend Health Check ===\n")
    results = await asyncio.gather(*(health_check_backend(c) for c in clients))

    for result in results:
        print(f"  {result.backend} / {result.model_name}... ", end="")
        if result.success:
            print(f"OK ({result.latency_ms}ms)")
        else:
            # Display only the first 100 characters of the error message
            error_short = result.error[:100] if result.error else "Unknown error"
            print("FAILED")
            print(f"    Error: {error_short}")

    print()
    return list(results)
