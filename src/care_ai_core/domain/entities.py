"""
Domain Entities

Defines the structures produced by a dual analysis run: per-backend results,
the judge's selection, and health check results.
"""

from dataclasses import dataclass, field
from enum import Enum

from care_ai_core.domain.value_objects import GenerationResult


class AnalysisStatus(str, Enum):
    """Outcome of dispatching one prompt to both backends"""
    BOTH_SUCCEEDED = "both_succeeded"
    PARTIAL_SUCCESS = "partial_success"
    BOTH_FAILED = "both_failed"


@dataclass
class SelectionOutcome:
    """Judge verdict"""
    winner: str
    content: str
    reasoning: str
    scores: dict[str, dict[str, int]] | None = None
    is_fallback: bool = False

    def to_dict(self) -> dict:
        data = {
            "winner": self.winner,
            "content": self.content,
            "reasoning": self.reasoning,
        }
        if self.scores is not None:
            data["scores"] = self.scores
        return data


@dataclass
class DualAnalysis:
    """Results of one prompt sent to the primary and secondary backends"""
    primary_backend: str
    secondary_backend: str
    results: dict[str, GenerationResult] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    selected: SelectionOutcome | None = None

    @property
    def primary(self) -> GenerationResult | None:
        return self.results.get(self.primary_backend)

    @property
    def secondary(self) -> GenerationResult | None:
        return self.results.get(self.secondary_backend)

    @property
    def status(self) -> AnalysisStatus:
        if self.primary is not None and self.secondary is not None:
            return AnalysisStatus.BOTH_SUCCEEDED
        if self.primary is None and self.secondary is None:
            return AnalysisStatus.BOTH_FAILED
        return AnalysisStatus.PARTIAL_SUCCESS

    @property
    def failed_backends(self) -> list[str]:
        return [
            b for b in (self.primary_backend, self.secondary_backend)
            if b in self.errors
        ]

    @property
    def best_content(self) -> str | None:
        """
        Content a caller should use: the judge's pick when present,
        otherwise whichever backend produced a result (primary first).
        """
        if self.selected is not None:
            return self.selected.content
        for result in (self.primary, self.secondary):
            if result is not None:
                return result.content
        return None

    def to_dict(self) -> dict:
        """Convert to the JSON shape returned by the API (keyed by backend)"""
        data: dict = {}
        for backend in (self.primary_backend, self.secondary_backend):
            result = self.results.get(backend)
            data[backend] = result.to_dict() if result is not None else None
        data["errors"] = dict(self.errors)
        data["status"] = self.status.value
        if self.selected is not None:
            data["selected"] = self.selected.to_dict()
        return data


@dataclass
class HealthCheckResult:
    """Health check result"""
    backend: str
    model_name: str
    success: bool
    latency_ms: int | None
    error: str | None
