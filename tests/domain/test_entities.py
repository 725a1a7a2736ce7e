"""Tests for domain entities and value objects"""

import pytest

from care_ai_core.domain.entities import (
    AnalysisStatus,
    DualAnalysis,
    HealthCheckResult,
    SelectionOutcome,
)
from care_ai_core.domain.value_objects import GenerationRequest, GenerationResult


def _result(backend, content="answer", **kwargs):
    return GenerationResult(content=content, backend=backend, model_name=f"{backend}-model", **kwargs)


class TestGenerationRequest:
    def test_defaults(self):
        request = GenerationRequest(system_prompt="system", prompt="prompt")
        assert request.temperature == 0.7
        assert request.max_tokens == 2000
        assert request.model is None

    def test_zero_temperature_is_kept(self):
        request = GenerationRequest(system_prompt="system", prompt="prompt", temperature=0.0)
        assert request.temperature == 0.0

    @pytest.mark.parametrize("prompt", ["", "   "])
    def test_empty_prompt_rejected(self, prompt):
        with pytest.raises(ValueError, match="prompt"):
            GenerationRequest(system_prompt="system", prompt=prompt)

    def test_empty_system_prompt_rejected(self):
        with pytest.raises(ValueError, match="system_prompt"):
            GenerationRequest(system_prompt="", prompt="prompt")

    @pytest.mark.parametrize("temperature", [-0.1, 2.1])
    def test_temperature_out_of_range(self, temperature):
        with pytest.raises(ValueError, match="temperature"):
            GenerationRequest(system_prompt="s", prompt="p", temperature=temperature)

    def test_non_positive_max_tokens(self):
        with pytest.raises(ValueError, match="max_tokens"):
            GenerationRequest(system_prompt="s", prompt="p", max_tokens=0)


class TestGenerationResult:
    def test_total_tokens(self):
        result = _result("openai", input_tokens=12, output_tokens=30)
        assert result.total_tokens == 42

    def test_to_dict(self):
        result = _result("claude", input_tokens=3, output_tokens=4, finish_reason="end_turn", latency_ms=120)
        assert result.to_dict() == {
            "content": "answer",
            "model": "claude-model",
            "usage": {"input_tokens": 3, "output_tokens": 4},
            "finish_reason": "end_turn",
            "latency_ms": 120,
        }


class TestSelectionOutcome:
    def test_to_dict_with_scores(self):
        scores = {"A": {"accuracy": 9}, "B": {"accuracy": 7}}
        outcome = SelectionOutcome(winner="openai", content="x", reasoning="clearer", scores=scores)
        assert outcome.to_dict() == {
            "winner": "openai",
            "content": "x",
            "reasoning": "clearer",
            "scores": scores,
        }

    def test_to_dict_omits_missing_scores(self):
        outcome = SelectionOutcome(winner="claude", content="x", reasoning="r", is_fallback=True)
        assert "scores" not in outcome.to_dict()


class TestDualAnalysis:
    def test_both_succeeded(self):
        analysis = DualAnalysis(
            "openai", "claude",
            results={"openai": _result("openai"), "claude": _result("claude")},
        )
        assert analysis.status is AnalysisStatus.BOTH_SUCCEEDED
        assert analysis.failed_backends == []

    def test_partial_success(self):
        analysis = DualAnalysis(
            "openai", "claude",
            results={"claude": _result("claude")},
            errors={"openai": "quota"},
        )
        assert analysis.status is AnalysisStatus.PARTIAL_SUCCESS
        assert analysis.primary is None
        assert analysis.failed_backends == ["openai"]

    def test_both_failed(self):
        analysis = DualAnalysis("openai", "claude", errors={"openai": "a", "claude": "b"})
        assert analysis.status is AnalysisStatus.BOTH_FAILED
        assert analysis.best_content is None
        assert analysis.failed_backends == ["openai", "claude"]

    def test_best_content_prefers_selection(self):
        analysis = DualAnalysis(
            "openai", "claude",
            results={"openai": _result("openai", "A"), "claude": _result("claude", "B")},
            selected=SelectionOutcome(winner="claude", content="B", reasoning="r"),
        )
        assert analysis.best_content == "B"

    def test_best_content_primary_first(self):
        analysis = DualAnalysis(
            "openai", "claude",
            results={"openai": _result("openai", "A"), "claude": _result("claude", "B")},
        )
        assert analysis.best_content == "A"

    def test_to_dict_includes_selection(self):
        analysis = DualAnalysis(
            "openai", "claude",
            results={"openai": _result("openai", "A"), "claude": _result("claude", "B")},
            selected=SelectionOutcome(winner="openai", content="A", reasoning="r"),
        )
        data = analysis.to_dict()
        assert data["openai"]["content"] == "A"
        assert data["claude"]["content"] == "B"
        assert data["errors"] == {}
        assert data["status"] == "both_succeeded"
        assert data["selected"]["winner"] == "openai"

    def test_status_is_str_enum(self):
        assert AnalysisStatus.PARTIAL_SUCCESS == "partial_success"


class TestHealthCheckResult:
    def test_success(self):
        result = HealthCheckResult(
            backend="openai", model_name="gpt-4-turbo", success=True, latency_ms=150, error=None,
        )
        assert result.success is True
        assert result.error is None

    def test_failure(self):
        result = HealthCheckResult(
            backend="claude", model_name="claude-3-5-sonnet", success=False,
            latency_ms=None, error="Connection refused",
        )
        assert result.success is False
        assert result.latency_ms is None
