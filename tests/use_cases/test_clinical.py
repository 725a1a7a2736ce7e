"""
Clinical analysis tests

Each analysis builds its prompt pair and asks the responder with select_best.
"""

import asyncio

import pytest

from care_ai_core.domain.constants import DEFAULT_QUALITY_MEASURES
from care_ai_core.domain.entities import DualAnalysis
from care_ai_core.use_cases.clinical import (
    CARE_PLAN_CRITERIA,
    OUTREACH_CRITERIA,
    analyze_icd10_patterns,
    analyze_patient_for_care_plans,
    generate_outreach_content,
    identify_care_gaps,
    perform_risk_stratification,
)


class RecordingResponder:
    """Captures analyze() calls and returns an empty DualAnalysis"""

    def __init__(self):
        self.calls = []

    async def analyze(self, prompt, system_prompt=None, **options):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, **options})
        return DualAnalysis("openai", "claude")


def _call(fn, *args, **kwargs):
    responder = RecordingResponder()
    analysis = asyncio.run(fn(responder, *args, **kwargs))
    assert isinstance(analysis, DualAnalysis)
    assert len(responder.calls) == 1
    return responder.calls[0]


class TestCarePlans:

    def test_uses_care_plan_criteria(self):
        call = _call(analyze_patient_for_care_plans, {"id": "p1"}, [{"id": "cp1"}])
        assert call["select_best"] is True
        assert call["selection_criteria"] == CARE_PLAN_CRITERIA
        assert "care plan matching" in call["system_prompt"]
        assert '"id": "cp1"' in call["prompt"]


class TestOutreach:

    def test_mail(self):
        call = _call(
            generate_outreach_content,
            {"name": "Jane Doe"},
            {"name": "Diabetes Management", "benefits": ["Better A1c"]},
        )
        assert call["selection_criteria"] == OUTREACH_CRITERIA
        assert "Patient: Jane Doe" in call["prompt"]
        assert "Formal letter format" in call["prompt"]

    def test_email(self):
        call = _call(
            generate_outreach_content, {"name": "Jane"}, {"name": "Wellness"}, "email",
        )
        assert "Generate a email for this patient:" in call["prompt"]

    def test_unknown_outreach_type(self):
        responder = RecordingResponder()
        with pytest.raises(ValueError, match="outreach_type"):
            asyncio.run(generate_outreach_content(responder, {"name": "J"}, {"name": "W"}, "sms"))
        assert responder.calls == []

    def test_missing_patient_name(self):
        with pytest.raises(ValueError, match="patient_info"):
            asyncio.run(generate_outreach_content(RecordingResponder(), {}, {"name": "W"}))

    def test_missing_care_plan_name(self):
        with pytest.raises(ValueError, match="care_plan"):
            asyncio.run(generate_outreach_content(RecordingResponder(), {"name": "J"}, {}))


class TestPopulationAnalyses:

    def test_risk_stratification(self):
        call = _call(perform_risk_stratification, [{"id": "p1"}])
        assert call["select_best"] is True
        assert "selection_criteria" not in call
        assert '"stratification"' in call["prompt"]

    def test_icd10_patterns(self):
        call = _call(analyze_icd10_patterns, {"E11.9": 42})
        assert call["select_best"] is True
        assert '"E11.9": 42' in call["prompt"]


class TestCareGaps:

    def test_default_quality_measures(self):
        call = _call(identify_care_gaps, {"id": "p1"})
        for measure in DEFAULT_QUALITY_MEASURES:
            assert measure["name"] in call["prompt"]

    def test_empty_list_uses_defaults(self):
        call = _call(identify_care_gaps, {"id": "p1"}, [])
        assert "Annual Wellness Visit" in call["prompt"]

    def test_custom_quality_measures(self):
        call = _call(identify_care_gaps, {"id": "p1"}, [{"id": "bcs", "name": "Breast Cancer Screening"}])
        assert "Breast Cancer Screening" in call["prompt"]
        assert "Annual Wellness Visit" not in call["prompt"]
