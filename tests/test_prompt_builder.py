"""
Tests for prompt_builder.py
"""

import json
from unittest.mock import patch

from care_ai_core.domain.constants import SCORE_CRITERIA
from care_ai_core.prompt_builder import (
    build_care_gap_prompt,
    build_care_plan_match_prompt,
    build_icd10_prompt,
    build_outreach_prompt,
    build_risk_stratification_prompt,
    build_selection_prompt,
)


class TestBuildSelectionPrompt:

    def test_embeds_both_responses_verbatim(self):
        content_a = "Line one.\n  Indented line two."
        content_b = 'Contains "quotes" and {braces}'
        prompt = build_selection_prompt("Explain HbA1c", content_a, content_b)

        assert "Original Prompt: Explain HbA1c" in prompt
        assert f"Response A (OpenAI):\n{content_a}\n" in prompt
        assert f"Response B (Claude):\n{content_b}\n" in prompt

    def test_default_criteria(self):
        prompt = build_selection_prompt("p", "a", "b")
        assert "Evaluation Criteria: accuracy, helpfulness, clarity, completeness" in prompt

    def test_custom_criteria_and_labels(self):
        prompt = build_selection_prompt(
            "p", "a", "b", label_a="Gemini", label_b="Claude", criteria="empathy",
        )
        assert "Response A (Gemini):" in prompt
        assert "Evaluation Criteria: empathy" in prompt

    def test_requests_json_verdict(self):
        prompt = build_selection_prompt("p", "a", "b")
        assert '"selected": "A" or "B"' in prompt
        assert '"accuracy": 1-10' in prompt
        assert prompt.index("Response A") < prompt.index("Response B")

    def test_score_fields_follow_score_criteria(self):
        prompt = build_selection_prompt("p", "a", "b")
        fields = ", ".join(f'"{name}": 1-10' for name in SCORE_CRITERIA)
        assert f'"A": {{ {fields} }},' in prompt
        assert f'"B": {{ {fields} }}' in prompt

    def test_score_fields_change_with_constant(self):
        with patch("care_ai_core.prompt_builder.SCORE_CRITERIA", ("safety",)):
            prompt = build_selection_prompt("p", "a", "b")
        assert '"A": { "safety": 1-10 },' in prompt
        assert '"accuracy": 1-10' not in prompt


class TestClinicalPrompts:

    def test_care_plan_match_embeds_json(self):
        patient = {"id": "p1", "conditions": ["E11.9"]}
        plans = [{"id": "cp1", "name": "Diabetes Management"}]
        pair = build_care_plan_match_prompt(patient, plans)

        assert "care plan matching" in pair.system_prompt
        assert json.dumps(patient, indent=2) in pair.prompt
        assert json.dumps(plans, indent=2) in pair.prompt
        assert '"recommendations"' in pair.prompt

    def test_outreach_mail(self):
        pair = build_outreach_prompt(
            "Jane Doe", "Diabetes Management", "Monthly check-ins", ["Fewer ER visits", "Better A1c"],
        )
        assert "Generate a mail for this patient:" in pair.prompt
        assert "Patient: Jane Doe" in pair.prompt
        assert "Key Benefits: Fewer ER visits, Better A1c" in pair.prompt
        assert "- Formal letter format" in pair.prompt
        assert "HIPAA" in pair.system_prompt

    def test_outreach_email_defaults(self):
        pair = build_outreach_prompt("Jane Doe", "Wellness", outreach_type="email")
        assert "Key Benefits: Improved health outcomes" in pair.prompt
        assert "Care Plan Description: \n" in pair.prompt
        assert "- Email format" in pair.prompt

    def test_risk_stratification(self):
        pair = build_risk_stratification_prompt([{"id": "p1"}, {"id": "p2"}])
        assert "population health" in pair.system_prompt
        assert '"stratification"' in pair.prompt
        assert '"id": "p2"' in pair.prompt

    def test_icd10(self):
        pair = build_icd10_prompt({"E11.9": 120, "I10": 300})
        assert "ICD-10" in pair.system_prompt
        assert '"I10": 300' in pair.prompt
        assert "HEDIS" in pair.prompt

    def test_care_gap(self):
        measures = [{"id": "flu", "name": "Flu Vaccination"}]
        pair = build_care_gap_prompt({"id": "p1"}, measures)
        assert "quality improvement" in pair.system_prompt
        assert '"name": "Flu Vaccination"' in pair.prompt

    def test_non_ascii_preserved(self):
        pair = build_care_gap_prompt({"name": "José Müller"}, [])
        assert "José Müller" in pair.prompt
