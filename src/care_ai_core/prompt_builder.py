"""
Prompt Builder

Builds the judge's evaluation prompt and the system/user prompt pairs
for the clinical analysis use cases.

Structured inputs (patient data, care plans, ICD-10 data) are embedded
as indented JSON so both backends see identical text.
"""

import json
from dataclasses import dataclass
from typing import Any

from care_ai_core.domain.constants import DEFAULT_SELECTION_CRITERIA, SCORE_CRITERIA


@dataclass
class PromptPair:
    """System instruction plus user prompt for one analysis"""
    system_prompt: str
    prompt: str


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def build_selection_prompt(
    original_prompt: str,
    content_a: str,
    content_b: str,
    *,
    label_a: str = "OpenAI",
    label_b: str = "Claude",
    criteria: str | None = None,
) -> str:
    """
    Build the best-of-two evaluation prompt

    Both responses are embedded verbatim. The judge is asked for a JSON
    document with the selected label, a short reasoning and per-label
    1-10 scores for each of SCORE_CRITERIA.
    """
    score_fields = ", ".join(f'"{name}": 1-10' for name in SCORE_CRITERIA)
    parts: list[str] = [
        "You are an expert evaluator. Compare these two AI responses and select the better one.",
        "",
        f"Original Prompt: {original_prompt}",
        "",
        f"Response A ({label_a}):",
        content_a,
        "",
        f"Response B ({label_b}):",
        content_b,
        "",
        f"Evaluation Criteria: {criteria or DEFAULT_SELECTION_CRITERIA}",
        "",
        "Respond with JSON only:",
        "{",
        '  "selected": "A" or "B",',
        '  "reasoning": "brief explanation",',
        '  "scores": {',
        f'    "A": {{ {score_fields} }},',
        f'    "B": {{ {score_fields} }}',
        "  }",
        "}",
    ]
    return "\n".join(parts)


def build_care_plan_match_prompt(patient_data: dict, care_plans: list) -> PromptPair:
    """Prompt for matching a patient against the available care plans"""
    system_prompt = "\n".join([
        "You are a healthcare analytics AI assistant specializing in patient care plan matching.",
        "Analyze patient data and recommend appropriate care plans based on:",
        "- Current diagnoses (ICD-10 codes)",
        "- Risk factors",
        "- Demographics",
        "- Care gaps",
        "",
        "Provide structured recommendations with confidence scores.",
    ])
    prompt = "\n".join([
        "Patient Data:",
        _to_json(patient_data),
        "",
        "Available Care Plans:",
        _to_json(care_plans),
        "",
        "Analyze this patient and recommend suitable care plans. For each recommendation, provide:",
        "1. Care plan name",
        "2. Match confidence (0-100%)",
        "3. Key matching criteria",
        "4. Potential barriers",
        "5. Expected outcomes",
        "",
        "Respond in JSON format:",
        "{",
        '  "recommendations": [',
        "    {",
        '      "carePlanId": "id",',
        '      "carePlanName": "name",',
        '      "confidence": 85,',
        '      "matchingCriteria": ["criteria1", "criteria2"],',
        '      "barriers": ["barrier1"],',
        '      "expectedOutcomes": ["outcome1", "outcome2"],',
        '      "priority": "high|medium|low"',
        "    }",
        "  ],",
        '  "riskAssessment": {',
        '    "overallRiskLevel": "high|medium|low",',
        '    "riskFactors": ["factor1", "factor2"]',
        "  },",
        '  "careGaps": ["gap1", "gap2"]',
        "}",
    ])
    return PromptPair(system_prompt=system_prompt, prompt=prompt)


def build_outreach_prompt(
    patient_name: str,
    care_plan_name: str,
    care_plan_description: str | None = None,
    benefits: list[str] | None = None,
    outreach_type: str = "mail",
) -> PromptPair:
    """Prompt for a personalized outreach letter or email"""
    system_prompt = "\n".join([
        "You are a healthcare communications specialist.",
        "Generate personalized, empathetic patient outreach content that:",
        "- Uses warm, accessible language",
        "- Clearly explains the care plan benefits",
        "- Includes a clear call to action",
        "- Respects patient privacy",
        "- Follows healthcare communication best practices",
        "- Is HIPAA compliant (no specific PHI in content)",
    ])
    benefits_text = ", ".join(benefits) if benefits else "Improved health outcomes"
    format_line = "Formal letter format" if outreach_type == "mail" else "Email format"
    prompt = "\n".join([
        f"Generate a {outreach_type} for this patient:",
        "",
        f"Patient: {patient_name}",
        f"Recommended Care Plan: {care_plan_name}",
        f"Care Plan Description: {care_plan_description or ''}",
        f"Key Benefits: {benefits_text}",
        "",
        "Requirements:",
        "- Professional but warm tone",
        "- Clear explanation of the program",
        "- Specific call to action",
        "- Contact information placeholder",
        f"- {format_line}",
        "",
        "Generate the content:",
    ])
    return PromptPair(system_prompt=system_prompt, prompt=prompt)


def build_risk_stratification_prompt(patient_population: list) -> PromptPair:
    """Prompt for population risk stratification"""
    system_prompt = "\n".join([
        "You are a population health analytics expert.",
        "Analyze patient populations to identify high-risk individuals who would benefit from targeted interventions.",
        "Consider chronic conditions, utilization patterns, and social determinants.",
    ])
    prompt = "\n".join([
        "Analyze this patient population for risk stratification:",
        "",
        _to_json(patient_population),
        "",
        "Provide:",
        "1. Risk tier assignments (High, Medium, Low)",
        "2. Key risk factors for each tier",
        "3. Recommended interventions by tier",
        "4. Population health insights",
        "",
        "Respond in JSON:",
        "{",
        '  "stratification": {',
        '    "high": { "count": N, "characteristics": [], "interventions": [] },',
        '    "medium": { "count": N, "characteristics": [], "interventions": [] },',
        '    "low": { "count": N, "characteristics": [], "interventions": [] }',
        "  },",
        '  "topRiskFactors": [],',
        '  "populationInsights": "",',
        '  "recommendedActions": []',
        "}",
    ])
    return PromptPair(system_prompt=system_prompt, prompt=prompt)


def build_icd10_prompt(icd10_data: dict) -> PromptPair:
    """Prompt for ICD-10 diagnosis pattern analysis"""
    system_prompt = "\n".join([
        "You are a clinical coding and analytics expert.",
        "Analyze ICD-10 diagnosis patterns to identify:",
        "- Prevalent conditions",
        "- Comorbidity patterns",
        "- Care plan opportunities",
        "- Quality measure implications",
    ])
    prompt = "\n".join([
        "Analyze these ICD-10 diagnosis patterns:",
        "",
        _to_json(icd10_data),
        "",
        "Provide insights on:",
        "1. Most prevalent condition categories",
        "2. Common comorbidity combinations",
        "3. High-value care plan opportunities",
        "4. Quality measure considerations (HEDIS, CMS)",
        "5. Recommended population health strategies",
        "",
        "Respond in structured JSON format.",
    ])
    return PromptPair(system_prompt=system_prompt, prompt=prompt)


def build_care_gap_prompt(patient_data: dict, quality_measures: list) -> PromptPair:
    """Prompt for identifying care gaps against quality measures"""
    system_prompt = "\n".join([
        "You are a healthcare quality improvement specialist.",
        "Identify care gaps by comparing patient data against evidence-based quality measures.",
        "Focus on preventive care, chronic disease management, and screening compliance.",
    ])
    prompt = "\n".join([
        "Identify care gaps for this patient:",
        "",
        "Patient Data:",
        _to_json(patient_data),
        "",
        "Quality Measures to Check:",
        _to_json(quality_measures),
        "",
        "For each gap identified, provide:",
        "1. Gap description",
        "2. Associated quality measure",
        "3. Clinical urgency",
        "4. Recommended intervention",
        "5. Expected impact",
        "",
        "Respond in JSON format.",
    ])
    return PromptPair(system_prompt=system_prompt, prompt=prompt)
