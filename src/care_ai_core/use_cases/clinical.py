"""
Clinical Analysis

Healthcare analyses built on the dual responder. Every analysis asks both
backends and lets the judge select the better answer.
"""

from care_ai_core.domain.constants import DEFAULT_QUALITY_MEASURES, OUTREACH_TYPES
from care_ai_core.domain.entities import DualAnalysis
from care_ai_core.prompt_builder import (
    build_care_gap_prompt,
    build_care_plan_match_prompt,
    build_icd10_prompt,
    build_outreach_prompt,
    build_risk_stratification_prompt,
)
from care_ai_core.use_cases.dual_analysis import DualResponder

CARE_PLAN_CRITERIA = "clinical accuracy, completeness, actionability"
OUTREACH_CRITERIA = "empathy, clarity, professionalism, call-to-action effectiveness"


async def analyze_patient_for_care_plans(
    responder: DualResponder,
    patient_data: dict,
    care_plans: list,
) -> DualAnalysis:
    """Recommend care plans for a patient with confidence scores"""
    pair = build_care_plan_match_prompt(patient_data, care_plans)
    return await responder.analyze(
        pair.prompt,
        pair.system_prompt,
        select_best=True,
        selection_criteria=CARE_PLAN_CRITERIA,
    )


async def generate_outreach_content(
    responder: DualResponder,
    patient_info: dict,
    care_plan: dict,
    outreach_type: str = "mail",
) -> DualAnalysis:
    """
    Generate personalized outreach content for a patient

    Args:
        responder: Dual responder
        patient_info: Patient fields; "name" is required
        care_plan: Care plan fields; "name" is required, "description" and
            "benefits" (list of strings) are optional
        outreach_type: "mail" (formal letter) or "email"

    Returns:
        DualAnalysis whose selection holds the chosen draft

    Raises:
        ValueError: If outreach_type is unknown or a required name is missing
    """
    if outreach_type not in OUTREACH_TYPES:
        raise ValueError(f"outreach_type must be one of {OUTREACH_TYPES}, got '{outreach_type}'")
    if not patient_info.get("name"):
        raise ValueError("patient_info['name'] is required")
    if not care_plan.get("name"):
        raise ValueError("care_plan['name'] is required")

    pair = build_outreach_prompt(
        patient_name=patient_info["name"],
        care_plan_name=care_plan["name"],
        care_plan_description=care_plan.get("description"),
        benefits=care_plan.get("benefits"),
        outreach_type=outreach_type,
    )
    return await responder.analyze(
        pair.prompt,
        pair.system_prompt,
        select_best=True,
        selection_criteria=OUTREACH_CRITERIA,
    )


async def perform_risk_stratification(
    responder: DualResponder,
    patient_population: list,
) -> DualAnalysis:
    """Assign a patient population to high/medium/low risk tiers"""
    pair = build_risk_stratification_prompt(patient_population)
    return await responder.analyze(pair.prompt, pair.system_prompt, select_best=True)


async def analyze_icd10_patterns(
    responder: DualResponder,
    icd10_data: dict,
) -> DualAnalysis:
    """Find prevalent conditions and comorbidity patterns in ICD-10 data"""
    pair = build_icd10_prompt(icd10_data)
    return await responder.analyze(pair.prompt, pair.system_prompt, select_best=True)


async def identify_care_gaps(
    responder: DualResponder,
    patient_data: dict,
    quality_measures: list | None = None,
) -> DualAnalysis:
    """Compare a patient's record against quality measures (defaults: AWV, flu, HbA1c)"""
    measures = quality_measures if quality_measures else DEFAULT_QUALITY_MEASURES
    pair = build_care_gap_prompt(patient_data, measures)
    return await responder.analyze(pair.prompt, pair.system_prompt, select_best=True)
