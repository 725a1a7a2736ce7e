"""
Use Cases Layer

Aggregates business logic and provides use cases called from the runner.
"""

from care_ai_core.use_cases.dual_analysis import (
    DualResponder,
    create_responder,
)
from care_ai_core.use_cases.clinical import (
    analyze_icd10_patterns,
    analyze_patient_for_care_plans,
    generate_outreach_content,
    identify_care_gaps,
    perform_risk_stratification,
)
from care_ai_core.use_cases.batch import (
    batch_process,
    results_to_frame,
)
from care_ai_core.use_cases.fine_tuning import build_fine_tuning_jsonl
from care_ai_core.use_cases.health_check import (
    HEALTH_CHECK_PROMPT,
    health_check_backend,
    run_health_check,
)

__all__ = [
    # dual analysis
    "DualResponder",
    "create_responder",
    # clinical
    "analyze_icd10_patterns",
    "analyze_patient_for_care_plans",
    "generate_outreach_content",
    "identify_care_gaps",
    "perform_risk_stratification",
    # batch
    "batch_process",
    "results_to_frame",
    # fine tuning
    "build_fine_tuning_jsonl",
    # health_check
    "HEALTH_CHECK_PROMPT",
    "health_check_backend",
    "run_health_check",
]
