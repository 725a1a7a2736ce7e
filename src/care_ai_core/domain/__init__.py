"""
Domain Layer

Defines constants, entities, and value objects that form the core of the dual analysis workflow.
Has no dependencies on external libraries.
"""

from care_ai_core.domain.constants import (
    BACKEND_CLAUDE,
    BACKEND_GEMINI,
    BACKEND_OPENAI,
    DEFAULT_QUALITY_MEASURES,
    DEFAULT_SELECTION_CRITERIA,
    FALLBACK_REASONING,
)
from care_ai_core.domain.entities import (
    AnalysisStatus,
    DualAnalysis,
    HealthCheckResult,
    SelectionOutcome,
)
from care_ai_core.domain.value_objects import (
    GenerationRequest,
    GenerationResult,
)

__all__ = [
    # constants
    "BACKEND_CLAUDE",
    "BACKEND_GEMINI",
    "BACKEND_OPENAI",
    "DEFAULT_QUALITY_MEASURES",
    "DEFAULT_SELECTION_CRITERIA",
    "FALLBACK_REASONING",
    # entities
    "AnalysisStatus",
    "DualAnalysis",
    "HealthCheckResult",
    "SelectionOutcome",
    # value objects
    "GenerationRequest",
    "GenerationResult",
]
