"""
Scoring sub-package

Provides the best-of-two selection judge.
"""

from care_ai_core.domain.entities import SelectionOutcome
from care_ai_core.scoring.selection_judge import JudgeParseError, SelectionJudge

__all__ = [
    # entities (re-exported from domain)
    "SelectionOutcome",
    # judge
    "JudgeParseError",
    "SelectionJudge",
]
