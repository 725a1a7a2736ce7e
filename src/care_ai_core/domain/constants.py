"""
Domain Constants

Centrally manages constants shared by the responder, the judge and the clinical use cases.
"""

# Backend identifiers
BACKEND_OPENAI = "openai"
BACKEND_CLAUDE = "claude"
BACKEND_GEMINI = "gemini"

# Default models per backend
DEFAULT_OPENAI_MODEL = "gpt-4-turbo-preview"
DEFAULT_CLAUDE_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"

# Generation defaults
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TIMEOUT_SECONDS = 60
DEFAULT_SYSTEM_PROMPT = "You are a helpful healthcare analytics assistant."

# Judge
JUDGE_TEMPERATURE = 0.3
JUDGE_SYSTEM_PROMPT = "You are an impartial AI evaluator. Respond only with valid JSON."
DEFAULT_SELECTION_CRITERIA = "accuracy, helpfulness, clarity, completeness"
SCORE_CRITERIA = ("accuracy", "helpfulness", "clarity")
FALLBACK_REASONING = "Default selection due to evaluation error"

# Batch processing
DEFAULT_BATCH_SIZE = 5
DEFAULT_BATCH_DELAY_SECONDS = 1.0

# Fine-tuning dataset
FINE_TUNING_SYSTEM_PROMPT = "You are a healthcare analytics AI assistant."

# Quality measures checked when the caller supplies none
DEFAULT_QUALITY_MEASURES = [
    {"id": "awv", "name": "Annual Wellness Visit", "interval": "12 months"},
    {"id": "flu", "name": "Flu Vaccination", "interval": "12 months"},
    {"id": "a1c", "name": "HbA1c Test (Diabetics)", "interval": "6 months"},
]

OUTREACH_TYPES = ("mail", "email")
