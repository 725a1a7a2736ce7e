"""
Domain Value Objects

Defines the request and response values exchanged with text-generation backends.
"""

from dataclasses import dataclass


@dataclass
class GenerationRequest:
    """A single prompt dispatched to a backend"""
    system_prompt: str
    prompt: str
    temperature: float = 0.7
    max_tokens: int = 2000
    model: str | None = None

    def __post_init__(self):
        if not self.system_prompt or not self.system_prompt.strip():
            raise ValueError("system_prompt must be a non-empty string")
        if not self.prompt or not self.prompt.strip():
            raise ValueError("prompt must be a non-empty string")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError("temperature must be between 0 and 2")
        if self.max_tokens < 1:
            raise ValueError("max_tokens must be a positive integer")


@dataclass
class GenerationResult:
    """Output of one backend call"""
    content: str
    backend: str
    model_name: str
    input_tokens: int = 0
    output_tokens: int = 0
    finish_reason: str | None = None
    latency_ms: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def to_dict(self) -> dict:
        """Convert to the JSON shape returned by the API"""
        return {
            "content": self.content,
            "model": self.model_name,
            "usage": {
                "input_tokens": self.input_tokens,
                "output_tokens": self.output_tokens,
            },
            "finish_reason": self.finish_reason,
            "latency_ms": self.latency_ms,
        }
