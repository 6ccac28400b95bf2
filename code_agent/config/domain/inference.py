"""Inference backend configuration model."""

from pydantic import BaseModel, Field


class InferenceConfig(BaseModel, frozen=True):
    """How to reach the model: LiteLLM model string, credentials and request bounds."""

    model: str = Field(default="gpt-3.5-turbo", min_length=1)
    max_tokens: int = Field(default=1024, ge=1)
    api_key: str | None = None
    api_base: str | None = None
    system_prompt: str | None = None
    timeout_seconds: float = Field(default=120.0, gt=0)
