"""Top-level AgentConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from code_agent.config.domain.inference import InferenceConfig
from code_agent.config.domain.retention import RetentionConfig
from code_agent.tools.domain.classifier import FailureDetection


class AgentConfig(BaseModel, frozen=True):
    """Root configuration aggregate for one interactive agent session."""

    inference: InferenceConfig = Field(default_factory=InferenceConfig)
    retention: RetentionConfig = Field(default_factory=RetentionConfig)
    max_rounds: int = Field(default=10, ge=1)
    failure_detection: FailureDetection = "structured"
