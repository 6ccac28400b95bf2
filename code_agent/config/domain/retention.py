"""Conversation retention configuration model."""

from pydantic import BaseModel, Field, model_validator


class RetentionConfig(BaseModel, frozen=True):
    high_water_mark: int = Field(default=20, ge=1)
    low_water_mark: int = Field(default=10, ge=1)
    respect_tool_pairs: bool = True

    @model_validator(mode="after")
    def _low_not_above_high(self) -> "RetentionConfig":
        if self.low_water_mark > self.high_water_mark:
            raise ValueError(
                f"low_water_mark ({self.low_water_mark}) must not exceed"
                f" high_water_mark ({self.high_water_mark})"
            )
        return self
