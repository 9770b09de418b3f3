"""
Descriptive Statistics Models

This module defines the validated engine configuration and the result
model produced by the statistics engine.
"""

import operator
from typing import Any, List

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class EngineConfig(BaseModel):
    """Statistics engine configuration"""
    precision: StrictInt = Field(..., description="Decimal digits kept when truncating results")

    @field_validator("precision", mode="before")
    @classmethod
    def coerce_integral(cls, value: Any) -> int:
        """Accept any integral value, numpy integers included, but not booleans"""
        if isinstance(value, (bool, np.bool_)):
            raise ValueError("precision must be an integer, not a boolean")
        try:
            return operator.index(value)
        except TypeError:
            raise ValueError(f"precision must be an integer, got {type(value).__name__}")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "precision": 2
            }
        }
    )


class StatisticsResult(BaseModel):
    """Descriptive statistics for one input sequence"""
    count: int = Field(..., ge=1, description="Number of input values")
    precision: int = Field(..., description="Precision the values were truncated to")
    sum: float = Field(..., description="Sum of the inputs")
    mean: float = Field(..., description="Arithmetic mean, derived from the truncated sum")
    median: float = Field(..., description="Middle value, or average of the two middle values")
    standard_deviation: float = Field(..., description="Sample standard deviation (n - 1 denominator)")
    modes: List[float] = Field(..., description="Most frequent values, ascending")

    model_config = ConfigDict(
        frozen=True,
        ser_json_inf_nan='constants',
        json_schema_extra={
            "example": {
                "count": 8,
                "precision": 2,
                "sum": 40.0,
                "mean": 5.0,
                "median": 4.5,
                "standard_deviation": 2.13,
                "modes": [4.0]
            }
        }
    )

    def to_text(self) -> str:
        """Render the result as one ``name: value`` line per statistic"""
        lines = [
            f"count: {self.count}",
            f"sum: {self.sum}",
            f"mean: {self.mean}",
            f"median: {self.median}",
            f"standard_deviation: {self.standard_deviation}",
            f"modes: {', '.join(str(mode) for mode in self.modes)}",
        ]
        return "\n".join(lines)
