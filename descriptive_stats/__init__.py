"""
Descriptive statistics

Sum, mean, median, sample standard deviation and modes of a sequence of
real numbers, truncated to a fixed decimal precision.
"""

from .exceptions import (
    StatisticsError,
    EmptyInputError,
    InvalidInputError,
    InvalidPrecisionError,
)
from .models.statistics import EngineConfig, StatisticsResult
from .statistical_analysis import StatisticsEngine, compute_statistics
from .utils.precision import truncate_to_precision

__all__ = [
    'StatisticsEngine',
    'StatisticsResult',
    'EngineConfig',
    'compute_statistics',
    'truncate_to_precision',
    'StatisticsError',
    'EmptyInputError',
    'InvalidInputError',
    'InvalidPrecisionError',
]
