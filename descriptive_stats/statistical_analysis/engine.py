"""
Statistics Engine

Computes sum, mean, median, sample standard deviation and modes over a
finite sequence of real numbers, truncating every reported value to a
fixed decimal precision.
"""

import logging
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
from pydantic import ValidationError

from ..exceptions import EmptyInputError, InvalidInputError, InvalidPrecisionError
from ..models.statistics import EngineConfig, StatisticsResult
from ..utils.precision import truncate_to_precision

logger = logging.getLogger(__name__)


class StatisticsEngine:
    """
    Descriptive statistics engine.

    The precision is fixed at construction. Each call to ``compute``
    replaces the previous input and result; nothing accumulates across
    calls. Instances are not safe for concurrent use.
    """

    def __init__(self, precision: int):
        """
        Initialize the statistics engine

        Args:
            precision: decimal digits kept by truncation. Negative values
                truncate to tens, hundreds and so on.

        Raises:
            InvalidPrecisionError: precision is not an integer
        """
        try:
            self._config = EngineConfig(precision=precision)
        except ValidationError as e:
            raise InvalidPrecisionError(precision, validation_errors=e.errors()) from e

        self._result: Optional[StatisticsResult] = None
        logger.info(f"StatisticsEngine initialized (precision={self.precision})")

    @property
    def precision(self) -> int:
        return self._config.precision

    @property
    def result(self) -> Optional[StatisticsResult]:
        """Result of the last successful ``compute``, otherwise None"""
        return self._result

    @property
    def sum(self) -> Optional[float]:
        return self._result.sum if self._result else None

    @property
    def mean(self) -> Optional[float]:
        return self._result.mean if self._result else None

    @property
    def median(self) -> Optional[float]:
        return self._result.median if self._result else None

    @property
    def standard_deviation(self) -> Optional[float]:
        return self._result.standard_deviation if self._result else None

    @property
    def modes(self) -> Optional[List[float]]:
        return list(self._result.modes) if self._result else None

    def compute(self, inputs: Iterable[Any]) -> StatisticsResult:
        """
        Compute all statistics for the given numbers.

        The engine keeps its own sorted copy of the inputs, so mutating
        the caller's sequence afterwards has no effect on the result.

        Args:
            inputs: iterable of real numbers

        Returns:
            StatisticsResult: truncated sum, mean, median, standard
            deviation and modes

        Raises:
            InvalidInputError: an element is not a real number
            EmptyInputError: inputs is empty
        """
        numbers = self._snapshot(inputs)
        self._result = None

        if not numbers:
            raise EmptyInputError()

        logger.debug(f"Computing statistics for {len(numbers)} values (precision={self.precision})")

        numbers.sort()
        total = self._compute_sum(numbers)
        mean = self._compute_mean(total, len(numbers))

        self._result = StatisticsResult(
            count=len(numbers),
            precision=self.precision,
            sum=total,
            mean=mean,
            median=self._compute_median(numbers),
            standard_deviation=self._compute_standard_deviation(numbers, mean),
            modes=self._compute_modes(numbers),
        )
        return self._result

    def _snapshot(self, inputs: Iterable[Any]) -> List[float]:
        snapshot = []
        for index, value in enumerate(inputs):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
                raise InvalidInputError(index, value)
            try:
                snapshot.append(float(value))
            except OverflowError:
                raise InvalidInputError(index, value, reason="is too large for a float")
        return snapshot

    def _truncate(self, value: float) -> float:
        return truncate_to_precision(value, self.precision)

    def _compute_sum(self, numbers: List[float]) -> float:
        # Plain left-to-right accumulation; builtin sum() compensates on 3.12+.
        total = 0.0
        for number in numbers:
            total += number
        return self._truncate(total)

    def _compute_mean(self, truncated_sum: float, count: int) -> float:
        """Mean is derived from the already truncated sum, then truncated again"""
        return self._truncate(truncated_sum / count)

    def _compute_median(self, numbers: List[float]) -> float:
        middle = len(numbers) // 2
        median = numbers[middle]
        if len(numbers) % 2 == 0:
            median = (median + numbers[middle - 1]) / 2
        return self._truncate(median)

    def _compute_standard_deviation(self, numbers: List[float], mean: float) -> float:
        """
        Sample standard deviation around the truncated mean.

        A single value divides by zero; IEEE-754 semantics apply, giving
        inf for a non-zero sum of squares and nan for 0/0.
        """
        squared_deviations = np.float64(0.0)
        for number in numbers:
            squared_deviations += (np.float64(number) - mean) ** 2

        denominator = np.float64(len(numbers) - 1)
        if denominator == 0:
            logger.warning("Standard deviation of a single value divides by zero; result is not finite")

        with np.errstate(divide='ignore', invalid='ignore'):
            variance = squared_deviations / denominator

        return self._truncate(np.sqrt(variance))

    def _compute_modes(self, numbers: List[float]) -> List[float]:
        occurrences: Dict[float, int] = {}
        max_occurrence = 0
        for number in numbers:
            occurrences[number] = occurrences.get(number, 0) + 1
            if occurrences[number] > max_occurrence:
                max_occurrence = occurrences[number]

        return [number for number, occurrence in occurrences.items() if occurrence == max_occurrence]


def compute_statistics(inputs: Iterable[Any], precision: int) -> StatisticsResult:
    """Compute statistics with a throwaway engine"""
    return StatisticsEngine(precision).compute(inputs)
