"""
Pass-rate performance model.

The built-in model: each course passes with its historical pass rate.
"""

import logging
from typing import Optional

import numpy as np

from ..config import DEFAULT_PASS_RATE, PASSING_GRADE, FAILING_GRADE
from ..exceptions import ModelTrainingError
from ..models import Course, Curriculum, Student, StopoutModel
from .base import PerformanceModel

logger = logging.getLogger(__name__)


class PassRateModel(PerformanceModel):
    """
    Predicts a pass (PASSING_GRADE) with probability equal to the course's
    pass rate, and a fail (FAILING_GRADE) otherwise.

    Courses without a `pass_rate` fall back to `default_rate`. Stopouts are
    drawn from the degree plan's StopoutModel; without one, nobody stops out.

    Usage:
        model = PassRateModel(seed=42)
        result = simulate(plan, students, performance_model=model)
    """

    def __init__(self, seed: Optional[int] = None, default_rate: float = DEFAULT_PASS_RATE):
        self.rng = np.random.default_rng(seed)
        self.default_rate = default_rate
        self.pass_rates = {}  # course id -> pass rate

    def train(self, curriculum: Curriculum) -> None:
        if curriculum.num_courses == 0:
            raise ModelTrainingError(f"Curriculum '{curriculum.name}' has no courses to train on")

        rates = {}
        for course in curriculum.courses:
            rate = self.default_rate if course.pass_rate is None else course.pass_rate
            if not 0.0 <= rate <= 1.0:
                raise ModelTrainingError(
                    f"Pass rate for '{course.full_name.strip()}' must be within [0, 1], got {rate}"
                )
            rates[course.id] = float(rate)

        self.pass_rates = rates
        logger.debug(f"Trained pass rates for {len(rates)} courses")

    def predict_grade(self, course: Course, student: Student) -> float:
        rate = self.pass_rates.get(course.id, self.default_rate)
        return PASSING_GRADE if self.rng.random() < rate else FAILING_GRADE

    def predict_stopout(self, student: Student, term: int,
                        stopout_model: Optional[StopoutModel]) -> bool:
        if stopout_model is None:
            return False
        return bool(self.rng.random() < stopout_model.rate_for(term))
