"""
Performance model port.

The engine depends only on this interface. Concrete models decide how
grades and stopouts are predicted.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Course, Curriculum, Student, StopoutModel


class PerformanceModel(ABC):
    """
    Predicts how a student will do in a course.

    LIFECYCLE:
    ----------
    1. train(curriculum) is called once, before any term runs.
       Raise ModelTrainingError if the model cannot be fit; the run aborts.
    2. predict_grade(course, student) is called for every roster entry,
       every term. Returns a grade on a 0.0 - 4.0 scale.
    3. predict_stopout(student, term, stopout_model) is called for every
       student still enrolled at the end of a term, only when stopout
       modeling is enabled.
    """

    @abstractmethod
    def train(self, curriculum: Curriculum) -> None:
        pass

    @abstractmethod
    def predict_grade(self, course: Course, student: Student) -> float:
        pass

    @abstractmethod
    def predict_stopout(self, student: Student, term: int,
                        stopout_model: Optional[StopoutModel]) -> bool:
        pass
