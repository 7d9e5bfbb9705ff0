"""
Student data model.

A Student is the mutable per-student record a simulation run updates as
grades come in.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


# eq=False: rosters test membership by identity, never by field values
@dataclass(eq=False)
class Student:
    """
    Tracks one student's academic progress through a run.

    Attributes:
        id: Row index in the simulation matrices, assigned at run start
        termpassed: Per-course term in which the course was passed (0 = not yet)
        performance: Composite course name -> most recent predicted grade
        total_credits: Cumulative credit hours attempted
        total_points: Cumulative quality points (grade x credit hours)
        gpa: total_points / total_credits, None until credits are attempted
        term_credits: Credit load taken on in the current term
        grad_term: Term of graduation (set once)
        stopout: True once the student has left without graduating
        attributes: Free-form features available to performance models
    """
    id: int = -1
    termpassed: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=int))
    performance: dict = field(default_factory=dict)
    total_credits: float = 0.0
    total_points: float = 0.0
    gpa: Optional[float] = None
    term_credits: float = 0.0
    grad_term: Optional[int] = None
    stopout: bool = False
    attributes: dict = field(default_factory=dict)

    def reset(self, student_id: int, num_courses: int):
        """Prepare the record for a fresh run."""
        self.id = student_id
        self.termpassed = np.zeros(num_courses, dtype=int)
        self.performance = {}
        self.total_credits = 0.0
        self.total_points = 0.0
        self.gpa = None
        self.term_credits = 0.0
        self.grad_term = None
        self.stopout = False

    def record_grade(self, course_name: str, grade: float, credit_hours: float):
        """Add one graded attempt to the cumulative totals."""
        self.performance[course_name] = grade
        self.total_credits += credit_hours
        self.total_points += grade * credit_hours

    def update_gpa(self) -> Optional[float]:
        """
        Recompute GPA from the cumulative totals.

        A student with no attempted credits has no GPA: the value is left
        as None rather than dividing by zero.
        """
        if self.total_credits == 0:
            logger.debug(f"Student {self.id} has no attempted credits; GPA left unset")
            return self.gpa
        self.gpa = self.total_points / self.total_credits
        return self.gpa
