"""
Simulation state and result models.

SimulationState is the engine-owned working set threaded through every
step of the term loop. SimulationResult is the value handed back to the
caller once the loop ends.
"""

from dataclasses import dataclass, field

import numpy as np

from ..config import SimulationOptions
from .curriculum import DegreePlan


@dataclass
class SimulationState:
    """
    Everything the term loop reads and writes.

    MATRICES:
    ---------
    student_progress: num_students x num_courses, 1 once a student has passed
                      a course. Cells only ever go 0 -> 1.
    attempts:         num_students x num_courses, starts at 1 and is
                      incremented on every failed attempt.

    POPULATIONS:
    ------------
    enrolled, graduated and stopouts always partition `students`. Students
    only ever move out of `enrolled`.
    """
    degree_plan: DegreePlan
    options: SimulationOptions
    students: list
    student_progress: np.ndarray
    attempts: np.ndarray
    enrolled: list = field(default_factory=list)
    graduated: list = field(default_factory=list)
    stopouts: list = field(default_factory=list)
    term: int = 0
    term_grad_rates: list = field(default_factory=list)
    term_stopout_rates: list = field(default_factory=list)
    time_to_degree_total: int = 0
    finished: bool = False

    @property
    def num_students(self) -> int:
        return len(self.students)

    @property
    def num_courses(self) -> int:
        return self.degree_plan.curriculum.num_courses

    @property
    def courses(self) -> list:
        return self.degree_plan.curriculum.courses

    def check_partition(self) -> bool:
        """True if enrolled, graduated and stopouts partition the population."""
        ids = [s.id for s in self.enrolled] + [s.id for s in self.graduated] + [s.id for s in self.stopouts]
        return len(ids) == len(set(ids)) and set(ids) == {s.id for s in self.students}


@dataclass
class SimulationResult:
    """
    Aggregate and per-student output of a run.

    term_grad_rates / term_stopout_rates hold one cumulative rate per term
    actually run, so their length equals `duration`.
    """
    duration: int
    num_students: int
    term_grad_rates: list
    term_stopout_rates: list
    grad_rate: float
    stopout_rate: float
    time_to_degree: float
    graduated_students: list
    stopout_students: list
    enrolled_students: list
    student_progress: np.ndarray
    attempts: np.ndarray

    def summary(self) -> dict:
        """Scalar statistics as a plain dict."""
        return {
            "duration": self.duration,
            "num_students": self.num_students,
            "graduated": len(self.graduated_students),
            "stopouts": len(self.stopout_students),
            "still_enrolled": len(self.enrolled_students),
            "grad_rate": self.grad_rate,
            "stopout_rate": self.stopout_rate,
            "time_to_degree": self.time_to_degree,
        }
