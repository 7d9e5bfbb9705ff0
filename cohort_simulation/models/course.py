"""
Course data models.

Contains the Course dataclass and the per-course counter block that a
simulation run fills in as students enroll, pass, and fail.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


def construct_course_name(prefix: str, num, name: str) -> str:
    """Build the composite course name, e.g. "MATH 121 Calculus I"."""
    return f"{prefix} {num} {name}"


@dataclass
class CourseCounters:
    """
    Per-course statistics owned by ONE simulation run.

    term_enrollment and term_passed are indexed by term - 1 (term 1 is
    index 0). The roster in `students` only holds the current term's
    enrollment; the engine clears it before each enrollment step.
    """
    term_enrollment: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=int))
    term_passed: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=int))
    failures: int = 0
    grades: list = field(default_factory=list)
    students: list = field(default_factory=list)

    @classmethod
    def for_duration(cls, duration: int) -> "CourseCounters":
        """Fresh counters sized for a run of `duration` terms."""
        return cls(
            term_enrollment=np.zeros(duration, dtype=int),
            term_passed=np.zeros(duration, dtype=int),
        )

    def is_enrolled(self, student) -> bool:
        """True if this exact student object is on the current roster."""
        return any(s is student for s in self.students)


# eq=False keeps identity comparison: courses reference each other through
# prereqs/coreqs, so field-wise equality would be both slow and wrong.
@dataclass(eq=False)
class Course:
    """
    A single course node in the curriculum graph.

    Attributes:
        name: Course title (e.g., "Calculus I")
        credit_hours: Credit hours earned/attempted per enrollment
        prefix: Subject prefix (e.g., "MATH")
        num: Catalog number (e.g., "121")
        prereqs: Courses that must be passed before enrolling
        coreqs: Courses that must be taken concurrently or already passed
        term_req: Earliest term number in which the course may be taken
        pass_rate: Historical pass rate in [0, 1], used by PassRateModel
        id: Column index in the simulation matrices (assigned by Curriculum)
        counters: Run statistics, reset by Curriculum.reset_counters()
    """
    name: str
    credit_hours: float = 3
    prefix: str = ""
    num: str = ""
    prereqs: list = field(default_factory=list)
    coreqs: list = field(default_factory=list)
    term_req: int = 1
    pass_rate: Optional[float] = None
    id: int = -1
    counters: CourseCounters = field(default_factory=CourseCounters)

    @property
    def full_name(self) -> str:
        return construct_course_name(self.prefix, self.num, self.name)

    @property
    def students(self) -> list:
        """Current-term roster (shortcut for counters.students)."""
        return self.counters.students

    def __repr__(self) -> str:
        return f"Course(id={self.id}, name='{self.full_name.strip()}', credits={self.credit_hours})"
