"""
Curriculum and degree plan models.

The curriculum is the course graph; the degree plan lays those courses out
over an ordered sequence of terms. Building and validating these graphs is
left to the caller: the simulation assumes the prerequisite relation is
acyclic.
"""

from dataclasses import dataclass, field
from typing import Optional

from .course import Course, CourseCounters


@dataclass
class Curriculum:
    """
    A set of courses plus their prerequisite/corequisite edges.

    Course ids are assigned here, in list order, and double as the column
    index into the simulation's progress and attempt matrices.
    """
    name: str
    courses: list = field(default_factory=list)

    def __post_init__(self):
        for i, course in enumerate(self.courses):
            course.id = i

    @property
    def num_courses(self) -> int:
        return len(self.courses)

    def reset_counters(self, duration: int):
        """Give every course a fresh counter block for a new run."""
        for course in self.courses:
            course.counters = CourseCounters.for_duration(duration)

    def course_by_name(self, full_name: str) -> Optional[Course]:
        """Look a course up by its composite name ("PREFIX NUM Title")."""
        for course in self.courses:
            if course.full_name == full_name:
                return course
        return None


@dataclass
class Term:
    """Courses the plan expects a student to take in one term (a hint, not a rule)."""
    courses: list = field(default_factory=list)


@dataclass
class StopoutModel:
    """
    Per-term stopout probabilities.

    rates[0] applies to term 1. Terms past the end of the list reuse the
    last rate; an empty list means nobody stops out.
    """
    rates: list = field(default_factory=list)

    def rate_for(self, term: int) -> float:
        if not self.rates:
            return 0.0
        index = min(term, len(self.rates)) - 1
        return float(self.rates[max(index, 0)])


@dataclass
class DegreePlan:
    """
    A curriculum arranged into an ordered list of terms.

    Attributes:
        name: Plan name
        curriculum: The underlying course graph
        terms: Ordered Term objects (term 1 first)
        stopout_model: Passed to PerformanceModel.predict_stopout when
                       stopout modeling is enabled
    """
    name: str
    curriculum: Curriculum
    terms: list = field(default_factory=list)
    stopout_model: Optional[StopoutModel] = None

    def planned_courses(self) -> list:
        """
        Every curriculum course, in plan order.

        Courses the plan never places come last, in curriculum order.
        """
        ordered = []
        seen = set()
        for term in self.terms:
            for course in term.courses:
                if course.id not in seen:
                    seen.add(course.id)
                    ordered.append(course)
        for course in self.curriculum.courses:
            if course.id not in seen:
                seen.add(course.id)
                ordered.append(course)
        return ordered
