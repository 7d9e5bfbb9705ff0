"""
Data models for the cohort simulation.

This package contains all dataclasses used throughout the system.
These serve as "contracts" between the engine and the pluggable models.
"""

from .course import Course, CourseCounters, construct_course_name
from .curriculum import Curriculum, Term, DegreePlan, StopoutModel
from .student import Student
from .simulation import SimulationState, SimulationResult

__all__ = [
    # Course models
    "Course",
    "CourseCounters",
    "construct_course_name",
    # Curriculum models
    "Curriculum",
    "Term",
    "DegreePlan",
    "StopoutModel",
    # Student
    "Student",
    # Run state and output
    "SimulationState",
    "SimulationResult",
]
