"""
Enrollment models.

EnrollmentModel is the port the engine talks to; GreedyEnrollment is the
default implementation.
"""

from .base import EnrollmentModel
from .greedy import GreedyEnrollment

__all__ = ["EnrollmentModel", "GreedyEnrollment"]
