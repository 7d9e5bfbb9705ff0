"""
Enrollment model port.
"""

from abc import ABC, abstractmethod

from ..models import Course, Student, SimulationState


class EnrollmentModel(ABC):
    """
    Decides which courses each enrolled student takes in a term.

    CONTRACT:
    ---------
    - Only place a student in a course when can_enroll() holds for them
    - Keep each student's term load within max_credits
    - Record every placement with assign(), so the roster, the student's
      term credits and the course's term enrollment count stay in sync

    The engine clears all rosters before calling enroll().
    """

    @abstractmethod
    def enroll(self, term: int, state: SimulationState, max_credits: float) -> None:
        pass

    @staticmethod
    def assign(student: Student, course: Course, term: int):
        """Put `student` on the roster of `course` for `term`."""
        course.counters.students.append(student)
        course.counters.term_enrollment[term - 1] += 1
        student.term_credits += course.credit_hours

    @staticmethod
    def unassign(student: Student, course: Course, term: int):
        """Undo assign() for a tentative placement."""
        course.counters.students = [s for s in course.counters.students if s is not student]
        course.counters.term_enrollment[term - 1] -= 1
        student.term_credits -= course.credit_hours
