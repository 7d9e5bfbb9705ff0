"""
Greedy enrollment.

The built-in enrollment model: every student takes every course they are
eligible for, in degree plan order, until the credit cap stops them.
"""

import logging

from ..eligibility import can_enroll, enrolled_in_coreqs
from ..models import Course, Student, SimulationState
from .base import EnrollmentModel

logger = logging.getLogger(__name__)


class GreedyEnrollment(EnrollmentModel):
    """
    Fills each student's term in degree plan order.

    ORDERING:
    ---------
    Students are processed in id order. For each student, courses are tried
    in the order the degree plan lays them out (term 1 first), followed by
    any curriculum courses the plan never places.

    COREQUISITE GROUPS:
    -------------------
    A course whose only obstacle is an unmet corequisite is tried together
    with that corequisite. If every member of the group is eligible once the
    others are on their rosters, the whole group is kept; otherwise all of
    it is rolled back. This is what lets a mutual pair (A needs B, B needs A)
    be taken in the same term.
    """

    def enroll(self, term: int, state: SimulationState, max_credits: float) -> None:
        courses = state.degree_plan.planned_courses()
        progress = state.student_progress
        placed = 0

        for student in sorted(state.enrolled, key=lambda s: s.id):
            for course in courses:
                if can_enroll(student, course, progress, max_credits, term):
                    self.assign(student, course, term)
                    placed += 1
                elif course.coreqs:
                    placed += self._enroll_with_coreqs(student, course, state, max_credits, term)

        logger.debug(f"Term {term}: placed {placed} enrollments for {len(state.enrolled)} students")

    def _enroll_with_coreqs(self, student: Student, course: Course, state: SimulationState,
                            max_credits: float, term: int) -> int:
        """
        Try to take `course` together with its unmet corequisites.

        Returns the number of placements kept (0 if the group was rolled back).
        """
        progress = state.student_progress
        if not can_enroll(student, course, progress, max_credits, term, check_coreqs=False):
            return 0

        missing = [
            coreq for coreq in course.coreqs
            if not coreq.counters.is_enrolled(student) and progress[student.id, coreq.id] == 0
        ]

        self.assign(student, course, term)
        group = [course]
        for coreq in missing:
            if not can_enroll(student, coreq, progress, max_credits, term):
                break
            self.assign(student, coreq, term)
            group.append(coreq)
        else:
            if enrolled_in_coreqs(student, course, progress):
                return len(group)

        for placed in reversed(group):
            self.unassign(student, placed, term)
        return 0
