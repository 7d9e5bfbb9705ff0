"""
Enrollment eligibility rules.

Pure predicates over a student, a course, and the progress matrix. Both the
enrollment models and the engine's roster audit use these.
"""

import numpy as np

from .models import Course, Student


def enrolled_in_coreqs(student: Student, course: Course, student_progress: np.ndarray) -> bool:
    """
    Check the corequisite rule for `course`.

    Every corequisite must either have the student on its current roster
    or already be passed. All corequisites are evaluated; the result is
    their logical AND.
    """
    checks = [
        coreq.counters.is_enrolled(student) or student_progress[student.id, coreq.id] == 1
        for coreq in course.coreqs
    ]
    return all(checks)


def prereqs_passed(student: Student, course: Course, student_progress: np.ndarray) -> bool:
    """True if the course has no prerequisites or the student passed all of them."""
    if not course.prereqs:
        return True
    prereq_ids = [p.id for p in course.prereqs]
    return int(student_progress[student.id, prereq_ids].sum()) == len(course.prereqs)


def can_enroll(student: Student, course: Course, student_progress: np.ndarray,
               max_credits: float, term: int, check_coreqs: bool = True) -> bool:
    """
    Decide whether `student` may be scheduled into `course` in `term`.

    ELIGIBILITY RULE (all must hold):
    ---------------------------------
    1. Student is not already on the course roster
    2. All prerequisites have been passed
    3. Student has not already passed the course
    4. Current term load + course credits stays within max_credits
    5. The course's term requirement has been reached
    6. Corequisites are satisfied (see enrolled_in_coreqs)

    Args:
        check_coreqs: Set False to evaluate rules 1-5 only. Enrollment
                      models use this when co-enrolling a corequisite group.
    """
    eligible = (
        not course.counters.is_enrolled(student)
        and prereqs_passed(student, course, student_progress)
        and student_progress[student.id, course.id] == 0
        and student.term_credits + course.credit_hours <= max_credits
        and course.term_req <= term
    )
    if not eligible:
        return False
    return enrolled_in_coreqs(student, course, student_progress) if check_coreqs else True
