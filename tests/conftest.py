import pytest

from cohort_simulation import Course, Student, Term

from .doubles import make_plan


@pytest.fixture
def single_course_plan():
    course = Course("Intro", 3, prefix="MATH", num="101")
    return make_plan([course])


@pytest.fixture
def chain_plan():
    a = Course("Calculus I", 3, prefix="MATH", num="121")
    b = Course("Calculus II", 3, prefix="MATH", num="122", prereqs=[a])
    return make_plan([a, b])


@pytest.fixture
def coreq_plan():
    a = Course("Physics I", 3, prefix="PHYS", num="101")
    b = Course("Physics I Lab", 1, prefix="PHYS", num="101L")
    a.coreqs = [b]
    b.coreqs = [a]
    return make_plan([a, b], terms=[Term([a, b])])


@pytest.fixture
def one_student():
    return [Student()]
