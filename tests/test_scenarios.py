import numpy as np

from cohort_simulation import (
    SimulationEngine,
    SimulationOptions,
    Student,
    can_enroll,
    enrolled_in_coreqs,
    simulate,
)

from .doubles import FixedGradeModel


def test_single_course_student_graduates_in_one_term(single_course_plan, one_student):
    result = simulate(
        single_course_plan, one_student,
        performance_model=FixedGradeModel(4.0), max_credits=18, duration=1,
    )

    assert result.grad_rate == 1.0
    assert result.term_grad_rates == [1.0]
    assert result.duration == 1
    assert result.time_to_degree == 1.0
    graduate = result.graduated_students[0]
    assert graduate.grad_term == 1
    assert graduate.gpa == 4.0
    assert graduate.performance == {"MATH 101 Intro": 4.0}


def test_failing_student_runs_full_locked_duration(single_course_plan, one_student):
    engine = SimulationEngine(SimulationOptions(
        performance_model=FixedGradeModel(1.0), duration=3, duration_lock=True,
    ))
    state = engine.start(single_course_plan, one_student)

    attempts_by_term = []
    while True:
        keep_going = engine.run_term(state)
        attempts_by_term.append(int(state.attempts[0, 0]))
        if not keep_going:
            break
    result = engine.finish(state)

    assert attempts_by_term == [2, 3, 4]
    assert result.attempts[0, 0] == 4
    assert result.student_progress[0, 0] == 0
    assert result.grad_rate == 0.0
    assert result.duration == 3
    assert result.term_grad_rates == [0.0, 0.0, 0.0]
    assert len(result.enrolled_students) == 1

    course = state.degree_plan.curriculum.courses[0]
    assert course.counters.failures == 3
    assert course.counters.grades == [1.0, 1.0, 1.0]
    assert list(course.counters.term_enrollment) == [1, 1, 1]


def test_prerequisite_blocks_enrollment_until_passed(chain_plan, one_student):
    engine = SimulationEngine(SimulationOptions(
        performance_model=FixedGradeModel(4.0), duration=2, validate_enrollment=True,
    ))
    state = engine.start(chain_plan, one_student)
    calc1, calc2 = state.courses

    assert engine.run_term(state)
    assert list(calc1.counters.term_enrollment) == [1, 0]
    assert list(calc2.counters.term_enrollment) == [0, 0]
    assert state.student_progress.tolist() == [[1, 0]]

    assert not engine.run_term(state)
    result = engine.finish(state)

    assert result.grad_rate == 1.0
    assert result.time_to_degree == 2.0
    graduate = result.graduated_students[0]
    assert graduate.grad_term == 2
    assert list(graduate.termpassed) == [1, 2]


def test_corequisites_satisfied_only_when_both_taken(coreq_plan):
    plan = coreq_plan
    physics, lab = plan.curriculum.courses
    student = Student()
    student.reset(0, 2)
    progress = np.zeros((1, 2), dtype=int)

    # Neither scheduled: each blocks the other
    assert not can_enroll(student, physics, progress, 18, 1)
    assert not can_enroll(student, lab, progress, 18, 1)

    # Enrolled in both: both corequisite checks pass
    physics.counters.students.append(student)
    lab.counters.students.append(student)
    assert enrolled_in_coreqs(student, physics, progress)
    assert enrolled_in_coreqs(student, lab, progress)

    # Physics alone on the roster: the lab may join it
    lab.counters.students.clear()
    assert can_enroll(student, lab, progress, 18, 1)

    # Physics neither scheduled nor passed: the lab stays closed
    physics.counters.students.clear()
    assert not can_enroll(student, lab, progress, 18, 1)

    # Once physics is passed the lab is open
    progress[0, physics.id] = 1
    assert can_enroll(student, lab, progress, 18, 1)


def test_mutual_corequisites_taken_together(coreq_plan, one_student):
    result = simulate(
        coreq_plan, one_student,
        performance_model=FixedGradeModel(4.0), duration=1, validate_enrollment=True,
    )

    assert result.grad_rate == 1.0
    assert result.student_progress.tolist() == [[1, 1]]
