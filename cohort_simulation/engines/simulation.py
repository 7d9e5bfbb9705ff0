"""
Term-by-term Simulation Engine.

This module runs a cohort of students through a degree plan, one term at a
time, until every student has graduated or stopped out, or the term budget
runs out.
"""

import copy
import logging
from typing import Optional

import numpy as np

from ..config import PASS_THRESHOLD, SimulationOptions
from ..eligibility import enrolled_in_coreqs, prereqs_passed
from ..enrollment import GreedyEnrollment
from ..exceptions import ConfigurationError, EnrollmentViolationError
from ..models import DegreePlan, SimulationResult, SimulationState
from ..predictors import PassRateModel

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Orchestrates the term loop.

    ═══════════════════════════════════════════════════════════════════════════
    TERM STATE MACHINE
    ═══════════════════════════════════════════════════════════════════════════

    start() -> run_term() -> run_term() -> ... -> finish()

    Each run_term() call performs, for term t:

    1. ENROLL     Clear rosters, then let the enrollment model fill them
    2. GRADE      Predict a grade for every roster entry; > PASS_THRESHOLD
                  marks the course passed, anything else counts an attempt
    3. CLOSE      Recompute GPA, reset term credit loads
    4. GRADUATE   Students whose progress row is complete leave `enrolled`
    5. STOPOUT    (if enabled) the performance model decides who leaves
    6. RATES      Record cumulative graduation / stopout rates
    7. TERMINATE  Stop when the term budget is spent, or early when nobody
                  is left enrolled and the duration is not locked

    Graduation is always decided before stopout, and each removal pass
    recomputes membership from the current `enrolled` list.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        engine = SimulationEngine(SimulationOptions(duration=10, stopouts=True))
        result = engine.run(degree_plan, students)

        # Or step through terms to inspect the state in between
        state = engine.start(degree_plan, students)
        while engine.run_term(state):
            print(state.term, len(state.enrolled))
        result = engine.finish(state)
    """

    def __init__(self, options: Optional[SimulationOptions] = None):
        self.options = options or SimulationOptions()
        self.performance_model = self.options.performance_model
        if self.performance_model is None:
            self.performance_model = PassRateModel()
        self.enrollment_model = self.options.enrollment_model
        if self.enrollment_model is None:
            self.enrollment_model = GreedyEnrollment()

    def run(self, degree_plan: DegreePlan, students: list) -> SimulationResult:
        """Run the whole simulation and return its result."""
        state = self.start(degree_plan, students)
        while self.run_term(state):
            pass
        return self.finish(state)

    def start(self, degree_plan: DegreePlan, students: list) -> SimulationState:
        """
        Build the initial SimulationState.

        The degree plan and the students are deep-copied, so the caller's
        objects are never mutated by a run. The performance model is
        trained here; a training failure propagates before any term runs.
        """
        if not students:
            raise ConfigurationError("Cannot simulate an empty student population")
        if self.options.stopouts and not callable(getattr(self.performance_model, "predict_stopout", None)):
            raise ConfigurationError("Stopout modeling requires a performance model with predict_stopout()")

        degree_plan, students = copy.deepcopy((degree_plan, list(students)))
        curriculum = degree_plan.curriculum

        self.performance_model.train(curriculum)

        num_students = len(students)
        num_courses = curriculum.num_courses
        duration = self.options.duration

        for i, student in enumerate(students):
            student.reset(i, num_courses)
        curriculum.reset_counters(duration)

        state = SimulationState(
            degree_plan=degree_plan,
            options=self.options,
            students=students,
            student_progress=np.zeros((num_students, num_courses), dtype=int),
            attempts=np.ones((num_students, num_courses), dtype=int),
            enrolled=list(students),
        )

        logger.info(
            f"Starting simulation of '{degree_plan.name}': {num_students} students, "
            f"{num_courses} courses, up to {duration} terms "
            f"(max_credits={self.options.max_credits}, stopouts={self.options.stopouts}, "
            f"duration_lock={self.options.duration_lock})"
        )
        return state

    def run_term(self, state: SimulationState) -> bool:
        """
        Advance the simulation by one term.

        Returns:
            True if another term should run, False once the loop has ended
        """
        if state.finished:
            return False

        options = self.options
        term = state.term + 1
        state.term = term

        # STEP 1: Enrollment
        for course in state.courses:
            course.counters.students = []
        self.enrollment_model.enroll(term, state, options.max_credits)
        if options.validate_enrollment:
            self._audit_rosters(state, term)

        # STEP 2-3: Grades and term close
        self._grade_term(state, term)
        for student in state.enrolled:
            student.update_gpa()
            student.term_credits = 0

        # STEP 4: Graduation (always before stopout)
        graduates = self._graduate(state, term)

        # STEP 5: Stopouts, evaluated on the post-graduation population
        stopped = self._stop_out(state, term) if options.stopouts else []

        # STEP 6: Cumulative rates
        state.term_grad_rates.append(len(state.graduated) / state.num_students)
        state.term_stopout_rates.append(len(state.stopouts) / state.num_students)

        logger.info(
            f"Term {term}: {len(graduates)} graduated, {len(stopped)} stopped out, "
            f"{len(state.enrolled)} still enrolled"
        )

        # STEP 7: Termination
        if not state.enrolled and not options.duration_lock:
            logger.info(f"All students resolved after term {term}; ending early")
            state.finished = True
        elif term >= options.duration:
            state.finished = True
        return not state.finished

    def finish(self, state: SimulationState) -> SimulationResult:
        """Aggregate the final statistics."""
        num_students = state.num_students
        graduated = state.graduated
        time_to_degree = state.time_to_degree_total / len(graduated) if graduated else 0.0

        result = SimulationResult(
            duration=state.term,
            num_students=num_students,
            term_grad_rates=list(state.term_grad_rates),
            term_stopout_rates=list(state.term_stopout_rates),
            grad_rate=len(graduated) / num_students,
            stopout_rate=len(state.stopouts) / num_students,
            time_to_degree=time_to_degree,
            graduated_students=list(graduated),
            stopout_students=list(state.stopouts),
            enrolled_students=list(state.enrolled),
            student_progress=state.student_progress.copy(),
            attempts=state.attempts.copy(),
        )
        logger.info(
            f"Simulation finished after {result.duration} terms: "
            f"grad rate {result.grad_rate:.1%}, stopout rate {result.stopout_rate:.1%}, "
            f"time to degree {result.time_to_degree:.2f} terms"
        )
        return result

    def _grade_term(self, state: SimulationState, term: int):
        """Predict and record a grade for every roster entry."""
        progress = state.student_progress
        for course in state.courses:
            counters = course.counters
            if not counters.students:
                continue

            course_name = course.full_name
            for student in counters.students:
                grade = float(self.performance_model.predict_grade(course, student))
                counters.grades.append(grade)

                if grade > PASS_THRESHOLD:
                    progress[student.id, course.id] = 1
                    counters.term_passed[term - 1] += 1
                    student.termpassed[course.id] = term
                else:
                    counters.failures += 1
                    state.attempts[student.id, course.id] += 1

                student.record_grade(course_name, grade, course.credit_hours)
                logger.debug(f"Term {term}: student {student.id} earned {grade:.2f} in '{course_name}'")

    def _graduate(self, state: SimulationState, term: int) -> list:
        """Move students with a complete progress row from enrolled to graduated."""
        num_courses = state.num_courses
        graduates = [
            student for student in state.enrolled
            if int(state.student_progress[student.id].sum()) == num_courses
        ]
        graduate_ids = {student.id for student in graduates}

        for student in graduates:
            student.grad_term = term
            state.time_to_degree_total += term
        state.graduated.extend(graduates)
        state.enrolled = [s for s in state.enrolled if s.id not in graduate_ids]
        return graduates

    def _stop_out(self, state: SimulationState, term: int) -> list:
        """Ask the performance model which remaining students stop out."""
        stopout_model = state.degree_plan.stopout_model
        stopped = []
        for student in state.enrolled:
            student.stopout = bool(self.performance_model.predict_stopout(student, term, stopout_model))
            if student.stopout:
                stopped.append(student)

        stopped_ids = {student.id for student in stopped}
        state.stopouts.extend(stopped)
        state.enrolled = [s for s in state.enrolled if s.id not in stopped_ids]
        return stopped

    def _audit_rosters(self, state: SimulationState, term: int):
        """
        Check every roster entry against the eligibility rule.

        Rosters are complete at this point, so the rule is evaluated on the
        final term load rather than incrementally.
        """
        progress = state.student_progress
        enrolled_ids = {s.id for s in state.enrolled}
        for course in state.courses:
            seen = set()
            for student in course.counters.students:
                eligible = (
                    student.id in enrolled_ids
                    and student.id not in seen
                    and prereqs_passed(student, course, progress)
                    and progress[student.id, course.id] == 0
                    and student.term_credits <= self.options.max_credits
                    and course.term_req <= term
                    and enrolled_in_coreqs(student, course, progress)
                )
                if not eligible:
                    raise EnrollmentViolationError(student.id, course.full_name, term)
                seen.add(student.id)


def simulate(degree_plan: DegreePlan, students: list, **options) -> SimulationResult:
    """
    Simulate a cohort of students through a degree plan.

    Args:
        degree_plan: The plan (and curriculum) to simulate
        students: Student records; copies are simulated, the originals are untouched
        **options: Any SimulationOptions field (performance_model,
                   enrollment_model, max_credits, duration, duration_lock,
                   stopouts, validate_enrollment)

    Returns:
        SimulationResult
    """
    return SimulationEngine(SimulationOptions(**options)).run(degree_plan, students)
