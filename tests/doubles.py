"""Test doubles implementing the simulation ports."""

from cohort_simulation import (
    Curriculum,
    DegreePlan,
    EnrollmentModel,
    PerformanceModel,
    Term,
)


class FixedGradeModel(PerformanceModel):
    """Returns the same grade for every prediction."""

    def __init__(self, grade, stopout=False):
        self.grade = grade
        self.stopout = stopout
        self.trained_on = None
        self.grade_calls = 0
        self.stopout_calls = []

    def train(self, curriculum):
        self.trained_on = curriculum.name

    def predict_grade(self, course, student):
        self.grade_calls += 1
        return self.grade

    def predict_stopout(self, student, term, stopout_model):
        self.stopout_calls.append((student.id, term))
        return self.stopout


class FailingTrainingModel(FixedGradeModel):
    def train(self, curriculum):
        raise RuntimeError("not enough data")


class EnrollEverywhere(EnrollmentModel):
    """Ignores eligibility entirely. Used to check the roster audit."""

    def enroll(self, term, state, max_credits):
        for student in state.enrolled:
            for course in state.courses:
                self.assign(student, course, term)


def make_plan(courses, terms=None, name="Test Plan"):
    curriculum = Curriculum(name, courses)
    if terms is None:
        terms = [Term([c]) for c in courses]
    return DegreePlan(name, curriculum, terms)
