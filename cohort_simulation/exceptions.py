"""
Exception hierarchy for the cohort simulation.

Every error raised by the package derives from SimulationError, so callers
can catch the whole family in one place. A raised error aborts the run;
no partial result is ever returned.
"""


class SimulationError(Exception):
    """Base class for all simulation errors."""


class ConfigurationError(SimulationError):
    """Invalid run options or inputs (credit cap, duration, population)."""


class ModelTrainingError(SimulationError):
    """A performance model could not be trained on the curriculum."""


class EnrollmentViolationError(SimulationError):
    """
    An enrollment model placed a student in a course they were not
    eligible for.

    Attributes:
        student_id: Row index of the offending student
        course_name: Composite name of the course
        term: Term in which the assignment was made
    """

    def __init__(self, student_id: int, course_name: str, term: int):
        self.student_id = student_id
        self.course_name = course_name
        self.term = term
        super().__init__(
            f"Student {student_id} is not eligible for '{course_name}' in term {term}"
        )
