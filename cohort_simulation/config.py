"""
Configuration constants for the cohort simulation.

This module contains all configuration values and constants used throughout
the simulation. Centralizing these makes it easy to adjust grading policy
and run defaults in one place.
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError


# =============================================================================
# GRADING POLICY
# =============================================================================

# Predicted grades strictly above this value count as passing.
# 1.67 is the C-minus boundary on a 4.0 scale.
PASS_THRESHOLD = 1.67

# Grades emitted by the built-in pass-rate model
PASSING_GRADE = 4.0
FAILING_GRADE = 0.0

# Pass rate assumed for a course that carries no historical rate
DEFAULT_PASS_RATE = 0.5


# =============================================================================
# RUN DEFAULTS
# =============================================================================

DEFAULT_MAX_CREDITS = 18     # Per-term credit cap for each student
DEFAULT_DURATION = 8         # Maximum number of terms to simulate
DEFAULT_DURATION_LOCK = False
DEFAULT_STOPOUTS = False


# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME = "cohort_simulation"


@dataclass
class SimulationOptions:
    """
    Options recognized by a simulation run.

    performance_model and enrollment_model default to None, which means
    "use the built-in model" (PassRateModel / GreedyEnrollment). They are
    resolved by the engine so this module stays free of model imports.

    Attributes:
        performance_model: Object implementing the PerformanceModel port
        enrollment_model: Object implementing the EnrollmentModel port
        max_credits: Per-term credit cap
        duration: Maximum number of terms to simulate
        duration_lock: Run the full duration even after every student resolves
        stopouts: Enable stopout modeling
        validate_enrollment: Audit every roster against the eligibility rule
    """
    performance_model: Optional[object] = None
    enrollment_model: Optional[object] = None
    max_credits: float = DEFAULT_MAX_CREDITS
    duration: int = DEFAULT_DURATION
    duration_lock: bool = DEFAULT_DURATION_LOCK
    stopouts: bool = DEFAULT_STOPOUTS
    validate_enrollment: bool = False

    def __post_init__(self):
        if self.max_credits <= 0:
            raise ConfigurationError(f"max_credits must be positive, got {self.max_credits}")
        if int(self.duration) != self.duration or self.duration < 1:
            raise ConfigurationError(f"duration must be a positive integer, got {self.duration}")
        self.duration = int(self.duration)
