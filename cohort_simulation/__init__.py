"""
Cohort Simulation Package
=========================

Term-by-term simulation of student cohorts moving through a degree plan.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           MODEL LAYER                                   │
│              (Dataclasses - curriculum graph and students)              │
│                                                                         │
│  ┌──────────────┐  ┌──────────────┐  ┌─────────┐  ┌──────────────────┐  │
│  │ Course       │  │ Curriculum   │  │ Student │  │ SimulationState  │  │
│  │ (+counters)  │  │ DegreePlan   │  │         │  │ SimulationResult │  │
│  └──────────────┘  └──────────────┘  └─────────┘  └──────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        PLUGGABLE MODELS (ports)                         │
│                                                                         │
│  ┌─────────────────────────────┐   ┌─────────────────────────────────┐  │
│  │ PerformanceModel            │   │ EnrollmentModel                 │  │
│  │  default: PassRateModel     │   │  default: GreedyEnrollment      │  │
│  └─────────────────────────────┘   └─────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         SimulationEngine                                │
│    (Term loop - enroll, grade, graduate, stop out, terminate)           │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

cohort_simulation/
├── __init__.py          # This file - main exports
├── config.py            # Constants and SimulationOptions
├── exceptions.py        # SimulationError hierarchy
├── logging_config.py    # setup_logging()
├── eligibility.py       # can_enroll, enrolled_in_coreqs
│
├── models/              # Data classes
│   ├── course.py        # Course, CourseCounters
│   ├── curriculum.py    # Curriculum, Term, DegreePlan, StopoutModel
│   ├── student.py       # Student
│   └── simulation.py    # SimulationState, SimulationResult
│
├── engines/
│   └── simulation.py    # SimulationEngine, simulate()
│
├── predictors/          # PerformanceModel port + PassRateModel
└── enrollment/          # EnrollmentModel port + GreedyEnrollment

USAGE
-----

    from cohort_simulation import Course, Curriculum, DegreePlan, Term, Student, simulate

    calc1 = Course("Calculus I", 4, prefix="MATH", num="121", pass_rate=0.8)
    calc2 = Course("Calculus II", 4, prefix="MATH", num="122", prereqs=[calc1], pass_rate=0.7)
    curriculum = Curriculum("Mathematics", [calc1, calc2])
    plan = DegreePlan("Math 2-term", curriculum, [Term([calc1]), Term([calc2])])

    result = simulate(plan, [Student() for _ in range(100)], duration=6)
    print(result.summary())

"""

# Version
__version__ = "1.0.0"

# Main exports
from .engines import SimulationEngine, simulate

# Model exports
from .models import (
    Course,
    CourseCounters,
    construct_course_name,
    Curriculum,
    Term,
    DegreePlan,
    StopoutModel,
    Student,
    SimulationState,
    SimulationResult,
)

# Pluggable model exports
from .predictors import PerformanceModel, PassRateModel
from .enrollment import EnrollmentModel, GreedyEnrollment

# Eligibility rules
from .eligibility import can_enroll, enrolled_in_coreqs, prereqs_passed

# Errors and logging
from .exceptions import (
    SimulationError,
    ConfigurationError,
    ModelTrainingError,
    EnrollmentViolationError,
)
from .logging_config import setup_logging

# Configuration exports
from .config import (
    SimulationOptions,
    PASS_THRESHOLD,
    DEFAULT_MAX_CREDITS,
    DEFAULT_DURATION,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "SimulationEngine",
    "simulate",
    # Models
    "Course",
    "CourseCounters",
    "construct_course_name",
    "Curriculum",
    "Term",
    "DegreePlan",
    "StopoutModel",
    "Student",
    "SimulationState",
    "SimulationResult",
    # Ports and default models
    "PerformanceModel",
    "PassRateModel",
    "EnrollmentModel",
    "GreedyEnrollment",
    # Eligibility
    "can_enroll",
    "enrolled_in_coreqs",
    "prereqs_passed",
    # Errors
    "SimulationError",
    "ConfigurationError",
    "ModelTrainingError",
    "EnrollmentViolationError",
    # Logging
    "setup_logging",
    # Config
    "SimulationOptions",
    "PASS_THRESHOLD",
    "DEFAULT_MAX_CREDITS",
    "DEFAULT_DURATION",
]
