"""
Performance models.

PerformanceModel is the port the engine talks to; PassRateModel is the
default implementation.
"""

from .base import PerformanceModel
from .pass_rate import PassRateModel

__all__ = ["PerformanceModel", "PassRateModel"]
