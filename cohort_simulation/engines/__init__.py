"""
Simulation engines.

This package contains the term loop that performs the core business logic
of the simulation.
"""

from .simulation import SimulationEngine, simulate

__all__ = ["SimulationEngine", "simulate"]
