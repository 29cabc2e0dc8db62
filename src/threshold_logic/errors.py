# src/threshold_logic/errors.py

"""
Exceptions raised when a threshold decision cannot be made.

A function that is proven not to be threshold is a normal ``False`` result and
never raises. These errors mean the answer is undetermined.
"""

__all__ = [
    "ThresholdError",
    "SolverUnavailableError",
    "SolverError",
]


class ThresholdError(RuntimeError):
    """Base class for undetermined threshold decisions."""


class SolverUnavailableError(ThresholdError):
    """No ILP solver could be constructed."""


class SolverError(ThresholdError):
    """The solver ran but returned neither a usable point nor a proof of infeasibility."""
