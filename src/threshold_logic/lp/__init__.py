from __future__ import annotations

from .formulation import Sense, ConstraintRow, ILPModel, build_threshold_ilp, onset_coefficient, offset_coefficient
from .backend import ILPBackend, SciPyBackend, PuLPBackend, best_available_backend, get_backend

__all__ = [
    "Sense",
    "ConstraintRow",
    "ILPModel",
    "build_threshold_ilp",
    "onset_coefficient",
    "offset_coefficient",
    "ILPBackend",
    "SciPyBackend",
    "PuLPBackend",
    "best_available_backend",
    "get_backend",
]
