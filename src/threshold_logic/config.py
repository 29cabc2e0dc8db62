# src/threshold_logic/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

"""
Configuration for threshold identification.

:class:`ThresholdConfig` is a small dataclass with sane defaults. Treat it as
an immutable snapshot passed into :func:`threshold_logic.identification.find_linear_form`
and the batch helpers in :mod:`threshold_logic.reporting`.

Examples
--------
>>> from threshold_logic.config import ThresholdConfig
>>> cfg = ThresholdConfig(backend="scipy", time_limit=5.0)
>>> cfg.verify
True
"""

__all__ = [
    'ThresholdConfig',
    'BACKENDS',
]

BACKENDS = ("auto", "scipy", "pulp")


@dataclass
class ThresholdConfig:
    """
    Knobs for the ILP stage of threshold identification.

    Parameters
    ----------
    backend : {"auto", "scipy", "pulp"}, default="auto"
        Which ILP backend to use. ``"auto"`` prefers SciPy's in-process HiGHS
        and falls back to PuLP (CBC or GLPK).
    time_limit : float or None, default=None
        Wall-clock limit in seconds handed to the solver. Hitting it leaves
        the answer undetermined and raises :class:`~threshold_logic.errors.SolverError`.
    verify : bool, default=True
        Check the returned linear form against the input table before
        returning it.
    msg : bool, default=False
        Let the solver print its own log.

    Examples
    --------
    >>> ThresholdConfig(backend="pulp", msg=True)
    ThresholdConfig(backend='pulp', time_limit=None, verify=True, msg=True)
    """

    backend: str = "auto"
    time_limit: Optional[float] = None
    verify: bool = True
    msg: bool = False

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got {self.backend!r}")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError("time_limit must be > 0")
