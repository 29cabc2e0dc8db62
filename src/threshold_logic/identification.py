# src/threshold_logic/identification.py

"""
Threshold logic function identification.

A Boolean function is a threshold function (TF) if it can be written as

    f(x_1, ..., x_n) = 1  iff  Σ w_i x_i ≥ T

for integer weights ``w_i`` and threshold ``T``; ``[w_1, ..., w_n; T]`` is a
linear form of ``f``.

Pipeline:

1. classify every input as positive/negative unate; any binate input means
   ``f`` is not a TF,
2. flip the negative-unate inputs so the working table is positive unate,
3. take ISOP covers of the onset and offset,
4. build and solve the ILP of :mod:`threshold_logic.lp.formulation`;
   infeasible means ``f`` is not a TF,
5. map the solution back to the original input polarities.

Solver trouble is never reported as "not a TF": it raises
:class:`~threshold_logic.errors.SolverUnavailableError` or
:class:`~threshold_logic.errors.SolverError`.

Examples
--------
>>> from threshold_logic import TruthTable, find_linear_form, is_threshold
>>> find_linear_form(TruthTable.majority(3))
[1, 1, 1; 2]
>>> is_threshold(TruthTable.from_binary("0110"))
False
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import ThresholdConfig
from .cubes import Cube, isop
from .errors import SolverError
from .forms import LinearForm
from .lp.backend import ILPBackend, get_backend
from .lp.formulation import build_threshold_ilp
from .truth_table import TruthTable
from .unateness import normalize, unateness

__all__ = [
    "extract_covers",
    "translate_solution",
    "find_linear_form",
    "is_threshold",
]

log = logging.getLogger(__name__)


def extract_covers(tt: TruthTable) -> Tuple[List[Cube], List[Cube]]:
    """ISOP covers ``(onset, offset)`` of ``tt``."""
    return isop(tt), isop(~tt)


def translate_solution(values: Sequence[float], polarities: Sequence[bool]) -> LinearForm:
    """
    Turn solver values for the normalized table into a form over the original inputs.

    For each negative-unate input, ``w_i`` becomes ``-w_i`` and ``T`` drops by the
    old ``w_i``.
    """
    ints = [int(round(float(v))) for v in values]
    if len(ints) != len(polarities) + 1:
        raise ValueError(f"expected {len(polarities) + 1} values, got {len(ints)}")
    weights, threshold = ints[:-1], ints[-1]
    for i, positive in enumerate(polarities):
        if not positive:
            weights[i] = -weights[i]
            threshold += weights[i]
    return LinearForm(tuple(weights), threshold)


def find_linear_form(
    tt: TruthTable,
    *,
    config: Optional[ThresholdConfig] = None,
    backend: Optional[ILPBackend] = None,
) -> Optional[LinearForm]:
    """
    Linear form of ``tt``, or ``None`` if ``tt`` is not a threshold function.

    Parameters
    ----------
    tt : TruthTable
        Completely specified function. It is not modified.
    config : ThresholdConfig, optional
        Backend choice, time limit and verification switch.
    backend : ILPBackend, optional
        Pre-built backend; overrides ``config.backend``.

    Raises
    ------
    SolverUnavailableError
        No ILP solver could be constructed.
    SolverError
        The solver failed, or (with ``config.verify``) its answer does not
        realize ``tt``.
    """
    cfg = config or ThresholdConfig()

    polarities = unateness(tt)
    if polarities is None:
        return None

    work = normalize(tt, polarities)
    onset, offset = extract_covers(work)
    log.debug("%r: %d onset cubes, %d offset cubes", tt, len(onset), len(offset))

    model = build_threshold_ilp(tt.num_vars, onset, offset)
    solver = backend if backend is not None else get_backend(cfg)
    values = solver.solve(model)
    if values is None:
        log.debug("%r: ILP infeasible", tt)
        return None

    form = translate_solution(np.asarray(values, dtype=float), polarities)
    if cfg.verify and not form.realizes(tt):
        raise SolverError(f"solver returned {form!r}, which does not realize {tt!r}")
    log.debug("%r: linear form %r", tt, form)
    return form


def is_threshold(
    tt: TruthTable,
    linear_form: Optional[list] = None,
    *,
    config: Optional[ThresholdConfig] = None,
    backend: Optional[ILPBackend] = None,
) -> bool:
    """
    Whether ``tt`` is a threshold function.

    If ``linear_form`` is a list and the answer is True, its contents are replaced
    by ``[w_1, ..., w_n, T]``; otherwise it is left untouched.
    """
    form = find_linear_form(tt, config=config, backend=backend)
    if form is None:
        return False
    if linear_form is not None:
        linear_form[:] = form.as_list()
    return True
