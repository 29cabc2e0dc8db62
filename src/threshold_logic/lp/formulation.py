# src/threshold_logic/lp/formulation.py

"""
Integer program whose feasible points are the linear forms of a positive-unate function.

Columns are ``w_1, ..., w_n, T`` (all non-negative integers). Rows:

1. ``w_i ≥ 0`` and ``T ≥ 0`` as explicit rows.
2. ``Σ w_i - T ≥ 0`` when the onset is non-empty (the all-ones input is on).
3. onset cube ``c``:  ``Σ_{i positive in c} w_i - T ≥ 0``
4. offset cube ``c``: ``Σ_{i not negative in c} w_i - T ≤ -1``

Objective: minimize ``Σ w_i + T``. Any optimum is accepted; the objective only
keeps the solver on a bounded point.

The covers must come from a positive-unate table: onset cubes then carry no
negative literals and offset cubes no positive ones, so each row pins the
extreme point of its cube.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from ..cubes import Cube, Literal

__all__ = [
    "Sense",
    "ConstraintRow",
    "ILPModel",
    "onset_coefficient",
    "offset_coefficient",
    "build_threshold_ilp",
]


class Sense(Enum):
    GE = ">="
    LE = "<="


@dataclass(frozen=True)
class ConstraintRow:
    coefficients: Tuple[float, ...]
    sense: Sense
    rhs: float

    def satisfied_by(self, x: Sequence[float]) -> bool:
        lhs = float(np.dot(self.coefficients, x))
        if self.sense is Sense.GE:
            return lhs >= self.rhs
        return lhs <= self.rhs


@dataclass
class ILPModel:
    """
    ``minimize c·x  s.t.  rows, x integer`` over ``num_columns`` columns.

    Built fresh per decision and discarded after solving.
    """
    num_columns: int
    objective: Tuple[float, ...] = ()
    rows: List[ConstraintRow] = field(default_factory=list)
    integrality: Tuple[bool, ...] = ()

    def __post_init__(self):
        if not self.objective:
            self.objective = (0.0,) * self.num_columns
        if not self.integrality:
            self.integrality = (True,) * self.num_columns

    def add_row(self, coefficients: Sequence[float], sense: Sense, rhs: float) -> None:
        if len(coefficients) != self.num_columns:
            raise ValueError(f"row has {len(coefficients)} coefficients, model has {self.num_columns} columns")
        self.rows.append(ConstraintRow(tuple(float(c) for c in coefficients), sense, float(rhs)))

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Two-sided matrix form ``lb ≤ A x ≤ ub`` (``±inf`` for the open side).
        """
        m, k = len(self.rows), self.num_columns
        A = np.zeros((m, k), dtype=float)
        lb = np.full(m, -np.inf)
        ub = np.full(m, np.inf)
        for r, row in enumerate(self.rows):
            A[r, :] = row.coefficients
            if row.sense is Sense.GE:
                lb[r] = row.rhs
            else:
                ub[r] = row.rhs
        return A, lb, ub

    def is_feasible_point(self, x: Sequence[float]) -> bool:
        return all(row.satisfied_by(x) for row in self.rows)


def onset_coefficient(lit: Literal) -> int:
    """Weight coefficient of an input in an onset-cube row."""
    if lit is Literal.POSITIVE:
        return 1
    if lit is Literal.NEGATIVE:
        return 0
    if lit is Literal.DONT_CARE:
        return 0
    raise ValueError(f"unknown literal {lit!r}")


def offset_coefficient(lit: Literal) -> int:
    """Weight coefficient of an input in an offset-cube row."""
    if lit is Literal.POSITIVE:
        return 1
    if lit is Literal.NEGATIVE:
        return 0
    if lit is Literal.DONT_CARE:
        return 1
    raise ValueError(f"unknown literal {lit!r}")


def build_threshold_ilp(num_vars: int, onset: Sequence[Cube], offset: Sequence[Cube]) -> ILPModel:
    """
    Build the threshold ILP for the onset/offset covers of a positive-unate table.

    Parameters
    ----------
    num_vars : int
        Number of inputs ``n``; the model has ``n + 1`` columns.
    onset, offset : sequence of Cube
        Covers of the onset and offset. Order is irrelevant.
    """
    k = num_vars + 1
    model = ILPModel(num_columns=k, objective=(1.0,) * k)

    for j in range(k):
        row = [0] * k
        row[j] = 1
        model.add_row(row, Sense.GE, 0)

    if onset:
        model.add_row([1] * num_vars + [-1], Sense.GE, 0)

    for cube in onset:
        _check_width(cube, num_vars)
        model.add_row([onset_coefficient(lit) for lit in cube.literals] + [-1], Sense.GE, 0)

    for cube in offset:
        _check_width(cube, num_vars)
        model.add_row([offset_coefficient(lit) for lit in cube.literals] + [-1], Sense.LE, -1)

    return model


def _check_width(cube: Cube, num_vars: int) -> None:
    if cube.num_vars != num_vars:
        raise ValueError(f"cube {cube} has {cube.num_vars} inputs, expected {num_vars}")
