# src/threshold_logic/forms.py

"""
Linear forms ``[w_1, ..., w_n; T]`` of threshold functions.

A linear form realizes the function ``f(x) = 1  iff  Σ w_i x_i ≥ T``.
:meth:`LinearForm.check` evaluates a form against a truth table and reports
the assignments where the two disagree, in the same
``(holds, failures)`` shape used by the conjecture checks elsewhere.

Examples
--------
>>> from threshold_logic.forms import LinearForm
>>> from threshold_logic.truth_table import TruthTable
>>> lf = LinearForm((1, 1, 1), 2)
>>> lf
[1, 1, 1; 2]
>>> lf.realizes(TruthTable.majority(3))
True
>>> lf.to_truth_table().to_binary()
'11101000'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from .truth_table import TruthTable

__all__ = [
    "LinearForm",
]


@dataclass(frozen=True)
class LinearForm:
    """
    Integer weights and threshold.

    Parameters
    ----------
    weights : tuple of int
        One weight per input, input 0 first.
    threshold : int
        Threshold ``T``.
    """
    weights: Tuple[int, ...]
    threshold: int

    @classmethod
    def from_list(cls, values: Sequence[int]) -> "LinearForm":
        """Build from ``[w_1, ..., w_n, T]``."""
        if len(values) == 0:
            raise ValueError("a linear form needs at least the threshold")
        return cls(tuple(int(v) for v in values[:-1]), int(values[-1]))

    @property
    def num_vars(self) -> int:
        return len(self.weights)

    def as_list(self) -> List[int]:
        return list(self.weights) + [self.threshold]

    def weighted_sum(self, assignment: Sequence[int]) -> int:
        if len(assignment) != self.num_vars:
            raise ValueError(f"expected {self.num_vars} inputs, got {len(assignment)}")
        return sum(w for w, v in zip(self.weights, assignment) if v)

    def evaluate(self, assignment: Sequence[int]) -> int:
        return int(self.weighted_sum(assignment) >= self.threshold)

    def to_truth_table(self) -> TruthTable:
        return TruthTable.from_function(self.evaluate, self.num_vars)

    def realizes(self, tt: TruthTable) -> bool:
        return tt.num_vars == self.num_vars and self.to_truth_table() == tt

    def check(self, tt: TruthTable) -> Tuple[pd.Series, pd.DataFrame]:
        """
        Compare the form with ``tt`` on every assignment.

        Returns
        -------
        holds : pd.Series
            Boolean mask, one entry per assignment, True where form and table agree.
        failures : pd.DataFrame
            Rows of ``tt.to_frame()`` where they disagree, with the weighted sum in
            ``"__sum__"`` and the signed margin ``sum - T`` in ``"__slack__"``.
        """
        if tt.num_vars != self.num_vars:
            raise ValueError(f"form has {self.num_vars} inputs, table has {tt.num_vars}")
        df = tt.to_frame()
        inputs = df[[f"x{i}" for i in range(self.num_vars)]].to_numpy(dtype=np.int64)
        sums = inputs @ np.asarray(self.weights, dtype=np.int64) if self.num_vars else np.zeros(len(df), dtype=np.int64)
        predicted = (sums >= self.threshold).astype(int)
        holds = pd.Series(predicted == df["f"].to_numpy(), index=df.index)

        failures = df.loc[~holds].copy()
        failures["__sum__"] = sums[~holds.to_numpy()]
        failures["__slack__"] = failures["__sum__"] - self.threshold
        return holds, failures

    def __repr__(self):
        return "[" + ", ".join(str(w) for w in self.weights) + f"; {self.threshold}]"
