# src/threshold_logic/unateness.py

"""
Unateness classification and polarity normalization.

A function is positive unate in ``x_i`` if raising ``x_i`` from 0 to 1 never
lowers the output, negative unate if it never raises it, and binate otherwise.
A binate variable rules out any linear threshold form, so classification stops
at the first binate variable.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .truth_table import TruthTable

__all__ = [
    "variable_polarity",
    "unateness",
    "normalize",
]

log = logging.getLogger(__name__)


def variable_polarity(tt: TruthTable, var: int) -> Optional[bool]:
    """
    Polarity of ``tt`` in input ``var``.

    Returns
    -------
    True
        Positive unate (also returned when ``tt`` does not depend on ``var``).
    False
        Negative unate.
    None
        Binate.
    """
    cof1 = tt.cofactor1(var).bits
    cof0 = tt.cofactor0(var).bits
    positive = (cof1 & ~cof0) != 0
    negative = (cof0 & ~cof1) != 0
    if positive and negative:
        return None
    return not negative


def unateness(tt: TruthTable) -> Optional[List[bool]]:
    """
    Classify every input of ``tt``.

    Returns the list of polarities (``True`` positive, ``False`` negative) or
    ``None`` as soon as one input is binate.
    """
    polarities: List[bool] = []
    for var in range(tt.num_vars):
        polarity = variable_polarity(tt, var)
        if polarity is None:
            log.debug("variable %d is binate in %r", var, tt)
            return None
        polarities.append(polarity)
    return polarities


def normalize(tt: TruthTable, polarities: Sequence[bool]) -> TruthTable:
    """Flip every negative-unate input so the result is positive unate everywhere."""
    if len(polarities) != tt.num_vars:
        raise ValueError(f"expected {tt.num_vars} polarities, got {len(polarities)}")
    out = tt
    for var, positive in enumerate(polarities):
        if not positive:
            out = out.flip(var)
    return out
