# src/threshold_logic/cubes.py

"""
Cubes and irredundant sum-of-products (ISOP) covers.

A cube is a partial assignment: each input is asserted true, asserted false,
or left free. :func:`isop` computes the Minato–Morreale irredundant cover of
the onset of a completely specified table; the offset cover of ``tt`` is
``isop(~tt)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .truth_table import TruthTable, projection_mask

__all__ = [
    "Literal",
    "Cube",
    "isop",
]


class Literal(Enum):
    """State of one input inside a cube."""
    POSITIVE = "1"
    NEGATIVE = "0"
    DONT_CARE = "-"


@dataclass(frozen=True)
class Cube:
    """
    Conjunction of literals over ``len(literals)`` inputs.

    Examples
    --------
    >>> from threshold_logic.cubes import Cube
    >>> c = Cube.from_string("1-0")
    >>> c.contains((1, 1, 0)), c.contains((0, 1, 0))
    (True, False)
    >>> str(c)
    '1-0'
    """
    literals: Tuple[Literal, ...]

    @classmethod
    def universal(cls, num_vars: int) -> "Cube":
        return cls((Literal.DONT_CARE,) * num_vars)

    @classmethod
    def from_string(cls, text: str) -> "Cube":
        """Parse ``'1'``, ``'0'`` and ``'-'`` characters, input 0 first."""
        return cls(tuple(Literal(ch) for ch in text))

    @property
    def num_vars(self) -> int:
        return len(self.literals)

    def num_literals(self) -> int:
        return sum(1 for lit in self.literals if lit is not Literal.DONT_CARE)

    def contains(self, assignment) -> bool:
        for lit, v in zip(self.literals, assignment):
            if lit is Literal.POSITIVE and not v:
                return False
            if lit is Literal.NEGATIVE and v:
                return False
        return True

    def to_truth_table(self) -> TruthTable:
        bits = (1 << (1 << self.num_vars)) - 1
        for i, lit in enumerate(self.literals):
            if lit is Literal.POSITIVE:
                bits &= projection_mask(self.num_vars, i)
            elif lit is Literal.NEGATIVE:
                bits &= ~projection_mask(self.num_vars, i)
        return TruthTable(self.num_vars, bits)

    def __str__(self):
        return "".join(lit.value for lit in self.literals)


def _cofactors(bits: int, num_vars: int, var: int) -> Tuple[int, int]:
    mask = projection_mask(num_vars, var)
    shift = 1 << var
    lo = bits & ~mask
    hi = bits & mask
    return lo | (lo << shift), hi | (hi >> shift)


def _isop_rec(
    lower: int,
    upper: int,
    var_index: int,
    num_vars: int,
    full: int,
    cubes: List[Dict[int, Literal]],
) -> int:
    # Cover some f with lower <= f <= upper; returns the covered bits.
    if lower == 0:
        return 0
    if upper == full:
        cubes.append({})
        return full

    var = var_index - 1
    while var >= 0:
        lo0, lo1 = _cofactors(lower, num_vars, var)
        up0, up1 = _cofactors(upper, num_vars, var)
        if lo0 != lo1 or up0 != up1:
            break
        var -= 1
    if var < 0:
        raise ValueError("lower bound is not contained in upper bound")

    beg0 = len(cubes)
    res0 = _isop_rec(lo0 & ~up1, up0, var, num_vars, full, cubes)
    end0 = len(cubes)
    res1 = _isop_rec(lo1 & ~up0, up1, var, num_vars, full, cubes)
    end1 = len(cubes)
    res2 = _isop_rec((lo0 & ~res0) | (lo1 & ~res1), up0 & up1, var, num_vars, full, cubes)

    mask = projection_mask(num_vars, var)
    res2 |= (res0 & ~mask) | (res1 & mask)

    for c in cubes[beg0:end0]:
        c[var] = Literal.NEGATIVE
    for c in cubes[end0:end1]:
        c[var] = Literal.POSITIVE
    return res2


def isop(tt: TruthTable) -> List[Cube]:
    """
    Irredundant sum-of-products cover of the onset of ``tt``.

    The union of the returned cubes is exactly the onset; no cube can be
    dropped without uncovering a minterm. Constant 0 yields ``[]`` and
    constant 1 yields the universal cube. Cube order carries no meaning.
    """
    n = tt.num_vars
    full = (1 << (1 << n)) - 1
    partial: List[Dict[int, Literal]] = []
    covered = _isop_rec(tt.bits, tt.bits, n, n, full, partial)
    assert covered == tt.bits, "ISOP cover does not match the table"
    return [
        Cube(tuple(c.get(i, Literal.DONT_CARE) for i in range(n)))
        for c in partial
    ]
