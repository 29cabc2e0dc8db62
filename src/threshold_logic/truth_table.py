# src/threshold_logic/truth_table.py

"""
Completely specified truth tables stored as Python integers.

A table over ``n`` inputs holds ``2**n`` output bits. Bit ``k`` is the value of
the function at the assignment whose input ``i`` equals bit ``i`` of ``k``;
input 0 is the least significant variable.

Tables are immutable values: every operation (cofactor, complement, flip)
returns a new table.

Examples
--------
>>> from threshold_logic.truth_table import TruthTable
>>> maj = TruthTable.majority(3)
>>> maj.to_binary()
'11101000'
>>> maj.cofactor1(0).to_binary()
'11111100'
>>> (~maj).count_ones()
4
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, Iterator, Sequence, Tuple

import pandas as pd

__all__ = [
    "TruthTable",
    "projection_mask",
]


@lru_cache(maxsize=None)
def _full_mask(num_vars: int) -> int:
    return (1 << (1 << num_vars)) - 1


@lru_cache(maxsize=None)
def projection_mask(num_vars: int, var: int) -> int:
    """
    Bits of the table of ``x_var`` over ``num_vars`` inputs.

    The result has a 1 at every position whose assignment sets ``var`` to 1.
    """
    if not 0 <= var < num_vars:
        raise IndexError(f"variable {var} out of range for {num_vars} inputs")
    shift = 1 << var
    block = ((1 << shift) - 1) << shift
    mask = 0
    for start in range(0, 1 << num_vars, 2 * shift):
        mask |= block << start
    return mask


@dataclass(frozen=True)
class TruthTable:
    """
    Immutable truth table of a completely specified Boolean function.

    Parameters
    ----------
    num_vars : int
        Number of inputs ``n`` (``n >= 0``).
    bits : int
        Output bits, ``0 <= bits < 2**(2**n)``.
    """
    num_vars: int
    bits: int = 0

    def __post_init__(self):
        if self.num_vars < 0:
            raise ValueError("num_vars must be ≥ 0")
        if not 0 <= self.bits <= _full_mask(self.num_vars):
            raise ValueError(f"bits do not fit in a table of {self.num_vars} inputs")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def constant(cls, num_vars: int, value: bool) -> "TruthTable":
        return cls(num_vars, _full_mask(num_vars) if value else 0)

    @classmethod
    def nth_var(cls, num_vars: int, var: int) -> "TruthTable":
        """Projection function ``f(x) = x_var``."""
        return cls(num_vars, projection_mask(num_vars, var))

    @classmethod
    def from_function(cls, fn: Callable[[Tuple[int, ...]], object], num_vars: int) -> "TruthTable":
        """
        Tabulate ``fn`` on every assignment.

        ``fn`` receives a tuple ``(x0, ..., x{n-1})`` of 0/1 ints; its result is
        interpreted by truthiness.
        """
        bits = 0
        for k in range(1 << num_vars):
            x = tuple((k >> i) & 1 for i in range(num_vars))
            if fn(x):
                bits |= 1 << k
        return cls(num_vars, bits)

    @classmethod
    def from_minterms(cls, minterms: Iterable[int], num_vars: int) -> "TruthTable":
        bits = 0
        size = 1 << num_vars
        for m in minterms:
            if not 0 <= m < size:
                raise ValueError(f"minterm {m} out of range for {num_vars} inputs")
            bits |= 1 << m
        return cls(num_vars, bits)

    @classmethod
    def from_binary(cls, text: str) -> "TruthTable":
        """
        Parse a binary string, most significant bit (last assignment) first.

        The length must be a power of two.
        """
        text = text.strip()
        size = len(text)
        if size == 0 or size & (size - 1):
            raise ValueError("binary string length must be a power of two")
        if set(text) - {"0", "1"}:
            raise ValueError(f"not a binary string: {text!r}")
        return cls(size.bit_length() - 1, int(text, 2))

    @classmethod
    def from_hex(cls, text: str, num_vars: int) -> "TruthTable":
        text = text.strip().lower()
        if text.startswith("0x"):
            text = text[2:]
        return cls(num_vars, int(text, 16) if text else 0)

    @classmethod
    def majority(cls, num_vars: int) -> "TruthTable":
        """Majority function: 1 iff more than half of the inputs are 1."""
        return cls.from_function(lambda x: 2 * sum(x) > num_vars, num_vars)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def num_bits(self) -> int:
        return 1 << self.num_vars

    def get_bit(self, index: int) -> int:
        if not 0 <= index < self.num_bits():
            raise IndexError(f"bit {index} out of range")
        return (self.bits >> index) & 1

    def count_ones(self) -> int:
        return bin(self.bits).count("1")

    def is_const0(self) -> bool:
        return self.bits == 0

    def is_const1(self) -> bool:
        return self.bits == _full_mask(self.num_vars)

    def has_var(self, var: int) -> bool:
        """Whether the function depends on input ``var``."""
        return self.cofactor0(var) != self.cofactor1(var)

    def evaluate(self, assignment: Sequence[int]) -> int:
        if len(assignment) != self.num_vars:
            raise ValueError(f"expected {self.num_vars} inputs, got {len(assignment)}")
        index = 0
        for i, v in enumerate(assignment):
            if v:
                index |= 1 << i
        return self.get_bit(index)

    def assignments(self) -> Iterator[Tuple[Tuple[int, ...], int]]:
        """Yield ``(assignment, value)`` for every input in index order."""
        for k in range(self.num_bits()):
            x = tuple((k >> i) & 1 for i in range(self.num_vars))
            yield x, (self.bits >> k) & 1

    # ------------------------------------------------------------------
    # Operations (all return new tables)
    # ------------------------------------------------------------------

    def cofactor0(self, var: int) -> "TruthTable":
        """Fix ``var`` to 0; the kept half is copied onto both halves."""
        mask = projection_mask(self.num_vars, var)
        kept = self.bits & ~mask
        return TruthTable(self.num_vars, kept | (kept << (1 << var)))

    def cofactor1(self, var: int) -> "TruthTable":
        """Fix ``var`` to 1; the kept half is copied onto both halves."""
        mask = projection_mask(self.num_vars, var)
        kept = self.bits & mask
        return TruthTable(self.num_vars, kept | (kept >> (1 << var)))

    def flip(self, var: int) -> "TruthTable":
        """Complement input ``var``: the result is ``f(x ^ e_var)``."""
        mask = projection_mask(self.num_vars, var)
        shift = 1 << var
        hi = self.bits & mask
        lo = self.bits & ~mask
        return TruthTable(self.num_vars, (hi >> shift) | (lo << shift))

    def _check_same_arity(self, other: "TruthTable") -> None:
        if not isinstance(other, TruthTable):
            raise TypeError(f"expected TruthTable, got {type(other).__name__}")
        if other.num_vars != self.num_vars:
            raise ValueError("truth tables have different numbers of inputs")

    def __invert__(self) -> "TruthTable":
        return TruthTable(self.num_vars, self.bits ^ _full_mask(self.num_vars))

    def __and__(self, other: "TruthTable") -> "TruthTable":
        self._check_same_arity(other)
        return TruthTable(self.num_vars, self.bits & other.bits)

    def __or__(self, other: "TruthTable") -> "TruthTable":
        self._check_same_arity(other)
        return TruthTable(self.num_vars, self.bits | other.bits)

    def __xor__(self, other: "TruthTable") -> "TruthTable":
        self._check_same_arity(other)
        return TruthTable(self.num_vars, self.bits ^ other.bits)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_binary(self) -> str:
        return format(self.bits, f"0{self.num_bits()}b")

    def to_hex(self) -> str:
        digits = max(1, self.num_bits() // 4)
        return format(self.bits, f"0{digits}x")

    def to_frame(self) -> pd.DataFrame:
        """
        One row per assignment with input columns ``x0..x{n-1}`` and output ``f``.
        """
        rows = [dict({f"x{i}": v for i, v in enumerate(x)}, f=value) for x, value in self.assignments()]
        columns = [f"x{i}" for i in range(self.num_vars)] + ["f"]
        return pd.DataFrame(rows, columns=columns)

    def __repr__(self):
        return f"TruthTable({self.num_vars}, 0b{self.to_binary()})"
