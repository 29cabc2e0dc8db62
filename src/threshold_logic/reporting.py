# src/threshold_logic/reporting.py

"""
Batch classification of truth tables into pandas frames.

Examples
--------
>>> from threshold_logic.reporting import count_threshold_functions
>>> count_threshold_functions(2)
14
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

import pandas as pd

from .config import ThresholdConfig
from .identification import find_linear_form
from .lp.backend import ILPBackend, get_backend
from .truth_table import TruthTable

__all__ = [
    "enumerate_truth_tables",
    "classify_functions",
    "count_threshold_functions",
    "summarize",
]

log = logging.getLogger(__name__)

_COLUMNS = ["num_vars", "bits", "hex", "is_threshold", "linear_form"]


def enumerate_truth_tables(num_vars: int) -> Iterator[TruthTable]:
    """All ``2**(2**n)`` tables over ``num_vars`` inputs, in order of their bits."""
    if num_vars < 0:
        raise ValueError("num_vars must be ≥ 0")
    for bits in range(1 << (1 << num_vars)):
        yield TruthTable(num_vars, bits)


def classify_functions(
    tables: Iterable[TruthTable],
    *,
    config: Optional[ThresholdConfig] = None,
    backend: Optional[ILPBackend] = None,
) -> pd.DataFrame:
    """
    One row per table: arity, bits, hex, verdict and the linear form as a list
    (``None`` for non-threshold functions).

    The backend is built once and shared by every decision.
    """
    cfg = config or ThresholdConfig()
    solver = backend if backend is not None else get_backend(cfg)

    rows = []
    for tt in tables:
        form = find_linear_form(tt, config=cfg, backend=solver)
        rows.append({
            "num_vars": tt.num_vars,
            "bits": tt.bits,
            "hex": tt.to_hex(),
            "is_threshold": form is not None,
            "linear_form": form.as_list() if form is not None else None,
        })
    log.debug("classified %d tables", len(rows))
    return pd.DataFrame(rows, columns=_COLUMNS)


def count_threshold_functions(
    num_vars: int,
    *,
    config: Optional[ThresholdConfig] = None,
    backend: Optional[ILPBackend] = None,
) -> int:
    """Number of threshold functions over ``num_vars`` inputs (2, 4, 14, 104, 1882, ...)."""
    df = classify_functions(enumerate_truth_tables(num_vars), config=config, backend=backend)
    return int(df["is_threshold"].sum())


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-arity totals of a :func:`classify_functions` frame.

    Columns: ``num_vars``, ``functions``, ``threshold``, ``fraction``.
    """
    if df.empty:
        return pd.DataFrame(columns=["num_vars", "functions", "threshold", "fraction"])
    out = (
        df.groupby("num_vars")["is_threshold"]
        .agg(functions="size", threshold="sum")
        .reset_index()
    )
    out["threshold"] = out["threshold"].astype(int)
    out["fraction"] = out["threshold"] / out["functions"]
    return out
