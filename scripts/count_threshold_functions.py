# scripts/count_threshold_functions.py
"""
Classify every Boolean function of up to ``--max-vars`` inputs and print how
many are threshold functions.

Usage (from project root):

    PYTHONPATH=src python scripts/count_threshold_functions.py --max-vars 3
"""
from __future__ import annotations

import argparse
import itertools

import pandas as pd

from threshold_logic import ThresholdConfig, classify_functions, enumerate_truth_tables, summarize
from threshold_logic.utils import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--max-vars", type=int, default=3)
    parser.add_argument("--backend", default="auto", choices=["auto", "scipy", "pulp"])
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    log = setup_logging("threshold_logic", args.log_level)
    cfg = ThresholdConfig(backend=args.backend)

    tables = itertools.chain.from_iterable(
        enumerate_truth_tables(n) for n in range(args.max_vars + 1)
    )
    df = classify_functions(tables, config=cfg)
    log.info("classified %d functions", len(df))

    print("─" * 72)
    print("Threshold functions by number of inputs")
    with pd.option_context("display.width", 120):
        print(summarize(df).to_string(index=False))

    print("\nSample linear forms:")
    for _, row in df[df["is_threshold"]].tail(5).iterrows():
        print(f"  n={row['num_vars']}  0x{row['hex']}  {row['linear_form']}")


if __name__ == "__main__":
    main()
