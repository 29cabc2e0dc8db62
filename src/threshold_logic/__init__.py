"""
Threshold logic function identification.

    f(x) = 1  iff  Σ w_i x_i ≥ T

Unified import layer for:
    - Truth tables and cubes            (truth_table, cubes)
    - Unateness and normalization       (unateness)
    - ILP formulation and backends      (lp)
    - Identification and linear forms   (identification, forms)
    - Batch reporting                   (reporting)
"""

from .config import ThresholdConfig
from .errors import ThresholdError, SolverUnavailableError, SolverError
from .truth_table import TruthTable
from .cubes import Literal, Cube, isop
from .unateness import variable_polarity, unateness, normalize
from .forms import LinearForm
from .identification import extract_covers, translate_solution, find_linear_form, is_threshold
from .reporting import enumerate_truth_tables, classify_functions, count_threshold_functions, summarize

__version__ = "0.1.0"

__all__ = [
    "ThresholdConfig",
    "ThresholdError",
    "SolverUnavailableError",
    "SolverError",
    "TruthTable",
    "Literal",
    "Cube",
    "isop",
    "variable_polarity",
    "unateness",
    "normalize",
    "LinearForm",
    "extract_covers",
    "translate_solution",
    "find_linear_form",
    "is_threshold",
    "enumerate_truth_tables",
    "classify_functions",
    "count_threshold_functions",
    "summarize",
]
