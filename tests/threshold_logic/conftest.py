import numpy as np
import pytest

from threshold_logic.config import ThresholdConfig
from threshold_logic.lp.backend import ILPBackend, SciPyBackend
from threshold_logic.truth_table import TruthTable


class FixedBackend(ILPBackend):
    """Backend stub returning a preset answer and counting calls."""
    name = "fixed"

    def __init__(self, values):
        self.values = values
        self.calls = 0

    def solve(self, model):
        self.calls += 1
        if self.values is None:
            return None
        return np.asarray(self.values, dtype=float)


@pytest.fixture
def scipy_backend():
    return SciPyBackend()


@pytest.fixture
def cfg():
    return ThresholdConfig(backend="scipy")


@pytest.fixture
def maj3():
    return TruthTable.majority(3)


@pytest.fixture
def xor2():
    return TruthTable.from_binary("0110")


@pytest.fixture
def and_not():
    # x0 ∧ ¬x1
    return TruthTable.from_function(lambda x: x[0] and not x[1], 2)


@pytest.fixture
def fixed_backend():
    return FixedBackend
