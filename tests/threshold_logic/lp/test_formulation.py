import numpy as np
import pytest

from threshold_logic.cubes import Cube, Literal, isop
from threshold_logic.lp.formulation import (
    ILPModel,
    Sense,
    build_threshold_ilp,
    offset_coefficient,
    onset_coefficient,
)
from threshold_logic.truth_table import TruthTable


def test_literal_coefficients():
    assert [onset_coefficient(l) for l in Literal] == [1, 0, 0]
    assert [offset_coefficient(l) for l in Literal] == [1, 0, 1]


def test_majority_model_rows(maj3):
    model = build_threshold_ilp(3, isop(maj3), isop(~maj3))
    assert model.num_columns == 4
    assert model.objective == (1.0, 1.0, 1.0, 1.0)
    assert model.integrality == (True,) * 4
    # 4 non-negativity + 1 ordering + 3 onset + 3 offset
    assert len(model.rows) == 11

    onset_rows = {(r.coefficients, r.sense, r.rhs) for r in model.rows[5:8]}
    assert onset_rows == {
        ((1.0, 1.0, 0.0, -1.0), Sense.GE, 0.0),
        ((1.0, 0.0, 1.0, -1.0), Sense.GE, 0.0),
        ((0.0, 1.0, 1.0, -1.0), Sense.GE, 0.0),
    }
    offset_rows = {(r.coefficients, r.sense, r.rhs) for r in model.rows[8:]}
    assert offset_rows == {
        ((1.0, 0.0, 0.0, -1.0), Sense.LE, -1.0),
        ((0.0, 1.0, 0.0, -1.0), Sense.LE, -1.0),
        ((0.0, 0.0, 1.0, -1.0), Sense.LE, -1.0),
    }

    assert model.is_feasible_point([1, 1, 1, 2])
    assert not model.is_feasible_point([1, 1, 1, 1])
    assert not model.is_feasible_point([1, 1, 1, 3])


def test_nonnegativity_rows_come_first():
    model = build_threshold_ilp(2, [Cube.from_string("1-")], [Cube.from_string("0-")])
    for j, row in enumerate(model.rows[:3]):
        expected = [0.0, 0.0, 0.0]
        expected[j] = 1.0
        assert row.coefficients == tuple(expected)
        assert row.sense is Sense.GE and row.rhs == 0.0
    assert model.rows[3].coefficients == (1.0, 1.0, -1.0)


def test_constant_zero_has_no_ordering_row():
    model = build_threshold_ilp(2, [], [Cube.universal(2)])
    assert len(model.rows) == 4
    assert ((1.0, 1.0, -1.0), Sense.GE) not in {(r.coefficients, r.sense) for r in model.rows}
    assert model.is_feasible_point([0, 0, 1])


def test_constant_one_is_satisfied_by_zero():
    model = build_threshold_ilp(2, [Cube.universal(2)], [])
    assert model.is_feasible_point([0, 0, 0])


def test_cube_width_is_checked():
    with pytest.raises(ValueError):
        build_threshold_ilp(3, [Cube.from_string("1-")], [])


def test_as_arrays_two_sided_form():
    model = ILPModel(num_columns=2)
    model.add_row([1, 0], Sense.GE, 2)
    model.add_row([0, 1], Sense.LE, 5)
    A, lb, ub = model.as_arrays()
    np.testing.assert_array_equal(A, [[1.0, 0.0], [0.0, 1.0]])
    assert lb.tolist() == [2.0, -np.inf]
    assert ub.tolist() == [np.inf, 5.0]
    with pytest.raises(ValueError):
        model.add_row([1], Sense.GE, 0)
