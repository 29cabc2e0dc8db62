import pytest

from threshold_logic.config import ThresholdConfig
from threshold_logic.errors import SolverError, SolverUnavailableError
from threshold_logic.identification import extract_covers, find_linear_form, is_threshold, translate_solution
from threshold_logic.lp.backend import PuLPBackend, SciPyBackend
from threshold_logic.reporting import enumerate_truth_tables
from threshold_logic.truth_table import TruthTable


# ---------------------------
# known functions
# ---------------------------

@pytest.mark.parametrize("n", [0, 1, 2, 4])
def test_constants_are_threshold(n, scipy_backend):
    one = find_linear_form(TruthTable.constant(n, True), backend=scipy_backend)
    zero = find_linear_form(TruthTable.constant(n, False), backend=scipy_backend)
    assert one is not None and one.realizes(TruthTable.constant(n, True))
    assert zero is not None and zero.realizes(TruthTable.constant(n, False))
    assert one.as_list() == [0] * n + [0]
    assert zero.as_list() == [0] * n + [1]


def test_single_literal(scipy_backend):
    assert find_linear_form(TruthTable.nth_var(1, 0), backend=scipy_backend).as_list() == [1, 1]
    # ¬x0 → -x0 ≥ 0
    assert find_linear_form(~TruthTable.nth_var(1, 0), backend=scipy_backend).as_list() == [-1, 0]


@pytest.mark.parametrize("n,i", [(2, 0), (3, 2), (4, 1)])
def test_projection_is_threshold(n, i, scipy_backend):
    tt = TruthTable.nth_var(n, i)
    form = find_linear_form(tt, backend=scipy_backend)
    assert form is not None and form.realizes(tt)
    assert form.weights[i] > 0
    assert all(w == 0 for j, w in enumerate(form.weights) if j != i)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_xor_is_not_threshold(n, fixed_backend):
    backend = fixed_backend([0] * (n + 1))
    tt = TruthTable.from_function(lambda x: x[0] ^ x[1], n)
    assert is_threshold(tt, backend=backend) is False
    # binate inputs are rejected before any ILP is built
    assert backend.calls == 0


def test_majority(maj3, scipy_backend):
    form = find_linear_form(maj3, backend=scipy_backend)
    assert form.as_list() == [1, 1, 1, 2]


def test_unate_but_not_threshold(scipy_backend):
    # x0x1 ∨ x2x3 is positive unate in every input but not linearly separable
    tt = TruthTable.from_function(lambda x: (x[0] and x[1]) or (x[2] and x[3]), 4)
    assert find_linear_form(tt, backend=scipy_backend) is None


def test_flipping_an_input_flips_its_weight(maj3, scipy_backend):
    g = maj3.flip(1)
    form = find_linear_form(g, backend=scipy_backend)
    assert form.as_list() == [1, -1, 1, 1]
    assert form.realizes(g)


def test_negative_unate_everywhere(scipy_backend):
    nor = TruthTable.from_function(lambda x: not (x[0] or x[1] or x[2]), 3)
    form = find_linear_form(nor, backend=scipy_backend)
    assert form.realizes(nor)
    assert all(w < 0 for w in form.weights)


def test_caller_table_is_not_modified(and_not, scipy_backend):
    before = and_not.bits
    assert find_linear_form(and_not, backend=scipy_backend).realizes(and_not)
    assert and_not.bits == before


# ---------------------------
# exhaustive properties
# ---------------------------

@pytest.mark.parametrize("n,expected", [(0, 2), (1, 4), (2, 14), (3, 104)])
def test_threshold_counts_and_soundness(n, expected, scipy_backend):
    cfg = ThresholdConfig(verify=False)
    count = 0
    for tt in enumerate_truth_tables(n):
        form = find_linear_form(tt, config=cfg, backend=scipy_backend)
        if form is not None:
            count += 1
            assert form.realizes(tt), (tt, form)
    assert count == expected


def test_verdict_is_idempotent(scipy_backend):
    for bits in (0x17, 0x69, 0xE8, 0x80, 0x3C):
        tt = TruthTable(3, bits)
        first = is_threshold(tt, backend=scipy_backend)
        assert is_threshold(tt, backend=scipy_backend) == first


@pytest.mark.skipif(not PuLPBackend.available(), reason="no CBC/GLPK solver available to PuLP")
def test_pulp_backend_agrees(scipy_backend):
    pb = PuLPBackend()
    for tt in enumerate_truth_tables(2):
        a = find_linear_form(tt, backend=pb)
        b = find_linear_form(tt, backend=scipy_backend)
        assert (a is None) == (b is None)


# ---------------------------
# output slot & translation
# ---------------------------

def test_output_slot_filled_only_on_success(maj3, xor2, scipy_backend):
    slot = [42]
    assert is_threshold(xor2, slot, backend=scipy_backend) is False
    assert slot == [42]
    assert is_threshold(maj3, slot, backend=scipy_backend) is True
    assert slot == [1, 1, 1, 2]


def test_infeasible_model_is_a_plain_false(maj3, fixed_backend):
    slot = []
    assert is_threshold(maj3, slot, backend=fixed_backend(None)) is False
    assert slot == []


def test_translate_solution():
    form = translate_solution([2.0, 1.0, 3.0, 4.0], [True, False, False])
    assert form.as_list() == [2, -1, -3, 0]
    form = translate_solution([0.9999999, 2.0000001], [True])
    assert form.as_list() == [1, 2]
    with pytest.raises(ValueError):
        translate_solution([1.0], [True])


def test_extract_covers_partition_inputs(and_not):
    onset, offset = extract_covers(and_not)
    on_points = {x for x, _ in and_not.assignments() if any(c.contains(x) for c in onset)}
    off_points = {x for x, _ in and_not.assignments() if any(c.contains(x) for c in offset)}
    assert on_points == {(1, 0)}
    assert off_points.isdisjoint(on_points)
    assert len(on_points | off_points) == 4


# ---------------------------
# undetermined outcomes
# ---------------------------

def test_unsound_solution_raises_when_verifying(maj3, fixed_backend):
    with pytest.raises(SolverError):
        find_linear_form(maj3, backend=fixed_backend([1, 1, 1, 1]))


def test_unsound_solution_passes_through_without_verify(maj3, fixed_backend):
    form = find_linear_form(maj3, config=ThresholdConfig(verify=False), backend=fixed_backend([1, 1, 1, 1]))
    assert form.as_list() == [1, 1, 1, 1]
    assert not form.realizes(maj3)


def test_missing_solver_is_an_error_not_false(maj3, monkeypatch):
    def _no_scipy(self, **kwargs):
        raise SolverUnavailableError("no scipy")

    def _no_solver(self):
        raise SolverUnavailableError("no cbc/glpk")

    monkeypatch.setattr(SciPyBackend, "__init__", _no_scipy)
    monkeypatch.setattr(PuLPBackend, "_get_available_solver", _no_solver)
    with pytest.raises(SolverUnavailableError):
        is_threshold(maj3)


def test_binate_input_needs_no_solver(xor2, monkeypatch):
    def _no_scipy(self, **kwargs):
        raise SolverUnavailableError("no scipy")

    monkeypatch.setattr(SciPyBackend, "__init__", _no_scipy)
    def _no_solver(self):
        raise SolverUnavailableError("no cbc/glpk")

    monkeypatch.setattr(PuLPBackend, "_get_available_solver", _no_solver)
    assert is_threshold(xor2) is False
