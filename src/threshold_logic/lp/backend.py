from __future__ import annotations

import logging
import shutil
from typing import Optional

import numpy as np
import pulp  # type: ignore

from ..config import ThresholdConfig
from ..errors import SolverError, SolverUnavailableError
from .formulation import ILPModel, Sense

log = logging.getLogger(__name__)


class ILPBackend:
    """
    Abstracts ``minimize c·x s.t. rows, x integer`` on an :class:`ILPModel`.

    ``solve`` returns the column values of a feasible point, or ``None`` when the
    solver proves the model infeasible. Anything else raises :class:`SolverError`.
    """
    name: str = "abstract"

    def solve(self, model: ILPModel) -> Optional[np.ndarray]:  # pragma: no cover - abstract
        raise NotImplementedError


class SciPyBackend(ILPBackend):
    """
    In-process HiGHS via ``scipy.optimize.milp``.

    Columns are left unbounded; non-negativity comes from the model's own rows.
    """
    name = "scipy"

    # scipy.optimize.milp status codes
    _OPTIMAL = 0
    _LIMIT = 1
    _INFEASIBLE = 2

    def __init__(self, *, time_limit: Optional[float] = None, msg: bool = False) -> None:
        try:
            from scipy.optimize import Bounds, LinearConstraint, milp  # lazy import
        except ImportError as e:
            raise SolverUnavailableError(f"scipy.optimize.milp is not available: {e}") from e
        self._milp = milp
        self._Bounds = Bounds
        self._LinearConstraint = LinearConstraint
        self.time_limit = time_limit
        self.msg = msg

    def solve(self, model: ILPModel) -> Optional[np.ndarray]:
        k = model.num_columns
        c = np.asarray(model.objective, dtype=float)
        integrality = np.asarray(model.integrality, dtype=int)
        bounds = self._Bounds(np.full(k, -np.inf), np.full(k, np.inf))

        constraints = None
        if model.rows:
            A, lb, ub = model.as_arrays()
            constraints = self._LinearConstraint(A, lb, ub)

        options = {"disp": self.msg}
        if self.time_limit is not None:
            options["time_limit"] = self.time_limit

        res = self._milp(c, constraints=constraints, integrality=integrality, bounds=bounds, options=options)
        log.debug("milp status=%s message=%s", res.status, res.message)

        if res.status == self._INFEASIBLE:
            return None
        if res.status == self._LIMIT and res.x is not None:
            # A feasible point is enough, optimal or not.
            return np.asarray(res.x, dtype=float)
        if res.status != self._OPTIMAL or res.x is None:
            raise SolverError(f"MILP failed: {res.message}")
        return np.asarray(res.x, dtype=float)


class PuLPBackend(ILPBackend):
    """
    External solver via PuLP: the bundled CBC, a CBC on PATH, or GLPK.
    Keeps the same formulation as SciPyBackend.
    """
    name = "pulp"

    def __init__(self, *, time_limit: Optional[float] = None, msg: bool = False) -> None:
        self.time_limit = time_limit
        self.msg = msg
        self._solver = self._get_available_solver()

    def _get_available_solver(self):
        bundled = pulp.PULP_CBC_CMD(msg=self.msg, timeLimit=self.time_limit)
        if bundled.available():
            return bundled
        cbc = shutil.which("cbc")
        if cbc:
            return pulp.COIN_CMD(path=cbc, msg=self.msg, timeLimit=self.time_limit)
        glpk = shutil.which("glpsol")
        if glpk:
            return pulp.GLPK_CMD(path=glpk, msg=self.msg, timeLimit=self.time_limit)
        raise SolverUnavailableError("No ILP solver found (install CBC or GLPK)")

    @classmethod
    def available(cls) -> bool:
        try:
            cls()
        except SolverUnavailableError:
            return False
        return True

    def solve(self, model: ILPModel) -> Optional[np.ndarray]:
        k = model.num_columns
        prob = pulp.LpProblem("threshold", pulp.LpMinimize)
        x = [pulp.LpVariable(f"x_{j}", lowBound=None, cat=pulp.LpInteger) for j in range(k)]

        prob += pulp.lpSum(float(cj) * x[j] for j, cj in enumerate(model.objective) if cj)

        for r, row in enumerate(model.rows):
            lhs = pulp.lpSum(float(a) * x[j] for j, a in enumerate(row.coefficients) if a)
            if row.sense is Sense.GE:
                prob += (lhs >= row.rhs), f"r_{r}"
            else:
                prob += (lhs <= row.rhs), f"r_{r}"

        status = pulp.LpStatus[prob.solve(self._solver)]
        log.debug("pulp status=%s", status)
        if status == "Infeasible":
            return None
        if status != "Optimal":
            raise SolverError(f"ILP not solved: {status}")

        values = [v.value() for v in x]
        if any(v is None for v in values):
            raise SolverError("solver returned no value for some columns")
        return np.array(values, dtype=float)


def best_available_backend(*, time_limit: Optional[float] = None, msg: bool = False) -> ILPBackend:
    """Prefer SciPy (in-process) else fall back to PuLP (external solver)."""
    try:
        return SciPyBackend(time_limit=time_limit, msg=msg)
    except SolverUnavailableError:
        log.debug("scipy MILP unavailable, trying PuLP")
        return PuLPBackend(time_limit=time_limit, msg=msg)


def get_backend(config: Optional[ThresholdConfig] = None) -> ILPBackend:
    """Construct the backend named by ``config.backend``."""
    cfg = config or ThresholdConfig()
    if cfg.backend == "scipy":
        return SciPyBackend(time_limit=cfg.time_limit, msg=cfg.msg)
    if cfg.backend == "pulp":
        return PuLPBackend(time_limit=cfg.time_limit, msg=cfg.msg)
    return best_available_backend(time_limit=cfg.time_limit, msg=cfg.msg)
