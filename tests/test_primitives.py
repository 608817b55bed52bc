import math

import numpy as np
import pytest

from rsplanner.common import cartesian_to_polar, normalize_angle
from rsplanner.reeds_shepp.primitives import (
    RSPParam,
    lrl,
    lrlrn,
    lrlrp,
    lrsl,
    lrslr,
    lrsr,
    lsl,
    lsr,
    sls,
    tau_omega,
)


def _random_poses(n=400, seed=0):
    rng = np.random.default_rng(seed)
    xs = rng.uniform(-6.0, 6.0, n)
    ys = rng.uniform(-6.0, 6.0, n)
    phis = rng.uniform(-math.pi, math.pi, n)
    return list(zip(xs.tolist(), ys.tolist(), phis.tolist()))


# Sign constraints each solver promises for a valid result.
PREDICATES = {
    lsl: lambda p: p.t >= 0.0 and p.v >= 0.0 and p.u >= 0.0,
    lsr: lambda p: p.t >= 0.0 and p.v >= 0.0 and p.u >= 0.0,
    lrl: lambda p: p.t >= 0.0 and p.u <= 0.0,
    lrlrn: lambda p: p.t >= 0.0 and p.v <= 0.0 and 0.0 <= p.u <= math.pi / 3.0 + 1e-12,
    lrlrp: lambda p: p.t >= 0.0 and p.v >= 0.0 and -0.5 * math.pi <= p.u <= 0.0,
    lrsl: lambda p: p.t >= 0.0 and p.u <= 0.0 and p.v <= 0.0,
    lrsr: lambda p: p.t >= 0.0 and p.u <= 0.0 and p.v <= 0.0,
    lrslr: lambda p: p.t >= 0.0 and p.u <= 0.0 and p.v >= 0.0,
}


def test_normalize_angle_is_right_open():
    assert normalize_angle(math.pi) == pytest.approx(-math.pi)
    assert normalize_angle(-math.pi) == pytest.approx(-math.pi)
    assert normalize_angle(3.0 * math.pi / 2.0) == pytest.approx(-math.pi / 2.0)
    assert normalize_angle(0.0) == 0.0


def test_cartesian_to_polar_handles_origin():
    assert cartesian_to_polar(0.0, 0.0) == (0.0, 0.0)
    r, a = cartesian_to_polar(0.0, -2.0)
    assert r == pytest.approx(2.0)
    assert a == pytest.approx(-math.pi / 2.0)


@pytest.mark.parametrize("solver", list(PREDICATES), ids=lambda f: f.__name__)
def test_valid_results_satisfy_sign_constraints(solver):
    predicate = PREDICATES[solver]
    n_valid = 0
    for x, y, phi in _random_poses():
        param = solver(x, y, phi)
        if param.flag:
            n_valid += 1
            assert predicate(param), (solver.__name__, x, y, phi, param)
        else:
            assert param == RSPParam()
    assert n_valid > 0


def test_lsl_straight_ahead():
    param = lsl(5.0, 0.0, 0.0)
    assert param.flag
    assert param.t == pytest.approx(0.0)
    assert param.u == pytest.approx(5.0)
    assert param.v == pytest.approx(0.0)


def test_lsr_rejects_close_circles():
    # turning circles closer than 2 cannot be joined by an outer tangent
    assert not lsr(0.0, 0.5, 0.0).flag


def test_lrl_half_turn_in_place():
    param = lrl(0.0, 0.0, math.pi)
    assert param.flag
    assert param.t == pytest.approx(math.pi / 3.0)
    assert param.u == pytest.approx(-math.pi / 3.0)
    assert param.v == pytest.approx(math.pi / 3.0)


def test_sls_quarter_turn():
    param = sls(2.0, 1.0, math.pi / 2.0)
    assert param.flag
    assert param.t == pytest.approx(1.0)
    assert param.u == pytest.approx(math.pi / 2.0)
    assert param.v == pytest.approx(0.0, abs=1e-12)


def test_sls_goal_below_start_line_reverses_last_straight():
    param = sls(3.0, -1.0, math.pi / 4.0)
    assert param.flag
    assert param.v < 0.0


def test_sls_requires_lateral_offset_and_left_heading():
    assert not sls(2.0, 0.0, 0.5).flag
    assert not sls(2.0, 1.0, -0.5).flag
    assert not sls(2.0, 1.0, math.pi).flag


def test_zero_offset_does_not_divide_by_zero():
    for solver in list(PREDICATES) + [sls]:
        solver(0.0, 0.0, 0.0)
    param = lsl(0.0, 0.0, 0.0)
    assert param.flag
    assert (param.t, param.u, param.v) == (0.0, 0.0, 0.0)


def test_tau_omega_is_reproducible():
    args = (0.7, -0.7, 1.3, -2.1, 0.4)
    tau, omega = tau_omega(*args)
    assert tau_omega(*args) == (tau, omega)
    assert omega == normalize_angle(tau - 0.7 + -0.7 - 0.4)
    assert -math.pi <= tau < math.pi


def test_tau_omega_matches_four_turn_solvers():
    xi, eta, phi = 0.3, -1.8, 0.2
    for u, v in ((0.9, -0.9), (-0.6, -0.6)):
        tau, omega = tau_omega(u, v, xi, eta, phi)
        t1 = math.atan2(
            eta * (math.sin(u) - math.sin(normalize_angle(u - v)))
            - xi * (math.cos(u) - math.cos(normalize_angle(u - v)) - 1.0),
            xi * (math.sin(u) - math.sin(normalize_angle(u - v)))
            + eta * (math.cos(u) - math.cos(normalize_angle(u - v)) - 1.0),
        )
        assert tau == normalize_angle(t1)
        assert omega == normalize_angle(tau - u + v - phi)
