"""
Closed-form Reeds–Shepp primitive solvers.

Every solver receives the goal pose relative to a start at the origin with
zero heading, scaled so the curvature bound is 1, and returns an `RSPParam`.
`flag` is False when the pose lies outside the primitive's domain; the other
fields are then left at zero and must be ignored.

Formula numbers refer to Reeds & Shepp, "Optimal paths for a car that goes
both forwards and backwards" (1990).
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..common import cartesian_to_polar, normalize_angle


@dataclass
class RSPParam:
    flag: bool = False
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0


def tau_omega(u: float, v: float, xi: float, eta: float, phi: float) -> Tuple[float, float]:
    """Resolve the first and last arc angles of the four-turn patterns."""
    delta = normalize_angle(u - v)
    a = math.sin(u) - math.sin(delta)
    b = math.cos(u) - math.cos(delta) - 1.0

    t1 = math.atan2(eta * a - xi * b, xi * a + eta * b)
    t2 = 2.0 * (math.cos(delta) - math.cos(v) - math.cos(u)) + 3.0
    if t2 < 0.0:
        tau = normalize_angle(t1 + math.pi)
    else:
        tau = normalize_angle(t1)
    omega = normalize_angle(tau - u + v - phi)
    return tau, omega


def sls(x: float, y: float, phi: float) -> RSPParam:
    """S L S: straight, left arc through the goal heading, straight."""
    param = RSPParam()
    phi_mod = normalize_angle(phi)
    if y == 0.0 or not 0.0 < phi_mod < math.pi * 0.99:
        return param
    xd = -y / math.tan(phi_mod) + x
    half = math.tan(phi_mod / 2.0)
    dist = math.hypot(x - xd, y)
    param.flag = True
    param.t = xd - half
    param.u = phi_mod
    # goal below the start line means it sits behind the intersection point
    param.v = (dist if y > 0.0 else -dist) - half
    return param


def lsl(x: float, y: float, phi: float) -> RSPParam:
    """L+ S+ L+, formula 8.1."""
    param = RSPParam()
    u, t = cartesian_to_polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if t >= 0.0:
        v = normalize_angle(phi - t)
        if v >= 0.0:
            param.flag = True
            param.t = t
            param.u = u
            param.v = v
    return param


def lsr(x: float, y: float, phi: float) -> RSPParam:
    """L+ S+ R+, formula 8.2."""
    param = RSPParam()
    rho, t1 = cartesian_to_polar(x + math.sin(phi), y - 1.0 - math.cos(phi))
    u1 = rho * rho
    if u1 >= 4.0:
        u = math.sqrt(u1 - 4.0)
        theta = math.atan2(2.0, u)
        t = normalize_angle(t1 + theta)
        v = normalize_angle(t - phi)
        if t >= 0.0 and v >= 0.0:
            param.flag = True
            param.t = t
            param.u = u
            param.v = v
    return param


def lrl(x: float, y: float, phi: float) -> RSPParam:
    """L+ R- L, formulas 8.3 / 8.4."""
    param = RSPParam()
    u1, theta = cartesian_to_polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if u1 <= 4.0:
        u = -2.0 * math.asin(0.25 * u1)
        t = normalize_angle(theta + 0.5 * u + math.pi)
        v = normalize_angle(phi - t + u)
        if t >= 0.0 and u <= 0.0:
            param.flag = True
            param.t = t
            param.u = u
            param.v = v
    return param


def lrlrn(x: float, y: float, phi: float) -> RSPParam:
    """L+ R+ L- R-, formula 8.7."""
    param = RSPParam()
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = 0.25 * (2.0 + math.sqrt(xi * xi + eta * eta))
    if rho <= 1.0:
        u = math.acos(rho)
        t, v = tau_omega(u, -u, xi, eta, phi)
        if t >= 0.0 and v <= 0.0:
            param.flag = True
            param.t = t
            param.u = u
            param.v = v
    return param


def lrlrp(x: float, y: float, phi: float) -> RSPParam:
    """L+ R- L- R+, formula 8.8."""
    param = RSPParam()
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = (20.0 - xi * xi - eta * eta) / 16.0
    if 0.0 <= rho <= 1.0:
        u = -math.acos(rho)
        if u >= -0.5 * math.pi:
            t, v = tau_omega(u, u, xi, eta, phi)
            if t >= 0.0 and v >= 0.0:
                param.flag = True
                param.t = t
                param.u = u
                param.v = v
    return param


def lrsl(x: float, y: float, phi: float) -> RSPParam:
    """L+ R-(pi/2) S- L-, formula 8.9."""
    param = RSPParam()
    xi = x - math.sin(phi)
    eta = y - 1.0 + math.cos(phi)
    rho, theta = cartesian_to_polar(xi, eta)
    if rho >= 2.0:
        r = math.sqrt(rho * rho - 4.0)
        u = 2.0 - r
        t = normalize_angle(theta + math.atan2(r, -2.0))
        v = normalize_angle(phi - 0.5 * math.pi - t)
        if t >= 0.0 and u <= 0.0 and v <= 0.0:
            param.flag = True
            param.t = t
            param.u = u
            param.v = v
    return param


def lrsr(x: float, y: float, phi: float) -> RSPParam:
    """L+ R-(pi/2) S- R-, formula 8.10."""
    param = RSPParam()
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho, theta = cartesian_to_polar(-eta, xi)
    if rho >= 2.0:
        t = theta
        u = 2.0 - rho
        v = normalize_angle(t + 0.5 * math.pi - phi)
        if t >= 0.0 and u <= 0.0 and v <= 0.0:
            param.flag = True
            param.t = t
            param.u = u
            param.v = v
    return param


def lrslr(x: float, y: float, phi: float) -> RSPParam:
    """L+ R-(pi/2) S- L-(pi/2) R+, formula 8.11."""
    param = RSPParam()
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho, _ = cartesian_to_polar(xi, eta)
    if rho >= 2.0:
        u = 4.0 - math.sqrt(rho * rho - 4.0)
        if u <= 0.0:
            t = normalize_angle(math.atan2((4.0 - u) * xi - 2.0 * eta, -2.0 * xi + (u - 4.0) * eta))
            v = normalize_angle(t - phi)
            if t >= 0.0 and v >= 0.0:
                param.flag = True
                param.t = t
                param.u = u
                param.v = v
    return param
