"""Kraus operators of textbook single-qubit channels.

Every builder returns a tuple of complex128 tensors that can be passed to
GateError.from_kraus.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

import torch

from gatenoise.gates.standard import I, X, Y, Z
from gatenoise.noise.gate_error import GateError

KrausOps = Tuple[torch.Tensor, ...]


def _check_probability(name: str, value: float) -> None:
    if value < 0.0 or value > 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


def bit_flip_kraus(p: float) -> KrausOps:
    """
    Bit-flip channel E(rho) = (1 - p) rho + p X rho X.

    Kraus operators: K0 = sqrt(1 - p) I, K1 = sqrt(p) X.

    Raises
    ------
    ValueError
        If p is not in [0, 1].
    """
    _check_probability("Bit-flip probability p", p)
    return (math.sqrt(1.0 - p) * I(), math.sqrt(p) * X())


def phase_flip_kraus(p: float) -> KrausOps:
    """Phase-flip channel, K0 = sqrt(1 - p) I, K1 = sqrt(p) Z."""
    _check_probability("Phase-flip probability p", p)
    return (math.sqrt(1.0 - p) * I(), math.sqrt(p) * Z())


def depolarizing_kraus(p: float) -> KrausOps:
    """
    Single-qubit depolarizing channel

        E(rho) = (1 - p) rho + (p / 3) (X rho X + Y rho Y + Z rho Z).

    Raises
    ------
    ValueError
        If p is not in [0, 1].
    """
    _check_probability("Depolarizing probability p", p)
    s = math.sqrt(p / 3.0)
    return (math.sqrt(1.0 - p) * I(), s * X(), s * Y(), s * Z())


def amplitude_damping_kraus(gamma: float) -> KrausOps:
    """
    Amplitude damping with relaxation probability gamma:

        K0 = [[1, 0], [0, sqrt(1 - gamma)]],
        K1 = [[0, sqrt(gamma)], [0, 0]].
    """
    _check_probability("Amplitude damping parameter gamma", gamma)
    k0 = torch.zeros((2, 2), dtype=torch.complex128)
    k0[0, 0] = 1.0
    k0[1, 1] = math.sqrt(1.0 - gamma)
    k1 = torch.zeros((2, 2), dtype=torch.complex128)
    k1[0, 1] = math.sqrt(gamma)
    return (k0, k1)


def phase_damping_kraus(gamma: float) -> KrausOps:
    """
    Phase damping (dephasing) with parameter gamma:

        K0 = [[1, 0], [0, sqrt(1 - gamma)]],
        K1 = [[0, 0], [0, sqrt(gamma)]].
    """
    _check_probability("Phase damping parameter gamma", gamma)
    k0 = torch.zeros((2, 2), dtype=torch.complex128)
    k0[0, 0] = 1.0
    k0[1, 1] = math.sqrt(1.0 - gamma)
    k1 = torch.zeros((2, 2), dtype=torch.complex128)
    k1[1, 1] = math.sqrt(gamma)
    return (k0, k1)


def bit_flip_error(p: float, p_error: float = 1.0, tol: Optional[float] = None) -> GateError:
    """GateError for a bit-flip channel."""
    return GateError.from_kraus(bit_flip_kraus(p), p_error=p_error, tol=tol)


def depolarizing_error(p: float, p_error: float = 1.0, tol: Optional[float] = None) -> GateError:
    """GateError for a single-qubit depolarizing channel."""
    return GateError.from_kraus(depolarizing_kraus(p), p_error=p_error, tol=tol)


def amplitude_damping_error(
    gamma: float, p_error: float = 1.0, tol: Optional[float] = None
) -> GateError:
    """
    GateError for an amplitude damping channel.

    K1 = sqrt(gamma) |0><1| has a zero first column, so classification
    gives it zero weight and drops it. The Kraus branch holds K0 alone:
    sampling it applies the no-decay backaction and never moves population
    from |1> to |0>. Use ``make_kraus`` with ``amplitude_damping_kraus`` to
    apply the complete channel to a trajectory.
    """
    return GateError.from_kraus(amplitude_damping_kraus(gamma), p_error=p_error, tol=tol)


__all__ = [
    "bit_flip_kraus",
    "phase_flip_kraus",
    "depolarizing_kraus",
    "amplitude_damping_kraus",
    "phase_damping_kraus",
    "bit_flip_error",
    "depolarizing_error",
    "amplitude_damping_error",
]
