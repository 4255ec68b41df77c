"""Statevector realization of sampled noise operations.

Convention: qubit 0 is the least significant bit of the basis index. A
k-qubit matrix acting on qubits (q_0, ..., q_{k-1}) is written in the basis
|q_0 ... q_{k-1}>, q_0 being the most significant bit of the matrix index.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

import torch

from gatenoise.gates.standard import gate_matrix
from gatenoise.logging import get_logger
from gatenoise.noise.base import Error
from gatenoise.operations import KRAUS, UNITARY, NoiseOps, Operation
from gatenoise.rng import RngEngine

logger = get_logger(__name__)

_ZERO_NORM = 1e-12


def zero_state(n_qubits: int) -> torch.Tensor:
    """Return |0...0> as a complex128 statevector."""
    if n_qubits < 1:
        raise ValueError(f"n_qubits must be >= 1, got {n_qubits}")
    state = torch.zeros(1 << n_qubits, dtype=torch.complex128)
    state[0] = 1.0
    return state


def _num_qubits(state: torch.Tensor) -> int:
    if state.dim() != 1:
        raise ValueError(f"state must be 1D, got {state.dim()} dimensions")
    dim = state.shape[0]
    n_qubits = int(math.log2(dim)) if dim > 0 else 0
    if n_qubits < 1 or (1 << n_qubits) != dim:
        raise ValueError(f"state dimension {dim} is not a power of 2")
    return n_qubits


def apply_matrix(
    state: torch.Tensor,
    mat: torch.Tensor,
    qubits: Sequence[int],
) -> torch.Tensor:
    """
    Apply a (not necessarily unitary) matrix to qubits of a statevector.

    Returns
    -------
    torch.Tensor
        The unnormalized statevector mat |state>.

    Raises
    ------
    ValueError
        If the qubits are repeated or out of range, or the matrix size does
        not match the number of qubits.
    """
    n_qubits = _num_qubits(state)
    qubits = tuple(int(q) for q in qubits)
    k = len(qubits)
    if len(set(qubits)) != k:
        raise ValueError(f"qubits must be distinct, got {qubits}")
    if any(q < 0 or q >= n_qubits for q in qubits):
        raise ValueError(f"qubits {qubits} out of range [0, {n_qubits})")
    if mat.shape != (1 << k, 1 << k):
        raise ValueError(
            f"matrix shape {tuple(mat.shape)} does not match {k} target qubits"
        )

    mat = mat.to(dtype=state.dtype, device=state.device)
    axes = [n_qubits - 1 - q for q in qubits]
    front = list(range(k))

    psi = state.reshape([2] * n_qubits)
    psi = torch.movedim(psi, axes, front).reshape(1 << k, -1)
    psi = (mat @ psi).reshape([2] * n_qubits)
    psi = torch.movedim(psi, front, axes)
    return psi.reshape(-1)


def _apply_kraus(
    state: torch.Tensor,
    mats: Tuple[torch.Tensor, ...],
    qubits: Sequence[int],
    rng: RngEngine,
) -> torch.Tensor:
    # p_k = <psi|K_k^dag K_k|psi>
    candidates = [apply_matrix(state, mat, qubits) for mat in mats]
    probs = [float(torch.vdot(psi, psi).real.item()) for psi in candidates]
    if sum(probs) < _ZERO_NORM:
        # operators dropped at classification can leave no support on psi
        logger.warning(
            "Kraus operators on qubits %s annihilate the state; leaving it unchanged.",
            tuple(qubits),
        )
        return state

    j = rng.rand_int(probs) if len(candidates) > 1 else 0
    psi_out = candidates[j]
    norm = torch.linalg.vector_norm(psi_out)
    if norm < _ZERO_NORM:
        raise ValueError(f"Sampled Kraus operator {j} produces zero-norm statevector")
    return psi_out / norm


def apply_operation(state: torch.Tensor, op: Operation, rng: RngEngine) -> torch.Tensor:
    """
    Apply one operation to a statevector.

    "unitary" operations apply their matrix, "kraus" operations apply one
    of their operators drawn with probability <psi|K^dag K|psi> and
    renormalize, any other name is resolved as a standard gate. A Kraus set
    with no support on the state leaves it unchanged and logs a warning.
    """
    if op.name == UNITARY:
        return apply_matrix(state, op.mats[0], op.qubits)
    if op.name == KRAUS:
        return _apply_kraus(state, op.mats, op.qubits, rng)
    return apply_matrix(state, gate_matrix(op.name), op.qubits)


def run_noisy_ops(
    state: torch.Tensor,
    ops: Iterable[Operation],
    rng: RngEngine,
) -> torch.Tensor:
    """Apply a sequence of operations in order."""
    for op in ops:
        state = apply_operation(state, op, rng)
    return state


def sample_noisy_gate(
    state: torch.Tensor,
    op: Operation,
    error: Error,
    rng: RngEngine,
) -> Tuple[torch.Tensor, NoiseOps]:
    """
    Sample a noisy realization of op and apply it to state.

    Returns
    -------
    tuple
        The new statevector and the sampled operations.
    """
    noise_ops = error.sample_noise(op, op.qubits, rng)
    return run_noisy_ops(state, noise_ops, rng), noise_ops


__all__ = [
    "zero_state",
    "apply_matrix",
    "apply_operation",
    "run_noisy_ops",
    "sample_noisy_gate",
]
