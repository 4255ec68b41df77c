"""Standard single-qubit gate matrices."""

from __future__ import annotations

import cmath
import math

import torch


def _matrix(
    rows: list[list[complex]],
    dtype: torch.dtype | None,
    device: torch.device | None,
) -> torch.Tensor:
    if dtype is None:
        dtype = torch.complex128
    if device is None:
        device = torch.device("cpu")
    return torch.tensor(rows, dtype=dtype, device=device)


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Identity gate (single-qubit)."""
    return _matrix([[1.0, 0.0], [0.0, 1.0]], dtype, device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-X gate (bit flip)."""
    return _matrix([[0.0, 1.0], [1.0, 0.0]], dtype, device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Y gate (bit and phase flip)."""
    return _matrix([[0.0, -1.0j], [1.0j, 0.0]], dtype, device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Z gate (phase flip)."""
    return _matrix([[1.0, 0.0], [0.0, -1.0]], dtype, device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Hadamard gate."""
    s = 1.0 / math.sqrt(2.0)
    return _matrix([[s, s], [s, -s]], dtype, device)


def S(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Phase gate, diag(1, i)."""
    return _matrix([[1.0, 0.0], [0.0, 1.0j]], dtype, device)


def T(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """T gate, diag(1, exp(i pi / 4))."""
    return _matrix([[1.0, 0.0], [0.0, cmath.exp(1j * math.pi / 4.0)]], dtype, device)


def CNOT(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Controlled-NOT in the basis |q_first q_second>, control on the first qubit
    listed by the operation.
    """
    return _matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 0.0],
        ],
        dtype,
        device,
    )


_GATES = {
    "I": I,
    "ID": I,
    "X": X,
    "Y": Y,
    "Z": Z,
    "H": H,
    "S": S,
    "T": T,
    "CX": CNOT,
    "CNOT": CNOT,
}


def gate_matrix(
    name: str,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Resolve a gate name to its matrix.

    Raises
    ------
    ValueError
        If the gate name is unknown.
    """
    try:
        factory = _GATES[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unsupported gate name {name!r}. "
            f"Supported gates: {', '.join(sorted(_GATES))}."
        ) from None
    return factory(dtype=dtype, device=device)
