"""Operation records passed through noise sampling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import torch

UNITARY = "unitary"
KRAUS = "kraus"


@dataclass(frozen=True)
class Operation:
    """
    A single instruction in a (noisy) circuit.

    Noise sampling treats operations as opaque: the ideal gate is passed
    through unchanged, and error branches only add operations built with
    make_unitary or make_kraus.

    Attributes
    ----------
    name:
        Instruction name, e.g. "X", "CNOT", "unitary" or "kraus".
    qubits:
        Tuple of target qubit indices (0-based).
    params:
        Optional tuple of float parameters.
    mats:
        Matrices carried by "unitary" (one matrix) and "kraus"
        (one or more matrices) operations.
    """

    name: str
    qubits: Tuple[int, ...]
    params: Optional[Tuple[float, ...]] = None
    mats: Tuple[torch.Tensor, ...] = ()

    def __post_init__(self) -> None:
        qubits = tuple(int(q) for q in self.qubits)
        if not qubits:
            raise ValueError("Operation must act on at least one qubit.")
        if any(q < 0 for q in qubits):
            raise ValueError(f"Qubit indices must be non-negative, got {qubits}")
        object.__setattr__(self, "qubits", qubits)
        object.__setattr__(self, "mats", tuple(self.mats))


# Sampled noise realization of one gate application.
NoiseOps = List[Operation]


def make_unitary(qubits: Sequence[int], mat: torch.Tensor) -> Operation:
    """Build a "unitary" operation applying mat to qubits."""
    return Operation(name=UNITARY, qubits=tuple(qubits), mats=(mat,))


def make_kraus(qubits: Sequence[int], mats: Sequence[torch.Tensor]) -> Operation:
    """Build a "kraus" operation whose operators are realized by the simulator."""
    if len(mats) == 0:
        raise ValueError("A kraus operation needs at least one operator.")
    return Operation(name=KRAUS, qubits=tuple(qubits), mats=tuple(mats))


__all__ = ["Operation", "NoiseOps", "UNITARY", "KRAUS", "make_unitary", "make_kraus"]
