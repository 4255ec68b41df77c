"""Standard gate matrices."""

from .standard import CNOT, H, I, S, T, X, Y, Z, gate_matrix

__all__ = ["I", "X", "Y", "Z", "H", "S", "T", "CNOT", "gate_matrix"]
