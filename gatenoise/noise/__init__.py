"""Gate noise models.

This package splits a CPTP map into no-error, mixed-unitary and general
Kraus branches and samples a noisy realization of a gate from them.
"""

from .base import Error
from .decomposition import (
    ChannelDecomposition,
    ClassificationResult,
    NormalizedBranches,
    classify_kraus,
    normalize_branches,
    operator_weight,
)
from .gate_error import GateError, NoiseBranch, compose_probabilities
from .kraus_error import KrausError
from .unitary_error import UnitaryError

__all__ = [
    "Error",
    "GateError",
    "UnitaryError",
    "KrausError",
    "NoiseBranch",
    "ClassificationResult",
    "ChannelDecomposition",
    "NormalizedBranches",
    "classify_kraus",
    "normalize_branches",
    "operator_weight",
    "compose_probabilities",
]
