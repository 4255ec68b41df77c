"""gatenoise - sampled gate errors built from Kraus channels."""

__version__ = "0.1.0"

from .channels import (
    amplitude_damping_error,
    amplitude_damping_kraus,
    bit_flip_error,
    bit_flip_kraus,
    depolarizing_error,
    depolarizing_kraus,
    phase_damping_kraus,
    phase_flip_kraus,
)
from .exceptions import GateNoiseError, InternalError, ValidationError
from .logging import configure_logging, get_logger, set_log_level
from .noise import (
    ClassificationResult,
    Error,
    GateError,
    KrausError,
    NoiseBranch,
    UnitaryError,
    classify_kraus,
    compose_probabilities,
    normalize_branches,
)
from .operations import NoiseOps, Operation, make_kraus, make_unitary
from .rng import RngEngine
from .settings import get_default_tolerance, set_default_tolerance, tolerance_context
from .trajectory import apply_operation, run_noisy_ops, sample_noisy_gate, zero_state

__all__ = [
    "__version__",
    "GateError",
    "UnitaryError",
    "KrausError",
    "Error",
    "NoiseBranch",
    "ClassificationResult",
    "classify_kraus",
    "normalize_branches",
    "compose_probabilities",
    "Operation",
    "NoiseOps",
    "make_unitary",
    "make_kraus",
    "RngEngine",
    "GateNoiseError",
    "ValidationError",
    "InternalError",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "get_default_tolerance",
    "set_default_tolerance",
    "tolerance_context",
    "bit_flip_kraus",
    "phase_flip_kraus",
    "depolarizing_kraus",
    "amplitude_damping_kraus",
    "phase_damping_kraus",
    "bit_flip_error",
    "depolarizing_error",
    "amplitude_damping_error",
    "zero_state",
    "apply_operation",
    "run_noisy_ops",
    "sample_noisy_gate",
]
