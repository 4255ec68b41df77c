"""Partitioning of a Kraus set into identity, unitary and residual parts.

A CPTP map given by Kraus operators {K_i} is split into three branches:

- operators proportional to the identity (no error),
- operators proportional to a unitary (mixed-unitary error),
- everything else (general Kraus error).

Each operator K is weighted by

    p = sum_j |K[j, 0] * conj(K[0, j])|

and rescaled to K / sqrt(p) before it is compared to the identity or tested
for unitarity. For K = sqrt(q) U with U unitary this recovers p = q whenever
|U[j, 0]| == |U[0, j]| for every j (Paulis, Hadamard, diagonal phases,
symmetric permutations). Operators with p == 0 are dropped, so an operator
whose first column or first row is zero never reaches any branch.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

import torch

from gatenoise.exceptions import ValidationError
from gatenoise.linalg import as_matrices, is_cptp, is_identity, is_square, is_unitary
from gatenoise.logging import get_logger
from gatenoise.settings import resolve_tolerance

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    """Unnormalized probabilities of the three error branches."""

    p_identity: float
    p_unitary: float
    p_kraus: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.p_identity, self.p_unitary, self.p_kraus)


@dataclass(frozen=True)
class ChannelDecomposition:
    """
    Result of classify_kraus.

    Attributes
    ----------
    classification:
        Branch probabilities (p_identity, p_unitary, p_kraus).
    unitaries:
        Rescaled unitary operators K / sqrt(p).
    unitary_weights:
        Weight p of each unitary, not yet normalized by p_unitary.
    kraus_ops:
        Residual operators, unscaled.
    tol:
        Tolerance used for the classification.
    """

    classification: ClassificationResult
    unitaries: Tuple[torch.Tensor, ...]
    unitary_weights: Tuple[float, ...]
    kraus_ops: Tuple[torch.Tensor, ...]
    tol: float


@dataclass(frozen=True)
class NormalizedBranches:
    """Branch content rescaled so each branch is well formed on its own."""

    unitaries: Tuple[torch.Tensor, ...]
    unitary_probabilities: Tuple[float, ...]
    kraus_ops: Tuple[torch.Tensor, ...]
    kraus_probability: float


def operator_weight(mat: torch.Tensor) -> float:
    """Return sum_j |mat[j, 0] * conj(mat[0, j])|."""
    return float(torch.sum(torch.abs(mat[:, 0] * torch.conj(mat[0, :]))).item())


def classify_kraus(
    kraus_ops: Sequence[Any],
    tol: Optional[float] = None,
) -> ChannelDecomposition:
    """
    Classify the operators of a CPTP map.

    Parameters
    ----------
    kraus_ops:
        Non-empty sequence of square complex matrices.
    tol:
        Tolerance for the identity, unitary and CPTP checks. Defaults to
        the package tolerance.

    Returns
    -------
    ChannelDecomposition
        Branch probabilities and the operators of each branch.

    Raises
    ------
    ValidationError
        ``"empty"`` if no operator is given, ``"not-square"`` if any
        operator is not square, ``"shape-mismatch"`` if the operators differ
        in size, ``"not-cptp"`` if sum K^dag K != I and
        ``"inconsistent-probabilities"`` if the deduced probabilities do
        not sum to 1 or p_kraus falls below -tol. A p_kraus in [-tol, 0)
        is clamped to 0.
    """
    tol = resolve_tolerance(tol)
    mats = as_matrices(kraus_ops)
    if not mats:
        raise ValidationError("empty", "GateError input has no Kraus operators.")

    for i, mat in enumerate(mats):
        if not is_square(mat):
            raise ValidationError(
                "not-square",
                f"Error matrix {i} is not square, got shape {tuple(mat.shape)}.",
            )

    dim = mats[0].shape[0]
    for i, mat in enumerate(mats):
        if mat.shape[0] != dim:
            raise ValidationError(
                "shape-mismatch",
                f"Error matrix {i} has shape {tuple(mat.shape)}, expected ({dim}, {dim}).",
            )

    if not is_cptp(mats, tol):
        raise ValidationError("not-cptp", "GateError input is not a CPTP map.")

    p_identity = 0.0
    p_unitary = 0.0
    unitaries = []
    unitary_weights = []
    residual = []

    for mat in mats:
        p = operator_weight(mat)
        if p > 0:
            rescaled = mat / math.sqrt(p)
            if is_identity(rescaled, tol):
                p_identity += p
            elif is_unitary(rescaled, tol):
                unitaries.append(rescaled)
                unitary_weights.append(p)
                p_unitary += p
            else:
                # the unscaled operator goes to the Kraus branch
                residual.append(mat)

    p_kraus = 1.0 - p_identity - p_unitary
    # a Kraus sum inside the CPTP tolerance can push p_identity + p_unitary past 1
    if p_kraus < -tol or abs(p_identity + p_unitary + p_kraus - 1.0) > tol:
        raise ValidationError(
            "inconsistent-probabilities",
            "GateError deduced probabilities invalid: "
            f"p_identity={p_identity}, p_unitary={p_unitary}, p_kraus={p_kraus}.",
        )
    p_kraus = max(p_kraus, 0.0)

    classification = ClassificationResult(p_identity, p_unitary, p_kraus)
    logger.debug(
        "Classified %d Kraus operators: %d unitary, %d residual, "
        "p_identity=%.6g p_unitary=%.6g p_kraus=%.6g",
        len(mats),
        len(unitaries),
        len(residual),
        p_identity,
        p_unitary,
        p_kraus,
    )
    return ChannelDecomposition(
        classification=classification,
        unitaries=tuple(unitaries),
        unitary_weights=tuple(unitary_weights),
        kraus_ops=tuple(residual),
        tol=tol,
    )


def normalize_branches(decomposition: ChannelDecomposition) -> NormalizedBranches:
    """
    Rescale each branch of a decomposition independently.

    Residual operators are divided by sqrt(p_kraus) and unitary weights by
    p_unitary, each only when that probability lies strictly inside (0, 1).
    The Kraus branch is selected with probability 1 whenever residual
    operators exist and 0 otherwise, independently of the value of p_kraus.
    """
    _, p_unitary, p_kraus = decomposition.classification.as_tuple()

    kraus_ops = decomposition.kraus_ops
    if 0.0 < p_kraus < 1.0:
        scale = 1.0 / math.sqrt(p_kraus)
        kraus_ops = tuple(scale * mat for mat in kraus_ops)

    weights = decomposition.unitary_weights
    if 0.0 < p_unitary < 1.0:
        weights = tuple(w / p_unitary for w in weights)

    kraus_probability = 0.0 if not kraus_ops else 1.0
    if kraus_ops and abs(p_kraus) <= decomposition.tol:
        logger.warning(
            "Kraus branch has %d residual operators but p_kraus=%.3g; "
            "the branch stays selectable with probability 1.",
            len(kraus_ops),
            p_kraus,
        )

    return NormalizedBranches(
        unitaries=decomposition.unitaries,
        unitary_probabilities=weights,
        kraus_ops=kraus_ops,
        kraus_probability=kraus_probability,
    )


__all__ = [
    "ClassificationResult",
    "ChannelDecomposition",
    "NormalizedBranches",
    "operator_weight",
    "classify_kraus",
    "normalize_branches",
]
