"""Gate error combining no-op, unitary and Kraus branches.

Splitting a channel into these branches avoids carrying unitary operators
inside a general Kraus map: unitary errors are sampled up front, and only
the residual operators need a state-dependent draw at simulation time.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Sequence, Tuple

from gatenoise.exceptions import InternalError, ValidationError
from gatenoise.logging import get_logger
from gatenoise.noise.base import Error
from gatenoise.noise.decomposition import (
    ClassificationResult,
    classify_kraus,
    normalize_branches,
)
from gatenoise.noise.kraus_error import KrausError
from gatenoise.noise.unitary_error import UnitaryError
from gatenoise.operations import NoiseOps, Operation
from gatenoise.rng import RngEngine
from gatenoise.settings import resolve_tolerance

logger = get_logger(__name__)


class NoiseBranch(IntEnum):
    """Outcome of the first draw in GateError.sample_noise."""

    NONE = 0
    UNITARY = 1
    KRAUS = 2


def compose_probabilities(
    p_error: float,
    classification: ClassificationResult,
) -> Tuple[float, float, float]:
    """
    Blend branch probabilities with an overall error probability.

    Returns
    -------
    tuple of float
        ``(1 - p_error + p_error * p_identity, p_error * p_unitary,
        p_error * p_kraus)``.
    """
    p_identity, p_unitary, p_kraus = classification.as_tuple()
    return (
        1.0 - p_error + p_error * p_identity,
        p_error * p_unitary,
        p_error * p_kraus,
    )


class GateError(Error):
    """
    Stochastic error model of a single gate.

    Each sample first draws a NoiseBranch with the stored weights, then
    returns the ideal operation unchanged (NONE) or delegates to the
    unitary or Kraus sub-error.

    A GateError is usually built with from_kraus. Calling the constructor
    directly gives an error that never fires; set_probabilities,
    set_unitary and set_kraus then assemble it by hand. Sampling never
    modifies the instance, so one GateError can be shared by concurrent
    shots as long as each uses its own RngEngine.
    """

    def __init__(self) -> None:
        self._probabilities: Tuple[float, float, float] = (1.0, 0.0, 0.0)
        self._classification: Optional[ClassificationResult] = None
        self._unitary_error = UnitaryError()
        self._kraus_error = KrausError()

    @classmethod
    def from_kraus(
        cls,
        kraus_ops: Sequence[Any],
        p_error: float = 1.0,
        tol: Optional[float] = None,
        errors_after_op: bool = True,
    ) -> "GateError":
        """
        Build a GateError from the Kraus operators of a CPTP map.

        Parameters
        ----------
        kraus_ops:
            Non-empty sequence of square complex matrices with
            sum K^dag K = I.
        p_error:
            Probability in [0, 1] that the channel is applied at all.
        tol:
            Tolerance for the classification. Defaults to the package
            tolerance.
        errors_after_op:
            Whether sampled noise operations follow the ideal operation.

        Raises
        ------
        ValidationError
            If the operators are not a valid CPTP map or p_error is out of
            range. No GateError is returned in that case.
        """
        p_error = float(p_error)
        if not 0.0 <= p_error <= 1.0:
            raise ValidationError(
                "invalid-error-probability",
                f"p_error must be in [0, 1], got {p_error}",
            )
        tol = resolve_tolerance(tol)

        decomposition = classify_kraus(kraus_ops, tol)
        branches = normalize_branches(decomposition)

        error = cls()
        error.set_unitary(
            UnitaryError(
                branches.unitaries,
                branches.unitary_probabilities,
                errors_after_op=errors_after_op,
                tol=tol,
            )
        )
        error.set_kraus(
            KrausError(
                branches.kraus_ops,
                branches.kraus_probability,
                errors_after_op=errors_after_op,
            )
        )
        error.set_probabilities(
            *compose_probabilities(p_error, decomposition.classification), tol=tol
        )
        error._classification = decomposition.classification
        logger.debug("Built %r with p_error=%g", error, p_error)
        return error

    def set_probabilities(
        self,
        p_identity: float,
        p_unitary: float,
        p_kraus: float,
        tol: Optional[float] = None,
    ) -> None:
        """
        Set the relative weights of the three branches.

        Weights within tol below zero are clamped to zero.

        Raises
        ------
        ValidationError
            If a weight is negative beyond tol or all weights are zero.
        """
        tol = resolve_tolerance(tol)
        weights = []
        for value in (p_identity, p_unitary, p_kraus):
            value = float(value)
            if value < -tol:
                raise ValidationError(
                    "negative-probability",
                    f"GateError probabilities must be non-negative, got "
                    f"{(p_identity, p_unitary, p_kraus)}",
                )
            weights.append(max(value, 0.0))
        if sum(weights) <= 0.0:
            raise ValidationError(
                "negative-probability", "GateError probabilities are all zero."
            )
        self._probabilities = (weights[0], weights[1], weights[2])

    def set_unitary(self, error: UnitaryError) -> None:
        self._unitary_error = error

    def set_kraus(self, error: KrausError) -> None:
        self._kraus_error = error

    @property
    def probabilities(self) -> Tuple[float, float, float]:
        """Stored weights of (no error, unitary error, Kraus error)."""
        return self._probabilities

    @property
    def classification(self) -> Optional[ClassificationResult]:
        """Branch probabilities before p_error scaling, if built from Kraus operators."""
        return self._classification

    @property
    def unitary_error(self) -> UnitaryError:
        return self._unitary_error

    @property
    def kraus_error(self) -> KrausError:
        return self._kraus_error

    def sample_noise(
        self,
        op: Operation,
        qubits: Sequence[int],
        rng: RngEngine,
    ) -> NoiseOps:
        """
        Sample a noisy implementation of op.

        Raises
        ------
        InternalError
            If the random engine returns an index outside the three
            branches.
        """
        noise_type = rng.rand_int(self._probabilities)
        if noise_type == NoiseBranch.NONE:
            return [op]
        if noise_type == NoiseBranch.UNITARY:
            return self._unitary_error.sample_noise(op, qubits, rng)
        if noise_type == NoiseBranch.KRAUS:
            return self._kraus_error.sample_noise(op, qubits, rng)
        raise InternalError(f"GateError type {noise_type} is out of range.")

    def __repr__(self) -> str:
        p_none, p_unitary, p_kraus = self._probabilities
        return (
            f"GateError(probabilities=({p_none:.6g}, {p_unitary:.6g}, {p_kraus:.6g}), "
            f"unitary_error={self._unitary_error!r}, kraus_error={self._kraus_error!r})"
        )


__all__ = ["NoiseBranch", "GateError", "compose_probabilities"]
