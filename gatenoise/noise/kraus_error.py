"""General Kraus gate error."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

import torch

from gatenoise.exceptions import ValidationError
from gatenoise.linalg import as_matrices, is_square
from gatenoise.noise.base import Error
from gatenoise.operations import NoiseOps, Operation, make_kraus
from gatenoise.rng import RngEngine


class KrausError(Error):
    """
    Error that, with a given probability, applies a general Kraus map.

    The Kraus operators are attached to the sampled noise as a single
    "kraus" operation; picking the realized operator depends on the state
    and is left to the simulator (see gatenoise.trajectory).

    Parameters
    ----------
    kraus_ops:
        Square matrices of a common shape. The set is not checked for the
        CPTP property.
    probability:
        Probability in [0, 1] that the Kraus map is applied.
    errors_after_op:
        If True (default) the Kraus operation follows the ideal operation,
        otherwise it precedes it.

    Raises
    ------
    ValidationError
        If a matrix is not square, the probability is out of range, or a
        non-zero probability is given with no operators.
    """

    def __init__(
        self,
        kraus_ops: Sequence[Any] = (),
        probability: float = 0.0,
        errors_after_op: bool = True,
    ) -> None:
        mats = as_matrices(kraus_ops)
        for i, mat in enumerate(mats):
            if not is_square(mat):
                raise ValidationError(
                    "not-square",
                    f"Kraus operator {i} is not square, got shape {tuple(mat.shape)}",
                )
        probability = float(probability)
        if probability < 0.0 or probability > 1.0:
            raise ValidationError(
                "invalid-error-probability",
                f"Kraus error probability must be in [0, 1], got {probability}",
            )
        if probability > 0.0 and not mats:
            raise ValidationError(
                "empty", "KrausError with non-zero probability needs operators"
            )

        self._kraus_ops: Tuple[torch.Tensor, ...] = mats
        self._probability = probability
        self._errors_after_op = bool(errors_after_op)

    @property
    def kraus_ops(self) -> Tuple[torch.Tensor, ...]:
        return self._kraus_ops

    @property
    def probability(self) -> float:
        return self._probability

    @property
    def errors_after_op(self) -> bool:
        return self._errors_after_op

    def __len__(self) -> int:
        return len(self._kraus_ops)

    def sample_noise(
        self,
        op: Operation,
        qubits: Sequence[int],
        rng: RngEngine,
    ) -> NoiseOps:
        """
        Return op alone, or op together with the Kraus operation.

        A random draw is made only when 0 < probability < 1.
        """
        if self._probability <= 0.0:
            return [op]
        if self._probability < 1.0:
            if rng.rand_int([1.0 - self._probability, self._probability]) == 0:
                return [op]
        noise_op = make_kraus(qubits, self._kraus_ops)
        return self._place(op, noise_op, self._errors_after_op)

    def __repr__(self) -> str:
        return (
            f"KrausError(n_kraus={len(self._kraus_ops)}, "
            f"probability={self._probability})"
        )


__all__ = ["KrausError"]
