"""Mixed-unitary gate error."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import torch

from gatenoise.exceptions import InternalError, ValidationError
from gatenoise.linalg import as_matrices, is_unitary
from gatenoise.noise.base import Error
from gatenoise.operations import NoiseOps, Operation, make_unitary
from gatenoise.rng import RngEngine


class UnitaryError(Error):
    """
    Error that applies one of several unitaries U_k with probability w_k.

    Parameters
    ----------
    unitaries:
        Square unitary matrices.
    probabilities:
        Non-negative weights, one per unitary. They are used as relative
        weights, so they need not sum exactly to 1.
    errors_after_op:
        If True (default) the sampled unitary is applied after the ideal
        operation, otherwise before it. The ideal operation is always kept,
        never replaced by the unitary.
    tol:
        Tolerance for the unitarity check. Defaults to the package tolerance.

    Raises
    ------
    ValidationError
        If the lengths differ, a matrix is not unitary or a weight is
        negative.
    """

    def __init__(
        self,
        unitaries: Sequence[Any] = (),
        probabilities: Sequence[float] = (),
        errors_after_op: bool = True,
        tol: Optional[float] = None,
    ) -> None:
        mats = as_matrices(unitaries)
        probs = tuple(float(p) for p in probabilities)
        if len(mats) != len(probs):
            raise ValidationError(
                "shape-mismatch",
                f"Got {len(mats)} unitaries but {len(probs)} probabilities",
            )
        for i, mat in enumerate(mats):
            if not is_unitary(mat, tol):
                raise ValidationError("not-unitary", f"Matrix {i} is not unitary")
        if any(p < 0.0 for p in probs):
            raise ValidationError(
                "negative-probability",
                f"Unitary error probabilities must be non-negative, got {probs}",
            )

        self._unitaries: Tuple[torch.Tensor, ...] = mats
        self._probabilities: Tuple[float, ...] = probs
        self._errors_after_op = bool(errors_after_op)

    @property
    def unitaries(self) -> Tuple[torch.Tensor, ...]:
        return self._unitaries

    @property
    def probabilities(self) -> Tuple[float, ...]:
        return self._probabilities

    @property
    def errors_after_op(self) -> bool:
        return self._errors_after_op

    def __len__(self) -> int:
        return len(self._unitaries)

    def sample_noise(
        self,
        op: Operation,
        qubits: Sequence[int],
        rng: RngEngine,
    ) -> NoiseOps:
        """Draw one unitary by weight and attach it to op."""
        if not self._unitaries:
            raise InternalError("UnitaryError has no unitaries to sample.")
        r = rng.rand_int(self._probabilities)
        if r < 0 or r >= len(self._unitaries):
            raise InternalError(
                f"UnitaryError index {r} is out of range "
                f"[0, {len(self._unitaries)})."
            )
        noise_op = make_unitary(qubits, self._unitaries[r])
        return self._place(op, noise_op, self._errors_after_op)

    def __repr__(self) -> str:
        return (
            f"UnitaryError(n_unitaries={len(self._unitaries)}, "
            f"probabilities={list(self._probabilities)})"
        )


__all__ = ["UnitaryError"]
