"""Matrix helpers for classifying Kraus operators."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Tuple

import numpy as np
import torch

from gatenoise.exceptions import ValidationError
from gatenoise.settings import resolve_tolerance


def as_matrix(mat: Any, index: Optional[int] = None) -> torch.Tensor:
    """
    Coerce a matrix-like object to a 2D complex128 tensor.

    Parameters
    ----------
    mat:
        torch.Tensor, numpy array or nested sequence of numbers.
    index:
        Position of the matrix in its Kraus set, used in error messages.

    Returns
    -------
    torch.Tensor
        2D tensor with dtype torch.complex128 on the CPU.

    Raises
    ------
    ValidationError
        If the input is not two-dimensional.
    """
    if isinstance(mat, torch.Tensor):
        tensor = mat.detach().to(dtype=torch.complex128, device="cpu")
    else:
        tensor = torch.from_numpy(np.asarray(mat, dtype=np.complex128))

    if tensor.dim() != 2:
        label = "Matrix" if index is None else f"Kraus operator {index}"
        raise ValidationError(
            "not-square",
            f"{label} must be 2D, got {tensor.dim()} dimensions",
        )
    return tensor


def as_matrices(mats: Iterable[Any]) -> Tuple[torch.Tensor, ...]:
    """Coerce every element of mats with as_matrix."""
    return tuple(as_matrix(mat, index=i) for i, mat in enumerate(mats))


def dagger(mat: torch.Tensor) -> torch.Tensor:
    """Conjugate transpose of a matrix."""
    return mat.conj().transpose(-2, -1)


def is_square(mat: torch.Tensor) -> bool:
    """Return True if mat is a 2D matrix with as many rows as columns."""
    return mat.dim() == 2 and mat.shape[0] == mat.shape[1]


def is_identity(mat: torch.Tensor, tol: Optional[float] = None) -> bool:
    """
    Check whether a square matrix equals the identity.

    Each entry is compared entrywise: the squared magnitude of
    ``mat[i, j] - delta_ij`` must not exceed tol.

    Parameters
    ----------
    mat:
        Square complex matrix.
    tol:
        Threshold on the squared deviation. Defaults to the package
        tolerance.

    Returns
    -------
    bool
        True if mat is the identity within tol.
    """
    if not is_square(mat):
        return False
    tol = resolve_tolerance(tol)
    identity = torch.eye(mat.shape[0], dtype=mat.dtype, device=mat.device)
    deviation = torch.abs(mat - identity) ** 2
    return bool(torch.max(deviation).item() <= tol)


def is_unitary(mat: torch.Tensor, tol: Optional[float] = None) -> bool:
    """Check whether ``mat @ mat^dag`` is the identity within tol."""
    if not is_square(mat):
        return False
    return is_identity(mat @ dagger(mat), tol)


def kraus_sum(mats: Sequence[torch.Tensor]) -> torch.Tensor:
    """
    Return ``sum_k K_k^dag K_k``.

    Raises
    ------
    ValidationError
        If the operators do not all share the same shape.
    """
    dim = mats[0].shape[0]
    total = torch.zeros((dim, dim), dtype=torch.complex128)
    for i, mat in enumerate(mats):
        if mat.shape != (dim, dim):
            raise ValidationError(
                "shape-mismatch",
                f"Kraus operator {i} has shape {tuple(mat.shape)}, "
                f"expected ({dim}, {dim})",
            )
        total = total + dagger(mat) @ mat
    return total


def is_cptp(mats: Sequence[torch.Tensor], tol: Optional[float] = None) -> bool:
    """Check whether a set of square Kraus operators is trace preserving."""
    if len(mats) == 0 or not all(is_square(mat) for mat in mats):
        return False
    try:
        total = kraus_sum(mats)
    except ValidationError:
        return False
    return is_identity(total, tol)


__all__ = [
    "as_matrix",
    "as_matrices",
    "dagger",
    "is_square",
    "is_identity",
    "is_unitary",
    "kraus_sum",
    "is_cptp",
]
