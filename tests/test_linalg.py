"""Tests for gatenoise.linalg."""

import math

import numpy as np
import pytest
import torch

from gatenoise.exceptions import ValidationError
from gatenoise.gates import H, I, S, X
from gatenoise.linalg import (
    as_matrix,
    dagger,
    is_cptp,
    is_identity,
    is_square,
    is_unitary,
    kraus_sum,
)


def test_as_matrix_from_list():
    mat = as_matrix([[1, 0], [0, 1j]])
    assert mat.dtype == torch.complex128
    assert torch.allclose(mat, S())


def test_as_matrix_from_float_tensor():
    mat = as_matrix(torch.eye(3))
    assert mat.dtype == torch.complex128
    assert mat.shape == (3, 3)


def test_as_matrix_rejects_vectors():
    with pytest.raises(ValidationError) as excinfo:
        as_matrix(np.zeros(4))
    assert excinfo.value.reason == "not-square"


def test_dagger():
    assert torch.allclose(dagger(S()), torch.diag(torch.tensor([1.0, -1.0j], dtype=torch.complex128)))


def test_is_square():
    assert is_square(I())
    assert not is_square(torch.zeros((2, 3)))


def test_is_identity_uses_squared_deviation():
    """Entries may deviate by sqrt(tol) from the identity."""
    mat = I() + 5e-6
    assert is_identity(mat, tol=1e-10)
    assert not is_identity(I() + 2e-5, tol=1e-10)


def test_is_identity_rejects_phase():
    assert not is_identity(-I())


def test_is_unitary():
    assert is_unitary(H())
    assert is_unitary(1j * X())
    assert not is_unitary(0.5 * X())
    assert not is_unitary(torch.zeros((2, 3), dtype=torch.complex128))


def test_kraus_sum_and_cptp():
    ops = (math.sqrt(0.5) * I(), math.sqrt(0.5) * X())
    assert torch.allclose(kraus_sum(ops), I())
    assert is_cptp(ops)
    assert not is_cptp((I(), X()))
    assert not is_cptp(())
    assert not is_cptp((I(), torch.eye(4, dtype=torch.complex128)))
