"""Tests for gatenoise.operations."""

import pytest

from gatenoise.gates import I, X
from gatenoise.operations import KRAUS, UNITARY, Operation, make_kraus, make_unitary


def test_operation_normalizes_qubits():
    op = Operation("CNOT", [0, 1])
    assert op.qubits == (0, 1)
    assert op.mats == ()


@pytest.mark.parametrize("qubits", [(), (-1,)])
def test_operation_rejects_bad_qubits(qubits):
    with pytest.raises(ValueError):
        Operation("X", qubits)


def test_make_unitary():
    op = make_unitary([2], X())
    assert op.name == UNITARY
    assert op.qubits == (2,)
    assert len(op.mats) == 1


def test_make_kraus():
    op = make_kraus((0,), [I(), X()])
    assert op.name == KRAUS
    assert len(op.mats) == 2
    with pytest.raises(ValueError):
        make_kraus((0,), [])


def test_operation_is_frozen():
    op = Operation("X", (0,))
    with pytest.raises(AttributeError):
        op.name = "Y"
