"""Tests for gatenoise.channels."""

import pytest

from gatenoise.channels import (
    amplitude_damping_error,
    amplitude_damping_kraus,
    bit_flip_error,
    bit_flip_kraus,
    depolarizing_error,
    depolarizing_kraus,
    phase_damping_kraus,
    phase_flip_kraus,
)
from gatenoise.linalg import is_cptp

BUILDERS = [
    bit_flip_kraus,
    phase_flip_kraus,
    depolarizing_kraus,
    amplitude_damping_kraus,
    phase_damping_kraus,
]


class TestKrausBuilders:
    """Test textbook channel builders."""

    @pytest.mark.parametrize("builder", BUILDERS)
    @pytest.mark.parametrize("p", [0.0, 0.1, 0.5, 1.0])
    def test_builders_are_cptp(self, builder, p):
        assert is_cptp(builder(p))

    @pytest.mark.parametrize("builder", BUILDERS)
    @pytest.mark.parametrize("p", [-0.1, 1.1])
    def test_builders_reject_out_of_range(self, builder, p):
        with pytest.raises(ValueError, match=r"\[0, 1\]"):
            builder(p)

    def test_operator_counts(self):
        assert len(bit_flip_kraus(0.2)) == 2
        assert len(depolarizing_kraus(0.2)) == 4


class TestErrorConstructors:
    """Test GateError convenience constructors."""

    def test_bit_flip_error(self):
        error = bit_flip_error(0.25)
        assert error.probabilities == pytest.approx((0.75, 0.25, 0.0), abs=1e-12)

    def test_depolarizing_error_with_error_probability(self):
        error = depolarizing_error(0.6, p_error=0.5)
        assert error.probabilities == pytest.approx((0.7, 0.3, 0.0), abs=1e-12)
        assert error.unitary_error.probabilities == pytest.approx((1 / 3, 1 / 3, 1 / 3))

    def test_amplitude_damping_error(self):
        error = amplitude_damping_error(0.1)
        assert error.probabilities == pytest.approx((0.0, 0.0, 1.0))
        assert error.kraus_error.probability == 1.0

    @pytest.mark.parametrize("p_error", [0.0, 0.3, 1.0])
    @pytest.mark.parametrize("p", [0.0, 0.05, 0.5, 1.0])
    def test_composed_weights_sum_to_one(self, p, p_error):
        for error in (
            bit_flip_error(p, p_error=p_error),
            depolarizing_error(p, p_error=p_error),
            amplitude_damping_error(p, p_error=p_error),
        ):
            assert sum(error.probabilities) == pytest.approx(1.0, abs=1e-10)
