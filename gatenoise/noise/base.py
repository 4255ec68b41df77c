"""Base class for sampled gate errors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from gatenoise.operations import NoiseOps, Operation
from gatenoise.rng import RngEngine


class Error(ABC):
    """
    Base class for stochastic gate errors.

    An error turns one ideal operation into the sequence of operations
    realized in a single noisy shot. Implementations must not mutate
    themselves while sampling.
    """

    @abstractmethod
    def sample_noise(
        self,
        op: Operation,
        qubits: Sequence[int],
        rng: RngEngine,
    ) -> NoiseOps:
        """
        Sample a noisy implementation of op.

        Args:
            op: The ideal operation.
            qubits: Qubits the error acts on.
            rng: Random engine providing ``rand_int(weights)``.

        Returns:
            Operations to execute in place of op.
        """
        pass

    @staticmethod
    def _place(op: Operation, noise_op: Operation, errors_after_op: bool) -> NoiseOps:
        if errors_after_op:
            return [op, noise_op]
        return [noise_op, op]
