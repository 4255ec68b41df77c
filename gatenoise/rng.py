"""Random number engine used for noise sampling."""

from __future__ import annotations

from typing import Optional, Sequence

import torch


class RngEngine:
    """
    Seedable random source exposing a weighted categorical draw.

    An engine is not safe for concurrent use; give every simulation
    thread its own instance.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize an RngEngine.

        Args:
            seed: Optional seed. If None, the generator is seeded from
                a non-deterministic source.
        """
        self._generator = torch.Generator(device="cpu")
        if seed is None:
            self._generator.seed()
        else:
            self._generator.manual_seed(int(seed))

    @property
    def generator(self) -> torch.Generator:
        """Return the underlying torch.Generator."""
        return self._generator

    def set_seed(self, seed: int) -> None:
        """Reseed the engine."""
        self._generator.manual_seed(int(seed))

    def rand_int(self, weights: Sequence[float] | torch.Tensor) -> int:
        """
        Draw an index with probability proportional to its weight.

        Args:
            weights: Non-negative weights; they need not sum to 1.

        Returns:
            The selected index.

        Raises:
            ValueError: If weights is empty, contains negative or
                non-finite values, or has zero total mass.
        """
        probs = torch.as_tensor(weights, dtype=torch.float64).reshape(-1)
        if probs.numel() == 0:
            raise ValueError("weights must be non-empty.")
        if not torch.all(torch.isfinite(probs)):
            raise ValueError("weights must be finite.")
        if torch.any(probs < 0):
            raise ValueError(f"weights must be non-negative, got {probs.tolist()}")
        if probs.sum().item() <= 0.0:
            raise ValueError("weights have zero total mass.")
        return int(torch.multinomial(probs, num_samples=1, generator=self._generator).item())


__all__ = ["RngEngine"]
