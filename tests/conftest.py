"""Pytest configuration and shared fixtures for gatenoise tests.

This module provides:
- Deterministic RNG fixtures for numpy, torch and gatenoise
- A scripted random source that returns predetermined draws
"""

import os
from typing import Callable, List, Sequence

import numpy as np
import pytest
import torch

from gatenoise.rng import RngEngine


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


class ScriptedRng:
    """Random source returning predetermined indices from rand_int.

    Every call records the weights it was given in ``calls``.
    """

    def __init__(self, draws: Sequence[int]) -> None:
        self._draws = list(draws)
        self.calls: List[List[float]] = []

    def rand_int(self, weights) -> int:
        self.calls.append([float(w) for w in weights])
        if not self._draws:
            raise AssertionError("ScriptedRng ran out of draws")
        return self._draws.pop(0)


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def engine() -> RngEngine:
    """Provide a seeded gatenoise RngEngine."""
    return RngEngine(seed=_seed())


@pytest.fixture(scope="function")
def scripted_rng() -> Callable[..., ScriptedRng]:
    """Factory for ScriptedRng instances: ``scripted_rng(1, 0)``."""

    def factory(*draws: int) -> ScriptedRng:
        return ScriptedRng(draws)

    return factory


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy and torch global generators for every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())
