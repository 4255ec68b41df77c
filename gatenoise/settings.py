"""Numeric tolerance settings for gatenoise."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_TOLERANCE_ENV_VAR = "GATENOISE_TOLERANCE"
_FALLBACK_TOLERANCE = 1e-10


def _tolerance_from_env() -> float:
    raw = os.getenv(_TOLERANCE_ENV_VAR)
    if raw is None:
        return _FALLBACK_TOLERANCE
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(
            f"{_TOLERANCE_ENV_VAR} must be a positive float, got {raw!r}"
        ) from exc
    if not value > 0.0:
        raise ValueError(f"{_TOLERANCE_ENV_VAR} must be positive, got {value}")
    return value


_default_tolerance: float = _tolerance_from_env()


def get_default_tolerance() -> float:
    """
    Return the tolerance used by identity, unitary and CPTP checks.

    The initial value comes from the GATENOISE_TOLERANCE environment
    variable, or 1e-10 if it is unset.
    """
    return _default_tolerance


def set_default_tolerance(tol: float) -> None:
    """
    Globally set the default tolerance.

    Parameters
    ----------
    tol:
        Strictly positive tolerance.

    Raises
    ------
    ValueError
        If tol is not positive.
    """
    global _default_tolerance
    tol = float(tol)
    if not tol > 0.0:
        raise ValueError(f"tolerance must be positive, got {tol}")
    _default_tolerance = tol


def resolve_tolerance(tol: Optional[float]) -> float:
    """Return tol, or the default tolerance when tol is None."""
    if tol is None:
        return _default_tolerance
    tol = float(tol)
    if not tol > 0.0:
        raise ValueError(f"tolerance must be positive, got {tol}")
    return tol


@contextmanager
def tolerance_context(tol: float) -> Iterator[None]:
    """
    Context manager to temporarily change the default tolerance.

    Example
    -------
    >>> with tolerance_context(1e-8):
    ...     error = GateError.from_kraus(mats)
    """
    global _default_tolerance
    prev = _default_tolerance
    set_default_tolerance(tol)
    try:
        yield
    finally:
        _default_tolerance = prev


__all__ = [
    "get_default_tolerance",
    "set_default_tolerance",
    "resolve_tolerance",
    "tolerance_context",
]
