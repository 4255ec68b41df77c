"""Exception types raised by gatenoise."""

from __future__ import annotations


class GateNoiseError(Exception):
    """Base class for all gatenoise errors."""


class ValidationError(GateNoiseError, ValueError):
    """
    Raised when a noise specification is malformed.

    Attributes
    ----------
    reason:
        Short tag naming the violated invariant, e.g. ``"not-square"``,
        ``"not-cptp"`` or ``"inconsistent-probabilities"``.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(f"{message} [{reason}]")
        self.reason = reason


class InternalError(GateNoiseError, RuntimeError):
    """Raised when sampling reaches a state that a valid error cannot produce."""


__all__ = ["GateNoiseError", "ValidationError", "InternalError"]
