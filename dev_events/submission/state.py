"""Explicit state machine for a single in-flight event submission.

States: ``Idle`` -> ``Submitting`` -> ``Succeeded(slug)`` | ``Failed(reason)``.
A new submission may start from any state except ``Submitting``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    pass


@dataclass(frozen=True)
class Succeeded:
    slug: str


@dataclass(frozen=True)
class Failed:
    reason: str
    errors: Dict[str, List[str]] = field(default_factory=dict)


State = Union[Idle, Submitting, Succeeded, Failed]


class InvalidTransition(RuntimeError):
    """Raised when a transition is not allowed from the current state."""


class SubmissionState:
    """Holds the current :data:`State` and enforces legal transitions."""

    def __init__(self) -> None:
        self.current: State = Idle()

    @property
    def is_busy(self) -> bool:
        """``True`` while a request is outstanding; the submit control is disabled."""
        return isinstance(self.current, Submitting)

    def start(self) -> None:
        if self.is_busy:
            raise InvalidTransition("A submission is already in flight")
        self.current = Submitting()

    def succeed(self, slug: str) -> None:
        self._finish(Succeeded(slug))

    def fail(self, reason: str, errors: Dict[str, List[str]] | None = None) -> None:
        self._finish(Failed(reason, dict(errors or {})))

    def reject(self, reason: str, errors: Dict[str, List[str]] | None = None) -> None:
        """Fail without a request ever starting (local precondition failure)."""
        if self.is_busy:
            raise InvalidTransition("Cannot reject while a submission is in flight")
        self.current = Failed(reason, dict(errors or {}))

    def _finish(self, state: State) -> None:
        if not self.is_busy:
            raise InvalidTransition(f"Cannot finish from {type(self.current).__name__}")
        logger.debug("Submission finished: %s", state)
        self.current = state

__all__ = [
    "Idle",
    "Submitting",
    "Succeeded",
    "Failed",
    "State",
    "InvalidTransition",
    "SubmissionState",
]
