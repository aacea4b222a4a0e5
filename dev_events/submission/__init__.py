"""Client-side submission: form state, preconditions and the state machine."""

from .assembler import EventSubmission  # noqa: F401
from .state import (  # noqa: F401
    Failed,
    Idle,
    InvalidTransition,
    Submitting,
    SubmissionState,
    Succeeded,
)

__all__ = [
    "EventSubmission",
    "SubmissionState",
    "Idle",
    "Submitting",
    "Succeeded",
    "Failed",
    "InvalidTransition",
]
