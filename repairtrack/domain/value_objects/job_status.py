"""
Job status value object.
"""

from enum import Enum
from typing import FrozenSet


class JobStatus(str, Enum):
    """Repair job status enumeration."""

    RECEIVED = "Received"
    AWAITING_PARTS = "Awaiting Parts"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    def is_final(self) -> bool:
        """Check if status is final under the normal workflow."""
        return self == self.COMPLETED

    def is_open(self) -> bool:
        """Check if the job is still on the bench."""
        return self != self.COMPLETED

    def allowed_next(self) -> FrozenSet["JobStatus"]:
        """Statuses reachable from this one under the normal workflow."""
        return _TRANSITIONS[self]

    def can_transition_to(self, other: "JobStatus") -> bool:
        """Check if moving to ``other`` follows the normal workflow.

        Re-selecting the current status is always allowed.
        """
        return other is self or other in _TRANSITIONS[self]


_TRANSITIONS = {
    JobStatus.RECEIVED: frozenset(
        {JobStatus.AWAITING_PARTS, JobStatus.IN_PROGRESS, JobStatus.COMPLETED}
    ),
    JobStatus.AWAITING_PARTS: frozenset({JobStatus.IN_PROGRESS, JobStatus.COMPLETED}),
    JobStatus.IN_PROGRESS: frozenset({JobStatus.AWAITING_PARTS, JobStatus.COMPLETED}),
    JobStatus.COMPLETED: frozenset(),
}
