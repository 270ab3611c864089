"""
Job status transition policies.

The lifecycle engine asks a policy whether a status change is allowed before
applying it. The permissive policy accepts any change; the strict policy
enforces an adjacency table.
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet

from fieldops.domain.exceptions.status_error import TransitionNotAllowedError
from fieldops.domain.value_objects.job_status import JobStatus


class TransitionPolicy(ABC):
    """Decides whether a job may move from one status to another."""

    name: str = "abstract"

    @abstractmethod
    def is_allowed(self, current: JobStatus, target: JobStatus) -> bool:
        """Check if ``current`` -> ``target`` is a legal move."""
        pass

    def check(self, current: JobStatus, target: JobStatus) -> None:
        """Raise TransitionNotAllowedError if the move is not legal."""
        if not self.is_allowed(current, target):
            raise TransitionNotAllowedError(current.value, target.value)


class PermissiveTransitionPolicy(TransitionPolicy):
    """Any status can be set from any other status."""

    name = "permissive"

    def is_allowed(self, current: JobStatus, target: JobStatus) -> bool:
        return True


S = JobStatus

DEFAULT_ADJACENCY: Dict[JobStatus, FrozenSet[JobStatus]] = {
    S.CREATED: frozenset({S.ACCEPTED, S.ASSIGNED, S.CANCELLED}),
    S.ACCEPTED: frozenset({S.ASSIGNED, S.CANCELLED}),
    S.ASSIGNED: frozenset({S.ASSIGNED, S.SCHEDULED, S.CANCELLED}),
    S.SCHEDULED: frozenset({S.SCHEDULED, S.ASSIGNED, S.ONGOING, S.CANCELLED}),
    S.ONGOING: frozenset({S.COMPLETED, S.CANCELLED}),
    S.COMPLETED: frozenset({S.COMPLETED}),
    S.CANCELLED: frozenset({S.CANCELLED}),
}


class StrictTransitionPolicy(TransitionPolicy):
    """Only moves listed in the adjacency table are allowed."""

    name = "strict"

    def __init__(self, adjacency: Dict[JobStatus, FrozenSet[JobStatus]] = None):
        self.adjacency = adjacency or DEFAULT_ADJACENCY

    def is_allowed(self, current: JobStatus, target: JobStatus) -> bool:
        return target in self.adjacency.get(current, frozenset())


def get_transition_policy(name: str) -> TransitionPolicy:
    """Build the policy configured under ``name``."""
    policies = {
        PermissiveTransitionPolicy.name: PermissiveTransitionPolicy,
        StrictTransitionPolicy.name: StrictTransitionPolicy,
    }
    try:
        return policies[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown transition policy '{name}'")
