"""
Application services package.
"""

from .authorization_gate import AuthorizationGate, Operation
from .job_lifecycle_engine import JobLifecycleEngine, TransitionResult
from .transition_policy import (
    PermissiveTransitionPolicy,
    StrictTransitionPolicy,
    TransitionPolicy,
    get_transition_policy,
)

__all__ = [
    "AuthorizationGate",
    "JobLifecycleEngine",
    "Operation",
    "PermissiveTransitionPolicy",
    "StrictTransitionPolicy",
    "TransitionPolicy",
    "TransitionResult",
    "get_transition_policy",
]
