"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the application.
"""

from .interfaces.repositories import (
    JobRepositoryInterface,
    JobTechnicianRepositoryInterface,
    JobTypeRepositoryInterface,
    UserRepositoryInterface,
    WorkflowRepositoryInterface,
)
from .services.authorization_gate import AuthorizationGate, Operation
from .services.job_lifecycle_engine import JobLifecycleEngine, TransitionResult
from .services.transition_policy import get_transition_policy

__all__ = [
    # Interfaces
    "JobRepositoryInterface",
    "JobTechnicianRepositoryInterface",
    "JobTypeRepositoryInterface",
    "UserRepositoryInterface",
    "WorkflowRepositoryInterface",
    # Services
    "AuthorizationGate",
    "JobLifecycleEngine",
    "Operation",
    "TransitionResult",
    "get_transition_policy",
]
