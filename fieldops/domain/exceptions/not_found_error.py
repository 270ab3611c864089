"""
Lookup-related domain exceptions.
"""

from .base import JobServiceError


class NotFoundError(JobServiceError):
    """Raised when a referenced record does not exist."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class JobNotFoundError(NotFoundError):
    """Raised when a job does not exist."""

    def __init__(self, job_id):
        super().__init__("Job", job_id)


class WorkflowNotFoundError(NotFoundError):
    """Raised when no workflow matches the lookup."""

    def __init__(self, lookup):
        super().__init__("Workflow", lookup)
