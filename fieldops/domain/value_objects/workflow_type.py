"""
Workflow type value object.
"""

from enum import Enum


class WorkflowType(str, Enum):
    """What a workflow audits."""

    JOB = "JOB"
    SUBSCRIPTION = "SUBSCRIPTION"
