"""
Role-based authorization gate.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional
from uuid import UUID

from fieldops.application.interfaces.repositories import UserRepositoryInterface
from fieldops.config.logging import get_logger
from fieldops.domain.exceptions.authorization_error import ForbiddenError

logger = get_logger(__name__)


class Operation(str, Enum):
    """Job operations guarded by a role allow-list."""

    CREATE_JOB = "create_job"
    ASSIGN_TECHNICIANS = "assign_technicians"
    SCHEDULE_JOB = "schedule_job"
    UPDATE_JOB = "update_job"
    UPDATE_JOB_STATUS = "update_job_status"
    DELETE_JOB = "delete_job"


BUSINESS_OWNER = "business owner"
DISPATCHER = "dispatcher"
TECHNICIAN = "technician"

_MANAGERS = frozenset({BUSINESS_OWNER, DISPATCHER})

DEFAULT_ALLOW_LISTS: Dict[Operation, FrozenSet[str]] = {
    Operation.CREATE_JOB: _MANAGERS,
    Operation.ASSIGN_TECHNICIANS: _MANAGERS,
    Operation.SCHEDULE_JOB: _MANAGERS,
    Operation.UPDATE_JOB: _MANAGERS,
    Operation.DELETE_JOB: _MANAGERS,
    Operation.UPDATE_JOB_STATUS: _MANAGERS | {TECHNICIAN},
}


class AuthorizationGate:
    """Checks a caller's role name against the allow-list of an operation."""

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        allow_lists: Optional[Dict[Operation, FrozenSet[str]]] = None,
    ):
        self.user_repo = user_repo
        self.allow_lists = allow_lists or DEFAULT_ALLOW_LISTS

    async def role_name_of(self, user_id: UUID) -> Optional[str]:
        """Resolve the role name of a user, None if the user is unknown."""
        role_name = await self.user_repo.get_role_name(user_id)
        return role_name.strip().lower() if role_name else None

    async def require(self, user_id: UUID, operation: Operation) -> str:
        """Raise ForbiddenError unless the user's role may perform ``operation``."""
        role_name = await self.role_name_of(user_id)
        allowed = self.allow_lists.get(operation, frozenset())

        if role_name is None or role_name not in allowed:
            logger.warning(
                "Operation denied",
                user_id=str(user_id),
                operation=operation.value,
                role_name=role_name,
            )
            raise ForbiddenError(operation.value, role_name)

        return role_name
