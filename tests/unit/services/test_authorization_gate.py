"""
Unit tests for the authorization gate.
"""

from uuid import uuid4

import pytest

from fieldops.application.services.authorization_gate import (
    AuthorizationGate,
    Operation,
)
from fieldops.domain.exceptions.authorization_error import ForbiddenError

MANAGEMENT_OPERATIONS = [
    Operation.CREATE_JOB,
    Operation.ASSIGN_TECHNICIANS,
    Operation.SCHEDULE_JOB,
    Operation.UPDATE_JOB,
    Operation.DELETE_JOB,
]


class TestAuthorizationGate:
    """Test cases for AuthorizationGate."""

    @pytest.fixture
    def gate(self, mock_user_repository):
        return AuthorizationGate(mock_user_repository)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role_name", ["Business Owner", "dispatcher", "DISPATCHER"])
    @pytest.mark.parametrize("operation", MANAGEMENT_OPERATIONS)
    async def test_managers_allowed(self, gate, mock_user_repository, role_name, operation):
        mock_user_repository.get_role_name.return_value = role_name

        assert await gate.require(uuid4(), operation) == role_name.lower()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", MANAGEMENT_OPERATIONS)
    async def test_technician_denied_management(self, gate, mock_user_repository, operation):
        mock_user_repository.get_role_name.return_value = "Technician"

        with pytest.raises(ForbiddenError) as exc_info:
            await gate.require(uuid4(), operation)

        assert exc_info.value.operation == operation.value
        assert exc_info.value.role_name == "technician"

    @pytest.mark.asyncio
    async def test_technician_may_update_status(self, gate, mock_user_repository):
        mock_user_repository.get_role_name.return_value = "Technician"

        assert await gate.require(uuid4(), Operation.UPDATE_JOB_STATUS) == "technician"

    @pytest.mark.asyncio
    async def test_unknown_user_denied(self, gate, mock_user_repository):
        mock_user_repository.get_role_name.return_value = None

        assert await gate.role_name_of(uuid4()) is None
        with pytest.raises(ForbiddenError):
            await gate.require(uuid4(), Operation.UPDATE_JOB_STATUS)

    @pytest.mark.asyncio
    async def test_unknown_role_denied(self, gate, mock_user_repository):
        mock_user_repository.get_role_name.return_value = "accountant"

        with pytest.raises(ForbiddenError) as exc_info:
            await gate.require(uuid4(), Operation.CREATE_JOB)

        assert exc_info.value.role_name == "accountant"

    @pytest.mark.asyncio
    async def test_custom_allow_lists(self, mock_user_repository):
        gate = AuthorizationGate(
            mock_user_repository,
            allow_lists={Operation.DELETE_JOB: frozenset({"business owner"})},
        )
        mock_user_repository.get_role_name.return_value = "dispatcher"

        with pytest.raises(ForbiddenError):
            await gate.require(uuid4(), Operation.DELETE_JOB)
