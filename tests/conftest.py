"""
Pytest configuration and fixtures.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from dataclasses import dataclass
from typing import AsyncGenerator, Dict
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fieldops.api.security import create_access_token
from fieldops.application.interfaces.repositories import (
    JobRepositoryInterface,
    JobTechnicianRepositoryInterface,
    UserRepositoryInterface,
    WorkflowRepositoryInterface,
)
from fieldops.application.services.authorization_gate import (
    BUSINESS_OWNER,
    DISPATCHER,
    TECHNICIAN,
)
from fieldops.domain.entities.job import Job
from fieldops.infrastructure.database.models import (
    Base,
    ClientModel,
    CompanyModel,
    JobTypeModel,
    RoleModel,
    UserModel,
)
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def bearer_headers(user_id: UUID) -> Dict[str, str]:
    """Bearer header for ``user_id``."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def auth_headers():
    """Build request headers authenticating as a given user."""
    return bearer_headers


@dataclass
class SeedData:
    """IDs of the rows every integration test starts with."""

    company_id: UUID
    other_company_id: UUID
    owner_id: UUID
    dispatcher_id: UUID
    technician_ids: list
    client_id: UUID
    job_type_id: UUID


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker:
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seed(session_factory) -> SeedData:
    """Roles, two companies, an owner, a dispatcher, two technicians, a client and a job type."""
    async with session_factory() as session:
        roles = {name: RoleModel(id=uuid4(), name=name) for name in (BUSINESS_OWNER, DISPATCHER, TECHNICIAN)}
        company = CompanyModel(id=uuid4(), name="Northside Plumbing")
        other_company = CompanyModel(id=uuid4(), name="Southside Electric")
        session.add_all([*roles.values(), company, other_company])
        await session.flush()

        owner = UserModel(
            id=uuid4(),
            first_name="Olivia",
            last_name="Owner",
            email="owner@northside.example",
            company_id=company.id,
            role_id=roles[BUSINESS_OWNER].id,
        )
        dispatcher = UserModel(
            id=uuid4(),
            first_name="Dan",
            last_name="Dispatch",
            email="dispatch@northside.example",
            company_id=company.id,
            role_id=roles[DISPATCHER].id,
        )
        technicians = [
            UserModel(
                id=uuid4(),
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name.lower()}@northside.example",
                company_id=company.id,
                role_id=roles[TECHNICIAN].id,
            )
            for first_name, last_name in [("Tara", "Pipes"), ("Theo", "Valves")]
        ]
        client = ClientModel(
            id=uuid4(),
            first_name="Carla",
            last_name="Customer",
            email="carla@example.com",
            company_id=company.id,
        )
        job_type = JobTypeModel(id=uuid4(), name="Repair")
        session.add_all([owner, dispatcher, *technicians, client, job_type])
        await session.commit()

        return SeedData(
            company_id=company.id,
            other_company_id=other_company.id,
            owner_id=owner.id,
            dispatcher_id=dispatcher.id,
            technician_ids=[technician.id for technician in technicians],
            client_id=client.id,
            job_type_id=job_type.id,
        )


@pytest_asyncio.fixture
async def api_client(test_engine, session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with sessions from the test engine."""
    from fieldops.api.app import create_app
    from fieldops.config.database import get_db_session

    app = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)

    # Repository writes hand back what they were given
    mock_repo.create = AsyncMock(side_effect=lambda job: job)
    mock_repo.update = AsyncMock(side_effect=lambda job: job)
    mock_repo.get_by_id = AsyncMock()
    mock_repo.delete = AsyncMock(return_value=True)

    return mock_repo


@pytest.fixture
def mock_workflow_repository():
    """Mock workflow repository."""
    mock_repo = AsyncMock(spec=WorkflowRepositoryInterface)

    mock_repo.create = AsyncMock(side_effect=lambda workflow: workflow)
    mock_repo.get_by_job_id = AsyncMock(return_value=None)
    mock_repo.append_step_if_absent = AsyncMock()
    mock_repo.delete_by_job_id = AsyncMock(return_value=1)

    return mock_repo


@pytest.fixture
def mock_job_technician_repository():
    """Mock job technician repository."""
    mock_repo = AsyncMock(spec=JobTechnicianRepositoryInterface)

    mock_repo.add_many = AsyncMock(return_value=[])
    mock_repo.delete_by_job_id = AsyncMock(return_value=0)

    return mock_repo


@pytest.fixture
def mock_user_repository():
    """Mock user repository."""
    mock_repo = AsyncMock(spec=UserRepositoryInterface)

    mock_repo.get_many = AsyncMock(return_value=[])
    mock_repo.get_role_name = AsyncMock(return_value="Dispatcher")

    return mock_repo


@pytest.fixture
def mock_transaction_service():
    """Transaction service that runs the operation without a database."""

    async def run(operation, name="operation"):
        return await operation()

    mock_service = AsyncMock(spec=TransactionService)
    mock_service.execute_in_transaction = AsyncMock(side_effect=run)

    return mock_service


@pytest.fixture
def sample_job():
    """A job in CREATED state."""
    return Job(
        name="Fix leaking sink",
        description="Kitchen sink drips under the cabinet",
        job_type_id=uuid4(),
        company_id=uuid4(),
        client_id=uuid4(),
        dispatcher_id=uuid4(),
    )
