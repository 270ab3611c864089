"""
FastAPI dependency injection container.
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.api.security import decode_user_id
from fieldops.application.services.authorization_gate import AuthorizationGate
from fieldops.application.services.job_lifecycle_engine import JobLifecycleEngine
from fieldops.application.services.transition_policy import (
    TransitionPolicy,
    get_transition_policy,
)
from fieldops.application.use_cases.assign_technicians import AssignTechniciansUseCase
from fieldops.application.use_cases.create_job import CreateJobUseCase
from fieldops.application.use_cases.delete_job import DeleteJobUseCase
from fieldops.application.use_cases.job_queries import JobQueryService
from fieldops.application.use_cases.manage_job_types import ManageJobTypesUseCase
from fieldops.application.use_cases.schedule_job import ScheduleJobUseCase
from fieldops.application.use_cases.update_job import UpdateJobUseCase
from fieldops.application.use_cases.update_job_status import UpdateJobStatusUseCase
from fieldops.config.database import get_db_session
from fieldops.config.settings import settings
from fieldops.domain.exceptions.authorization_error import AuthenticationError
from fieldops.infrastructure.database.repositories import (
    JobRepository,
    JobTechnicianRepository,
    JobTypeRepository,
    TransactionService,
    UserRepository,
    WorkflowRepository,
)

bearer_scheme = HTTPBearer(auto_error=False)


# Authentication
async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UUID:
    """Identify the caller from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    return decode_user_id(credentials.credentials)


# Database Dependencies
async def get_job_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_workflow_repository(
    db: AsyncSession = Depends(get_db_session),
) -> WorkflowRepository:
    """Get workflow repository instance."""
    return WorkflowRepository(db)


async def get_job_technician_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobTechnicianRepository:
    """Get job technician repository instance."""
    return JobTechnicianRepository(db)


async def get_user_repository(
    db: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    """Get user repository instance."""
    return UserRepository(db)


async def get_job_type_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobTypeRepository:
    """Get job type repository instance."""
    return JobTypeRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(db)


# Service Dependencies
def get_configured_transition_policy() -> TransitionPolicy:
    """Get the transition policy named in settings."""
    return get_transition_policy(settings.JOB_TRANSITION_POLICY)


async def get_lifecycle_engine(
    job_repo: JobRepository = Depends(get_job_repository),
    workflow_repo: WorkflowRepository = Depends(get_workflow_repository),
    job_technician_repo: JobTechnicianRepository = Depends(get_job_technician_repository),
    policy: TransitionPolicy = Depends(get_configured_transition_policy),
) -> JobLifecycleEngine:
    """Get job lifecycle engine instance."""
    return JobLifecycleEngine(job_repo, workflow_repo, job_technician_repo, policy)


async def get_authorization_gate(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthorizationGate:
    """Get authorization gate instance."""
    return AuthorizationGate(user_repo)


# Type aliases for cleaner dependency injection
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
WorkflowRepositoryDep = Annotated[WorkflowRepository, Depends(get_workflow_repository)]
JobTechnicianRepositoryDep = Annotated[
    JobTechnicianRepository, Depends(get_job_technician_repository)
]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
JobTypeRepositoryDep = Annotated[JobTypeRepository, Depends(get_job_type_repository)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
LifecycleEngineDep = Annotated[JobLifecycleEngine, Depends(get_lifecycle_engine)]
AuthorizationGateDep = Annotated[AuthorizationGate, Depends(get_authorization_gate)]


# Use Case Dependencies
async def get_create_job_use_case(
    engine: LifecycleEngineDep,
    gate: AuthorizationGateDep,
    transaction_service: TransactionServiceDep,
) -> CreateJobUseCase:
    return CreateJobUseCase(engine, gate, transaction_service)


async def get_assign_technicians_use_case(
    job_repo: JobRepositoryDep,
    user_repo: UserRepositoryDep,
    job_technician_repo: JobTechnicianRepositoryDep,
    engine: LifecycleEngineDep,
    gate: AuthorizationGateDep,
    transaction_service: TransactionServiceDep,
) -> AssignTechniciansUseCase:
    return AssignTechniciansUseCase(
        job_repo, user_repo, job_technician_repo, engine, gate, transaction_service
    )


async def get_schedule_job_use_case(
    engine: LifecycleEngineDep,
    gate: AuthorizationGateDep,
    transaction_service: TransactionServiceDep,
) -> ScheduleJobUseCase:
    return ScheduleJobUseCase(engine, gate, transaction_service)


async def get_update_job_status_use_case(
    engine: LifecycleEngineDep,
    gate: AuthorizationGateDep,
    transaction_service: TransactionServiceDep,
) -> UpdateJobStatusUseCase:
    return UpdateJobStatusUseCase(engine, gate, transaction_service)


async def get_update_job_use_case(
    job_repo: JobRepositoryDep,
    user_repo: UserRepositoryDep,
    job_technician_repo: JobTechnicianRepositoryDep,
    engine: LifecycleEngineDep,
    gate: AuthorizationGateDep,
    transaction_service: TransactionServiceDep,
) -> UpdateJobUseCase:
    return UpdateJobUseCase(
        job_repo, user_repo, job_technician_repo, engine, gate, transaction_service
    )


async def get_delete_job_use_case(
    engine: LifecycleEngineDep,
    gate: AuthorizationGateDep,
    transaction_service: TransactionServiceDep,
) -> DeleteJobUseCase:
    return DeleteJobUseCase(engine, gate, transaction_service)


async def get_job_query_service(
    job_repo: JobRepositoryDep,
    workflow_repo: WorkflowRepositoryDep,
) -> JobQueryService:
    return JobQueryService(job_repo, workflow_repo)


async def get_manage_job_types_use_case(
    job_type_repo: JobTypeRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> ManageJobTypesUseCase:
    return ManageJobTypesUseCase(job_type_repo, transaction_service)


CreateJobUseCaseDep = Annotated[CreateJobUseCase, Depends(get_create_job_use_case)]
AssignTechniciansUseCaseDep = Annotated[
    AssignTechniciansUseCase, Depends(get_assign_technicians_use_case)
]
ScheduleJobUseCaseDep = Annotated[ScheduleJobUseCase, Depends(get_schedule_job_use_case)]
UpdateJobStatusUseCaseDep = Annotated[
    UpdateJobStatusUseCase, Depends(get_update_job_status_use_case)
]
UpdateJobUseCaseDep = Annotated[UpdateJobUseCase, Depends(get_update_job_use_case)]
DeleteJobUseCaseDep = Annotated[DeleteJobUseCase, Depends(get_delete_job_use_case)]
JobQueryServiceDep = Annotated[JobQueryService, Depends(get_job_query_service)]
ManageJobTypesUseCaseDep = Annotated[
    ManageJobTypesUseCase, Depends(get_manage_job_types_use_case)
]
