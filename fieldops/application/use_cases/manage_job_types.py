"""Job type use cases."""

from typing import List, Sequence

from fieldops.application.interfaces.repositories import JobTypeRepositoryInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.job import JobTypeRef
from fieldops.domain.exceptions.not_found_error import NotFoundError
from fieldops.domain.exceptions.validation_error import ValidationError
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


class ManageJobTypesUseCase:
    """List job types and create them in bulk."""

    def __init__(
        self,
        job_type_repo: JobTypeRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_type_repo = job_type_repo
        self.transaction_service = transaction_service

    async def list_job_types(self) -> List[JobTypeRef]:
        job_types = await self.job_type_repo.list_all()
        if not job_types:
            raise NotFoundError("Job types", None)
        return job_types

    async def create_job_types(self, names: Sequence[str]) -> int:
        """Create job types by name; names that already exist are skipped.

        Returns the number of job types actually created.
        """
        cleaned = [name.strip() for name in names or [] if name and name.strip()]
        if not cleaned:
            raise ValidationError("Please provide an array of job types")

        created = await self.transaction_service.execute_in_transaction(
            lambda: self.job_type_repo.create_many(cleaned), name="create_job_types"
        )

        logger.info("Job types created", requested=len(cleaned), created=created)
        return created
