"""
Transaction service for managing database transactions centrally.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService:
    """Centralized transaction management service."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = logger

    async def execute_in_transaction(
        self, operation: Callable[[], Awaitable[T]], name: str = "operation"
    ) -> T:
        """
        Execute an operation within a transaction.

        Args:
            operation: Async function to execute
            name: Label used in log lines

        Returns:
            Result of the operation

        Raises:
            Exception: Any exception that occurs during execution, after rollback
        """
        try:
            result = await operation()

            await self.session.commit()

            self.logger.info("Transaction committed successfully", operation=name)
            return result

        except Exception as e:
            await self.session.rollback()
            self.logger.warning(
                "Transaction rolled back due to error",
                operation=name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        await self.session.commit()
        self.logger.debug("Transaction committed")

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        await self.session.rollback()
        self.logger.debug("Transaction rolled back")
