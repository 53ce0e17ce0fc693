"""UpdateTransaction Use Case

Merges a partial update into a stored transaction, keeping status consistent.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction
from .dtos import TransactionPatchDTO

logger = logging.getLogger(__name__)


class UpdateTransaction:
    """
    Use Case: Edit a transaction

    Business Rules:
    1. New products without an explicit total_amount recompute the total
    2. status is re-derived whenever total_amount or amount_paid changes
    3. Unknown id returns TRANSACTION_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork, transaction_repo: TransactionRepository):
        self.uow = uow
        self.transaction_repo = transaction_repo

    async def execute(self, transaction_id: str, patch: TransactionPatchDTO) -> Result[Transaction]:
        try:
            transactions = await self.transaction_repo.get_all()
            index = next((i for i, t in enumerate(transactions) if t.id == transaction_id), -1)

            if index == -1:
                return Return.err(
                    Error(
                        code="TRANSACTION_NOT_FOUND",
                        message=f"Transaction {transaction_id} not found",
                    )
                )

            updated = transactions[index].apply_patch(patch.model_dump(exclude_unset=True))
            transactions[index] = updated

            await self.transaction_repo.save_all(transactions)
            await self.uow.commit()

            return Return.ok(updated)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update transaction {transaction_id}: {e}")
            return Return.err(
                Error(
                    code="SAVE_FAILED",
                    message="Failed to update transaction",
                    reason=str(e),
                )
            )
