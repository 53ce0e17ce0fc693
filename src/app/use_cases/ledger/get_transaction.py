"""GetTransaction Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.repositories.payment_repository import PaymentRepository
from .dtos import TransactionDetailDTO


class GetTransaction:
    """Use case: a transaction and the payments recorded against it"""

    def __init__(self, transaction_repo: TransactionRepository, payment_repo: PaymentRepository):
        self.transaction_repo = transaction_repo
        self.payment_repo = payment_repo

    async def execute(self, transaction_id: str) -> Result[TransactionDetailDTO]:
        transaction = await self.transaction_repo.get_by_id(transaction_id)
        if not transaction:
            return Return.err(
                Error(
                    code="TRANSACTION_NOT_FOUND",
                    message=f"Transaction {transaction_id} not found",
                )
            )

        payments = await self.payment_repo.get_by_transaction_id(transaction_id)
        return Return.ok(TransactionDetailDTO(transaction=transaction, payments=payments))
