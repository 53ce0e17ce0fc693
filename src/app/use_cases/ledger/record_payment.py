"""RecordPayment Use Case

Records a payment and applies it to the referenced transaction.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.payment_repository import PaymentRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.base import generate_uuid, utc_now
from src.domain.payment import Payment
from src.domain.transaction import derive_status
from .dtos import RecordPaymentCommandDTO, RecordPaymentResponseDTO

logger = logging.getLogger(__name__)


class RecordPayment:
    """
    Use Case: Record a (partial) payment

    Business Rules:
    1. The payment is prepended to the payments collection
    2. The transaction's amount_paid becomes its previous amount_paid plus
       the payment amount, and status is re-derived from the new figures
    3. No cap against total_amount is applied here; the caller must not
       submit more than the pending balance
    4. A payment whose transaction is missing is still recorded (logged)
    5. Payments and transactions are committed together

    Flow:
    1. Build and prepend the payment
    2. Locate the transaction and apply the amount
    3. Commit both collections
    """

    def __init__(
        self,
        uow: UnitOfWork,
        payment_repo: PaymentRepository,
        transaction_repo: TransactionRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.payment_repo = payment_repo
        self.transaction_repo = transaction_repo
        self.clock = clock

    async def execute(self, command: RecordPaymentCommandDTO) -> Result[RecordPaymentResponseDTO]:
        try:
            # Step 1: Record the payment
            payment = Payment(
                id=generate_uuid(),
                transaction_id=command.transaction_id,
                customer_id=command.customer_id,
                amount=command.amount,
                date=command.date or self.clock(),
                method=command.method,
                notes=command.notes,
            )

            payments = await self.payment_repo.get_all()
            payments.insert(0, payment)
            await self.payment_repo.save_all(payments)

            # Step 2: Apply it to the transaction
            transactions = await self.transaction_repo.get_all()
            index = next(
                (i for i, t in enumerate(transactions) if t.id == command.transaction_id), -1
            )

            updated_transaction = None
            if index == -1:
                logger.warning(
                    f"Payment {payment.id} references unknown transaction "
                    f"{command.transaction_id}; no balance updated"
                )
            else:
                transaction = transactions[index]
                new_amount_paid = transaction.amount_paid + payment.amount
                updated_transaction = transaction.model_copy(
                    update={
                        "amount_paid": new_amount_paid,
                        "status": derive_status(transaction.total_amount, new_amount_paid),
                    }
                )
                transactions[index] = updated_transaction
                await self.transaction_repo.save_all(transactions)

            # Step 3: Commit payments and transactions together
            await self.uow.commit()

            return Return.ok(
                RecordPaymentResponseDTO(payment=payment, transaction=updated_transaction)
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to record payment for transaction {command.transaction_id}: {e}")
            return Return.err(
                Error(
                    code="SAVE_FAILED",
                    message="Failed to record payment",
                    reason=str(e),
                )
            )
