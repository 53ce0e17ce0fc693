"""ReconcileLedger Use Case

Scans the collections for inconsistencies a partial write or a buggy caller
could leave behind.
"""

import logging
import time
from enum import Enum
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.base import utc_now
from src.domain.transaction import TransactionStatus, derive_status
from .dtos import LedgerIssueDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class LedgerIssueType(str, Enum):
    STATUS_MISMATCH = "status_mismatch"            # status disagrees with amounts
    OVERPAID = "overpaid"                          # amount_paid > total_amount
    MISSING_TRANSACTION = "missing_transaction"    # payment for an unknown transaction
    CUSTOMER_MISMATCH = "customer_mismatch"        # payment.customer_id != transaction.customer_id
    MISSING_CUSTOMER = "missing_customer"          # orphaned transaction or payment


class ReconcileLedger:
    """
    Use Case: Reconcile transactions and payments

    Business Rules:
    1. Read-only: nothing is repaired, issues are reported and logged
    2. Each transaction's status must equal derive_status(total, paid)
    3. amount_paid must not exceed total_amount
    4. Every payment must reference an existing transaction of the same customer
    5. Every transaction and payment must reference an existing customer
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
        payment_repo: PaymentRepository,
    ):
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo
        self.payment_repo = payment_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        start_time = time.time()
        reconciliation_time = utc_now()

        try:
            logger.info("Starting ledger reconciliation")

            customers = await self.customer_repo.get_all()
            transactions = await self.transaction_repo.get_all()
            payments = await self.payment_repo.get_all()

            customer_ids = {c.id for c in customers}
            transactions_by_id = {t.id: t for t in transactions}
            issues: List[LedgerIssueDTO] = []

            for t in transactions:
                expected = derive_status(t.total_amount, t.amount_paid)
                if TransactionStatus(t.status) != expected:
                    issues.append(
                        LedgerIssueDTO(
                            issue_type=LedgerIssueType.STATUS_MISMATCH.value,
                            entity_id=t.id,
                            customer_id=t.customer_id,
                            detail=f"status={TransactionStatus(t.status).value}, expected={expected.value}",
                        )
                    )
                if t.amount_paid > t.total_amount:
                    issues.append(
                        LedgerIssueDTO(
                            issue_type=LedgerIssueType.OVERPAID.value,
                            entity_id=t.id,
                            customer_id=t.customer_id,
                            detail=f"amount_paid={t.amount_paid}, total_amount={t.total_amount}",
                        )
                    )
                if t.customer_id not in customer_ids:
                    issues.append(
                        LedgerIssueDTO(
                            issue_type=LedgerIssueType.MISSING_CUSTOMER.value,
                            entity_id=t.id,
                            customer_id=t.customer_id,
                            detail="transaction references a customer that does not exist",
                        )
                    )

            for p in payments:
                transaction = transactions_by_id.get(p.transaction_id)
                if transaction is None:
                    issues.append(
                        LedgerIssueDTO(
                            issue_type=LedgerIssueType.MISSING_TRANSACTION.value,
                            entity_id=p.id,
                            customer_id=p.customer_id,
                            detail=f"transaction {p.transaction_id} does not exist",
                        )
                    )
                elif transaction.customer_id != p.customer_id:
                    issues.append(
                        LedgerIssueDTO(
                            issue_type=LedgerIssueType.CUSTOMER_MISMATCH.value,
                            entity_id=p.id,
                            customer_id=p.customer_id,
                            detail=f"transaction {transaction.id} belongs to {transaction.customer_id}",
                        )
                    )
                if p.customer_id not in customer_ids:
                    issues.append(
                        LedgerIssueDTO(
                            issue_type=LedgerIssueType.MISSING_CUSTOMER.value,
                            entity_id=p.id,
                            customer_id=p.customer_id,
                            detail="payment references a customer that does not exist",
                        )
                    )

            for issue in issues:
                logger.warning(f"Ledger issue {issue.issue_type} on {issue.entity_id}: {issue.detail}")

            execution_time_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"Reconciliation complete. {len(issues)} issue(s) across "
                f"{len(transactions)} transactions and {len(payments)} payments in {execution_time_ms}ms"
            )

            return Return.ok(
                ReconciliationResultDTO(
                    transactions_checked=len(transactions),
                    payments_checked=len(payments),
                    issues_found=len(issues),
                    issues=issues,
                    reconciliation_time=reconciliation_time,
                    execution_time_ms=execution_time_ms,
                )
            )

        except Exception as e:
            logger.error(f"Ledger reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile ledger",
                    reason=str(e),
                )
            )
