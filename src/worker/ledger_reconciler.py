"""Ledger reconciliation worker

Scans the stored collections for balances and references that no longer
agree: stale statuses, overpayments, orphaned payments and missing customers.
Nothing is repaired; findings are logged for the owner to correct.
"""

import asyncio
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.app.use_cases.ledger import ReconcileLedger, ReconciliationResultDTO
from src.domain.base import utc_now

logger = logging.getLogger(__name__)


def describe(result: ReconciliationResultDTO) -> str:
    """One-line summary of a reconciliation pass"""
    return (
        f"{result.transactions_checked} transactions, {result.payments_checked} payments, "
        f"{result.issues_found} issue(s), {result.execution_time_ms}ms"
    )


class LedgerReconcilerWorker:
    """
    Periodic read-only check of the customer, transaction and payment collections

    Usage:
        worker = LedgerReconcilerWorker()
        result = await worker.run_once()
    """

    def __init__(self, db_uri: Optional[str] = None):
        self.db_uri = db_uri or ApplicationConfig.DB_URI

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.debug(f"Ledger reconciler bound to {self.db_uri}")

    async def run_once(self) -> ReconciliationResultDTO:
        """
        Reconcile the ledger once

        Returns an empty result without opening a session when
        RECONCILIATION_ENABLED is off.

        Raises:
            RuntimeError: the reconciliation use case returned an error
        """
        if not ApplicationConfig.RECONCILIATION_ENABLED:
            logger.info("RECONCILIATION_ENABLED is off, nothing to do")
            return ReconciliationResultDTO(
                transactions_checked=0,
                payments_checked=0,
                issues_found=0,
                issues=[],
                reconciliation_time=utc_now(),
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            outcome = await ReconcileLedger(
                customer_repo=SqlAlchemyCustomerRepository(session),
                transaction_repo=SqlAlchemyTransactionRepository(session),
                payment_repo=SqlAlchemyPaymentRepository(session),
            ).execute()

        if outcome.is_err():
            raise RuntimeError(f"Ledger reconciliation error [{outcome.error.code}]: {outcome.error.message}")

        report = outcome.value
        if report.issues_found:
            logger.error(f"ALERT: ledger has {report.issues_found} inconsistent record(s)")
            for issue in report.issues:
                logger.warning(f"{issue.issue_type} {issue.entity_id}: {issue.detail}")

        return report

    async def run_forever(self, interval_seconds: Optional[int] = None):
        """Reconcile every interval_seconds until cancelled; a failed pass does not stop the loop"""
        interval_seconds = interval_seconds or ApplicationConfig.RECONCILIATION_INTERVAL_SECONDS
        logger.info(f"Reconciling the ledger every {interval_seconds}s")

        while True:
            try:
                report = await self.run_once()
                logger.info(f"Reconciliation pass: {describe(report)}")
            except Exception as e:
                logger.error(f"Reconciliation pass aborted: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        await self.engine.dispose()
        logger.info("Ledger reconciler stopped")


async def main():
    """
    python -m src.worker.ledger_reconciler --once
    python -m src.worker.ledger_reconciler --interval 3600
    """
    import argparse

    logging.basicConfig(
        level=getattr(logging, str(ApplicationConfig.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Check the CardVault ledger for inconsistencies")
    parser.add_argument("--once", action="store_true", help="Single pass, then exit")
    parser.add_argument(
        "--interval", type=int, default=None,
        help="Seconds between passes (default: RECONCILIATION_INTERVAL_SECONDS)"
    )
    options = parser.parse_args()

    reconciler = LedgerReconcilerWorker()
    try:
        if options.once:
            report = await reconciler.run_once()
            print(describe(report))
            for issue in report.issues:
                print(f"  {issue.issue_type:<22} {issue.entity_id}  {issue.detail}")
        else:
            await reconciler.run_forever(interval_seconds=options.interval)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        await reconciler.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
