"""Pending Payment Reminder Worker

Sends reminders for the oldest outstanding balances, once a day by default.
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
from src.adapter.repositories.profile_repository import SqlAlchemyProfileRepository
from src.adapter.services.notification_service import create_notification_service
from src.app.use_cases.ledger import SendPendingReminders, ReminderRunResultDTO

logger = logging.getLogger(__name__)


class PendingPaymentNotifierWorker:
    """
    Background worker for pending payment reminders

    Usage:
        worker = PendingPaymentNotifierWorker()
        await worker.run_once()
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        webhook_url: Optional[str] = None,
        limit: Optional[int] = None,
    ):
        """
        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            webhook_url: Notification webhook URL (defaults to config)
            limit: Maximum reminders per run (defaults to PENDING_REMINDER_LIMIT)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.webhook_url = webhook_url or ApplicationConfig.NOTIFICATION_WEBHOOK
        self.limit = limit or ApplicationConfig.PENDING_REMINDER_LIMIT

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        self.notification_service = create_notification_service(self.webhook_url)

        logger.info(f"PendingPaymentNotifierWorker initialized with limit={self.limit}")

    async def run_once(self) -> ReminderRunResultDTO:
        """
        Send one batch of reminders

        Returns:
            ReminderRunResultDTO (all zero when notifications are disabled
            or the run failed)
        """
        if not ApplicationConfig.NOTIFICATIONS_ENABLED:
            logger.info("Notifications are disabled, skipping")
            return ReminderRunResultDTO(candidates=0, sent=0, skipped=0)

        async with self.async_session_factory() as session:
            use_case = SendPendingReminders(
                customer_repo=SqlAlchemyCustomerRepository(session),
                transaction_repo=SqlAlchemyTransactionRepository(session),
                profile_repo=SqlAlchemyProfileRepository(session),
                notification_service=self.notification_service,
                limit=self.limit,
                grace_days=ApplicationConfig.PENDING_REMINDER_GRACE_DAYS,
            )

            result = await use_case.execute()

            if result.is_err():
                logger.error(f"Reminder run failed: {result.error.message}")
                return ReminderRunResultDTO(candidates=0, sent=0, skipped=0)

            return result.value

    async def run_forever(self, interval_seconds: Optional[int] = None):
        interval_seconds = interval_seconds or ApplicationConfig.PENDING_REMINDER_INTERVAL_SECONDS
        logger.info(f"Starting pending payment reminders with {interval_seconds}s interval")

        while True:
            try:
                result = await self.run_once()
                logger.info(f"Reminder cycle complete. Sent {result.sent} of {result.candidates}")
            except Exception as e:
                logger.error(f"Reminder cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("PendingPaymentNotifierWorker shutdown complete")


async def main():
    """
    Usage:
        python -m src.worker.pending_payment_notifier --once
    """
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    worker = PendingPaymentNotifierWorker()

    if "--once" in sys.argv:
        result = await worker.run_once()
        print(f"Reminders sent: {result.sent} of {result.candidates} candidates.")
        await worker.shutdown()
    else:
        try:
            await worker.run_forever()
        except KeyboardInterrupt:
            logger.info("Received shutdown signal")
        finally:
            await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
