"""SendPendingReminders Use Case

Reminds the owner about the oldest outstanding balances.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.repositories.profile_repository import ProfileRepository
from src.app.services.notification_service import NotificationService
from src.domain.base import to_naive_utc, utc_now
from src.domain.pending_reminder import PendingPaymentReminder
from .dtos import ReminderRunResultDTO

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class SendPendingReminders:
    """
    Use Case: Send pending payment reminders

    Business Rules:
    1. Candidates are transactions with total_amount > amount_paid dated before now
    2. Only the first `limit` candidates (collection order) are considered
    3. days_overdue = whole days since the sale minus the grace period
    4. Candidates whose customer no longer exists are skipped
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
        profile_repo: ProfileRepository,
        notification_service: NotificationService,
        limit: int = 3,
        grace_days: int = 30,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo
        self.profile_repo = profile_repo
        self.notification_service = notification_service
        self.limit = limit
        self.grace_days = grace_days
        self.clock = clock

    async def execute(self) -> Result[ReminderRunResultDTO]:
        try:
            now = self.clock()
            transactions = await self.transaction_repo.get_all()
            customers = {c.id: c for c in await self.customer_repo.get_all()}
            profile = await self.profile_repo.get()

            candidates = [
                t for t in transactions
                if t.total_amount > t.amount_paid and to_naive_utc(t.date) < now
            ][: self.limit]

            sent = 0
            for t in candidates:
                customer = customers.get(t.customer_id)
                if customer is None:
                    continue

                days_since = int((now - to_naive_utc(t.date)).total_seconds() // SECONDS_PER_DAY)
                reminder = PendingPaymentReminder(
                    transaction_id=t.id,
                    customer_id=customer.id,
                    customer_name=customer.name,
                    pending_amount=t.total_amount - t.amount_paid,
                    days_overdue=days_since - self.grace_days,
                    currency=profile.currency,
                )
                if await self.notification_service.send_pending_payment_reminder(reminder):
                    sent += 1

            logger.info(f"Pending payment reminders: {sent} sent of {len(candidates)} candidates")
            return Return.ok(
                ReminderRunResultDTO(
                    candidates=len(candidates),
                    sent=sent,
                    skipped=len(candidates) - sent,
                )
            )

        except Exception as e:
            logger.error(f"Pending payment reminders failed: {e}")
            return Return.err(
                Error(
                    code="NOTIFICATION_FAILED",
                    message="Failed to send pending payment reminders",
                    reason=str(e),
                )
            )
