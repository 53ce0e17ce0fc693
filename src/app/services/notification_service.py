"""Notification Service Interface

Defines the contract for delivering pending payment reminders.
"""

from abc import ABC, abstractmethod
from src.domain.pending_reminder import PendingPaymentReminder


class NotificationService(ABC):
    """
    Abstract notification service for payment reminders

    Implementations can deliver via:
    - Application log
    - Webhook (HTTP POST)
    - Several channels at once
    """

    @abstractmethod
    async def send_pending_payment_reminder(self, reminder: PendingPaymentReminder) -> bool:
        """
        Deliver a reminder

        Args:
            reminder: Outstanding balance to remind about

        Returns:
            True if delivered, False otherwise
        """
        pass
