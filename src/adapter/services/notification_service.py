"""Notification Service Implementations

Delivers pending payment reminders to the log and/or a webhook.
"""

import logging
from typing import Optional
import httpx
from src.app.services.notification_service import NotificationService
from src.domain.pending_reminder import PendingPaymentReminder

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """
    Notification service that logs reminders

    Default channel, and the fallback when no webhook is configured.
    """

    async def send_pending_payment_reminder(self, reminder: PendingPaymentReminder) -> bool:
        logger.warning(
            f"[{reminder.title.upper()}] {reminder.message} "
            f"(customer={reminder.customer_id}, transaction={reminder.transaction_id})"
        )
        return True


class WebhookNotificationService(NotificationService):
    """
    Notification service that posts reminders to an HTTP webhook

    Sends a JSON payload to the configured URL.
    """

    def __init__(self, webhook_url: str, timeout: float = 10.0):
        """
        Args:
            webhook_url: URL to POST reminders to
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def send_pending_payment_reminder(self, reminder: PendingPaymentReminder) -> bool:
        """
        Returns:
            True if the webhook answered with a success status, False otherwise
        """
        payload = {
            "type": "pending_payment",
            "title": reminder.title,
            "body": reminder.message,
            "transaction_id": reminder.transaction_id,
            "customer_id": reminder.customer_id,
            "customer_name": reminder.customer_name,
            "pending_amount": str(reminder.pending_amount),
            "currency": reminder.currency,
            "days_overdue": reminder.days_overdue,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
                logger.info(
                    f"Reminder for transaction {reminder.transaction_id} sent to {self.webhook_url}"
                )
                return True
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to send reminder for transaction {reminder.transaction_id}: {e}"
            )
            return False


class CompositeNotificationService(NotificationService):
    """Delivers to several channels; succeeds if any channel does"""

    def __init__(self, services: list[NotificationService]):
        self.services = services

    async def send_pending_payment_reminder(self, reminder: PendingPaymentReminder) -> bool:
        success = False
        for service in self.services:
            try:
                if await service.send_pending_payment_reminder(reminder):
                    success = True
            except Exception as e:
                logger.error(f"Notification service {type(service).__name__} failed: {e}")
        return success


def create_notification_service(webhook_url: Optional[str] = None) -> NotificationService:
    """
    Build the reminder channel(s)

    Args:
        webhook_url: Optional webhook URL. When given, reminders go to the log
                     and the webhook; otherwise only to the log.
    """
    services: list[NotificationService] = [LoggingNotificationService()]

    if webhook_url:
        services.append(WebhookNotificationService(webhook_url))

    if len(services) == 1:
        return services[0]

    return CompositeNotificationService(services)
