"""Pending Payment Reminder

Value object describing an outstanding balance worth reminding the owner about.
"""

from decimal import Decimal
from sqlmodel import Field
from src.domain.base import BaseModel


class PendingPaymentReminder(BaseModel):
    transaction_id: str = Field(description="Transaction with an outstanding balance")
    customer_id: str = Field(description="Customer who owes the balance")
    customer_name: str = Field(description="Customer name shown in the reminder")
    pending_amount: Decimal = Field(description="total_amount - amount_paid")
    days_overdue: int = Field(description="Days past the grace period (<= 0 when not yet overdue)")
    currency: str = Field(default="INR", description="Currency code for display")

    @property
    def title(self) -> str:
        return "Pending Payment"

    @property
    def message(self) -> str:
        amount = f"{self.currency} {self.pending_amount}"
        if self.days_overdue > 0:
            return f"Payment overdue by {self.days_overdue} days from {self.customer_name}: {amount}"
        return f"Pending payment from {self.customer_name}: {amount}"
