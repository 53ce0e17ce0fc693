"""Payment Domain Entity

A partial or full settlement recorded against a transaction.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid


class PaymentMethod(str, Enum):
    """How the money was received"""
    CASH = "cash"
    UPI = "upi"
    BANK = "bank"
    OTHER = "other"


class Payment(BaseModel):
    """
    Payment - Settlement against a transaction

    Domain Rules:
    - Immutable once recorded (no update or delete)
    - customer_id is a denormalized copy of the transaction's customer
    - Sum of payments for a transaction should not exceed its total_amount;
      the caller enforces this before recording
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Unique payment identifier"
    )

    transaction_id: str = Field(description="Transaction being settled")

    customer_id: str = Field(description="Customer of the settled transaction")

    amount: Decimal = Field(gt=0, description="Amount received (must be > 0)")

    date: datetime = Field(description="Date the payment was received")

    method: PaymentMethod = Field(
        default=PaymentMethod.CASH,
        description="Payment method (cash, upi, bank, other)"
    )

    notes: Optional[str] = Field(default=None, description="Free-form notes")
