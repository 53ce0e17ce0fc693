"""Transaction Domain Entity

One sales event for a customer, with its product lines and payment progress.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid, utc_now

PATCHABLE_FIELDS = frozenset({"date", "products", "total_amount", "amount_paid", "notes"})


class TransactionStatus(str, Enum):
    """Payment status of a transaction"""
    PAID = "paid"
    PARTIAL = "partial"
    PENDING = "pending"


def derive_status(total_amount: Decimal, amount_paid: Decimal) -> TransactionStatus:
    """
    Three-way status rule shared by every path that changes amount_paid.

    paid when amount_paid >= total_amount, partial when some money was
    received, pending otherwise. A zero-total transaction counts as paid.
    """
    if amount_paid >= total_amount:
        return TransactionStatus.PAID
    if amount_paid > 0:
        return TransactionStatus.PARTIAL
    return TransactionStatus.PENDING


class ProductItem(BaseModel):
    """
    Product line embedded in a Transaction (value object, no identity)

    total must equal quantity * unit_price; producers compute it with
    ProductItem.create and nothing downstream re-validates it.
    """

    name: str = Field(description="Product name (aggregation key)")

    quantity: Decimal = Field(gt=0, description="Quantity sold (must be > 0)")

    unit_price: Decimal = Field(ge=0, description="Price per unit (must be >= 0)")

    total: Decimal = Field(description="quantity * unit_price")

    @classmethod
    def create(cls, name: str, quantity: Decimal, unit_price: Decimal) -> "ProductItem":
        quantity = Decimal(quantity)
        unit_price = Decimal(unit_price)
        return cls(name=name, quantity=quantity, unit_price=unit_price, total=quantity * unit_price)


class Transaction(BaseModel):
    """
    Transaction - One sale to a customer

    Domain Rules:
    - status is a pure function of amount_paid vs total_amount (see derive_status)
    - amount_paid and status are the only fields that change after creation
    - total_amount is the sum of product totals
    - Only removed through cascading customer deletion
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Unique transaction identifier"
    )

    customer_id: str = Field(description="Customer this sale belongs to")

    date: datetime = Field(description="Date of the sale")

    products: List[ProductItem] = Field(
        default_factory=list,
        description="Ordered product lines"
    )

    total_amount: Decimal = Field(description="Sum of product totals")

    amount_paid: Decimal = Field(
        default=Decimal("0"),
        description="Amount received so far"
    )

    status: TransactionStatus = Field(
        default=TransactionStatus.PENDING,
        description="Payment status (paid, partial, pending)"
    )

    notes: Optional[str] = Field(default=None, description="Free-form notes")

    created_at: datetime = Field(
        default_factory=utc_now,
        description="Transaction creation timestamp"
    )

    @property
    def pending_amount(self) -> Decimal:
        return self.total_amount - self.amount_paid

    def apply_patch(self, changes: Dict[str, Any]) -> "Transaction":
        """
        Merge a partial update into a validated copy

        Only date, products, total_amount, amount_paid and notes are patchable;
        None clears notes and is ignored for the rest. New products without an
        explicit total_amount recompute the total, and status is re-derived
        whenever the total or amount_paid changes.
        """
        applied = {
            field: value
            for field, value in changes.items()
            if field in PATCHABLE_FIELDS and (value is not None or field == "notes")
        }
        updated = Transaction.model_validate({**self.model_dump(), **applied})

        if "products" in applied and "total_amount" not in applied:
            total = sum((p.total for p in updated.products), Decimal("0"))
            updated = updated.model_copy(update={"total_amount": total})
            applied["total_amount"] = total

        if "total_amount" in applied or "amount_paid" in applied:
            updated = updated.model_copy(
                update={"status": derive_status(updated.total_amount, updated.amount_paid)}
            )
        return updated
