"""Data Transfer Objects for Ledger Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from src.domain.analytics import CustomerStats
from src.domain.customer import Customer
from src.domain.payment import Payment, PaymentMethod
from src.domain.transaction import ProductItem, Transaction, TransactionStatus


class CreateCustomerCommandDTO(BaseModel):
    """
    Command DTO for adding a customer

    Used as input to AddCustomer. No uniqueness check is made on any field.
    """

    name: str = Field(..., description="Contact person's name")
    business_name: str = Field(default="", description="Company or business name")
    mobile: str = Field(default="", description="Phone or mobile number")
    email: str = Field(default="", description="Email address")
    address: str = Field(default="", description="Physical address")
    business_type: str = Field(default="", description="Type of business")
    card_image_uri: Optional[str] = Field(default=None, description="Scanned card image URI")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Asha Rao",
                "business_name": "Rao Traders",
                "mobile": "+91 98450 12345",
                "email": "asha@raotraders.in",
                "address": "12 MG Road, Bengaluru",
                "business_type": "Wholesale",
            }
        }
    )


class CustomerPatchDTO(BaseModel):
    """
    Partial update for a customer

    Only the fields explicitly set are merged into the stored record.
    """

    name: Optional[str] = None
    business_name: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    business_type: Optional[str] = None
    card_image_uri: Optional[str] = None


class CreateTransactionCommandDTO(BaseModel):
    """
    Command DTO for recording a sale

    status is taken as given when supplied; when omitted it is derived from
    total_amount and amount_paid.
    """

    customer_id: str = Field(..., description="Customer the sale belongs to")
    date: datetime = Field(..., description="Date of the sale")
    products: List[ProductItem] = Field(default_factory=list, description="Product lines")
    total_amount: Decimal = Field(..., ge=0, description="Sum of product totals")
    amount_paid: Decimal = Field(default=Decimal("0"), ge=0, description="Amount paid at the time of sale")
    status: Optional[TransactionStatus] = Field(default=None, description="Payment status")
    notes: Optional[str] = Field(default=None, description="Free-form notes")


class TransactionPatchDTO(BaseModel):
    """Partial update for a transaction"""

    date: Optional[datetime] = None
    products: Optional[List[ProductItem]] = None
    total_amount: Optional[Decimal] = Field(default=None, ge=0)
    amount_paid: Optional[Decimal] = Field(default=None, ge=0)
    notes: Optional[str] = None


class RecordPaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a payment against a transaction

    The caller is responsible for keeping amount within the pending balance.
    """

    transaction_id: str = Field(..., description="Transaction being settled")
    customer_id: str = Field(..., description="Customer of the transaction")
    amount: Decimal = Field(..., gt=0, description="Amount received (must be > 0)")
    date: Optional[datetime] = Field(default=None, description="Payment date (defaults to now)")
    method: PaymentMethod = Field(default=PaymentMethod.CASH, description="Payment method")
    notes: Optional[str] = Field(default=None, description="Free-form notes")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "transaction_id": "8f3a0c2e9b7d4d11a1f0e6c2b5a9d301",
                "customer_id": "c41d2b7e0a5f4c39b8e1d6a2f7c3e910",
                "amount": "300.00",
                "method": "upi",
            }
        }
    )


class RecordPaymentResponseDTO(BaseModel):
    """Recorded payment and the transaction as it stands afterwards"""

    payment: Payment
    transaction: Optional[Transaction] = Field(
        default=None,
        description="Updated transaction, None when the referenced transaction does not exist"
    )


class CustomerDetailDTO(BaseModel):
    customer: Customer
    transactions: List[Transaction]
    payments: List[Payment]
    stats: CustomerStats


class TransactionDetailDTO(BaseModel):
    transaction: Transaction
    payments: List[Payment]


class LedgerIssueDTO(BaseModel):
    """One inconsistency found by reconciliation"""

    issue_type: str = Field(..., description="Kind of inconsistency")
    entity_id: str = Field(..., description="Transaction or payment id")
    customer_id: Optional[str] = None
    detail: str = Field(..., description="Human-readable explanation")


class ReconciliationResultDTO(BaseModel):
    transactions_checked: int
    payments_checked: int
    issues_found: int
    issues: List[LedgerIssueDTO]
    reconciliation_time: datetime
    execution_time_ms: int


class ReminderRunResultDTO(BaseModel):
    candidates: int = Field(..., description="Overdue-eligible transactions considered")
    sent: int = Field(..., description="Reminders delivered")
    skipped: int = Field(..., description="Reminders not sent (missing customer or failed delivery)")
