"""Request schemas for the Ledger API

Pydantic models validating incoming HTTP requests. Input checks that the
ledger itself does not perform (required names, amounts within the pending
balance) live here.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from src.domain.payment import PaymentMethod
from src.domain.transaction import ProductItem


class CustomerRequestSchema(BaseModel):
    """
    Request schema for creating a customer

    Used for POST /customers.
    """

    name: str = Field(..., min_length=1, description="Contact name (required, non-empty)")
    business_name: str = Field(default="", description="Company or business name")
    mobile: str = Field(default="", description="Phone or mobile number")
    email: str = Field(default="", description="Email address")
    address: str = Field(default="", description="Physical address")
    business_type: str = Field(default="", description="Type of business")
    card_image_uri: Optional[str] = Field(default=None, description="Scanned card image URI")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

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


class CustomerUpdateSchema(BaseModel):
    """Request schema for PATCH /customers/{id}; omitted fields are left unchanged"""

    name: Optional[str] = Field(default=None, min_length=1)
    business_name: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    business_type: Optional[str] = None
    card_image_uri: Optional[str] = None

    @field_validator("name", "business_name", "mobile", "email", "address", "business_type")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class ProductItemSchema(BaseModel):
    name: str = Field(..., min_length=1, description="Product name")
    quantity: Decimal = Field(..., gt=0, description="Quantity (must be > 0)")
    unit_price: Decimal = Field(..., ge=0, description="Unit price (must be >= 0)")

    def to_domain(self) -> ProductItem:
        return ProductItem.create(self.name.strip(), self.quantity, self.unit_price)


class TransactionRequestSchema(BaseModel):
    """
    Request schema for recording a sale

    Used for POST /transactions. total_amount is computed from the products.
    """

    customer_id: str = Field(..., min_length=1, description="Customer identifier")
    date: Optional[datetime] = Field(default=None, description="Sale date (defaults to now)")
    products: List[ProductItemSchema] = Field(..., min_length=1, description="At least one product")
    amount_paid: Decimal = Field(default=Decimal("0"), ge=0, description="Amount paid at the time of sale")
    notes: Optional[str] = Field(default=None, description="Free-form notes")

    @property
    def total_amount(self) -> Decimal:
        return sum((p.quantity * p.unit_price for p in self.products), Decimal("0"))

    @model_validator(mode="after")
    def validate_amount_paid(self):
        if self.amount_paid > self.total_amount:
            raise ValueError("Amount paid cannot exceed total amount")
        return self


class TransactionUpdateSchema(BaseModel):
    """Request schema for PATCH /transactions/{id}"""

    date: Optional[datetime] = None
    products: Optional[List[ProductItemSchema]] = Field(default=None, min_length=1)
    amount_paid: Optional[Decimal] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @field_validator("date", "products", "amount_paid")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class PaymentRequestSchema(BaseModel):
    """
    Request schema for recording a payment

    Used for POST /transactions/{id}/payments. The route rejects amounts
    above the transaction's pending balance.
    """

    amount: Decimal = Field(..., gt=0, description="Amount received (must be > 0)")
    method: PaymentMethod = Field(default=PaymentMethod.CASH, description="cash, upi, bank or other")
    date: Optional[datetime] = Field(default=None, description="Payment date (defaults to now)")
    notes: Optional[str] = Field(default=None, description="Free-form notes")


class ProfileRequestSchema(BaseModel):
    name: str = Field(default="", description="Owner's name")
    business_name: str = Field(default="", description="Owner's business name")
    currency: str = Field(default="INR", min_length=3, max_length=3, description="ISO 4217 code")

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        return v.upper()


class ScanCardRequestSchema(BaseModel):
    image_base64: str = Field(..., min_length=1, description="JPEG image, base64 encoded")
