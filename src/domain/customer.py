"""Customer Domain Entity

A business contact, usually captured from a photographed business card.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid, utc_now

# Fields a patch may set to None; None elsewhere means "leave unchanged"
NULLABLE_FIELDS = frozenset({"card_image_uri"})
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


class Customer(BaseModel):
    """
    Customer - Identity, contact and business metadata

    Domain Rules:
    - id is immutable once created
    - updated_at advances on every mutation
    - Deleting a customer cascades to its transactions and payments
    - No uniqueness is enforced on name or email (duplicates permitted)
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Unique customer identifier (opaque)"
    )

    name: str = Field(default="", description="Contact person's name")

    business_name: str = Field(default="", description="Company or business name")

    mobile: str = Field(default="", description="Phone or mobile number")

    email: str = Field(default="", description="Email address")

    address: str = Field(default="", description="Physical address")

    business_type: str = Field(
        default="",
        description="Type of business (e.g., Retail, Wholesale, Services)"
    )

    card_image_uri: Optional[str] = Field(
        default=None,
        description="URI of the scanned business card image"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        description="Customer creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        description="Last update timestamp"
    )

    def apply_patch(self, changes: Dict[str, Any], now: datetime) -> "Customer":
        """
        Merge a partial update into a validated copy and bump updated_at

        Raises pydantic.ValidationError if a merged value does not fit its field,
        so an invalid record is never handed back for storage.
        """
        merged = self.model_dump()
        for field, value in changes.items():
            if field in IMMUTABLE_FIELDS:
                continue
            if value is None and field not in NULLABLE_FIELDS:
                continue
            merged[field] = value
        merged["updated_at"] = now
        return Customer.model_validate(merged)
