"""Fields extracted from a photographed business card"""

from sqlmodel import Field
from src.domain.base import BaseModel

CARD_FIELDS = ("name", "business_name", "mobile", "email", "address", "business_type")


class ExtractedCardData(BaseModel):
    """
    Best-effort guess of a card's contact fields

    Every field is always present; unknown values are empty strings so the
    user can correct them before a Customer is created.
    """

    name: str = Field(default="")
    business_name: str = Field(default="")
    mobile: str = Field(default="")
    email: str = Field(default="")
    address: str = Field(default="")
    business_type: str = Field(default="")
