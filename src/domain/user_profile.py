"""User Profile (singleton per installation)"""

from sqlmodel import Field
from src.domain.base import BaseModel

DEFAULT_CURRENCY = "INR"


class UserProfile(BaseModel):
    """Owner's name, business name and display currency"""

    name: str = Field(default="", description="Owner's name")

    business_name: str = Field(default="", description="Owner's business name")

    currency: str = Field(
        default=DEFAULT_CURRENCY,
        description="Currency code (ISO 4217)"
    )
