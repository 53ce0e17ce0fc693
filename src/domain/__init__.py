from .base import BaseModel, generate_uuid, utc_now
from .customer import Customer
from .transaction import Transaction, TransactionStatus, ProductItem, derive_status
from .payment import Payment, PaymentMethod
from .user_profile import UserProfile

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utc_now",
    "Customer",
    "Transaction",
    "TransactionStatus",
    "ProductItem",
    "derive_status",
    "Payment",
    "PaymentMethod",
    "UserProfile",
]
