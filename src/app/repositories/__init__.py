from .customer_repository import CustomerRepository
from .transaction_repository import TransactionRepository
from .payment_repository import PaymentRepository
from .profile_repository import ProfileRepository

__all__ = [
    "CustomerRepository",
    "TransactionRepository",
    "PaymentRepository",
    "ProfileRepository",
]
