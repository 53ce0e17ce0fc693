from .collection_store import CollectionRecord, SqlAlchemyCollectionStore
from .customer_repository import SqlAlchemyCustomerRepository
from .transaction_repository import SqlAlchemyTransactionRepository
from .payment_repository import SqlAlchemyPaymentRepository
from .profile_repository import SqlAlchemyProfileRepository

__all__ = [
    "CollectionRecord",
    "SqlAlchemyCollectionStore",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyProfileRepository",
]
