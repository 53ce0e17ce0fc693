"""SQLAlchemy implementation of TransactionRepository"""

from src.adapter.repositories.collection_store import SqlAlchemyCollectionRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction


class SqlAlchemyTransactionRepository(SqlAlchemyCollectionRepository[Transaction], TransactionRepository):
    entity_type = Transaction
    collection_name = "transactions"
