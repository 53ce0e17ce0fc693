"""SQLAlchemy implementation of PaymentRepository"""

from src.adapter.repositories.collection_store import SqlAlchemyCollectionRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import Payment


class SqlAlchemyPaymentRepository(SqlAlchemyCollectionRepository[Payment], PaymentRepository):
    entity_type = Payment
    collection_name = "payments"
