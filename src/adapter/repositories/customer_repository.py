"""SQLAlchemy implementation of CustomerRepository"""

from src.adapter.repositories.collection_store import SqlAlchemyCollectionRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer


class SqlAlchemyCustomerRepository(SqlAlchemyCollectionRepository[Customer], CustomerRepository):
    entity_type = Customer
    collection_name = "customers"
