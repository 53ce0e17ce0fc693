"""Integration tests for the collection repositories on SQLite"""

import pytest
from datetime import datetime
from decimal import Decimal
from sqlalchemy import DateTime

from src.adapter.repositories.collection_store import CollectionRecord, SqlAlchemyCollectionStore
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.repositories.profile_repository import SqlAlchemyProfileRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.ledger import RecordPayment, RecordPaymentCommandDTO
from src.domain.transaction import TransactionStatus
from src.domain.user_profile import UserProfile


class TestCollectionRepositories:
    @pytest.mark.asyncio
    async def test_missing_collection_reads_empty(self, db_session):
        assert await SqlAlchemyCustomerRepository(db_session).get_all() == []
        assert await SqlAlchemyTransactionRepository(db_session).get_all() == []
        assert await SqlAlchemyPaymentRepository(db_session).get_all() == []

    @pytest.mark.asyncio
    async def test_save_and_reload_keeps_order_and_values(
        self, session_factory, make_customer, make_transaction
    ):
        async with session_factory() as session:
            await SqlAlchemyCustomerRepository(session).save_all(
                [make_customer("c2", "Ravi"), make_customer("c1", "Asha")]
            )
            await SqlAlchemyTransactionRepository(session).save_all(
                [make_transaction("t1", "c1", datetime(2024, 5, 2), products=[("Dal", 1.5, 99.99)], amount_paid="50")]
            )
            await SqlAlchemyUnitOfWork(session).commit()

        async with session_factory() as session:
            customers = await SqlAlchemyCustomerRepository(session).get_all()
            transactions = await SqlAlchemyTransactionRepository(session).get_all()

        assert [c.id for c in customers] == ["c2", "c1"]
        transaction = transactions[0]
        assert transaction.total_amount == Decimal("149.985")
        assert transaction.products[0].quantity == Decimal("1.5")
        assert transaction.status == TransactionStatus.PARTIAL
        assert transaction.date == datetime(2024, 5, 2)

    @pytest.mark.asyncio
    async def test_collection_keys_use_prefix(self, db_session):
        await SqlAlchemyCustomerRepository(db_session).save_all([])

        assert await db_session.get(CollectionRecord, "@cardvault/customers") is not None

    def test_updated_at_column_is_naive_datetime(self):
        column = CollectionRecord.__table__.c.updated_at

        assert isinstance(column.type, DateTime)
        assert column.type.timezone is False
        assert column.nullable is False

    @pytest.mark.asyncio
    async def test_rewrite_stores_naive_timestamp(self, db_session):
        store = SqlAlchemyCollectionStore(db_session)
        await store.put("@cardvault/payments", "[]")
        await store.put("@cardvault/payments", "[]")

        record = await db_session.get(CollectionRecord, "@cardvault/payments")
        assert record.updated_at.tzinfo is None

    @pytest.mark.asyncio
    async def test_corrupt_payload_reads_empty(self, db_session):
        store = SqlAlchemyCollectionStore(db_session)
        await store.put("@cardvault/transactions", "{not json")
        await store.put("@cardvault/customers", '[{"id": "c1", "created_at": "yesterday"}]')

        assert await SqlAlchemyTransactionRepository(db_session).get_all() == []
        assert await SqlAlchemyCustomerRepository(db_session).get_all() == []

    @pytest.mark.asyncio
    async def test_uncommitted_writes_are_rolled_back(self, session_factory, make_customer):
        async with session_factory() as session:
            await SqlAlchemyCustomerRepository(session).save_all([make_customer("c1")])
            await SqlAlchemyUnitOfWork(session).rollback()

        async with session_factory() as session:
            assert await SqlAlchemyCustomerRepository(session).get_all() == []


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_default_profile(self, db_session):
        profile = await SqlAlchemyProfileRepository(db_session).get()

        assert profile.name == ""
        assert profile.business_name == ""
        assert profile.currency == "INR"

    @pytest.mark.asyncio
    async def test_save_overwrites(self, session_factory):
        async with session_factory() as session:
            repo = SqlAlchemyProfileRepository(session)
            await repo.save(UserProfile(name="Asha", business_name="Rao Traders", currency="INR"))
            await repo.save(UserProfile(name="Asha", business_name="Rao & Sons", currency="USD"))
            await session.commit()

        async with session_factory() as session:
            profile = await SqlAlchemyProfileRepository(session).get()

        assert profile.business_name == "Rao & Sons"
        assert profile.currency == "USD"


class TestRecordPaymentOnSqlite:
    @pytest.mark.asyncio
    async def test_payment_and_balance_committed_together(self, session_factory, make_transaction):
        async with session_factory() as session:
            await SqlAlchemyTransactionRepository(session).save_all(
                [make_transaction("t2", "c1", datetime(2024, 5, 2), total_amount="500", amount_paid="200")]
            )
            await session.commit()

        async with session_factory() as session:
            use_case = RecordPayment(
                SqlAlchemyUnitOfWork(session),
                SqlAlchemyPaymentRepository(session),
                SqlAlchemyTransactionRepository(session),
            )
            result = await use_case.execute(
                RecordPaymentCommandDTO(transaction_id="t2", customer_id="c1", amount=Decimal("300"))
            )
            assert result.is_ok()

        async with session_factory() as session:
            transaction = await SqlAlchemyTransactionRepository(session).get_by_id("t2")
            payments = await SqlAlchemyPaymentRepository(session).get_by_transaction_id("t2")

        assert transaction.amount_paid == Decimal("500")
        assert transaction.status == TransactionStatus.PAID
        assert [p.amount for p in payments] == [Decimal("300")]
