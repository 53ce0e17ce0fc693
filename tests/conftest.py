import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.domain.customer import Customer
from src.domain.payment import Payment
from src.domain.transaction import ProductItem, Transaction, derive_status


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def make_customer():
    def _make(customer_id: str, name: str = "Customer", **fields) -> Customer:
        return Customer(id=customer_id, name=name, **fields)
    return _make


@pytest.fixture
def make_transaction():
    """
    Transaction factory

    products is a list of (name, quantity, unit_price); total_amount defaults
    to the sum of the product totals and status is derived unless given.
    """
    def _make(
        transaction_id: str,
        customer_id: str,
        date: datetime,
        products=None,
        total_amount=None,
        amount_paid="0",
        status=None,
    ) -> Transaction:
        items = [
            ProductItem.create(name, Decimal(str(quantity)), Decimal(str(price)))
            for name, quantity, price in (products or [])
        ]
        total = Decimal(str(total_amount)) if total_amount is not None else sum(
            (p.total for p in items), Decimal("0")
        )
        paid = Decimal(str(amount_paid))
        return Transaction(
            id=transaction_id,
            customer_id=customer_id,
            date=date,
            products=items,
            total_amount=total,
            amount_paid=paid,
            status=status or derive_status(total, paid),
        )
    return _make


@pytest.fixture
def make_payment():
    def _make(payment_id: str, transaction_id: str, customer_id: str, amount, date: datetime) -> Payment:
        return Payment(
            id=payment_id,
            transaction_id=transaction_id,
            customer_id=customer_id,
            amount=Decimal(str(amount)),
            date=date,
        )
    return _make
