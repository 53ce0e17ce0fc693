"""Ledger Analytics

Pure aggregation functions over customer and transaction snapshots.

Every function recomputes its view from the collections it is given, never
mutates them, and takes an optional ``now`` so month bucketing is
deterministic. Month numbers are 1-12. Ties in every ranking keep the order
in which entries were first accumulated.
"""

import calendar
from collections import OrderedDict
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from pydantic import BaseModel, Field
from src.domain.base import to_naive_utc, utc_now
from src.domain.customer import Customer
from src.domain.transaction import Transaction, TransactionStatus

ZERO = Decimal("0")
CUSTOMER_TOP_PRODUCTS = 5


class TopCustomer(BaseModel):
    customer: Optional[Customer] = None
    amount: Decimal = ZERO


class DashboardStats(BaseModel):
    """Headline numbers for the home screen"""

    total_customers: int = Field(..., description="Number of customers")
    this_month_revenue: Decimal = Field(..., description="Sales total for the current calendar month")
    pending_collections: Decimal = Field(..., description="Outstanding amount across all transactions")
    top_customer: TopCustomer = Field(..., description="Best customer this month")


class RankedCustomer(BaseModel):
    customer: Customer
    rank: int
    total_amount: Decimal
    transaction_count: int


class ProductQuantity(BaseModel):
    name: str
    quantity: Decimal


class CustomerStats(BaseModel):
    """Lifetime totals for a single customer"""

    total_purchased: Decimal
    amount_paid: Decimal
    amount_pending: Decimal
    transaction_count: int
    top_products: List[ProductQuantity] = Field(default_factory=list)


class RevenueChartData(BaseModel):
    labels: List[str]
    data: List[Decimal]


class PaymentStatusData(BaseModel):
    collected: Decimal
    pending: Decimal


class ProductSales(BaseModel):
    name: str
    quantity: Decimal
    revenue: Decimal


class LedgerSummary(BaseModel):
    """Totals shared by the dashboard and the exported reports"""

    total_revenue: Decimal
    collected: Decimal
    pending: Decimal
    collection_rate: Decimal = Field(..., description="collected / revenue as a percentage, 0 without revenue")
    transaction_count: int
    status_counts: Dict[TransactionStatus, int]


def _current(now: Optional[datetime]) -> datetime:
    return to_naive_utc(now) if now is not None else utc_now()


def _in_month(transaction: Transaction, year: int, month: int) -> bool:
    tx_date = to_naive_utc(transaction.date)
    return tx_date.year == year and tx_date.month == month


def _in_range(
    transaction: Transaction,
    start_date: Optional[datetime],
    end_date: Optional[datetime],
) -> bool:
    tx_date = to_naive_utc(transaction.date)
    if start_date is not None and tx_date < to_naive_utc(start_date):
        return False
    if end_date is not None and tx_date > to_naive_utc(end_date):
        return False
    return True


def _filter_range(
    transactions: Iterable[Transaction],
    start_date: Optional[datetime],
    end_date: Optional[datetime],
) -> List[Transaction]:
    return [t for t in transactions if _in_range(t, start_date, end_date)]


def _shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    shifted_year, month_index = divmod(year * 12 + (month - 1) + offset, 12)
    return shifted_year, month_index + 1


def month_label(month: int) -> str:
    return calendar.month_abbr[month]


def get_dashboard_stats(
    customers: Sequence[Customer],
    transactions: Sequence[Transaction],
    now: Optional[datetime] = None,
) -> DashboardStats:
    current = _current(now)
    this_month = [t for t in transactions if _in_month(t, current.year, current.month)]

    this_month_revenue = sum((t.total_amount for t in this_month), ZERO)
    pending_collections = sum((t.total_amount - t.amount_paid for t in transactions), ZERO)

    customer_totals: "OrderedDict[str, Decimal]" = OrderedDict()
    for t in this_month:
        customer_totals[t.customer_id] = customer_totals.get(t.customer_id, ZERO) + t.total_amount

    # Strictly greater keeps the first customer seen on ties
    top_customer_id = None
    top_amount = ZERO
    for customer_id, amount in customer_totals.items():
        if amount > top_amount:
            top_amount = amount
            top_customer_id = customer_id

    top_customer = next((c for c in customers if c.id == top_customer_id), None)

    return DashboardStats(
        total_customers=len(customers),
        this_month_revenue=this_month_revenue,
        pending_collections=pending_collections,
        top_customer=TopCustomer(customer=top_customer, amount=top_amount),
    )


def get_monthly_rankings(
    customers: Sequence[Customer],
    transactions: Sequence[Transaction],
    month: Optional[int] = None,
    year: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[RankedCustomer]:
    current = _current(now)
    target_month = month if month is not None else current.month
    target_year = year if year is not None else current.year

    totals: "OrderedDict[str, List]" = OrderedDict()
    for t in transactions:
        if not _in_month(t, target_year, target_month):
            continue
        entry = totals.setdefault(t.customer_id, [ZERO, 0])
        entry[0] += t.total_amount
        entry[1] += 1

    customers_by_id = {c.id: c for c in customers}
    rankings = [
        RankedCustomer(
            customer=customers_by_id[customer_id],
            rank=0,
            total_amount=total_amount,
            transaction_count=count,
        )
        for customer_id, (total_amount, count) in totals.items()
        if customer_id in customers_by_id
    ]

    # sorted() is stable with reverse=True, so ties keep accumulation order
    rankings = sorted(rankings, key=lambda r: r.total_amount, reverse=True)
    for index, ranked in enumerate(rankings):
        ranked.rank = index + 1
    return rankings


def get_customer_stats(customer_id: str, transactions: Sequence[Transaction]) -> CustomerStats:
    customer_transactions = [t for t in transactions if t.customer_id == customer_id]

    total_purchased = sum((t.total_amount for t in customer_transactions), ZERO)
    amount_paid = sum((t.amount_paid for t in customer_transactions), ZERO)

    product_counts: "OrderedDict[str, Decimal]" = OrderedDict()
    for t in customer_transactions:
        for product in t.products:
            product_counts[product.name] = product_counts.get(product.name, ZERO) + product.quantity

    top_products = sorted(
        (ProductQuantity(name=name, quantity=quantity) for name, quantity in product_counts.items()),
        key=lambda p: p.quantity,
        reverse=True,
    )

    return CustomerStats(
        total_purchased=total_purchased,
        amount_paid=amount_paid,
        amount_pending=total_purchased - amount_paid,
        transaction_count=len(customer_transactions),
        top_products=top_products[:CUSTOMER_TOP_PRODUCTS],
    )


def get_revenue_chart_data(
    transactions: Sequence[Transaction],
    months: int = 6,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> RevenueChartData:
    """
    Monthly revenue for the trailing ``months`` calendar months, oldest first.

    The date range only applies when both bounds are given; a transaction must
    then fall in its month bucket and inside the range.
    """
    current = _current(now)
    use_range = start_date is not None and end_date is not None
    labels: List[str] = []
    data: List[Decimal] = []

    for offset in range(months - 1, -1, -1):
        year, month = _shift_month(current.year, current.month, -offset)
        labels.append(month_label(month))
        data.append(
            sum(
                (
                    t.total_amount
                    for t in transactions
                    if _in_month(t, year, month)
                    and (not use_range or _in_range(t, start_date, end_date))
                ),
                ZERO,
            )
        )

    return RevenueChartData(labels=labels, data=data)


def get_payment_status_data(
    transactions: Sequence[Transaction],
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> PaymentStatusData:
    filtered = _filter_range(transactions, start_date, end_date)
    return PaymentStatusData(
        collected=sum((t.amount_paid for t in filtered), ZERO),
        pending=sum((t.total_amount - t.amount_paid for t in filtered), ZERO),
    )


def get_top_products(
    transactions: Sequence[Transaction],
    limit: int = 5,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> List[ProductSales]:
    product_stats: "OrderedDict[str, List[Decimal]]" = OrderedDict()
    for t in _filter_range(transactions, start_date, end_date):
        for product in t.products:
            entry = product_stats.setdefault(product.name, [ZERO, ZERO])
            entry[0] += product.quantity
            entry[1] += product.total

    products = sorted(
        (
            ProductSales(name=name, quantity=quantity, revenue=revenue)
            for name, (quantity, revenue) in product_stats.items()
        ),
        key=lambda p: p.revenue,
        reverse=True,
    )
    return products[:limit]


def get_ledger_summary(transactions: Sequence[Transaction]) -> LedgerSummary:
    split = get_payment_status_data(transactions)
    total_revenue = sum((t.total_amount for t in transactions), ZERO)
    collection_rate = (split.collected / total_revenue * 100) if total_revenue > 0 else ZERO

    status_counts = {status: 0 for status in TransactionStatus}
    for t in transactions:
        status_counts[TransactionStatus(t.status)] += 1

    return LedgerSummary(
        total_revenue=total_revenue,
        collected=split.collected,
        pending=split.pending,
        collection_rate=collection_rate,
        transaction_count=len(transactions),
        status_counts=status_counts,
    )
