"""Unit tests for ledger analytics

Tests cover:
- Dashboard stats for the current calendar month
- Monthly rankings order and rank numbering
- Per-customer stats and top products
- Revenue chart buckets and optional date range
- Payment status split and top products
- Ledger summary used by the reports
"""

import pytest
from datetime import datetime
from decimal import Decimal

from src.domain.analytics import (
    get_customer_stats,
    get_dashboard_stats,
    get_ledger_summary,
    get_monthly_rankings,
    get_payment_status_data,
    get_revenue_chart_data,
    get_top_products,
    month_label,
)
from src.domain.transaction import TransactionStatus

NOW = datetime(2024, 5, 20, 12, 0)


@pytest.fixture
def customers(make_customer):
    return [make_customer("c1", "Asha"), make_customer("c2", "Ravi"), make_customer("c3", "Meena")]


class TestCustomerStats:
    def test_lifetime_totals(self, make_transaction):
        """
        Given: C1 has T1 (1000 paid in full) and T2 (500, 200 paid)
        When: Stats are computed for C1
        Then: 1500 purchased, 1200 paid, 300 pending over 2 transactions
        """
        transactions = [
            make_transaction("t1", "c1", NOW, total_amount="1000", amount_paid="1000"),
            make_transaction("t2", "c1", NOW, total_amount="500", amount_paid="200"),
            make_transaction("t3", "c2", NOW, total_amount="999", amount_paid="0"),
        ]

        stats = get_customer_stats("c1", transactions)

        assert stats.total_purchased == Decimal("1500")
        assert stats.amount_paid == Decimal("1200")
        assert stats.amount_pending == Decimal("300")
        assert stats.transaction_count == 2

    def test_pending_equals_purchased_minus_paid(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", NOW, total_amount="10.25", amount_paid="3.10"),
            make_transaction("t2", "c1", NOW, total_amount="7", amount_paid="7"),
        ]

        stats = get_customer_stats("c1", transactions)

        assert stats.amount_pending == stats.total_purchased - stats.amount_paid

    def test_top_products_by_quantity_limited_to_five(self, make_transaction):
        transactions = [
            make_transaction(
                "t1", "c1", NOW,
                products=[("A", 1, 100), ("B", 6, 1), ("C", 3, 1), ("D", 2, 1), ("E", 5, 1), ("F", 4, 1)],
            ),
            make_transaction("t2", "c1", NOW, products=[("A", 9, 100)]),
        ]

        stats = get_customer_stats("c1", transactions)

        assert [p.name for p in stats.top_products] == ["A", "B", "E", "F", "C"]
        assert stats.top_products[0].quantity == Decimal("10")

    def test_top_products_ties_keep_first_seen_order(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", NOW, products=[("Oil", 3, 1), ("Rice", 3, 9)]),
            make_transaction("t2", "c1", NOW, products=[("Dal", 3, 2)]),
        ]

        stats = get_customer_stats("c1", transactions)

        assert [p.name for p in stats.top_products] == ["Oil", "Rice", "Dal"]

    def test_unknown_customer_has_empty_stats(self, make_transaction):
        stats = get_customer_stats("missing", [make_transaction("t1", "c1", NOW, total_amount="5")])

        assert stats.total_purchased == Decimal("0")
        assert stats.transaction_count == 0
        assert stats.top_products == []


class TestDashboardStats:
    def test_current_month_revenue_and_all_time_pending(self, customers, make_transaction):
        transactions = [
            make_transaction("t1", "c1", datetime(2024, 5, 2), total_amount="300", amount_paid="100"),
            make_transaction("t2", "c2", datetime(2024, 5, 19), total_amount="700", amount_paid="700"),
            make_transaction("t3", "c1", datetime(2024, 4, 30), total_amount="400", amount_paid="0"),
            make_transaction("t4", "c3", datetime(2023, 5, 10), total_amount="900", amount_paid="900"),
        ]

        stats = get_dashboard_stats(customers, transactions, now=NOW)

        assert stats.total_customers == 3
        assert stats.this_month_revenue == Decimal("1000")
        assert stats.pending_collections == Decimal("600")
        assert stats.top_customer.customer.id == "c2"
        assert stats.top_customer.amount == Decimal("700")

    def test_tie_keeps_first_customer_seen(self, customers, make_transaction):
        transactions = [
            make_transaction("t1", "c3", datetime(2024, 5, 3), total_amount="500"),
            make_transaction("t2", "c1", datetime(2024, 5, 4), total_amount="500"),
        ]

        stats = get_dashboard_stats(customers, transactions, now=NOW)

        assert stats.top_customer.customer.id == "c3"

    def test_no_sales_this_month_has_no_top_customer(self, customers, make_transaction):
        transactions = [make_transaction("t1", "c1", datetime(2024, 4, 3), total_amount="500")]

        stats = get_dashboard_stats(customers, transactions, now=NOW)

        assert stats.this_month_revenue == Decimal("0")
        assert stats.top_customer.customer is None
        assert stats.top_customer.amount == Decimal("0")

    def test_top_customer_missing_from_list_is_none(self, make_transaction):
        transactions = [make_transaction("t1", "gone", datetime(2024, 5, 3), total_amount="80")]

        stats = get_dashboard_stats([], transactions, now=NOW)

        assert stats.top_customer.customer is None
        assert stats.top_customer.amount == Decimal("80")

    def test_is_idempotent(self, customers, make_transaction):
        transactions = [
            make_transaction("t1", "c1", datetime(2024, 5, 2), total_amount="300", amount_paid="100"),
            make_transaction("t2", "c2", datetime(2024, 5, 19), total_amount="700"),
        ]

        first = get_dashboard_stats(customers, transactions, now=NOW)
        second = get_dashboard_stats(customers, transactions, now=NOW)

        assert first.model_dump() == second.model_dump()


class TestMonthlyRankings:
    def test_sorted_descending_with_contiguous_ranks(self, customers, make_transaction):
        transactions = [
            make_transaction("t1", "c1", datetime(2024, 5, 1), total_amount="100"),
            make_transaction("t2", "c2", datetime(2024, 5, 2), total_amount="400"),
            make_transaction("t3", "c3", datetime(2024, 5, 3), total_amount="250"),
            make_transaction("t4", "c1", datetime(2024, 5, 4), total_amount="50"),
        ]

        rankings = get_monthly_rankings(customers, transactions, now=NOW)

        assert [r.customer.id for r in rankings] == ["c2", "c3", "c1"]
        assert [r.rank for r in rankings] == [1, 2, 3]
        assert rankings[2].total_amount == Decimal("150")
        assert rankings[2].transaction_count == 2

    def test_explicit_month_and_year(self, customers, make_transaction):
        transactions = [
            make_transaction("t1", "c1", datetime(2024, 5, 1), total_amount="100"),
            make_transaction("t2", "c2", datetime(2023, 12, 31, 23, 59), total_amount="400"),
        ]

        rankings = get_monthly_rankings(customers, transactions, month=12, year=2023, now=NOW)

        assert len(rankings) == 1
        assert rankings[0].customer.id == "c2"
        assert rankings[0].rank == 1

    def test_excludes_customers_no_longer_present(self, customers, make_transaction):
        transactions = [
            make_transaction("t1", "deleted", datetime(2024, 5, 1), total_amount="900"),
            make_transaction("t2", "c1", datetime(2024, 5, 1), total_amount="10"),
        ]

        rankings = get_monthly_rankings(customers, transactions, now=NOW)

        assert [(r.customer.id, r.rank) for r in rankings] == [("c1", 1)]

    def test_ties_get_consecutive_ranks_in_first_seen_order(self, customers, make_transaction):
        transactions = [
            make_transaction("t1", "c3", datetime(2024, 5, 1), total_amount="200"),
            make_transaction("t2", "c1", datetime(2024, 5, 2), total_amount="200"),
            make_transaction("t3", "c2", datetime(2024, 5, 3), total_amount="200"),
        ]

        rankings = get_monthly_rankings(customers, transactions, now=NOW)

        assert [(r.customer.id, r.rank) for r in rankings] == [("c3", 1), ("c1", 2), ("c2", 3)]

    def test_empty_month(self, customers):
        assert get_monthly_rankings(customers, [], now=NOW) == []


class TestRevenueChartData:
    def test_empty_transactions_give_zero_buckets(self):
        chart = get_revenue_chart_data([], 3, now=NOW)

        assert chart.labels == ["Mar", "Apr", "May"]
        assert chart.data == [Decimal("0"), Decimal("0"), Decimal("0")]

    def test_buckets_by_calendar_month_across_year_boundary(self, make_transaction):
        now = datetime(2024, 2, 10)
        transactions = [
            make_transaction("t1", "c1", datetime(2023, 12, 31), total_amount="10"),
            make_transaction("t2", "c1", datetime(2024, 1, 1), total_amount="20"),
            make_transaction("t3", "c1", datetime(2024, 2, 9), total_amount="30"),
            make_transaction("t4", "c1", datetime(2023, 2, 9), total_amount="99"),
        ]

        chart = get_revenue_chart_data(transactions, 3, now=now)

        assert chart.labels == ["Dec", "Jan", "Feb"]
        assert chart.data == [Decimal("10"), Decimal("20"), Decimal("30")]

    def test_range_applies_only_when_both_bounds_given(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", datetime(2024, 5, 1), total_amount="10"),
            make_transaction("t2", "c1", datetime(2024, 5, 15), total_amount="20"),
        ]

        ranged = get_revenue_chart_data(
            transactions, 1,
            start_date=datetime(2024, 5, 10),
            end_date=datetime(2024, 5, 31),
            now=NOW,
        )
        one_bound = get_revenue_chart_data(
            transactions, 1, start_date=datetime(2024, 5, 10), now=NOW
        )

        assert ranged.data == [Decimal("20")]
        assert one_bound.data == [Decimal("30")]


class TestPaymentStatusData:
    def test_collected_and_pending(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", datetime(2024, 5, 1), total_amount="100", amount_paid="40"),
            make_transaction("t2", "c2", datetime(2024, 4, 1), total_amount="50", amount_paid="50"),
        ]

        data = get_payment_status_data(transactions)

        assert data.collected == Decimal("90")
        assert data.pending == Decimal("60")

    def test_range_is_inclusive(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", datetime(2024, 5, 1), total_amount="100", amount_paid="40"),
            make_transaction("t2", "c2", datetime(2024, 4, 1), total_amount="50", amount_paid="50"),
        ]

        data = get_payment_status_data(
            transactions, start_date=datetime(2024, 5, 1), end_date=datetime(2024, 5, 1)
        )

        assert data.collected == Decimal("40")
        assert data.pending == Decimal("60")


class TestTopProducts:
    def test_aggregates_same_name_across_transactions(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", NOW, products=[("A", 3, 10)]),
            make_transaction("t2", "c2", NOW, products=[("A", 2, 10)]),
        ]

        products = get_top_products(transactions)

        assert len(products) == 1
        assert products[0].name == "A"
        assert products[0].quantity == Decimal("5")
        assert products[0].revenue == Decimal("50")

    def test_ties_keep_first_seen_order(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", NOW, products=[("Salt", 2, 10), ("Sugar", 1, 20)]),
            make_transaction("t2", "c2", NOW, products=[("Dal", 4, 5)]),
        ]

        products = get_top_products(transactions)

        assert [p.name for p in products] == ["Salt", "Sugar", "Dal"]

    def test_sorted_by_revenue_and_limited(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", NOW, products=[("Cheap", 100, 1), ("Dear", 1, 500), ("Mid", 10, 20)]),
        ]

        products = get_top_products(transactions, limit=2)

        assert [p.name for p in products] == ["Dear", "Mid"]


class TestLedgerSummary:
    def test_totals_rate_and_status_counts(self, make_transaction):
        transactions = [
            make_transaction("t1", "c1", NOW, total_amount="100", amount_paid="100"),
            make_transaction("t2", "c1", NOW, total_amount="200", amount_paid="50"),
            make_transaction("t3", "c2", NOW, total_amount="100", amount_paid="0"),
        ]

        summary = get_ledger_summary(transactions)

        assert summary.total_revenue == Decimal("400")
        assert summary.collected == Decimal("150")
        assert summary.pending == Decimal("250")
        assert summary.collection_rate == Decimal("37.5")
        assert summary.transaction_count == 3
        assert summary.status_counts[TransactionStatus.PAID] == 1
        assert summary.status_counts[TransactionStatus.PARTIAL] == 1
        assert summary.status_counts[TransactionStatus.PENDING] == 1

    def test_no_revenue_has_zero_rate(self):
        summary = get_ledger_summary([])

        assert summary.collection_rate == Decimal("0")
        assert summary.status_counts[TransactionStatus.PAID] == 0


def test_month_label_is_one_based():
    assert month_label(1) == "Jan"
    assert month_label(12) == "Dec"
