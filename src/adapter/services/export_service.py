"""CSV and plain-text export

String fields are double-quoted, numbers are written raw (no locale
formatting), header row first.
"""

import csv
import io
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union
from config import ApplicationConfig
from src.app.services.export_service import ExportService
from src.domain.analytics import get_customer_stats, get_ledger_summary
from src.domain.customer import Customer
from src.domain.transaction import Transaction, TransactionStatus
from src.domain.user_profile import UserProfile

CUSTOMER_HEADERS = [
    "Name",
    "Business Name",
    "Business Type",
    "Mobile",
    "Email",
    "Address",
    "Total Purchased",
    "Amount Paid",
    "Amount Pending",
    "Last Scanned",
]

TRANSACTION_HEADERS = [
    "Date",
    "Customer Name",
    "Products",
    "Quantity",
    "Total Amount",
    "Amount Paid",
    "Amount Pending",
    "Status",
]


def raw_number(value: Decimal) -> Union[int, Decimal]:
    """
    Decimal without trailing zeros, exact to the last digit

    Both int and Decimal count as numeric for csv.QUOTE_NONNUMERIC, so the
    writer leaves them unquoted.
    """
    if value == value.to_integral_value():
        return int(value)
    return value.normalize()


class CsvExportService(ExportService):
    def __init__(self, default_name: Optional[str] = None):
        self.default_name = default_name or ApplicationConfig.REPORT_DEFAULT_NAME

    def _write(self, headers: List[str], rows: List[list]) -> str:
        buffer = io.StringIO()
        # Headers are written unquoted; data rows quote every non-numeric field
        buffer.write(",".join(headers) + "\n")
        writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
        writer.writerows(rows)
        return buffer.getvalue().rstrip("\n")

    def customers_csv(self, customers: List[Customer], transactions: List[Transaction]) -> str:
        rows = []
        for customer in customers:
            stats = get_customer_stats(customer.id, transactions)
            rows.append(
                [
                    customer.name,
                    customer.business_name,
                    customer.business_type,
                    customer.mobile,
                    customer.email,
                    customer.address,
                    raw_number(stats.total_purchased),
                    raw_number(stats.amount_paid),
                    raw_number(stats.amount_pending),
                    customer.updated_at.date().isoformat(),
                ]
            )
        return self._write(CUSTOMER_HEADERS, rows)

    def transactions_csv(self, transactions: List[Transaction], customers: List[Customer]) -> str:
        names = {c.id: c.name for c in customers}
        rows = []
        for tx in transactions:
            rows.append(
                [
                    tx.date.date().isoformat(),
                    names.get(tx.customer_id, "Unknown"),
                    "; ".join(p.name for p in tx.products),
                    raw_number(sum((p.quantity for p in tx.products), Decimal("0"))),
                    raw_number(tx.total_amount),
                    raw_number(tx.amount_paid),
                    raw_number(tx.total_amount - tx.amount_paid),
                    TransactionStatus(tx.status).value,
                ]
            )
        return self._write(TRANSACTION_HEADERS, rows)

    def summary_report(
        self,
        customers: List[Customer],
        transactions: List[Transaction],
        profile: UserProfile,
        generated_at: datetime,
    ) -> str:
        summary = get_ledger_summary(transactions)
        counts = summary.status_counts
        collection_rate = f"{summary.collection_rate:.1f}" if summary.total_revenue > 0 else "0"

        lines = [
            f"BUSINESS REPORT - {profile.business_name or self.default_name}",
            f"Generated: {generated_at.date().isoformat()}",
            "",
            "SUMMARY",
            "=======",
            f"Total Customers: {len(customers)}",
            f"Total Revenue: {raw_number(summary.total_revenue)}",
            f"Total Collected: {raw_number(summary.collected)}",
            f"Pending Collection: {raw_number(summary.pending)}",
            f"Collection Rate: {collection_rate}%",
            "",
            "TRANSACTIONS",
            "============",
            f"Total Transactions: {summary.transaction_count}",
            f"Paid: {counts[TransactionStatus.PAID]}",
            f"Partial: {counts[TransactionStatus.PARTIAL]}",
            f"Pending: {counts[TransactionStatus.PENDING]}",
        ]
        return "\n".join(lines) + "\n"
