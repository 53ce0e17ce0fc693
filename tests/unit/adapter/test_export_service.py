"""Unit tests for CsvExportService and ReportLabPdfService"""

import pytest
from datetime import datetime
from decimal import Decimal

from src.adapter.services.export_service import CsvExportService, raw_number
from src.adapter.services.pdf_service import ReportLabPdfService
from src.domain.analytics import get_ledger_summary
from src.domain.user_profile import UserProfile

GENERATED_AT = datetime(2024, 5, 20, 8, 0)


@pytest.fixture
def service():
    return CsvExportService(default_name="CardVault")


@pytest.fixture
def ledger(make_customer, make_transaction):
    customers = [
        make_customer(
            "c1", "Asha Rao",
            business_name="Rao Traders", business_type="Wholesale", mobile="98450",
            email="asha@raotraders.in", address="12 MG Road, Bengaluru",
            updated_at=datetime(2024, 5, 1, 10, 0),
        ),
        make_customer("c2", "Ravi", updated_at=datetime(2024, 4, 2)),
    ]
    transactions = [
        make_transaction("t1", "c1", datetime(2024, 5, 2), products=[("Rice", 2, 250), ("Dal", 1.5, 100)], amount_paid="200"),
        make_transaction("t2", "gone", datetime(2024, 5, 3), products=[("Oil", 1, 99.5)], amount_paid="99.5"),
    ]
    return customers, transactions


class TestRawNumber:
    def test_integral_decimal_becomes_int(self):
        assert raw_number(Decimal("1500.00")) == 1500
        assert isinstance(raw_number(Decimal("1500.00")), int)

    def test_fractional_decimal_stays_exact(self):
        value = raw_number(Decimal("12345678901234.5670"))

        assert isinstance(value, Decimal)
        assert str(value) == "12345678901234.567"

    def test_high_precision_amount_written_unquoted(self, service, make_customer, make_transaction):
        customer = make_customer("c1", "Asha", updated_at=GENERATED_AT)
        transaction = make_transaction(
            "t1", "c1", GENERATED_AT, total_amount="98765432109876.54", amount_paid="0.01"
        )

        lines = service.customers_csv([customer], [transaction]).split("\n")

        assert lines[1] == '"Asha","","","","","",98765432109876.54,0.01,98765432109876.53,"2024-05-20"'


class TestCustomersCsv:
    def test_header_and_rows(self, service, ledger):
        customers, transactions = ledger

        lines = service.customers_csv(customers, transactions).split("\n")

        assert lines[0] == (
            "Name,Business Name,Business Type,Mobile,Email,Address,"
            "Total Purchased,Amount Paid,Amount Pending,Last Scanned"
        )
        assert lines[1] == (
            '"Asha Rao","Rao Traders","Wholesale","98450","asha@raotraders.in",'
            '"12 MG Road, Bengaluru",650,200,450,"2024-05-01"'
        )
        assert lines[2] == '"Ravi","","","","","",0,0,0,"2024-04-02"'
        assert len(lines) == 3

    def test_embedded_quotes_are_doubled(self, service, make_customer):
        customer = make_customer("c1", 'Sri "Lakshmi" Stores', updated_at=GENERATED_AT)

        csv_text = service.customers_csv([customer], [])

        assert '"Sri ""Lakshmi"" Stores"' in csv_text


class TestTransactionsCsv:
    def test_rows_with_unknown_customer(self, service, ledger):
        customers, transactions = ledger

        lines = service.transactions_csv(transactions, customers).split("\n")

        assert lines[0] == (
            "Date,Customer Name,Products,Quantity,Total Amount,Amount Paid,Amount Pending,Status"
        )
        assert lines[1] == '"2024-05-02","Asha Rao","Rice; Dal",3.5,650,200,450,"partial"'
        assert lines[2] == '"2024-05-03","Unknown","Oil",1,99.5,99.5,0,"paid"'


class TestSummaryReport:
    def test_report_text(self, service, ledger):
        customers, transactions = ledger

        report = service.summary_report(customers, transactions, UserProfile(), GENERATED_AT)

        assert report == (
            "BUSINESS REPORT - CardVault\n"
            "Generated: 2024-05-20\n"
            "\n"
            "SUMMARY\n"
            "=======\n"
            "Total Customers: 2\n"
            "Total Revenue: 749.5\n"
            "Total Collected: 299.5\n"
            "Pending Collection: 450\n"
            "Collection Rate: 40.0%\n"
            "\n"
            "TRANSACTIONS\n"
            "============\n"
            "Total Transactions: 2\n"
            "Paid: 1\n"
            "Partial: 1\n"
            "Pending: 0\n"
        )

    def test_empty_ledger_uses_business_name(self, service):
        report = service.summary_report([], [], UserProfile(business_name="Rao Traders"), GENERATED_AT)

        assert report.startswith("BUSINESS REPORT - Rao Traders\n")
        assert "Collection Rate: 0%" in report


class TestPdfReport:
    def test_generates_pdf_bytes(self, ledger):
        _, transactions = ledger

        pdf = ReportLabPdfService().generate_business_report(
            summary=get_ledger_summary(transactions),
            total_customers=2,
            profile=UserProfile(business_name="Rao Traders"),
            generated_at=GENERATED_AT,
        )

        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 500
