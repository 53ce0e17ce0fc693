"""Unit tests for export and report use cases"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.export_service import CsvExportService
from src.app.use_cases.reports import ExportCustomers, ExportTransactions, GenerateBusinessReport
from src.domain.user_profile import UserProfile

NOW = datetime(2024, 5, 20, 18, 45)


@pytest.fixture
def repos(make_customer, make_transaction):
    customer_repo, transaction_repo, profile_repo = MagicMock(), MagicMock(), MagicMock()
    customer_repo.get_all = AsyncMock(return_value=[make_customer("c1", "Asha", updated_at=NOW)])
    transaction_repo.get_all = AsyncMock(return_value=[
        make_transaction("t1", "c1", datetime(2024, 5, 2), products=[("Rice", 2, 50)], amount_paid="40"),
    ])
    profile_repo.get = AsyncMock(return_value=UserProfile(business_name="Rao Traders"))
    return customer_repo, transaction_repo, profile_repo


@pytest.mark.asyncio
class TestExports:
    async def test_customers_csv_file(self, repos):
        use_case = ExportCustomers(*repos, CsvExportService(), clock=lambda: NOW)

        result = await use_case.execute()

        assert result.is_ok()
        file = result.value
        assert file.filename == "Rao Traders_Customers_2024-05-20.csv"
        assert file.media_type == "text/csv"
        assert file.content.decode().startswith("Name,Business Name,")

    async def test_transactions_csv_file_uses_default_name(self, repos):
        repos[2].get = AsyncMock(return_value=UserProfile())
        use_case = ExportTransactions(*repos, CsvExportService(), clock=lambda: NOW)

        result = await use_case.execute()

        assert result.value.filename == "CardVault_Transactions_2024-05-20.csv"
        assert '"Asha","Rice"' in result.value.content.decode()

    async def test_export_failure(self, repos):
        export_service = MagicMock()
        export_service.customers_csv = MagicMock(side_effect=ValueError("bad row"))
        use_case = ExportCustomers(*repos, export_service, clock=lambda: NOW)

        result = await use_case.execute()

        assert result.is_err()
        assert result.error.code == "EXPORT_FAILED"


@pytest.mark.asyncio
class TestGenerateBusinessReport:
    async def test_text_report(self, repos):
        use_case = GenerateBusinessReport(*repos, CsvExportService(), MagicMock(), clock=lambda: NOW)

        result = await use_case.execute()

        file = result.value
        assert file.filename == "Rao Traders_Report_2024-05-20.txt"
        assert file.media_type == "text/plain"
        assert "BUSINESS REPORT - Rao Traders" in file.content.decode()

    async def test_pdf_report_delegates_to_pdf_service(self, repos):
        pdf_service = MagicMock()
        pdf_service.generate_business_report = MagicMock(return_value=b"%PDF-1.4 fake")
        use_case = GenerateBusinessReport(*repos, CsvExportService(), pdf_service, clock=lambda: NOW)

        result = await use_case.execute(as_pdf=True)

        file = result.value
        assert file.filename == "Rao Traders_Report_2024-05-20.pdf"
        assert file.media_type == "application/pdf"
        assert file.content == b"%PDF-1.4 fake"
        kwargs = pdf_service.generate_business_report.call_args.kwargs
        assert kwargs["total_customers"] == 1
        assert kwargs["summary"].transaction_count == 1

    async def test_report_failure(self, repos):
        pdf_service = MagicMock()
        pdf_service.generate_business_report = MagicMock(side_effect=RuntimeError("font missing"))
        use_case = GenerateBusinessReport(*repos, CsvExportService(), pdf_service, clock=lambda: NOW)

        result = await use_case.execute(as_pdf=True)

        assert result.is_err()
        assert result.error.code == "REPORT_FAILED"
