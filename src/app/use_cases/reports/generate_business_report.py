"""GenerateBusinessReport Use Case

Business summary as plain text or PDF. Both renderings use the same
ledger totals as the analytics dashboard.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from config import ApplicationConfig
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.repositories.profile_repository import ProfileRepository
from src.app.services.export_service import ExportService
from src.app.services.pdf_service import PdfService
from src.domain.analytics import get_ledger_summary
from src.domain.base import utc_now
from .dtos import ExportFileDTO

logger = logging.getLogger(__name__)


class GenerateBusinessReport:
    """
    Use Case: Business report

    Flow:
    1. Load customers, transactions and profile
    2. Render text via ExportService, or PDF via PdfService
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
        profile_repo: ProfileRepository,
        export_service: ExportService,
        pdf_service: PdfService,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo
        self.profile_repo = profile_repo
        self.export_service = export_service
        self.pdf_service = pdf_service
        self.clock = clock

    async def execute(self, as_pdf: bool = False) -> Result[ExportFileDTO]:
        try:
            customers = await self.customer_repo.get_all()
            transactions = await self.transaction_repo.get_all()
            profile = await self.profile_repo.get()
            generated_at = self.clock()
            stem = f"{profile.business_name or ApplicationConfig.REPORT_DEFAULT_NAME}_Report_{generated_at.date().isoformat()}"

            if as_pdf:
                pdf_bytes = self.pdf_service.generate_business_report(
                    summary=get_ledger_summary(transactions),
                    total_customers=len(customers),
                    profile=profile,
                    generated_at=generated_at,
                    default_name=ApplicationConfig.REPORT_DEFAULT_NAME,
                )
                return Return.ok(
                    ExportFileDTO(
                        filename=f"{stem}.pdf",
                        media_type="application/pdf",
                        content=pdf_bytes,
                    )
                )

            report = self.export_service.summary_report(customers, transactions, profile, generated_at)
            return Return.ok(
                ExportFileDTO(
                    filename=f"{stem}.txt",
                    media_type="text/plain",
                    content=report.encode("utf-8"),
                )
            )

        except Exception as e:
            logger.error(f"Business report generation failed: {e}")
            return Return.err(
                Error(
                    code="REPORT_FAILED",
                    message="Failed to generate business report",
                    reason=str(e),
                )
            )
