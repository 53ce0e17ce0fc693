"""ExportCustomers Use Case

Produces the customers CSV with lifetime totals per customer.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.export_service import ExportService, export_filename
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.repositories.profile_repository import ProfileRepository
from src.domain.base import utc_now
from .dtos import ExportFileDTO

logger = logging.getLogger(__name__)


class ExportCustomers:
    def __init__(
        self,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
        profile_repo: ProfileRepository,
        export_service: ExportService,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo
        self.profile_repo = profile_repo
        self.export_service = export_service
        self.clock = clock

    async def execute(self) -> Result[ExportFileDTO]:
        try:
            customers = await self.customer_repo.get_all()
            transactions = await self.transaction_repo.get_all()
            profile = await self.profile_repo.get()

            csv_text = self.export_service.customers_csv(customers, transactions)
            return Return.ok(
                ExportFileDTO(
                    filename=export_filename(profile, "Customers", self.clock()),
                    media_type="text/csv",
                    content=csv_text.encode("utf-8"),
                )
            )
        except Exception as e:
            logger.error(f"Customer export failed: {e}")
            return Return.err(
                Error(
                    code="EXPORT_FAILED",
                    message="Failed to export customers to CSV",
                    reason=str(e),
                )
            )
