"""PDF Generation Service Interface

Defines the contract for rendering the business report as a PDF.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from src.domain.analytics import LedgerSummary
from src.domain.user_profile import UserProfile


class PdfService(ABC):
    """Service interface for PDF generation"""

    @abstractmethod
    def generate_business_report(
        self,
        summary: LedgerSummary,
        total_customers: int,
        profile: UserProfile,
        generated_at: datetime,
        default_name: str = "CardVault",
    ) -> bytes:
        """
        Generate the business report PDF

        Args:
            summary: Ledger totals to print
            total_customers: Number of customers
            profile: Owner profile (business name and currency)
            generated_at: Report timestamp
            default_name: Title used when the profile has no business name

        Returns:
            PDF document as bytes
        """
        pass
