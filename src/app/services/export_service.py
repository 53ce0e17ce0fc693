"""Export Service Interface

Defines the contract for CSV and plain-text report generation.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from config import ApplicationConfig
from src.domain.customer import Customer
from src.domain.transaction import Transaction
from src.domain.user_profile import UserProfile


def export_filename(profile: UserProfile, kind: str, generated_at: datetime) -> str:
    """e.g. Rao Traders_Customers_2024-05-01.csv"""
    business_name = profile.business_name or ApplicationConfig.REPORT_DEFAULT_NAME
    return f"{business_name}_{kind}_{generated_at.date().isoformat()}.csv"


class ExportService(ABC):
    """
    Formats raw collections for sharing outside the application

    Totals must come from src.domain.analytics so exported figures never
    disagree with the dashboard.
    """

    @abstractmethod
    def customers_csv(self, customers: List[Customer], transactions: List[Transaction]) -> str:
        """
        One row per customer with lifetime purchase totals

        Returns:
            CSV document (header row first)
        """
        pass

    @abstractmethod
    def transactions_csv(self, transactions: List[Transaction], customers: List[Customer]) -> str:
        """
        One row per transaction with the customer's name and pending balance

        Returns:
            CSV document (header row first)
        """
        pass

    @abstractmethod
    def summary_report(
        self,
        customers: List[Customer],
        transactions: List[Transaction],
        profile: UserProfile,
        generated_at: datetime,
    ) -> str:
        """
        Plain-text business summary (revenue, collection rate, status counts)
        """
        pass
