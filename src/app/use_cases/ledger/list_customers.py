"""ListCustomers Use Case"""

from enum import Enum
from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer


class CustomerSort(str, Enum):
    RECENT = "recent"
    NAME = "name"


def matches(customer: Customer, query: str) -> bool:
    """Case-insensitive substring match on name, business name or business type"""
    query = query.lower()
    return any(
        query in value.lower()
        for value in (customer.name, customer.business_name, customer.business_type)
    )


class ListCustomers:
    """
    Use case: list customers, optionally searched and sorted

    recent keeps the stored order (newest first); name sorts
    case-insensitively, keeping stored order for equal names.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(
        self,
        query: Optional[str] = None,
        sort: CustomerSort = CustomerSort.RECENT,
    ) -> Result[List[Customer]]:
        customers = await self.customer_repo.get_all()

        if query and query.strip():
            customers = [c for c in customers if matches(c, query)]

        if sort == CustomerSort.NAME:
            customers = sorted(customers, key=lambda c: c.name.lower())

        return Return.ok(customers)
