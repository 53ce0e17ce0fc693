"""UpdateCustomer Use Case

Merges a partial update into a stored customer.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.base import utc_now
from src.domain.customer import Customer
from .dtos import CustomerPatchDTO

logger = logging.getLogger(__name__)


class UpdateCustomer:
    """
    Use Case: Update a customer

    Business Rules:
    1. Only fields set on the patch are merged; id and created_at never change
    2. updated_at is bumped on every successful merge
    3. Unknown id returns CUSTOMER_NOT_FOUND without touching storage
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.clock = clock

    async def execute(self, customer_id: str, patch: CustomerPatchDTO) -> Result[Customer]:
        try:
            customers = await self.customer_repo.get_all()
            index = next((i for i, c in enumerate(customers) if c.id == customer_id), -1)

            if index == -1:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer {customer_id} not found",
                    )
                )

            customers[index] = customers[index].apply_patch(
                patch.model_dump(exclude_unset=True), now=self.clock()
            )

            await self.customer_repo.save_all(customers)
            await self.uow.commit()

            return Return.ok(customers[index])

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update customer {customer_id}: {e}")
            return Return.err(
                Error(
                    code="SAVE_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )
