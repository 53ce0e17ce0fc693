"""AddCustomer Use Case

Creates a customer and prepends it to the customers collection.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.base import generate_uuid, utc_now
from src.domain.customer import Customer
from .dtos import CreateCustomerCommandDTO

logger = logging.getLogger(__name__)


class AddCustomer:
    """
    Use Case: Add a customer

    Business Rules:
    1. A new opaque id is generated
    2. created_at and updated_at are both set to now
    3. Duplicates (same name, email, ...) are allowed
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

    async def execute(self, command: CreateCustomerCommandDTO) -> Result[Customer]:
        try:
            now = self.clock()
            customer = Customer(
                **command.model_dump(),
                id=generate_uuid(),
                created_at=now,
                updated_at=now,
            )

            customers = await self.customer_repo.get_all()
            customers.insert(0, customer)
            await self.customer_repo.save_all(customers)
            await self.uow.commit()

            logger.info(f"Added customer {customer.id}")
            return Return.ok(customer)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add customer: {e}")
            return Return.err(
                Error(
                    code="SAVE_FAILED",
                    message="Failed to save customer",
                    reason=str(e),
                )
            )
