"""Customer API Routes

FastAPI routes for customers, their ledgers and business card scanning.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import error_for
from src.api.schemas.ledger_request import (
    CustomerRequestSchema,
    CustomerUpdateSchema,
    ScanCardRequestSchema,
)
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.card_extraction_service import CardExtractionService
from src.app.use_cases.analytics import GetCustomerStats
from src.app.use_cases.ledger import (
    AddCustomer,
    UpdateCustomer,
    DeleteCustomer,
    ListCustomers,
    CustomerSort,
    GetCustomer,
    ListCustomerTransactions,
    ListCustomerPayments,
    ScanBusinessCard,
    CreateCustomerCommandDTO,
    CustomerPatchDTO,
    CustomerDetailDTO,
)
from src.depends import get_card_extraction_service, get_session
from src.domain.analytics import CustomerStats
from src.domain.card_data import ExtractedCardData
from src.domain.customer import Customer
from src.domain.payment import Payment
from src.domain.transaction import Transaction

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=List[Customer])
async def list_customers(
    q: Optional[str] = Query(None, description="Search name, business name or business type"),
    sort: CustomerSort = Query(CustomerSort.RECENT, description="recent (newest first) or name"),
    session: AsyncSession = Depends(get_session),
):
    """List customers, newest first unless sorted by name."""
    result = await ListCustomers(SqlAlchemyCustomerRepository(session)).execute(query=q, sort=sort)
    return result.value


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
async def add_customer(
    request: CustomerRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Add a customer.

    **Returns:**
    - 201: Customer created (id and timestamps assigned)
    - 422: Name missing
    - 500: Customer could not be saved
    """
    uow = SqlAlchemyUnitOfWork(session)
    command = CreateCustomerCommandDTO(**request.model_dump())

    result = await AddCustomer(uow, SqlAlchemyCustomerRepository(session)).execute(command)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.post("/scan", response_model=ExtractedCardData)
async def scan_business_card(
    request: ScanCardRequestSchema,
    extraction_service: CardExtractionService = Depends(get_card_extraction_service),
):
    """
    Extract contact fields from a business card photo.

    Fields that could not be read come back as empty strings; the client
    should let the user correct them before creating the customer.
    """
    result = await ScanBusinessCard(extraction_service).execute(request.image_base64)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.get("/{customer_id}", response_model=CustomerDetailDTO)
async def get_customer(customer_id: str, session: AsyncSession = Depends(get_session)):
    """Customer with transactions, payments and lifetime stats."""
    use_case = GetCustomer(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyTransactionRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.patch("/{customer_id}", response_model=Customer)
async def update_customer(
    customer_id: str,
    request: CustomerUpdateSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Update some of a customer's fields.

    **Returns:**
    - 200: Updated customer
    - 404: Customer not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    patch = CustomerPatchDTO(**request.model_dump(exclude_unset=True))

    result = await UpdateCustomer(uow, SqlAlchemyCustomerRepository(session)).execute(customer_id, patch)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: str, session: AsyncSession = Depends(get_session)):
    """Delete a customer with all its transactions and payments. Unknown ids are ignored."""
    use_case = DeleteCustomer(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyTransactionRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise error_for(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{customer_id}/transactions", response_model=List[Transaction])
async def list_customer_transactions(customer_id: str, session: AsyncSession = Depends(get_session)):
    result = await ListCustomerTransactions(SqlAlchemyTransactionRepository(session)).execute(customer_id)
    return result.value


@router.get("/{customer_id}/payments", response_model=List[Payment])
async def list_customer_payments(customer_id: str, session: AsyncSession = Depends(get_session)):
    result = await ListCustomerPayments(SqlAlchemyPaymentRepository(session)).execute(customer_id)
    return result.value


@router.get("/{customer_id}/stats", response_model=CustomerStats)
async def get_customer_stats(customer_id: str, session: AsyncSession = Depends(get_session)):
    """Lifetime totals and top five products by quantity."""
    result = await GetCustomerStats(SqlAlchemyTransactionRepository(session)).execute(customer_id)
    return result.value
