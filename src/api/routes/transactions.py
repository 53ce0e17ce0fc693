"""Transaction API Routes

FastAPI routes for sales and the payments recorded against them.
"""

from decimal import Decimal
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from libs.result import Error
from src.api.error import ClientError, error_for
from src.api.schemas.ledger_request import (
    PaymentRequestSchema,
    TransactionRequestSchema,
    TransactionUpdateSchema,
)
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.ledger import (
    AddTransaction,
    UpdateTransaction,
    GetTransaction,
    RecordPayment,
    CreateTransactionCommandDTO,
    TransactionPatchDTO,
    RecordPaymentCommandDTO,
    RecordPaymentResponseDTO,
    TransactionDetailDTO,
)
from src.depends import get_session
from src.domain.base import utc_now
from src.domain.transaction import Transaction, derive_status

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("", response_model=Transaction, status_code=status.HTTP_201_CREATED)
async def add_transaction(
    request: TransactionRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Record a sale.

    total_amount is the sum of quantity x unit_price over the products and
    status follows from the amount paid up front.

    **Returns:**
    - 201: Transaction created
    - 422: No products, or amount_paid above the total
    """
    products = [p.to_domain() for p in request.products]
    total_amount = sum((p.total for p in products), Decimal("0"))

    command = CreateTransactionCommandDTO(
        customer_id=request.customer_id,
        date=request.date or utc_now(),
        products=products,
        total_amount=total_amount,
        amount_paid=request.amount_paid,
        status=derive_status(total_amount, request.amount_paid),
        notes=request.notes,
    )

    use_case = AddTransaction(SqlAlchemyUnitOfWork(session), SqlAlchemyTransactionRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.get("/{transaction_id}", response_model=TransactionDetailDTO)
async def get_transaction(transaction_id: str, session: AsyncSession = Depends(get_session)):
    use_case = GetTransaction(
        SqlAlchemyTransactionRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(transaction_id)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.patch("/{transaction_id}", response_model=Transaction)
async def update_transaction(
    transaction_id: str,
    request: TransactionUpdateSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Edit a sale. Changing products recomputes the total; status is re-derived.

    **Returns:**
    - 200: Updated transaction
    - 400: amount_paid would exceed the total
    - 404: Transaction not found
    """
    transaction_repo = SqlAlchemyTransactionRepository(session)
    current = await transaction_repo.get_by_id(transaction_id)
    if current is None:
        raise error_for(
            Error(code="TRANSACTION_NOT_FOUND", message=f"Transaction {transaction_id} not found")
        )

    changes = request.model_dump(exclude_unset=True)
    if request.products is not None:
        changes["products"] = [p.to_domain() for p in request.products]
    patch = TransactionPatchDTO(**changes)

    new_total = (
        sum((p.total for p in patch.products), Decimal("0"))
        if patch.products is not None
        else current.total_amount
    )
    new_paid = patch.amount_paid if patch.amount_paid is not None else current.amount_paid
    if new_paid > new_total:
        raise ClientError(
            Error(
                code="AMOUNT_EXCEEDS_TOTAL",
                message=f"Amount paid {new_paid} exceeds total {new_total}",
            )
        )

    use_case = UpdateTransaction(SqlAlchemyUnitOfWork(session), transaction_repo)
    result = await use_case.execute(transaction_id, patch)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.post(
    "/{transaction_id}/payments",
    response_model=RecordPaymentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Payment exceeds the pending amount",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PAYMENT_EXCEEDS_PENDING",
                            "message": "Payment 600 exceeds pending amount 300"
                        }
                    }
                }
            }
        },
        404: {"description": "Transaction not found"},
    },
)
async def record_payment(
    transaction_id: str,
    request: PaymentRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Record a payment against a transaction.

    The amount must not exceed the transaction's pending balance. The
    transaction's amount_paid and status are updated in the same commit.
    """
    transaction_repo = SqlAlchemyTransactionRepository(session)
    transaction = await transaction_repo.get_by_id(transaction_id)
    if transaction is None:
        raise error_for(
            Error(code="TRANSACTION_NOT_FOUND", message=f"Transaction {transaction_id} not found")
        )

    pending = transaction.total_amount - transaction.amount_paid
    if request.amount > pending:
        raise ClientError(
            Error(
                code="PAYMENT_EXCEEDS_PENDING",
                message=f"Payment {request.amount} exceeds pending amount {pending}",
            )
        )

    command = RecordPaymentCommandDTO(
        transaction_id=transaction.id,
        customer_id=transaction.customer_id,
        amount=request.amount,
        date=request.date,
        method=request.method,
        notes=request.notes,
    )
    use_case = RecordPayment(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyPaymentRepository(session),
        transaction_repo,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise error_for(result.error)
    return result.value
