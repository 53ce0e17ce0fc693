"""Analytics API Routes

Read-only dashboards computed from the ledger on every request.
"""

from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import error_for
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.app.use_cases.analytics import (
    GetDashboardStats,
    GetMonthlyRankings,
    GetRevenueChart,
    GetPaymentStatus,
    GetTopProducts,
)
from src.depends import get_session
from src.domain.analytics import (
    DashboardStats,
    PaymentStatusData,
    ProductSales,
    RankedCustomer,
    RevenueChartData,
)

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard(session: AsyncSession = Depends(get_session)):
    """
    Headline numbers for the home screen.

    - total_customers
    - this_month_revenue: sales dated in the current calendar month
    - pending_collections: outstanding balance over all transactions
    - top_customer: highest total purchases this month, if any
    """
    use_case = GetDashboardStats(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyTransactionRepository(session),
    )
    result = await use_case.execute()
    return result.value


@router.get("/rankings", response_model=List[RankedCustomer])
async def get_monthly_rankings(
    month: Optional[int] = Query(None, description="Month 1-12, defaults to the current month"),
    year: Optional[int] = Query(None, description="Defaults to the current year"),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetMonthlyRankings(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyTransactionRepository(session),
    )
    result = await use_case.execute(month=month, year=year)

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.get("/revenue", response_model=RevenueChartData)
async def get_revenue_chart(
    months: int = Query(6, ge=1, le=120, description="Number of months ending with the current one"),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    session: AsyncSession = Depends(get_session),
):
    """
    Monthly revenue series. When both start_date and end_date are given only
    transactions in that range are counted.
    """
    result = await GetRevenueChart(SqlAlchemyTransactionRepository(session)).execute(
        months=months, start_date=start_date, end_date=end_date
    )

    if result.is_err():
        raise error_for(result.error)
    return result.value


@router.get("/payment-status", response_model=PaymentStatusData)
async def get_payment_status(
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    session: AsyncSession = Depends(get_session),
):
    result = await GetPaymentStatus(SqlAlchemyTransactionRepository(session)).execute(
        start_date=start_date, end_date=end_date
    )
    return result.value


@router.get("/top-products", response_model=List[ProductSales])
async def get_top_products(
    limit: int = Query(5, ge=1, le=100),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    session: AsyncSession = Depends(get_session),
):
    result = await GetTopProducts(SqlAlchemyTransactionRepository(session)).execute(
        limit=limit, start_date=start_date, end_date=end_date
    )
    return result.value
