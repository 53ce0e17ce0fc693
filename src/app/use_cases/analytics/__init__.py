"""Analytics use cases (read-only, recomputed per call)"""
from .get_dashboard_stats import GetDashboardStats
from .get_monthly_rankings import GetMonthlyRankings
from .get_customer_stats import GetCustomerStats
from .get_revenue_chart import GetRevenueChart
from .get_payment_status import GetPaymentStatus
from .get_top_products import GetTopProducts

__all__ = [
    "GetDashboardStats",
    "GetMonthlyRankings",
    "GetCustomerStats",
    "GetRevenueChart",
    "GetPaymentStatus",
    "GetTopProducts",
]
