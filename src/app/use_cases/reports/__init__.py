"""Report and export use cases"""
from .export_customers import ExportCustomers
from .export_transactions import ExportTransactions
from .generate_business_report import GenerateBusinessReport
from .dtos import ExportFileDTO

__all__ = [
    "ExportCustomers",
    "ExportTransactions",
    "GenerateBusinessReport",
    "ExportFileDTO",
]
