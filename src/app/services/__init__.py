from .unit_of_work import UnitOfWork
from .export_service import ExportService
from .pdf_service import PdfService
from .card_extraction_service import CardExtractionService
from .notification_service import NotificationService

__all__ = [
    "UnitOfWork",
    "ExportService",
    "PdfService",
    "CardExtractionService",
    "NotificationService",
]
