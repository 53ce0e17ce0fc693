from .unit_of_work import SqlAlchemyUnitOfWork
from .export_service import CsvExportService
from .pdf_service import ReportLabPdfService
from .card_extraction_service import OpenAICardExtractionService
from .notification_service import (
    LoggingNotificationService,
    WebhookNotificationService,
    CompositeNotificationService,
    create_notification_service,
)

__all__ = [
    "SqlAlchemyUnitOfWork",
    "CsvExportService",
    "ReportLabPdfService",
    "OpenAICardExtractionService",
    "LoggingNotificationService",
    "WebhookNotificationService",
    "CompositeNotificationService",
    "create_notification_service",
]
