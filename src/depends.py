from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.collection_store import CollectionRecord  # noqa: F401  (registers the table)
from src.adapter.services.card_extraction_service import OpenAICardExtractionService
from src.adapter.services.export_service import CsvExportService
from src.adapter.services.pdf_service import ReportLabPdfService
from src.app.services.card_extraction_service import CardExtractionService
from src.app.services.export_service import ExportService
from src.app.services.pdf_service import PdfService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db(db_engine: AsyncEngine = engine) -> None:
    """Create the collection table if it does not exist yet"""
    async with db_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_card_extraction_service() -> CardExtractionService:
    return OpenAICardExtractionService()


def get_export_service() -> ExportService:
    return CsvExportService()


def get_pdf_service() -> PdfService:
    return ReportLabPdfService()
