"""Export API Routes

CSV exports and the business report, returned as file downloads.
"""

from fastapi import APIRouter, Depends, Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import error_for
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.repositories.profile_repository import SqlAlchemyProfileRepository
from src.app.services.export_service import ExportService
from src.app.services.pdf_service import PdfService
from src.app.use_cases.reports import (
    ExportCustomers,
    ExportTransactions,
    GenerateBusinessReport,
    ExportFileDTO,
)
from src.depends import get_export_service, get_pdf_service, get_session

router = APIRouter(prefix="/exports", tags=["Exports"])


def _download(file: ExportFileDTO) -> Response:
    return Response(
        content=file.content,
        media_type=file.media_type,
        headers={"Content-Disposition": f'attachment; filename="{file.filename}"'},
    )


@router.get("/customers.csv")
async def export_customers(
    session: AsyncSession = Depends(get_session),
    export_service: ExportService = Depends(get_export_service),
):
    """One row per customer with lifetime purchase totals."""
    use_case = ExportCustomers(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyTransactionRepository(session),
        SqlAlchemyProfileRepository(session),
        export_service,
    )
    result = await use_case.execute()

    if result.is_err():
        raise error_for(result.error)
    return _download(result.value)


@router.get("/transactions.csv")
async def export_transactions(
    session: AsyncSession = Depends(get_session),
    export_service: ExportService = Depends(get_export_service),
):
    """One row per transaction; unknown customers are shown as "Unknown"."""
    use_case = ExportTransactions(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyTransactionRepository(session),
        SqlAlchemyProfileRepository(session),
        export_service,
    )
    result = await use_case.execute()

    if result.is_err():
        raise error_for(result.error)
    return _download(result.value)


async def _business_report(session: AsyncSession, export_service: ExportService, pdf_service: PdfService, as_pdf: bool):
    use_case = GenerateBusinessReport(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyTransactionRepository(session),
        SqlAlchemyProfileRepository(session),
        export_service,
        pdf_service,
    )
    result = await use_case.execute(as_pdf=as_pdf)

    if result.is_err():
        raise error_for(result.error)
    return _download(result.value)


@router.get("/report.txt")
async def business_report_text(
    session: AsyncSession = Depends(get_session),
    export_service: ExportService = Depends(get_export_service),
    pdf_service: PdfService = Depends(get_pdf_service),
):
    return await _business_report(session, export_service, pdf_service, as_pdf=False)


@router.get("/report.pdf")
async def business_report_pdf(
    session: AsyncSession = Depends(get_session),
    export_service: ExportService = Depends(get_export_service),
    pdf_service: PdfService = Depends(get_pdf_service),
):
    return await _business_report(session, export_service, pdf_service, as_pdf=True)
