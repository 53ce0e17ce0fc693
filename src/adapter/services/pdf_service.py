"""ReportLab PDF Generation Service Implementation

Renders the business report using ReportLab.
"""

from datetime import datetime
from decimal import Decimal
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.analytics import LedgerSummary
from src.domain.transaction import TransactionStatus
from src.domain.user_profile import UserProfile


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Same figures as the plain-text summary, laid out as two tables.
    """

    def generate_business_report(
        self,
        summary: LedgerSummary,
        total_customers: int,
        profile: UserProfile,
        generated_at: datetime,
        default_name: str = "CardVault",
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title="Business Report",
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#7F8C8D"),
        )
        section_style = ParagraphStyle(
            "SectionStyle",
            parent=styles["Heading2"],
            fontSize=13,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )

        currency = profile.currency

        def money(value: Decimal) -> str:
            return f"{currency} {value:,.2f}"

        elements.append(Paragraph(f"Business Report - {profile.business_name or default_name}", title_style))
        if profile.name:
            elements.append(Paragraph(profile.name, header_style))
        elements.append(Paragraph(f"Generated: {generated_at.strftime('%Y-%m-%d')}", header_style))
        elements.append(Spacer(1, 10 * mm))

        collection_rate = f"{summary.collection_rate:.1f}%" if summary.total_revenue > 0 else "0%"
        summary_data = [
            ["Total Customers", str(total_customers)],
            ["Total Revenue", money(summary.total_revenue)],
            ["Total Collected", money(summary.collected)],
            ["Pending Collection", money(summary.pending)],
            ["Collection Rate", collection_rate],
        ]

        counts = summary.status_counts
        transaction_data = [
            ["Status", "Transactions"],
            ["Paid", str(counts[TransactionStatus.PAID])],
            ["Partial", str(counts[TransactionStatus.PARTIAL])],
            ["Pending", str(counts[TransactionStatus.PENDING])],
            ["Total", str(summary.transaction_count)],
        ]

        elements.append(Paragraph("Summary", section_style))
        summary_table = Table(summary_data, colWidths=[60 * mm, 60 * mm])
        summary_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(summary_table)
        elements.append(Spacer(1, 10 * mm))

        elements.append(Paragraph("Transactions", section_style))
        transaction_table = Table(transaction_data, colWidths=[60 * mm, 60 * mm])
        transaction_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    # Total row
                    ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                    ("LINEABOVE", (0, -1), (-1, -1), 1.5, colors.HexColor("#2C3E50")),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -2), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )
        elements.append(transaction_table)

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
