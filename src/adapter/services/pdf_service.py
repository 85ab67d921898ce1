"""ReportLab PDF Generation Service Implementation

Implements invoice PDF rendering using the ReportLab library.
"""

from io import BytesIO
from decimal import Decimal
from typing import Optional

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
from src.domain.billing import to_decimal
from src.domain.invoice import Invoice


def _money(value: Optional[Decimal]) -> str:
    return f"${to_decimal(value):,.2f}"


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Renders a one-page invoice: header, invoice details, labor/material
    lines and the subtotal/tax/total/balance block.
    """

    def __init__(self, company_name: str = "HandimanApp", company_address: str = ""):
        self.company_name = company_name
        self.company_address = company_address

    def generate_invoice_pdf(self, invoice: Invoice) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            spaceAfter=10,
            textColor=colors.HexColor("#2C3E50"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#7F8C8D"),
        )
        label_style = ParagraphStyle(
            "LabelStyle",
            parent=styles["Heading2"],
            fontSize=14,
            spaceAfter=20,
        )

        elements.append(Paragraph(self.company_name, title_style))
        if self.company_address:
            elements.append(Paragraph(self.company_address, header_style))
        elements.append(Spacer(1, 10 * mm))
        elements.append(Paragraph("INVOICE", label_style))

        status = invoice.status.value if hasattr(invoice.status, "value") else str(invoice.status)
        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Status:", status.upper()],
            ["Invoice Date:", invoice.invoice_date.strftime("%Y-%m-%d")],
            ["Due Date:", invoice.due_date.strftime("%Y-%m-%d")],
            ["Customer:", invoice.customer_id],
            ["Job:", invoice.job_id],
        ]

        invoice_table = Table(invoice_info, colWidths=[40 * mm, 110 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(invoice_table)
        elements.append(Spacer(1, 10 * mm))

        hours = to_decimal(invoice.labor_hours)
        line_data = [
            ["Description", "Quantity", "Rate", "Amount"],
            [
                "Labor",
                f"{hours:,.2f} h",
                _money(invoice.hourly_rate),
                _money(invoice.labor_amount),
            ],
            ["Materials", "", "", _money(invoice.material_cost)],
        ]
        line_table = Table(line_data, colWidths=[80 * mm, 25 * mm, 30 * mm, 35 * mm])
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        tax_percent = to_decimal(invoice.tax_rate) * 100
        totals = [
            ["", "", "Subtotal:", _money(invoice.subtotal)],
            ["", "", f"Tax ({tax_percent:.2f}%):", _money(invoice.tax_amount)],
            ["", "", "Total:", _money(invoice.total_amount)],
            ["", "", "Paid:", _money(invoice.paid_amount)],
            ["", "", "Balance Due:", _money(invoice.balance_due)],
        ]
        totals_table = Table(totals, colWidths=[80 * mm, 25 * mm, 30 * mm, 35 * mm])
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (2, 0), (-1, -1), "Helvetica-Bold"),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (2, 2), (-1, 2), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)

        if invoice.notes:
            elements.append(Spacer(1, 10 * mm))
            elements.append(Paragraph(invoice.notes, styles["Normal"]))

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
