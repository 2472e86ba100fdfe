"""PDF renderer adapter - writes customer certificates with ReportLab."""

import abc
import logging
from pathlib import Path
from xml.sax.saxutils import escape
from typing import List, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

import config
from customers.domain.domain import Customer, format_date

logger = logging.getLogger(__name__)

CERTIFICATE_FONT = "CertificateFont"
SEX_LABELS = {"K": "Kobieta", "M": "Mężczyzna"}


class PdfGenerationError(Exception):
    """Raised when a certificate cannot be rendered or written."""
    pass


def default_pdf_filename(customer: Customer) -> str:
    """Filename suggested when exporting a certificate."""
    return f"swiadectwo_{customer.name}_{customer.surname}.pdf"


class AbstractPdfRenderer(abc.ABC):
    """Abstract base class for certificate renderers."""

    @abc.abstractmethod
    def render(self, customer: Customer, path: str) -> str:
        """
        Render the certificate of a customer to a file.

        Args:
            customer: Record to render
            path: Target file path

        Returns:
            The path that was written

        Raises:
            PdfGenerationError: If the file cannot be produced
        """
        raise NotImplementedError


def certificate_rows(customer: Customer) -> List[Tuple[str, str]]:
    """Label/value pairs printed on the certificate, in print order."""
    sex = (customer.sex or "").strip().upper()
    return [
        ("Imię", customer.name),
        ("Nazwisko", customer.surname),
        ("Płeć", SEX_LABELS.get(sex, sex)),
        ("Data urodzenia", format_date(customer.date_of_birth)),
        ("Miejsce urodzenia", customer.place_of_birth),
        ("Data śmierci", format_date(customer.date_of_death)),
        ("Miejsce śmierci", customer.place_of_death),
        ("Adres zamieszkania", customer.address),
        ("Numer aktu zgonu", customer.death_certificate_number),
        ("Data wydania aktu zgonu", format_date(customer.issue_date)),
        ("Akt zgonu wydany przez", customer.issued_by),
    ]


class ReportLabPdfRenderer(AbstractPdfRenderer):
    """Certificate renderer built on the ReportLab platypus layout engine."""

    def __init__(self, font_path: Optional[str] = None):
        self.font_path = font_path if font_path is not None else config.get_pdf_font_path()
        self.font_name = self._register_font()

    def _register_font(self) -> str:
        if not self.font_path:
            # Built-in Helvetica lacks some Polish glyphs
            return "Helvetica"
        if CERTIFICATE_FONT not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(CERTIFICATE_FONT, self.font_path))
            except Exception as e:
                raise PdfGenerationError(f"Cannot load certificate font {self.font_path}: {e}") from e
        return CERTIFICATE_FONT

    def _styles(self):
        base = getSampleStyleSheet()
        title = ParagraphStyle(
            "CertificateTitle", parent=base["Title"], fontName=self.font_name, fontSize=20,
        )
        subtitle = ParagraphStyle(
            "CertificateSubtitle", parent=base["Heading2"], fontName=self.font_name, alignment=1,
        )
        body = ParagraphStyle("CertificateBody", parent=base["BodyText"], fontName=self.font_name)
        return title, subtitle, body

    def render(self, customer: Customer, path: str) -> str:
        target = Path(path)
        if not target.parent.exists():
            raise PdfGenerationError(f"Directory does not exist: {target.parent}")

        title, subtitle, body = self._styles()
        story = [
            Paragraph("ŚWIADECTWO", title),
            Paragraph(f"nr {escape(customer.certificate_number or '-')}", subtitle),
            Spacer(1, 10 * mm),
        ]

        data = [[Paragraph(label, body), Paragraph(escape(value or ""), body)]
                for label, value in certificate_rows(customer)]
        table = Table(data, colWidths=[60 * mm, 110 * mm])
        table.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]))
        story.append(table)

        doc = SimpleDocTemplate(
            str(target),
            pagesize=A4,
            title=f"Świadectwo {customer.full_name}",
            leftMargin=20 * mm,
            rightMargin=20 * mm,
            topMargin=25 * mm,
            bottomMargin=20 * mm,
        )
        try:
            doc.build(story)
        except OSError as e:
            logger.error(f"Failed to write certificate for customer {customer.id} to {target}: {e}")
            raise PdfGenerationError(f"Cannot write {target}: {e}") from e

        logger.info(f"Wrote certificate for customer {customer.id} to {target}")
        return str(target)
