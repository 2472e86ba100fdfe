"""Integration tests for the ReportLab certificate renderer."""
import pytest

from customers.adapters.pdf import (
    ReportLabPdfRenderer,
    PdfGenerationError,
    certificate_rows,
    default_pdf_filename,
)


@pytest.fixture
def renderer():
    # empty font path selects the built-in font
    return ReportLabPdfRenderer(font_path="")


def test_writes_a_pdf_file(renderer, customer_factory, tmp_path):
    target = tmp_path / "swiadectwo.pdf"

    written = renderer.render(customer_factory(id=1), str(target))

    assert written == str(target)
    assert target.read_bytes().startswith(b"%PDF")


def test_missing_directory_raises(renderer, customer_factory, tmp_path):
    with pytest.raises(PdfGenerationError):
        renderer.render(customer_factory(id=1), str(tmp_path / "missing" / "out.pdf"))


def test_unreadable_font_raises(tmp_path):
    with pytest.raises(PdfGenerationError):
        ReportLabPdfRenderer(font_path=str(tmp_path / "no-such-font.ttf"))


def test_certificate_rows_format_values(customer_factory):
    rows = dict(certificate_rows(customer_factory(sex="k")))

    assert rows["Płeć"] == "Kobieta"
    assert rows["Data urodzenia"] == "12.03.1941"
    assert rows["Akt zgonu wydany przez"] == "USC Warszawa"


def test_empty_dates_print_blank(customer_factory):
    rows = dict(certificate_rows(customer_factory(issue_date=None, sex=" ")))

    assert rows["Data wydania aktu zgonu"] == ""
    assert rows["Płeć"] == ""


def test_default_filename(customer_factory):
    assert default_pdf_filename(customer_factory(name="Anna", surname="Nowak")) == "swiadectwo_Anna_Nowak.pdf"
