"""
Tests para el extractor de texto con pdfplumber.

El PDF de prueba se arma a mano: una página con una línea en Helvetica.
"""

import pytest

from src.adapters.input.text_extractors.pdfplumber_extractor import PdfplumberExtractor
from src.domain.exceptions import ExtractionError, FormatoInvalidoError


def _pdf_con_texto(texto: str) -> bytes:
    """Arma un PDF mínimo de una página con el texto dado."""
    contenido = f"BT /F1 12 Tf 72 720 Td ({texto}) Tj ET".encode("latin-1")
    objetos = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(contenido)).encode() + b" >>\nstream\n" + contenido + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    salida = bytearray(b"%PDF-1.4\n")
    offsets = []
    for numero, cuerpo in enumerate(objetos, start=1):
        offsets.append(len(salida))
        salida += f"{numero} 0 obj\n".encode() + cuerpo + b"\nendobj\n"

    inicio_xref = len(salida)
    salida += f"xref\n0 {len(objetos) + 1}\n".encode()
    salida += b"0000000000 65535 f \n"
    for offset in offsets:
        salida += f"{offset:010d} 00000 n \n".encode()
    salida += f"trailer\n<< /Size {len(objetos) + 1} /Root 1 0 R >>\n".encode()
    salida += f"startxref\n{inicio_xref}\n%%EOF\n".encode()
    return bytes(salida)


@pytest.fixture
def extractor():
    return PdfplumberExtractor()


class TestPdfplumberExtractor:
    def test_nombre(self, extractor):
        assert extractor.name == "pdfplumber"

    def test_can_handle(self, extractor, tmp_path):
        assert extractor.can_handle(tmp_path / "resumen.pdf")
        assert extractor.can_handle(tmp_path / "RESUMEN.PDF")
        assert not extractor.can_handle(tmp_path / "resumen.xlsx")

    def test_extrae_texto(self, extractor, tmp_path):
        ruta = tmp_path / "resumen.pdf"
        ruta.write_bytes(_pdf_con_texto("15-03-24 Kiosco 350,00"))

        assert "15-03-24 Kiosco 350,00" in extractor.extract(ruta)

    def test_archivo_inexistente(self, extractor, tmp_path):
        with pytest.raises(FormatoInvalidoError):
            extractor.extract(tmp_path / "no_existe.pdf")

    def test_extension_inesperada(self, extractor, tmp_path):
        ruta = tmp_path / "resumen.txt"
        ruta.write_text("hola", encoding="utf-8")
        with pytest.raises(FormatoInvalidoError):
            extractor.extract(ruta)

    def test_pdf_corrupto(self, extractor, tmp_path):
        ruta = tmp_path / "roto.pdf"
        ruta.write_bytes(b"esto no es un PDF")
        with pytest.raises(ExtractionError):
            extractor.extract(ruta)
