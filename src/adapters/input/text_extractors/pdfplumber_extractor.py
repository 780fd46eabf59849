"""
Adaptador de entrada: Extractor de texto de resúmenes con pdfplumber.

Devuelve el texto de todas las páginas en un solo string, una página a
continuación de la otra. Los bank parsers trabajan sobre esa tira: no
necesitan saber en qué página cayó cada fila, y los encabezados o pies
que se repiten entre páginas los limpia cada parser.

Un PDF escaneado se abre sin error pero no trae texto: devuelve "" y el
dispatcher lo etiqueta "NoText(Scanned?)". No hay OCR.
"""

from pathlib import Path

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from src.domain.exceptions import ExtractionError, FormatoInvalidoError
from src.domain.ports.text_extractor import TextExtractor
from src.domain.shared.text_cleaner import clean_pdf_text


class PdfplumberExtractor(TextExtractor):
    """Extrae el texto embebido de un PDF."""

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> str:
        """Lee todas las páginas y las une con salto de línea.

        Raises:
            FormatoInvalidoError: La ruta no existe o no es un .pdf.
            ExtractionError: pdfplumber no pudo abrir el archivo
                             (corrupto o con contraseña).
        """
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "un PDF", "el archivo no existe")
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(str(file_path), "un PDF", f"extensión {file_path.suffix}")

        try:
            with pdfplumber.open(file_path) as pdf:
                if not pdf.pages:
                    raise ExtractionError(str(file_path), "el PDF no tiene páginas")
                paginas = [clean_pdf_text(page.extract_text() or "") for page in pdf.pages]
        except ExtractionError:
            raise
        except (PdfminerException, PDFSyntaxError) as e:
            raise ExtractionError(str(file_path), self._motivo(e))
        except Exception as e:
            # pdfminer no tiene una jerarquía común para PDFs rotos.
            raise ExtractionError(str(file_path), str(e) or type(e).__name__)

        return "\n".join(paginas).strip()

    @staticmethod
    def _motivo(error: Exception) -> str:
        """Traduce el error de pdfminer (o el que envuelve pdfplumber)."""
        causa = error.args[0] if error.args else error
        if isinstance(causa, PDFPasswordIncorrect) or "encrypt" in str(causa).lower():
            return "el PDF está protegido con contraseña"
        return f"PDF corrupto o inválido: {causa}"
