"""
Tests para el importador de resúmenes (StatementImporter).

Se usan extractores y lectores falsos que devuelven texto/filas fijas, y
un logger en memoria: no hace falta un PDF real.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from src.domain.exceptions import ExtractionError, FormatoInvalidoError
from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.spreadsheet_reader import SpreadsheetReader
from src.domain.ports.text_extractor import TextExtractor
from src.domain.services.statement_importer import StatementImporter
from src.infrastructure.registry import create_default_registry

TEXTO_GALICIA = (
    "Resumen de tarjeta de crédito VISA Banco Galicia DETALLE DEL CONSUMO "
    "15-03-24 Verdulería Don Jose 1.234,50 15-03-24 Kiosco 350,00 TOTAL A PAGAR 1.584,50"
)


class MemoryLogger(ProcessLogger):
    """Logger que guarda los eventos en una lista."""

    def __init__(self):
        self.eventos: list[tuple] = []

    def log_file_received(self, file_path, file_type):
        self.eventos.append(("recibido", file_path.name))

    def log_file_skipped(self, file_path, reason):
        self.eventos.append(("descartado", file_path.name))

    def log_extraction_start(self, file_path, extractor_name):
        self.eventos.append(("lectura", file_path.name, extractor_name))

    def log_format_detected(self, file_path, detected, num_movimientos):
        self.eventos.append(("detectado", file_path.name, detected, num_movimientos))

    def log_no_text(self, file_path):
        self.eventos.append(("sin_texto", file_path.name))

    def log_format_unknown(self, file_path):
        self.eventos.append(("desconocido", file_path.name))

    def log_error(self, file_path, error):
        self.eventos.append(("error", file_path.name, type(error).__name__))

    def log_import_saved(self, origen, detected, count):
        self.eventos.append(("guardado", origen))

    def log_quick_entry(self, line, accepted, detail):
        self.eventos.append(("rapida", line, accepted))

    def get_summary(self):
        return {}

    def tipos(self) -> list[str]:
        return [evento[0] for evento in self.eventos]


class FakeExtractor(TextExtractor):
    """Devuelve un texto fijo por nombre de archivo."""

    def __init__(self, textos: dict[str, str]):
        self._textos = textos

    @property
    def name(self):
        return "fake-pdf"

    def can_handle(self, file_path):
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path):
        texto = self._textos[file_path.name]
        if texto is None:
            raise ExtractionError(str(file_path), "PDF corrupto")
        return texto


class FakeReader(SpreadsheetReader):
    def __init__(self, movimientos=None, error=None):
        self._movimientos = movimientos or []
        self._error = error

    @property
    def name(self):
        return "fake-xlsx"

    def can_handle(self, file_path):
        return file_path.suffix.lower() == ".xlsx"

    def read(self, file_path):
        if self._error:
            raise self._error
        return list(self._movimientos)


def _importer(textos=None, reader=None, logger=None):
    return StatementImporter(
        text_extractors=[FakeExtractor(textos or {})],
        spreadsheet_readers=[reader or FakeReader()],
        parser_registry=create_default_registry(),
        logger=logger or MemoryLogger(),
    )


class TestImportFile:
    def test_pdf_galicia(self):
        logger = MemoryLogger()
        importer = _importer({"galicia.pdf": TEXTO_GALICIA}, logger=logger)

        resultado = importer.import_file(Path("galicia.pdf"))

        assert resultado.detectado == "Galicia Visa"
        assert len(resultado.movimientos) == 2
        assert ("detectado", "galicia.pdf", "Galicia Visa", 2) in logger.eventos

    def test_pdf_sin_texto(self):
        logger = MemoryLogger()
        importer = _importer({"escaneado.pdf": ""}, logger=logger)

        resultado = importer.import_file(Path("escaneado.pdf"))

        assert resultado.detectado == "NoText(Scanned?)"
        assert "sin_texto" in logger.tipos()

    def test_pdf_desconocido(self):
        logger = MemoryLogger()
        importer = _importer({"otro.pdf": "Extracto de caja de ahorro. " * 5}, logger=logger)

        resultado = importer.import_file(Path("otro.pdf"))

        assert resultado.detectado == "Unknown"
        assert "desconocido" in logger.tipos()

    def test_error_de_extraccion_no_propaga(self):
        logger = MemoryLogger()
        importer = _importer({"roto.pdf": None}, logger=logger)

        assert importer.import_file(Path("roto.pdf")) is None
        assert ("error", "roto.pdf", "ExtractionError") in logger.eventos

    def test_extension_no_soportada(self):
        logger = MemoryLogger()
        importer = _importer(logger=logger)

        assert importer.import_file(Path("notas.txt")) is None
        assert "descartado" in logger.tipos()

    def test_planilla_se_etiqueta_xlsx(self):
        mov = MovimientoImportado(
            fecha=date(2024, 3, 15), concepto="Kiosco", monto=Decimal("-350"), moneda="ARS"
        )
        importer = _importer(reader=FakeReader([mov]))

        resultado = importer.import_file(Path("gastos.xlsx"))

        assert resultado.detectado == "XLSX"
        assert resultado.movimientos == [mov]

    def test_planilla_vacia_es_desconocida(self):
        importer = _importer(reader=FakeReader([]))
        assert importer.import_file(Path("vacia.xlsx")).detectado == "Unknown"

    def test_planilla_sin_columnas(self):
        logger = MemoryLogger()
        error = FormatoInvalidoError("gastos.xlsx", "columnas Fecha, Descripción y Monto")
        importer = _importer(reader=FakeReader(error=error), logger=logger)

        assert importer.import_file(Path("gastos.xlsx")) is None
        assert ("error", "gastos.xlsx", "FormatoInvalidoError") in logger.eventos


class TestImportDirectory:
    def test_solo_devuelve_los_que_tienen_movimientos(self, tmp_path):
        for nombre in ("a_galicia.pdf", "b_escaneado.pdf", "c_notas.txt"):
            (tmp_path / nombre).write_bytes(b"")
        importer = _importer({"a_galicia.pdf": TEXTO_GALICIA, "b_escaneado.pdf": ""})

        resultados = importer.import_directory(tmp_path)

        assert list(resultados) == ["a_galicia.pdf"]

    def test_no_es_directorio(self, tmp_path):
        with pytest.raises(ValueError, match="directorio"):
            _importer().import_directory(tmp_path / "no_existe")
