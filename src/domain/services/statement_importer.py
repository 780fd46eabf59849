"""
Servicio de dominio: Importador de resúmenes.

Orquesta la importación de un archivo:
1. Recibe una ruta.
2. Si es una planilla, la lee un SpreadsheetReader y el resultado se
   etiqueta "XLSX".
3. Si es un PDF, un TextExtractor saca el texto y el dispatcher decide
   qué parser lo entiende.
4. Informa cada paso al ProcessLogger.

Los errores de infraestructura (PDF corrupto, planilla sin columnas) se
registran y el archivo se saltea: un archivo roto no corta una carpeta.
"""

from collections.abc import Sequence
from pathlib import Path

from src.domain.exceptions import FipeError
from src.domain.models.resultado_deteccion import (
    DETECTADO_DESCONOCIDO,
    DETECTADO_SIN_TEXTO,
    DETECTADO_XLSX,
    ResultadoDeteccion,
)
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.spreadsheet_reader import SpreadsheetReader
from src.domain.ports.text_extractor import TextExtractor
from src.domain.services.bank_dispatcher import MIN_TEXT_LENGTH, parse_bank_pdf
from src.infrastructure.registry import BankParserRegistry


class StatementImporter:
    """Importa un archivo (PDF o planilla) y produce un ResultadoDeteccion.

    Recibe sus dependencias por constructor. No sabe qué extractor ni
    qué parsers concretos se están usando, solo conoce los puertos.
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        spreadsheet_readers: Sequence[SpreadsheetReader],
        parser_registry: BankParserRegistry,
        logger: ProcessLogger,
        min_length: int = MIN_TEXT_LENGTH,
    ) -> None:
        """
        Args:
            text_extractors: Extractores de texto en orden de prioridad.
            spreadsheet_readers: Lectores de planillas en orden de prioridad.
            parser_registry: Parsers de resumen a probar, en orden.
            logger: Bitácora de procesamiento.
            min_length: Umbral de texto mínimo para considerar que hay texto.
        """
        self._extractors = text_extractors
        self._readers = spreadsheet_readers
        self._registry = parser_registry
        self._logger = logger
        self._min_length = min_length

    def import_file(self, file_path: Path) -> ResultadoDeteccion | None:
        """Importa un archivo.

        Returns:
            ResultadoDeteccion (posiblemente vacío, con la etiqueta que
            explica por qué). None si el archivo se descartó o falló.
        """
        self._logger.log_file_received(file_path, file_path.suffix)

        try:
            resultado = self._importar(file_path)
        except FipeError as e:
            self._logger.log_error(file_path, e)
            return None

        if resultado is None:
            return None

        if resultado.detectado == DETECTADO_SIN_TEXTO:
            self._logger.log_no_text(file_path)
        elif resultado.vacio:
            self._logger.log_format_unknown(file_path)
        else:
            self._logger.log_format_detected(
                file_path, resultado.detectado, len(resultado.movimientos)
            )
        return resultado

    def import_directory(self, dir_path: Path) -> dict[str, ResultadoDeteccion]:
        """Importa todos los archivos soportados de un directorio (recursivo).

        Returns:
            Nombre de archivo → resultado, solo los que tienen movimientos.
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            p for p in dir_path.glob("**/*") if p.is_file() and self._soportado(p)
        )

        resultados: dict[str, ResultadoDeteccion] = {}
        for archivo in archivos:
            resultado = self.import_file(archivo)
            if resultado is not None and not resultado.vacio:
                resultados[archivo.name] = resultado

        return resultados

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _importar(self, file_path: Path) -> ResultadoDeteccion | None:
        reader = self._find(self._readers, file_path)
        if reader is not None:
            self._logger.log_extraction_start(file_path, reader.name)
            movimientos = reader.read(file_path)
            detectado = DETECTADO_XLSX if movimientos else DETECTADO_DESCONOCIDO
            return ResultadoDeteccion(movimientos=movimientos, detectado=detectado)

        extractor = self._find(self._extractors, file_path)
        if extractor is None:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún lector puede manejar '{file_path.suffix}'",
            )
            return None

        self._logger.log_extraction_start(file_path, extractor.name)
        texto = extractor.extract(file_path)
        return parse_bank_pdf(texto, registry=self._registry, min_length=self._min_length)

    def _soportado(self, file_path: Path) -> bool:
        return (
            self._find(self._readers, file_path) is not None
            or self._find(self._extractors, file_path) is not None
        )

    @staticmethod
    def _find(candidatos, file_path: Path):
        """Devuelve el primer adaptador cuyo can_handle acepte el archivo."""
        for candidato in candidatos:
            if candidato.can_handle(file_path):
                return candidato
        return None
