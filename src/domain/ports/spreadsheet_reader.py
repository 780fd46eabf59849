"""
Puerto de entrada: Lector de planillas.

Una planilla exportada del home banking ya trae las filas separadas en
columnas, así que no pasa por el motor de texto: el lector devuelve
directamente los movimientos, y el importador los etiqueta como "XLSX".
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.movimiento_importado import MovimientoImportado


class SpreadsheetReader(ABC):
    """Interfaz para leer movimientos de una planilla."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        ...

    @abstractmethod
    def read(self, file_path: Path) -> list[MovimientoImportado]:
        """Lee los movimientos de la primera hoja.

        Las filas incompletas (sin fecha, descripción o monto válido) se
        descartan en silencio, igual que en los parsers de PDF.

        Raises:
            ExtractionError: Si el archivo no se puede abrir.
            FormatoInvalidoError: Si faltan las columnas esperadas.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        ...
