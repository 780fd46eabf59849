"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio que ocurren al importar resúmenes y cargar
gastos, sin decir cómo se registran:
- "Se recibió un archivo" (no "INFO: archivo recibido")
- "El PDF no tiene texto" (no "WARNING: texto vacío")

Implementaciones: consola en el CLI, acumulador en memoria en los tests.
Los parsers no loguean: son funciones puras y no conocen este puerto.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para importar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo se descartó (extensión no soportada, etc.)."""
        ...

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        """Registra el inicio de la lectura del archivo."""
        ...

    # --- Detección ---

    @abstractmethod
    def log_format_detected(self, file_path: Path, detected: str, num_movimientos: int) -> None:
        """Registra el formato detectado y cuántas filas se reconocieron."""
        ...

    @abstractmethod
    def log_no_text(self, file_path: Path) -> None:
        """Registra que el PDF no tiene texto utilizable (¿escaneado?)."""
        ...

    @abstractmethod
    def log_format_unknown(self, file_path: Path) -> None:
        """Registra que ningún parser reconoció filas en el archivo."""
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error de infraestructura al procesar un archivo."""
        ...

    # --- Ledger ---

    @abstractmethod
    def log_import_saved(self, origen: str, detected: str, count: int) -> None:
        """Registra que un lote se guardó en el ledger."""
        ...

    @abstractmethod
    def log_quick_entry(self, line: str, accepted: bool, detail: str) -> None:
        """Registra el resultado de una carga rápida.

        Args:
            line: Texto tipeado.
            accepted: Si la línea se resolvió en una transacción.
            detail: Resumen de la transacción o motivo del rechazo.
        """
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            {
                'archivos_recibidos': int,
                'archivos_importados': int,
                'archivos_descartados': int,
                'archivos_sin_filas': int,
                'archivos_con_error': int,
                'total_movimientos': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
