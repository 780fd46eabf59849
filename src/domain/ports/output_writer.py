"""
Puerto de salida: Escritor de resultados.

Define el contrato para exportar los movimientos detectados a un archivo
(Excel hoy; CSV o JSON mañana) sin que el dominio conozca el formato.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.resultado_deteccion import ResultadoDeteccion


class OutputWriter(ABC):
    """Interfaz para escribir resultados de importación."""

    @abstractmethod
    def write(self, resultados: dict[str, ResultadoDeteccion], output_path: Path) -> Path:
        """Escribe uno o varios resultados en un solo archivo.

        Args:
            resultados: Nombre de archivo de origen → resultado detectado.
            output_path: Ruta donde crear el archivo.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si no hay nada que escribir o falla la escritura.
        """
        ...
