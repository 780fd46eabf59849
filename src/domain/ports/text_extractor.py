"""
Puerto de entrada: Extractor de texto.

Define el contrato para obtener el texto crudo de un resumen en PDF.
El motor de parseo arranca recién cuando hay un string: todo lo que
tenga que ver con el formato binario del archivo vive detrás de este
puerto.

    TextExtractor (interfaz)
    └── PdfplumberExtractor     → PDFs nativos (texto embebido)

Los PDFs escaneados (solo imagen) no se leen con OCR: el extractor
devuelve poco o ningún texto y el dispatcher lo informa como
"NoText(Scanned?)".
"""

from abc import ABC, abstractmethod
from pathlib import Path


class TextExtractor(ABC):
    """Interfaz para extraer texto de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        El importador usa el primer extractor cuyo can_handle devuelva True.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> str:
        """Extrae el texto del archivo.

        Returns:
            Texto de todas las páginas, una página por línea de bloque,
            en el orden en que las emite la librería.

        Raises:
            ExtractionError: Si falla la extracción (archivo corrupto,
                            protegido, librería no disponible, etc.)
            FormatoInvalidoError: Si el archivo no existe o no es del tipo esperado.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Para la bitácora."""
        ...
