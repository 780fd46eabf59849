"""
Puerto de entrada: Parser de resúmenes de tarjeta.

Define el contrato que cada parser de banco debe cumplir.
Hay exactamente un BankParser por cada formato soportado:

    BankParser (interfaz)
    ├── GaliciaVisaParser
    └── BBVAVisaParser

¿Por qué recibe un string y no páginas?
Porque el extractor de texto ya entrega el contenido del PDF como una
sola tira. Los encabezados y pies que se repiten en cada página quedan
mezclados con las filas, y cada parser sabe cuáles limpiar.

¿Por qué devuelve una lista (posiblemente vacía) y no lanza excepciones?
Porque una lista vacía significa "este no es mi formato" y el dispatcher
prueba con el siguiente parser. Las filas que no cierran se descartan
en silencio dentro del parser.
"""

from abc import ABC, abstractmethod

from src.domain.models.movimiento_importado import MovimientoImportado


class BankParser(ABC):
    """Interfaz para parsear el texto de un resumen de un banco específico."""

    @property
    @abstractmethod
    def bank_name(self) -> str:
        """Etiqueta del formato que maneja este parser.

        Es la etiqueta que devuelve el dispatcher en
        ResultadoDeteccion.detectado ('Galicia Visa', 'BBVA Visa').
        """
        ...

    @abstractmethod
    def parse(self, text: str) -> list[MovimientoImportado]:
        """Parsea el texto crudo del resumen.

        Debe ser una función pura: el mismo texto produce siempre la
        misma lista, sin estado entre llamadas.

        Args:
            text: Texto extraído del PDF, con sus espacios originales.

        Returns:
            Movimientos reconocidos, en el orden en que aparecen.
            Lista vacía si el texto no corresponde a este formato.
        """
        ...
