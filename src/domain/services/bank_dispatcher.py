"""
Servicio de dominio: Dispatcher de formatos de resumen.

Recibe el texto crudo de un PDF y decide qué parser lo entiende:

1. Si el texto normalizado es demasiado corto, el PDF probablemente es
   una imagen escaneada: se devuelve "NoText(Scanned?)" sin probar nada.
2. Si no, se prueban los parsers del registro en orden y gana el primero
   que devuelva movimientos.
3. Si ninguno devuelve nada: "Unknown".

Nunca se mezclan resultados de dos parsers.
"""

from src.domain.models.resultado_deteccion import (
    DETECTADO_DESCONOCIDO,
    DETECTADO_SIN_TEXTO,
    ResultadoDeteccion,
)
from src.domain.shared.text_cleaner import clean_whitespace
from src.infrastructure.registry import BankParserRegistry, create_default_registry

MIN_TEXT_LENGTH = 80
"""Largo mínimo del texto normalizado para considerar que el PDF tiene texto.

Es la única política para distinguir un PDF imagen de un resumen vacío.
"""


def parse_bank_pdf(
    text: str,
    registry: BankParserRegistry | None = None,
    min_length: int = MIN_TEXT_LENGTH,
) -> ResultadoDeteccion:
    """Detecta el formato del resumen y extrae sus movimientos.

    Args:
        text: Texto extraído del PDF.
        registry: Parsers a probar, en orden. None usa el registro por defecto.
        min_length: Umbral de texto mínimo (caracteres, ya colapsados).

    Returns:
        ResultadoDeteccion con los movimientos y la etiqueta del formato.

    Ejemplos:
        >>> parse_bank_pdf("   ").detectado
        'NoText(Scanned?)'
    """
    if len(clean_whitespace(text)) < min_length:
        return ResultadoDeteccion(movimientos=[], detectado=DETECTADO_SIN_TEXTO)

    if registry is None:
        registry = create_default_registry()

    for parser in registry.parsers:
        movimientos = parser.parse(text)
        if movimientos:
            return ResultadoDeteccion(movimientos=movimientos, detectado=parser.bank_name)

    return ResultadoDeteccion(movimientos=[], detectado=DETECTADO_DESCONOCIDO)
