"""
Herramientas compartidas para recorrer el texto de un resumen de tarjeta.

El texto que llega del extractor es una sola tira con los espacios
colapsados: no hay líneas ni columnas confiables. Cada fila del detalle
se reconoce porque empieza con una fecha, y se extiende hasta la fecha
siguiente o el final del texto. A ese tramo lo llamamos "chunk".

Dentro de un chunk conviven varios números que se parecen entre sí:

    05/06 051695 22.314,05
    ^cuota ^comprobante ^monto

Este módulo ofrece las piezas para separarlos, siempre trabajando con
las posiciones exactas de cada token (spans), de modo que al armar la
descripción se borra ESE token y no cualquier otro número con los mismos
dígitos.
"""

import re
from dataclasses import dataclass

from src.domain.shared.money import MONEY_TOKEN
from src.domain.shared.text_cleaner import clean_whitespace

INSTALLMENT_TOKEN = re.compile(r"\b(\d{2}/\d{2})\b")
"""Cuota "NN/NN" sin prefijo (Galicia). El grupo 1 es el código de cuota."""

RECEIPT_TOKEN = re.compile(r"\b\d{5,7}\b")
"""Número de comprobante/cupón: 5 a 7 dígitos sueltos."""

TOTAL_CONSUMOS = re.compile(r"\bTotal\s+Consumos\b", re.IGNORECASE)
"""Marca de totales. Si queda en una descripción, la fila está mal cortada."""


@dataclass(frozen=True)
class TokensFila:
    """Tokens reconocidos dentro de un chunk, con sus posiciones."""

    montos: list[re.Match[str]]
    """Todos los montos con formato argentino, en orden de aparición."""

    cuota: re.Match[str] | None
    """Match de la cuota (el grupo 1 es "NN/NN"), o None."""

    comprobante: re.Match[str] | None
    """Match del comprobante de 5-7 dígitos, o None."""

    @property
    def codigo_cuota(self) -> str | None:
        return self.cuota.group(1) if self.cuota else None

    @property
    def numero_comprobante(self) -> str | None:
        return self.comprobante.group(0) if self.comprobante else None

    @property
    def spans(self) -> list[tuple[int, int]]:
        """Posiciones de todos los tokens que no forman parte de la descripción."""
        spans = [m.span() for m in self.montos]
        if self.cuota:
            spans.append(self.cuota.span())
        if self.comprobante:
            spans.append(self.comprobante.span())
        return spans


def row_start_pattern(date_regex: str) -> re.Pattern[str]:
    """Compila el patrón de inicio de fila para un formato de fecha.

    La fecha debe estar separada por espacios de lo que la rodea:
    así un "15-03-24" pegado a otro texto no parte la fila.
    """
    return re.compile(rf"(?<!\S)(?:{date_regex})(?=\s)")


def split_rows(text: str, row_start: re.Pattern[str]) -> list[tuple[str, str]]:
    """Divide el texto en filas (fecha, chunk).

    Se ubican todas las fechas de una pasada y cada chunk es el tramo
    entre el final de una fecha y el inicio de la siguiente. El costo es
    lineal en el largo del texto, sin backtracking.

    Las fechas sin contenido hasta la siguiente se ignoran.

    Ejemplos:
        >>> split_rows(
        ...     "15-03-24 Kiosco 350,00 16-03-24 Cafe 90,00",
        ...     row_start_pattern(r"\\d{2}-\\d{2}-\\d{2}"),
        ... )
        [('15-03-24', 'Kiosco 350,00'), ('16-03-24', 'Cafe 90,00')]
    """
    starts = list(row_start.finditer(text))
    rows: list[tuple[str, str]] = []

    for idx, match in enumerate(starts):
        end = starts[idx + 1].start() if idx + 1 < len(starts) else len(text)
        chunk = text[match.end() : end].strip()
        if chunk:
            rows.append((match.group(0), chunk))

    return rows


def mask_spans(text: str, spans: list[tuple[int, int]]) -> str:
    """Reemplaza cada span por espacios del mismo largo.

    Conserva las posiciones del resto del texto, de modo que los matches
    que se busquen después siguen siendo válidos sobre el texto original.
    """
    chars = list(text)
    for start, end in spans:
        chars[start:end] = " " * (end - start)
    return "".join(chars)


def find_receipt(text: str, after: int | None = None) -> re.Match[str] | None:
    """Busca el comprobante de 5-7 dígitos.

    Si se indica `after` (fin de la cuota), se prefiere el primer token
    ubicado después de esa posición: en el resumen la columna del
    comprobante va a la derecha de la cuota. Si no hay ninguno después,
    o no hubo cuota, se toma el primero del chunk.
    """
    if after is not None:
        match = RECEIPT_TOKEN.search(text, after)
        if match:
            return match
    return RECEIPT_TOKEN.search(text)


def extract_row_tokens(
    chunk: str,
    installment_pattern: re.Pattern[str] | None = INSTALLMENT_TOKEN,
    with_receipt: bool = True,
) -> TokensFila:
    """Reconoce montos, cuota y comprobante dentro de un chunk.

    Los montos se enmascaran antes de buscar cuota y comprobante, para
    que los dígitos de un monto sin puntos ("123456,00") no se lean como
    comprobante.

    Args:
        chunk: Texto de la fila, sin la fecha.
        installment_pattern: Patrón de cuota del banco (grupo 1 = "NN/NN").
                             None si la sección no tiene cuotas.
        with_receipt: False para secciones sin comprobante.
    """
    montos = list(MONEY_TOKEN.finditer(chunk))
    masked = mask_spans(chunk, [m.span() for m in montos])

    cuota = installment_pattern.search(masked) if installment_pattern else None
    comprobante = None
    if with_receipt:
        comprobante = find_receipt(masked, cuota.end() if cuota else None)

    return TokensFila(montos=montos, cuota=cuota, comprobante=comprobante)


def build_description(
    chunk: str,
    spans: list[tuple[int, int]],
    boilerplate: list[re.Pattern[str]] | None = None,
) -> str:
    """Arma la descripción borrando tokens y textos fijos del banco.

    1. Borra los spans exactos (montos, cuota, comprobante).
    2. Borra cada patrón de boilerplate (encabezados, pies, etiquetas).
    3. Colapsa espacios.
    """
    description = mask_spans(chunk, spans)
    for pattern in boilerplate or []:
        description = pattern.sub(" ", description)
    return clean_whitespace(description)
