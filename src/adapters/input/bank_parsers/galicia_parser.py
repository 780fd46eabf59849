"""
Adaptador de entrada: Parser de resúmenes Galicia Visa.

LÓGICA DE PARSEO:
1. Acota el texto a la sección "DETALLE DEL CONSUMO" → "TOTAL A PAGAR".
2. Divide en filas: cada fila empieza con una fecha DD-MM-YY.
3. Por cada fila:
   a. Descarta filas de consolidado y de pago recibido.
   b. Si el extractor pegó la línea "TARJETA 9224 Total Consumos ..."
      dentro de la fila, corta ahí (la parte anterior es un consumo
      válido y no se debe perder).
   c. Cuota: primer "NN/NN". Comprobante: 5-7 dígitos después de la cuota.
   d. Monto: ÚLTIMO monto de la fila (columna Pesos).
   e. Descripción: lo que queda sin montos, cuota ni comprobante.

Ejemplo de fila (texto colapsado):
    15-03-24 * MERPAGO*FARMACIA 05/06 051695 4.685,95
    → fecha 2024-03-15, concepto "MERPAGO*FARMACIA", cuota "05/06",
      comprobante "051695", monto -4685.95 ARS
"""

import re
from decimal import Decimal

from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.ports.bank_parser import BankParser
from src.domain.shared.date_parser import parse_numeric_date
from src.domain.shared.money import parse_locale_amount
from src.domain.shared.statement_text import (
    INSTALLMENT_TOKEN,
    TOTAL_CONSUMOS,
    build_description,
    extract_row_tokens,
    row_start_pattern,
    split_rows,
)
from src.domain.shared.text_cleaner import section_between


class GaliciaVisaParser(BankParser):
    """Parser de resúmenes de tarjeta Visa del Banco Galicia."""

    CUENTA_SUGERIDA: str = "Galicia Crédito (VISA)"

    # --- Marcadores de sección ---
    _INICIO_DETALLE = re.compile(r"\bDETALLE\s+DEL\s+CONSUMO\b", re.IGNORECASE)
    _FIN_DETALLE = re.compile(r"\bTOTAL\s+A\s+PAGAR\b", re.IGNORECASE)

    _INICIO_FILA = row_start_pattern(r"\d{2}-\d{2}-\d{2}")

    # --- Filas que no son consumos ---
    _FILAS_DESCARTADAS: list[re.Pattern[str]] = [
        re.compile(r"\bCONSOLIDADO\b", re.IGNORECASE),
        re.compile(r"\bSU\s+PAGO\s+EN\s+PESOS\b", re.IGNORECASE),
    ]

    # Totales de la tarjeta pegados dentro de una fila por el salto de página.
    _CORTE_TOTALES = re.compile(r"\bTARJETA\s+\d+\s+Total\s+Consumos\b", re.IGNORECASE)

    # Asterisco que Galicia antepone a algunos comercios.
    _ASTERISCO_INICIAL = re.compile(r"^\*\s*")

    @property
    def bank_name(self) -> str:
        return "Galicia Visa"

    def parse(self, text: str) -> list[MovimientoImportado]:
        """Parsea el detalle de consumos de un resumen Galicia Visa."""
        detalle = section_between(text, self._INICIO_DETALLE, self._FIN_DETALLE)

        movimientos: list[MovimientoImportado] = []
        for fecha_txt, chunk in split_rows(detalle, self._INICIO_FILA):
            movimiento = self._procesar_fila(fecha_txt, chunk)
            if movimiento is not None:
                movimientos.append(movimiento)

        return movimientos

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _procesar_fila(self, fecha_txt: str, chunk: str) -> MovimientoImportado | None:
        """Convierte una fila en movimiento, o None si la fila no sirve."""
        try:
            fecha = parse_numeric_date(fecha_txt)
        except ValueError:
            return None

        if any(patron.search(chunk) for patron in self._FILAS_DESCARTADAS):
            return None

        chunk = self._cortar_totales(chunk)
        if not chunk:
            return None

        tokens = extract_row_tokens(chunk, INSTALLMENT_TOKEN)
        if not tokens.montos:
            return None

        # Columna Pesos: el último monto de la fila.
        try:
            monto = parse_locale_amount(tokens.montos[-1].group(0))
        except ValueError:
            return None
        if monto == Decimal("0"):
            return None

        concepto = build_description(chunk, tokens.spans)
        concepto = self._ASTERISCO_INICIAL.sub("", concepto).strip()
        if not concepto or TOTAL_CONSUMOS.search(concepto):
            return None

        return MovimientoImportado(
            fecha=fecha,
            concepto=concepto,
            monto=-abs(monto),
            moneda="ARS",
            cuenta_sugerida=self.CUENTA_SUGERIDA,
            cuota=tokens.codigo_cuota,
            comprobante=tokens.numero_comprobante,
            texto_crudo=f"{fecha_txt} {chunk}",
        )

    def _cortar_totales(self, chunk: str) -> str:
        """Corta la fila donde empieza "TARJETA nnnn Total Consumos".

        Ejemplo:
            "AUTO ASIST 22.314,05 TARJETA 9224 Total Consumos 150.000,00"
            → "AUTO ASIST 22.314,05"
        """
        match = self._CORTE_TOTALES.search(chunk)
        if match is None:
            return chunk
        return chunk[: match.start()].strip()
