"""
Adaptador de entrada: Parser de resúmenes BBVA Visa (Argentina).

Del resumen solo interesan dos secciones:
1. "Consumos <Titular>"            → consumos del titular (con cuota y cupón)
2. "Impuestos, cargos e intereses" → cargos del banco (sin cuota ni cupón)
Pagos, saldos y legales se ignoran.

LÓGICA DE PARSEO:
1. Acota cada sección con sus marcadores.
2. Divide en filas: cada fila empieza con una fecha DD-Mon-YY ("05-Oct-24").
3. Por cada fila:
   a. Quita encabezados de tabla y pies de página que el extractor pega
      al cambiar de página ("FECHA DESCRIPCIÓN NRO. CUPÓN PESOS DÓLARES",
      "Página 2 de 4", ...).
   b. Corta la fila donde empieza "TOTAL CONSUMOS": lo anterior es un
      consumo válido. Las filas con "SALDO ACTUAL" o "Legales y avisos"
      se descartan completas.
   c. Moneda: si la fila dice "USD" o "U$S" es USD, si no ARS.
   d. Monto: la tabla tiene dos columnas (Pesos y Dólares). En filas en
      USD se toma el ÚLTIMO monto (columna Dólares); en ARS el PRIMERO
      (columna Pesos).
   e. Cuota "C.NN/NN" y cupón de 5-7 dígitos (solo en consumos).

TITULAR:
El encabezado de la sección de consumos lleva el nombre del titular
("Consumos Tadeo Medina Vetre"). Se puede pasar en el constructor; si no
se pasa, o si el resumen lo escribe distinto (otra tilde, otro titular),
se detecta del primer "Consumos Nombre Apellido" escrito en formato título.
Si tampoco se detecta, la sección de consumos va desde el principio del
texto hasta "Impuestos, cargos e intereses".
"""

import re
from decimal import Decimal

from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.ports.bank_parser import BankParser
from src.domain.shared.date_parser import parse_abbreviated_month_date
from src.domain.shared.money import parse_locale_amount
from src.domain.shared.statement_text import (
    build_description,
    extract_row_tokens,
    row_start_pattern,
    split_rows,
)
from src.domain.shared.text_cleaner import clean_whitespace, section_between


class BBVAVisaParser(BankParser):
    """Parser de resúmenes de tarjeta Visa de BBVA Argentina."""

    CUENTA_SUGERIDA: str = "BBVA VISA"

    # --- Marcadores de sección ---
    _INICIO_IMPUESTOS = re.compile(r"\bImpuestos,\s*cargos\s*e\s*intereses\b", re.IGNORECASE)
    _FIN_IMPUESTOS = re.compile(r"\bPlan\s+V\b|\bResumen\b|\bLegales\b", re.IGNORECASE)
    _DESDE_EL_PRINCIPIO = re.compile(r"^")

    # Nombre en formato título: "Tadeo Medina Vetre" (2 a 4 palabras).
    # Case-sensitive a propósito: así no se come el encabezado "FECHA ...".
    _TITULAR_DETECTABLE = re.compile(
        r"\bConsumos\s+((?:[A-ZÁÉÍÓÚÑ][a-záéíóúñ]+\s+){1,3}[A-ZÁÉÍÓÚÑ][a-záéíóúñ]+)\b"
    )

    _INICIO_FILA = row_start_pattern(r"\d{2}-[A-Za-z]{3}-\d{2}")

    _CUOTA = re.compile(r"\bC\.(\d{2}/\d{2})\b")

    # --- Encabezados y pies que se repiten en cada página ---
    _ENCABEZADOS: list[re.Pattern[str]] = [
        re.compile(
            r"FECHA\s*DESCRIPCI(?:Ó|O)N\s*NRO\.?\s*CUP(?:Ó|O)N\s*PESOS\s*D(?:Ó|O)LARES",
            re.IGNORECASE,
        ),
        re.compile(r"Impuestos,\s*cargos\s*e\s*intereses", re.IGNORECASE),
        re.compile(r"\bP\s*\.?\s*\d+\s*de\s*\d+\b", re.IGNORECASE),
        re.compile(r"Página\s*\d+\s*de\s*\d+", re.IGNORECASE),
        re.compile(r"Resumen\s*Visa", re.IGNORECASE),
        re.compile(r"Sobre\s*\(\d+\)", re.IGNORECASE),
    ]

    # --- Totales pegados al final de una fila: se corta ahí ---
    _CORTE_TOTALES = re.compile(r"\bTOTAL\s+CONSUMOS\b", re.IGNORECASE)

    # --- Filas que no son consumos: se descartan completas ---
    _FILAS_DESCARTADAS = re.compile(
        r"\bSALDO\s+ACTUAL\b|\bLegales\s+y\s+avisos\b",
        re.IGNORECASE,
    )

    _MARCA_USD = re.compile(r"\bUSD\b|U\$S", re.IGNORECASE)

    # Etiquetas de moneda/columna que no son parte de la descripción.
    _ETIQUETAS_COLUMNA: list[re.Pattern[str]] = [
        re.compile(r"\bUSD\b", re.IGNORECASE),
        re.compile(r"U\$S", re.IGNORECASE),
        re.compile(r"\bPESOS\b", re.IGNORECASE),
        re.compile(r"\bD(?:Ó|O)LARES\b", re.IGNORECASE),
    ]

    def __init__(self, titular: str | None = None) -> None:
        """
        Args:
            titular: Nombre del titular tal como aparece en el encabezado
                     "Consumos <Titular>". None para detectarlo del texto.
        """
        self._titular = titular.strip() if titular and titular.strip() else None

    @property
    def bank_name(self) -> str:
        return "BBVA Visa"

    def parse(self, text: str) -> list[MovimientoImportado]:
        """Parsea consumos e impuestos de un resumen BBVA Visa."""
        normalizado = clean_whitespace(text)
        inicio_consumos = self._patron_consumos(normalizado)

        encabezados = list(self._ENCABEZADOS)
        if inicio_consumos is not self._DESDE_EL_PRINCIPIO:
            encabezados.append(inicio_consumos)

        consumos = section_between(normalizado, inicio_consumos, self._INICIO_IMPUESTOS)
        # Sin el título de impuestos no hay sección: el texto completo ya se
        # leyó como consumos.
        impuestos = ""
        if self._INICIO_IMPUESTOS.search(normalizado):
            impuestos = section_between(normalizado, self._INICIO_IMPUESTOS, self._FIN_IMPUESTOS)

        movimientos = self._procesar_seccion(consumos, encabezados, con_cuota=True)
        movimientos.extend(self._procesar_seccion(impuestos, encabezados, con_cuota=False))
        return movimientos

    # =================================================================
    # MÉTODOS PRIVADOS: Secciones
    # =================================================================

    def _patron_consumos(self, normalizado: str) -> re.Pattern[str]:
        """Devuelve el patrón que marca el inicio de la sección de consumos."""
        if self._titular is not None:
            patron = self._patron_titular(self._titular)
            if patron.search(normalizado):
                return patron

        # Titular no indicado o escrito distinto en el resumen.
        match = self._TITULAR_DETECTABLE.search(normalizado)
        if match is None:
            return self._DESDE_EL_PRINCIPIO
        return self._patron_titular(match.group(1))

    @staticmethod
    def _patron_titular(titular: str) -> re.Pattern[str]:
        nombre = r"\s+".join(re.escape(palabra) for palabra in titular.split())
        return re.compile(rf"\bConsumos\s+{nombre}\b", re.IGNORECASE)

    def _procesar_seccion(
        self,
        seccion: str,
        encabezados: list[re.Pattern[str]],
        con_cuota: bool,
    ) -> list[MovimientoImportado]:
        movimientos: list[MovimientoImportado] = []
        for fecha_txt, chunk in split_rows(seccion, self._INICIO_FILA):
            movimiento = self._procesar_fila(fecha_txt, chunk, encabezados, con_cuota)
            if movimiento is not None:
                movimientos.append(movimiento)
        return movimientos

    # =================================================================
    # MÉTODOS PRIVADOS: Filas
    # =================================================================

    def _procesar_fila(
        self,
        fecha_txt: str,
        chunk: str,
        encabezados: list[re.Pattern[str]],
        con_cuota: bool,
    ) -> MovimientoImportado | None:
        """Convierte una fila en movimiento, o None si la fila no sirve."""
        try:
            fecha = parse_abbreviated_month_date(fecha_txt)
        except ValueError:
            return None

        chunk = self._cortar_en_totales(self._quitar_encabezados(chunk, encabezados))
        if not chunk or self._FILAS_DESCARTADAS.search(chunk):
            return None

        es_usd = bool(self._MARCA_USD.search(chunk))

        tokens = extract_row_tokens(
            chunk,
            self._CUOTA if con_cuota else None,
            with_receipt=con_cuota,
        )
        if not tokens.montos:
            return None

        # Columna Dólares = último monto; columna Pesos = primero.
        token_monto = tokens.montos[-1] if es_usd else tokens.montos[0]
        try:
            monto = parse_locale_amount(token_monto.group(0))
        except ValueError:
            return None
        if monto == Decimal("0"):
            return None

        concepto = build_description(chunk, tokens.spans, self._ETIQUETAS_COLUMNA)
        if not concepto:
            return None

        return MovimientoImportado(
            fecha=fecha,
            concepto=concepto,
            monto=-abs(monto),
            moneda="USD" if es_usd else "ARS",
            cuenta_sugerida=self.CUENTA_SUGERIDA,
            cuota=tokens.codigo_cuota,
            comprobante=tokens.numero_comprobante,
            texto_crudo=f"{fecha_txt} {chunk}",
        )

    @staticmethod
    def _quitar_encabezados(chunk: str, encabezados: list[re.Pattern[str]]) -> str:
        """Borra encabezados de tabla y pies de página pegados a la fila.

        Ejemplo:
            "NETFLIX 4.500,00 Página 2 de 4 FECHA DESCRIPCIÓN NRO. CUPÓN PESOS DÓLARES"
            → "NETFLIX 4.500,00"
        """
        for patron in encabezados:
            chunk = patron.sub(" ", chunk)
        return clean_whitespace(chunk)

    def _cortar_en_totales(self, chunk: str) -> str:
        """Corta la fila donde empieza "TOTAL CONSUMOS".

        Ejemplos:
            "UBER 234567 3.000,00 TOTAL CONSUMOS 7.500,00" → "UBER 234567 3.000,00"
            "TOTAL CONSUMOS 7.500,00" → ""
        """
        match = self._CORTE_TOTALES.search(chunk)
        if match is None:
            return chunk
        return chunk[: match.start()].strip()
