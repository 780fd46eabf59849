"""
Servicio de dominio: Carga rápida de gastos.

Convierte una línea de texto libre en una transacción:

    "Verdulería 900 ayer efectivo"
    → concepto "Verdulería", monto 900, fecha = ayer, cuenta cash_ars

La línea se parte por espacios y cada token se asigna al primer slot
cuya regla lo acepte. Las reglas son una tabla ordenada de pares
(predicado, acción) que se evalúa de arriba a abajo:

    1. Monto      → el PRIMER número ("900", "12,50", "-3000")
    2. "ayer"     → fecha = hoy - 1 día
    3. D/M/YYYY   → fecha
    4. Cuenta     → 'bbva', 'galicia', 'efectivo'
    5. Resto      → descripción (en orden y con las mayúsculas originales)

Sólo el primer número es el monto: los siguientes caen a la descripción
("Nafta 5000 YPF 24" → concepto "Nafta YPF 24").

El signo tipeado define el tipo: "900" es un gasto y "-900" un ingreso.
El monto se guarda siempre sin signo.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from src.domain.models.entrada_rapida import (
    TIPO_GASTO,
    TIPO_INGRESO,
    EntradaRapida,
    EntradaRechazada,
    ResultadoEntradaRapida,
)
from src.domain.shared.date_parser import parse_slash_date

_NUMERO = re.compile(r"^-?\d+(?:[.,]\d+)?$")

_PALABRA_AYER = "ayer"

CUENTAS_POR_PALABRA: dict[str, str] = {
    "bbva": "bbva_credit",
    "galicia": "galicia_credit_visa",
    "efectivo": "cash_ars",
}


@dataclass
class _Estado:
    """Slots que se van llenando mientras se recorren los tokens."""

    fecha: date
    cuenta: str
    monto: Decimal | None = None
    palabras: list[str] = field(default_factory=list)


_Regla = tuple[Callable[[str, _Estado], bool], Callable[[str, _Estado], None]]


class QuickEntryParser:
    """Parser de la gramática de carga rápida.

    `today` se inyecta para que "ayer" sea testeable sin depender del reloj.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today
        self._reglas: list[_Regla] = [
            (self._es_monto, self._asignar_monto),
            (self._es_ayer, self._asignar_ayer),
            (self._es_fecha, self._asignar_fecha),
            (self._es_cuenta, self._asignar_cuenta),
            (lambda token, estado: True, self._agregar_a_descripcion),
        ]

    def parse(
        self,
        line: str,
        default_account: str,
        default_date: date | None = None,
    ) -> ResultadoEntradaRapida:
        """Parsea una línea de carga rápida.

        Args:
            line: Texto tipeado por el usuario.
            default_account: Cuenta si la línea no nombra ninguna.
            default_date: Fecha si la línea no trae una. None = hoy.

        Returns:
            EntradaRapida si la línea tiene monto, EntradaRechazada si no.
        """
        if not line.strip():
            return EntradaRechazada(motivo="La línea está vacía")

        estado = _Estado(fecha=default_date or self._today(), cuenta=default_account)

        for token in line.split():
            for predicado, accion in self._reglas:
                if predicado(token, estado):
                    accion(token, estado)
                    break

        if estado.monto is None:
            return EntradaRechazada(motivo="No se encontró un monto")
        if estado.monto == Decimal("0"):
            return EntradaRechazada(motivo="El monto no puede ser cero")

        return EntradaRapida(
            concepto=" ".join(estado.palabras),
            monto=abs(estado.monto),
            fecha=estado.fecha,
            tipo=TIPO_GASTO if estado.monto > Decimal("0") else TIPO_INGRESO,
            cuenta=estado.cuenta,
        )

    # =================================================================
    # REGLAS: (predicado, acción)
    # =================================================================

    @staticmethod
    def _es_monto(token: str, estado: _Estado) -> bool:
        return estado.monto is None and bool(_NUMERO.match(token))

    @staticmethod
    def _asignar_monto(token: str, estado: _Estado) -> None:
        estado.monto = Decimal(token.replace(",", "."))

    @staticmethod
    def _es_ayer(token: str, estado: _Estado) -> bool:
        return token.lower() == _PALABRA_AYER

    def _asignar_ayer(self, token: str, estado: _Estado) -> None:
        estado.fecha = self._today() - timedelta(days=1)

    @staticmethod
    def _es_fecha(token: str, estado: _Estado) -> bool:
        try:
            parse_slash_date(token)
        except ValueError:
            return False
        return True

    @staticmethod
    def _asignar_fecha(token: str, estado: _Estado) -> None:
        estado.fecha = parse_slash_date(token)

    @staticmethod
    def _es_cuenta(token: str, estado: _Estado) -> bool:
        return token.lower() in CUENTAS_POR_PALABRA

    @staticmethod
    def _asignar_cuenta(token: str, estado: _Estado) -> None:
        estado.cuenta = CUENTAS_POR_PALABRA[token.lower()]

    @staticmethod
    def _agregar_a_descripcion(token: str, estado: _Estado) -> None:
        estado.palabras.append(token)


def parse_quick_entry(
    line: str,
    default_account: str,
    default_date: date | None = None,
    today: Callable[[], date] = date.today,
) -> ResultadoEntradaRapida:
    """Atajo funcional sobre QuickEntryParser."""
    return QuickEntryParser(today=today).parse(line, default_account, default_date)
