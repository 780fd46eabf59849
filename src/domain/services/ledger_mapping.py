"""
Servicio de dominio: Conversión de movimientos a transacciones del ledger.

Los parsers entregan montos con signo (negativo = gasto). El ledger
guarda el monto sin signo y un campo `tipo`. Además el ledger necesita
una clave de cuenta, que se deduce de la pista que dejó el parser.

El id y la fecha de creación se inyectan como funciones para que los
tests puedan fijarlos.
"""

import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from src.domain.models.entrada_rapida import TIPO_GASTO, TIPO_INGRESO, EntradaRapida
from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.models.transaccion import Transaccion

CUENTA_POR_DEFECTO = "cash_ars"

# (fragmento de la pista, clave de cuenta). Gana el primero que aparezca.
_CUENTAS_POR_PISTA: list[tuple[str, str]] = [
    ("Galicia", "galicia_credit_visa"),
    ("BBVA", "bbva_credit"),
]


def new_id() -> str:
    return str(uuid.uuid4())


def now() -> datetime:
    return datetime.now(timezone.utc)


def account_from_hint(cuenta_sugerida: str) -> str:
    """Deduce la clave de cuenta del ledger a partir de la pista del parser.

    Ejemplos:
        >>> account_from_hint("Galicia Crédito (VISA)")
        'galicia_credit_visa'
        >>> account_from_hint("")
        'cash_ars'
    """
    for fragmento, cuenta in _CUENTAS_POR_PISTA:
        if fragmento in cuenta_sugerida:
            return cuenta
    return CUENTA_POR_DEFECTO


def transaction_from_imported(
    movimiento: MovimientoImportado,
    make_id: Callable[[], str] = new_id,
    clock: Callable[[], datetime] = now,
) -> Transaccion:
    """Convierte un movimiento importado (monto con signo) en transacción."""
    return Transaccion(
        id=make_id(),
        creado=clock(),
        fecha=movimiento.fecha,
        concepto=movimiento.concepto,
        monto=abs(movimiento.monto),
        moneda=movimiento.moneda,
        tipo=TIPO_GASTO if movimiento.es_gasto else TIPO_INGRESO,
        cuenta=account_from_hint(movimiento.cuenta_sugerida),
        cuota=movimiento.cuota,
    )


def transaction_from_quick_entry(
    entrada: EntradaRapida,
    make_id: Callable[[], str] = new_id,
    clock: Callable[[], datetime] = now,
) -> Transaccion:
    """Convierte una carga rápida resuelta en transacción."""
    return Transaccion(
        id=make_id(),
        creado=clock(),
        fecha=entrada.fecha,
        concepto=entrada.concepto or "(sin descripción)",
        monto=entrada.monto,
        moneda=entrada.moneda,
        tipo=entrada.tipo,
        cuenta=entrada.cuenta,
    )
