"""
Modelo de dominio: Resultado de la carga rápida.

La carga rápida ("Verdulería 900 ayer efectivo") se resuelve en una sola
transacción o falla completa. Por eso el resultado es una suma de dos
tipos y no un objeto con campos opcionales:

    ResultadoEntradaRapida = EntradaRapida | EntradaRechazada

Ambos exponen `ok` para que quien llama pueda preguntar sin isinstance.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

TIPO_GASTO = "expense"
TIPO_INGRESO = "income"


@dataclass(frozen=True)
class EntradaRapida:
    """Carga rápida resuelta."""

    concepto: str
    """Palabras que no se reconocieron como monto, fecha ni cuenta.
    Puede estar vacío: el ledger pone '(sin descripción)'."""

    monto: Decimal
    """Magnitud del monto, siempre positiva."""

    fecha: date
    tipo: str
    """'expense' o 'income', derivado del signo tipeado."""

    cuenta: str
    """Clave de cuenta del ledger ('cash_ars', 'bbva_credit', ...)."""

    moneda: str = "ARS"

    ok = True

    def __post_init__(self) -> None:
        if self.monto <= Decimal("0"):
            raise ValueError(f"monto debe ser positivo: {self.monto}")
        if self.tipo not in (TIPO_GASTO, TIPO_INGRESO):
            raise ValueError(f"tipo inválido: '{self.tipo}'")


@dataclass(frozen=True)
class EntradaRechazada:
    """La línea no se pudo resolver."""

    motivo: str

    ok = False


ResultadoEntradaRapida = EntradaRapida | EntradaRechazada
