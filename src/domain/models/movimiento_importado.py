"""
Modelo de dominio: Movimiento importado de un resumen de tarjeta.

Es la unidad de salida de los bank parsers: una fila del detalle del
resumen ya limpia y normalizada.

Decisiones de diseño:
- `Decimal` para el monto (nunca float).
- `date` para la fecha; la representación ISO se obtiene con `fecha_iso`.
- El monto lleva signo: negativo = gasto, positivo = ingreso. En los
  resúmenes todos los consumos e impuestos son gastos.
- No existe un movimiento "a medio armar": si una fila no tiene monto
  válido, el parser la descarta y nunca construye la instancia.
"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

MONEDAS_VALIDAS = ("ARS", "USD")


@dataclass(frozen=True)
class MovimientoImportado:
    """Una fila del resumen convertida en movimiento."""

    fecha: date
    """Fecha del consumo."""

    concepto: str
    """Descripción limpia (sin montos, cuota ni comprobante)."""

    monto: Decimal
    """Monto con signo. Nunca cero ni infinito."""

    moneda: str
    """'ARS' o 'USD'. Se etiqueta por fila, nunca se convierte."""

    cuenta_sugerida: str = ""
    """Texto que nombra la tarjeta detectada ('Galicia Crédito (VISA)').
    Es solo una pista para el ledger, no una clave."""

    cuota: str | None = None
    """Código de cuota 'NN/NN' (ej: '05/06' = cuota 5 de 6)."""

    comprobante: str | None = None
    """Número de comprobante/cupón de 5 a 7 dígitos."""

    texto_crudo: str = ""
    """Fecha + chunk original, para auditar de dónde salió la fila."""

    @property
    def fecha_iso(self) -> str:
        return self.fecha.isoformat()

    @property
    def es_gasto(self) -> bool:
        return self.monto < Decimal("0")

    def __post_init__(self) -> None:
        if not self.monto.is_finite():
            raise ValueError(f"monto no finito: {self.monto}")
        if self.monto == Decimal("0"):
            raise ValueError("monto no puede ser cero")
        if not self.concepto.strip():
            raise ValueError("concepto no puede estar vacío")
        if self.moneda not in MONEDAS_VALIDAS:
            raise ValueError(f"Moneda no reconocida: '{self.moneda}'. Esperado: ARS o USD")
        if self.cuota is not None and not re.fullmatch(r"\d{2}/\d{2}", self.cuota):
            raise ValueError(f"cuota con formato inválido: '{self.cuota}'")
        if self.comprobante is not None and not re.fullmatch(r"\d{5,7}", self.comprobante):
            raise ValueError(f"comprobante con formato inválido: '{self.comprobante}'")
