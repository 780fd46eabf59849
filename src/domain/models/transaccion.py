"""
Modelo de dominio: Transacción del ledger y lote de importación.

Es la forma en que el ledger guarda los movimientos, distinta de la que
producen los parsers:

- MovimientoImportado: monto CON signo (negativo = gasto).
- Transaccion: monto SIN signo + campo `tipo` ('expense'/'income').

La conversión entre ambas vive en services/ledger_mapping.py. El id y
la fecha de creación los asigna el ledger, nunca el parser: así el mismo
resumen parseado dos veces produce exactamente la misma lista.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from src.domain.models.entrada_rapida import TIPO_GASTO, TIPO_INGRESO


@dataclass(frozen=True)
class Transaccion:
    """Transacción persistida en el ledger."""

    id: str
    creado: datetime
    fecha: date
    concepto: str
    monto: Decimal
    """Siempre >= 0. El sentido lo da `tipo`."""

    moneda: str
    tipo: str
    cuenta: str
    cuota: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id no puede estar vacío")
        if self.monto < Decimal("0"):
            raise ValueError(f"monto no puede ser negativo: {self.monto}")
        if self.tipo not in (TIPO_GASTO, TIPO_INGRESO):
            raise ValueError(f"tipo inválido: '{self.tipo}'")


@dataclass(frozen=True)
class LoteImportacion:
    """Un resumen (o una carga manual) guardado de una sola vez."""

    id: str
    creado: datetime
    origen: str
    """Nombre del archivo o 'Manual'."""

    detectado: str
    """Etiqueta del formato detectado ('Galicia Visa', 'XLSX', 'Manual'...)."""

    transacciones: list[Transaccion] = field(default_factory=list)

    @property
    def cantidad(self) -> int:
        return len(self.transacciones)
