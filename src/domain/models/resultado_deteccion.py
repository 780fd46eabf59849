"""
Modelo de dominio: Resultado de un intento de importación.

Empareja la lista de movimientos con la etiqueta del formato detectado.
La etiqueta se usa solo para mostrar y auditar; no debe usarse como
clave de control fuera del dispatcher.

"Sin texto", "formato desconocido" y "reconocido pero sin filas" se
representan igual (lista vacía + etiqueta). Quien llama los distingue
solo por la etiqueta.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.movimiento_importado import MovimientoImportado

DETECTADO_SIN_TEXTO = "NoText(Scanned?)"
DETECTADO_DESCONOCIDO = "Unknown"
DETECTADO_XLSX = "XLSX"


@dataclass(frozen=True)
class ResultadoDeteccion:
    """Movimientos extraídos + formato detectado."""

    movimientos: list[MovimientoImportado]
    detectado: str

    @property
    def vacio(self) -> bool:
        return not self.movimientos

    def total_por_moneda(self) -> dict[str, Decimal]:
        """Suma los montos (con signo) agrupando por moneda.

        Ejemplo: {'ARS': Decimal('-1584.50'), 'USD': Decimal('-12.00')}
        """
        totales: dict[str, Decimal] = {}
        for mov in self.movimientos:
            totales[mov.moneda] = totales.get(mov.moneda, Decimal("0")) + mov.monto
        return totales
