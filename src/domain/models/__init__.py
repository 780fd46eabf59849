"""
Modelos de dominio del proyecto fipe-statement-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import MovimientoImportado, ResultadoDeteccion
"""

from src.domain.models.entrada_rapida import (
    EntradaRapida,
    EntradaRechazada,
    ResultadoEntradaRapida,
)
from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.models.resultado_deteccion import ResultadoDeteccion
from src.domain.models.transaccion import LoteImportacion, Transaccion

__all__ = [
    "EntradaRapida",
    "EntradaRechazada",
    "LoteImportacion",
    "MovimientoImportado",
    "ResultadoDeteccion",
    "ResultadoEntradaRapida",
    "Transaccion",
]
