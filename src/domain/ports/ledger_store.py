"""
Puerto de salida: Ledger de transacciones.

El motor de parseo nunca lee ni escribe el ledger. Quien lo usa (el CLI)
toma el ResultadoDeteccion y se lo pasa a una implementación de este
puerto, que es responsable de:

- asignar id y fecha de creación a cada transacción;
- convertir el monto con signo en monto sin signo + tipo;
- fusionar por id (guardar dos veces el mismo id no duplica);
- persistir en forma durable.
"""

from abc import ABC, abstractmethod

from src.domain.models.entrada_rapida import EntradaRapida
from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.models.transaccion import LoteImportacion, Transaccion


class LedgerStore(ABC):
    """Interfaz del ledger de transacciones e importaciones."""

    @abstractmethod
    def add_import(
        self,
        movimientos: list[MovimientoImportado],
        origen: str,
        detectado: str,
    ) -> LoteImportacion:
        """Guarda un lote importado y suma sus transacciones al historial."""
        ...

    @abstractmethod
    def add_quick_entry(self, entrada: EntradaRapida) -> LoteImportacion:
        """Guarda una carga rápida como lote 'Manual' de una transacción."""
        ...

    @abstractmethod
    def load_transactions(self) -> list[Transaccion]:
        """Historial completo: fecha más reciente primero, luego creación."""
        ...

    @abstractmethod
    def load_imports(self) -> list[LoteImportacion]:
        """Lotes importados, el más reciente primero."""
        ...

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> bool:
        """Borra una transacción del historial. True si existía."""
        ...

    @abstractmethod
    def delete_import_batch(self, batch_id: str) -> bool:
        """Borra un lote de la lista de importaciones. True si existía.

        Las transacciones del lote quedan en el historial.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Vacía historial e importaciones."""
        ...
