"""
Adaptador de salida: Ledger en un archivo JSON.

Guarda el historial de transacciones y la lista de lotes importados en un
único archivo:

    {
      "transacciones": [ {id, creado, fecha, concepto, monto, ...}, ... ],
      "importaciones": [ {id, creado, origen, detectado, cantidad,
                          transacciones: [...]}, ... ]
    }

Los montos se guardan como string ("1234.50") para no perder precisión
pasando por float. Cada operación lee el archivo, modifica y lo vuelve a
escribir completo: el ledger es de una sola persona y entra en memoria.

Al leer se sanea cada fila: las que no tienen fecha o cuyo monto no es
un número finito se descartan; el resto de los campos faltantes toma un
valor por defecto. Si hubo filas descartadas, el archivo se reescribe
limpio.
"""

import json
import os
from collections.abc import Callable
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

from src.domain.exceptions import LedgerError
from src.domain.models.entrada_rapida import TIPO_GASTO, TIPO_INGRESO, EntradaRapida
from src.domain.models.movimiento_importado import MONEDAS_VALIDAS, MovimientoImportado
from src.domain.models.transaccion import LoteImportacion, Transaccion
from src.domain.ports.ledger_store import LedgerStore
from src.domain.services.ledger_mapping import (
    CUENTA_POR_DEFECTO,
    new_id,
    now,
    transaction_from_imported,
    transaction_from_quick_entry,
)

SIN_DESCRIPCION = "(sin descripción)"
ORIGEN_MANUAL = "Manual"


class JsonLedgerStore(LedgerStore):
    """Ledger persistido en un archivo JSON local."""

    def __init__(
        self,
        path: Path,
        make_id: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = now,
    ) -> None:
        """
        Args:
            path: Archivo del ledger. Si no existe se crea al primer guardado.
            make_id: Generador de ids (uuid4 por defecto).
            clock: Reloj para la fecha de creación (UTC por defecto).
        """
        self._path = path
        self._make_id = make_id
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    # =================================================================
    # ESCRITURA
    # =================================================================

    def add_import(
        self,
        movimientos: list[MovimientoImportado],
        origen: str,
        detectado: str,
    ) -> LoteImportacion:
        transacciones = [
            transaction_from_imported(mov, self._make_id, self._clock) for mov in movimientos
        ]
        lote = LoteImportacion(
            id=self._make_id(),
            creado=self._clock(),
            origen=origen.strip() or "Import",
            detectado=detectado.strip() or "Unknown",
            transacciones=transacciones,
        )
        self._guardar_lote(lote)
        return lote

    def add_quick_entry(self, entrada: EntradaRapida) -> LoteImportacion:
        transaccion = transaction_from_quick_entry(entrada, self._make_id, self._clock)
        lote = LoteImportacion(
            id=self._make_id(),
            creado=self._clock(),
            origen=ORIGEN_MANUAL,
            detectado=ORIGEN_MANUAL,
            transacciones=[transaccion],
        )
        self._guardar_lote(lote)
        return lote

    def delete_transaction(self, transaction_id: str) -> bool:
        datos = self._leer()
        antes = len(datos["transacciones"])
        datos["transacciones"] = [
            t for t in datos["transacciones"] if t.get("id") != transaction_id
        ]
        if len(datos["transacciones"]) == antes:
            return False
        self._escribir(datos)
        return True

    def delete_import_batch(self, batch_id: str) -> bool:
        datos = self._leer()
        antes = len(datos["importaciones"])
        datos["importaciones"] = [
            lote for lote in datos["importaciones"] if lote.get("id") != batch_id
        ]
        if len(datos["importaciones"]) == antes:
            return False
        self._escribir(datos)
        return True

    def clear(self) -> None:
        self._escribir({"transacciones": [], "importaciones": []})

    # =================================================================
    # LECTURA
    # =================================================================

    def load_transactions(self) -> list[Transaccion]:
        datos = self._leer()
        crudas = datos["transacciones"]
        transacciones = [t for t in map(self._sanear_transaccion, crudas) if t is not None]

        if len(transacciones) != len(crudas):
            datos["transacciones"] = [self._a_dict(t) for t in transacciones]
            self._escribir(datos)

        return sorted(transacciones, key=lambda t: (t.fecha, t.creado), reverse=True)

    def load_imports(self) -> list[LoteImportacion]:
        lotes = [self._sanear_lote(crudo) for crudo in self._leer()["importaciones"]]
        return sorted(lotes, key=lambda lote: lote.creado, reverse=True)

    # =================================================================
    # MÉTODOS PRIVADOS: Archivo
    # =================================================================

    def _leer(self) -> dict:
        if not self._path.exists():
            return {"transacciones": [], "importaciones": []}

        try:
            with open(self._path, encoding="utf-8") as f:
                datos = json.load(f)
        except json.JSONDecodeError as e:
            raise LedgerError(str(self._path), f"JSON inválido: {e}")
        except OSError as e:
            raise LedgerError(str(self._path), str(e))

        if not isinstance(datos, dict):
            raise LedgerError(str(self._path), "Se esperaba un objeto JSON")

        return {
            "transacciones": self._lista(datos.get("transacciones")),
            "importaciones": self._lista(datos.get("importaciones")),
        }

    def _escribir(self, datos: dict) -> None:
        """Escribe a un temporal y lo renombra, para no dejar el ledger a medias."""
        temporal = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(temporal, "w", encoding="utf-8") as f:
                json.dump(datos, f, indent=2, ensure_ascii=False)
            os.replace(temporal, self._path)
        except OSError as e:
            raise LedgerError(str(self._path), str(e))

    def _guardar_lote(self, lote: LoteImportacion) -> None:
        datos = self._leer()

        # Fusión por id: una transacción con id repetido reemplaza a la anterior.
        por_id = {t["id"]: t for t in datos["transacciones"] if isinstance(t.get("id"), str)}
        sin_id = [t for t in datos["transacciones"] if not isinstance(t.get("id"), str)]
        for transaccion in lote.transacciones:
            por_id[transaccion.id] = self._a_dict(transaccion)

        datos["transacciones"] = sin_id + list(por_id.values())
        datos["importaciones"] = [self._lote_a_dict(lote)] + datos["importaciones"]
        self._escribir(datos)

    @staticmethod
    def _lista(valor) -> list[dict]:
        if not isinstance(valor, list):
            return []
        return [item for item in valor if isinstance(item, dict)]

    # =================================================================
    # MÉTODOS PRIVADOS: Serialización
    # =================================================================

    @staticmethod
    def _a_dict(t: Transaccion) -> dict:
        fila = {
            "id": t.id,
            "creado": t.creado.isoformat(),
            "fecha": t.fecha.isoformat(),
            "concepto": t.concepto,
            "monto": str(t.monto),
            "moneda": t.moneda,
            "tipo": t.tipo,
            "cuenta": t.cuenta,
        }
        if t.cuota:
            fila["cuota"] = t.cuota
        return fila

    def _lote_a_dict(self, lote: LoteImportacion) -> dict:
        return {
            "id": lote.id,
            "creado": lote.creado.isoformat(),
            "origen": lote.origen,
            "detectado": lote.detectado,
            "cantidad": lote.cantidad,
            "transacciones": [self._a_dict(t) for t in lote.transacciones],
        }

    def _sanear_transaccion(self, crudo: dict) -> Transaccion | None:
        """Reconstruye una transacción desde JSON o devuelve None si no sirve."""
        try:
            fecha = date.fromisoformat(str(crudo.get("fecha") or ""))
        except ValueError:
            return None

        try:
            monto = Decimal(str(crudo.get("monto")))
        except InvalidOperation:
            return None
        if not monto.is_finite():
            return None

        concepto = crudo.get("concepto")
        if not isinstance(concepto, str) or not concepto.strip():
            concepto = SIN_DESCRIPCION

        moneda = crudo.get("moneda") if crudo.get("moneda") in MONEDAS_VALIDAS else "ARS"
        tipo = TIPO_INGRESO if crudo.get("tipo") == TIPO_INGRESO else TIPO_GASTO

        cuenta = crudo.get("cuenta")
        if not isinstance(cuenta, str) or not cuenta:
            cuenta = CUENTA_POR_DEFECTO

        cuota = crudo.get("cuota")
        if not isinstance(cuota, str) or not cuota.strip():
            cuota = None

        transaccion_id = crudo.get("id")
        if not isinstance(transaccion_id, str) or not transaccion_id:
            transaccion_id = self._make_id()

        return Transaccion(
            id=transaccion_id,
            creado=self._leer_instante(crudo.get("creado")),
            fecha=fecha,
            concepto=concepto,
            monto=abs(monto),
            moneda=moneda,
            tipo=tipo,
            cuenta=cuenta,
            cuota=cuota,
        )

    def _sanear_lote(self, crudo: dict) -> LoteImportacion:
        filas = self._lista(crudo.get("transacciones"))
        transacciones = [t for t in map(self._sanear_transaccion, filas) if t is not None]

        lote_id = crudo.get("id")
        origen = crudo.get("origen")
        detectado = crudo.get("detectado")
        return LoteImportacion(
            id=lote_id if isinstance(lote_id, str) and lote_id else self._make_id(),
            creado=self._leer_instante(crudo.get("creado")),
            origen=origen if isinstance(origen, str) and origen.strip() else "Import",
            detectado=detectado if isinstance(detectado, str) and detectado.strip() else "Unknown",
            transacciones=transacciones,
        )

    def _leer_instante(self, valor) -> datetime:
        if isinstance(valor, str) and valor:
            try:
                instante = datetime.fromisoformat(valor)
                if instante.tzinfo is None:
                    instante = instante.replace(tzinfo=timezone.utc)
                return instante
            except ValueError:
                pass
        return self._clock()
