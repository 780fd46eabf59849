"""
Adaptador de entrada: Lector de planillas Excel con pandas.

Lee la primera hoja de un .xlsx/.xls exportado del home banking o armado
a mano, con columnas de fecha, descripción y monto. Los nombres de
columna aceptados son los que aparecen en las exportaciones habituales:

    Fecha / FECHA / date / Date
    Descripción / DESCRIPCION / Descripcion / Desc / description
    Monto / MONTO / amount / Amount

Todas las filas se importan como gastos en pesos: la planilla no trae
signo confiable ni moneda.
"""

import numbers
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

import pandas as pd

from src.domain.exceptions import ExtractionError, FormatoInvalidoError
from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.ports.spreadsheet_reader import SpreadsheetReader
from src.domain.shared.date_parser import parse_numeric_date, parse_slash_date


class XlsxReader(SpreadsheetReader):
    """Lee movimientos de la primera hoja de una planilla Excel."""

    COLUMNAS_FECHA: list[str] = ["Fecha", "FECHA", "date", "Date"]
    COLUMNAS_DESCRIPCION: list[str] = [
        "Descripción",
        "DESCRIPCION",
        "Descripcion",
        "Desc",
        "description",
    ]
    COLUMNAS_MONTO: list[str] = ["Monto", "MONTO", "amount", "Amount"]

    EXTENSIONES: tuple[str, ...] = (".xlsx", ".xls")

    @property
    def name(self) -> str:
        return "pandas-excel"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONES

    def read(self, file_path: Path) -> list[MovimientoImportado]:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "XLSX", "El archivo no existe")

        try:
            df = pd.read_excel(file_path, sheet_name=0)
        except Exception as e:
            raise ExtractionError(str(file_path), f"No se pudo leer la planilla: {e}")

        col_fecha = self._buscar_columna(df, self.COLUMNAS_FECHA)
        col_desc = self._buscar_columna(df, self.COLUMNAS_DESCRIPCION)
        col_monto = self._buscar_columna(df, self.COLUMNAS_MONTO)
        if col_fecha is None or col_desc is None or col_monto is None:
            raise FormatoInvalidoError(
                str(file_path),
                "columnas Fecha, Descripción y Monto",
                f"Columnas encontradas: {list(df.columns)}",
            )

        movimientos: list[MovimientoImportado] = []
        for fila in df.to_dict(orient="records"):
            movimiento = self._procesar_fila(fila[col_fecha], fila[col_desc], fila[col_monto])
            if movimiento is not None:
                movimientos.append(movimiento)

        return movimientos

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _buscar_columna(df: pd.DataFrame, candidatas: list[str]) -> str | None:
        for nombre in candidatas:
            if nombre in df.columns:
                return nombre
        return None

    def _procesar_fila(self, fecha_raw, desc_raw, monto_raw) -> MovimientoImportado | None:
        fecha = self._convertir_fecha(fecha_raw)
        concepto = "" if pd.isna(desc_raw) else str(desc_raw).strip()
        monto = self._convertir_monto(monto_raw)

        if fecha is None or not concepto or monto is None or monto == Decimal("0"):
            return None

        return MovimientoImportado(
            fecha=fecha,
            concepto=concepto,
            monto=-abs(monto),
            moneda="ARS",
            texto_crudo=f"{fecha_raw} {desc_raw} {monto_raw}",
        )

    @staticmethod
    def _convertir_fecha(valor) -> date | None:
        """Acepta celdas fecha de Excel, 'YYYY-MM-DD', 'D/M/YYYY' o 'DD-MM-YY'."""
        if valor is None or pd.isna(valor):
            return None
        if isinstance(valor, datetime):
            return valor.date()
        if isinstance(valor, date):
            return valor

        texto = str(valor).strip()
        try:
            return date.fromisoformat(texto)
        except ValueError:
            pass
        for parser in (parse_slash_date, parse_numeric_date):
            try:
                return parser(texto)
            except ValueError:
                continue
        return None

    @staticmethod
    def _convertir_monto(valor) -> Decimal | None:
        """Convierte la celda de monto.

        - Celda numérica: se usa el valor tal cual.
        - Celda de texto: formato argentino, "1.234,56" → 1234.56.
        """
        if valor is None or pd.isna(valor):
            return None

        if isinstance(valor, numbers.Real):
            texto = str(valor)
        else:
            texto = str(valor).strip().replace("$", "").replace(" ", "")
            texto = texto.replace(".", "").replace(",", ".")

        try:
            monto = Decimal(texto)
        except InvalidOperation:
            return None
        return monto if monto.is_finite() else None
