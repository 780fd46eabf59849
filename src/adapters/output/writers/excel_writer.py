"""
Adaptador de salida: Escritor de Excel.

Genera un archivo Excel con 2 hojas:
- Hoja 1 (Resumen): una fila por archivo con el formato detectado, la
  cantidad de movimientos y el total por moneda.
- Hoja 2 (Movimientos): detalle de cada movimiento de todos los archivos.

Sirve tanto para un solo resumen como para consolidar una carpeta: la
diferencia es solo cuántas entradas trae el diccionario.
"""

from decimal import Decimal
from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.resultado_deteccion import ResultadoDeteccion
from src.domain.ports.output_writer import OutputWriter

COLUMNAS_RESUMEN = ["Archivo", "Detectado", "Movimientos", "Total ARS", "Total USD"]
COLUMNAS_MOVIMIENTOS = [
    "Fecha",
    "Concepto",
    "Monto",
    "Moneda",
    "Cuenta",
    "Cuota",
    "Comprobante",
    "Archivo",
]


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write(self, resultados: dict[str, ResultadoDeteccion], output_path: Path) -> Path:
        """Escribe los resultados en un .xlsx.

        Args:
            resultados: Nombre de archivo de origen → resultado detectado.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if not resultados:
            raise OutputError(str(output_path), "No hay resultados para escribir")

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, resultados: dict[str, ResultadoDeteccion], output_path: Path) -> None:
        filas_movimientos = []
        filas_resumen = []

        for archivo, resultado in resultados.items():
            for mov in resultado.movimientos:
                filas_movimientos.append(
                    {
                        "Fecha": mov.fecha.strftime("%d/%m/%Y"),
                        "Concepto": mov.concepto,
                        "Monto": float(mov.monto),
                        "Moneda": mov.moneda,
                        "Cuenta": mov.cuenta_sugerida,
                        "Cuota": mov.cuota or "",
                        "Comprobante": mov.comprobante or "",
                        "Archivo": archivo,
                    }
                )

            totales = resultado.total_por_moneda()
            filas_resumen.append(
                {
                    "Archivo": archivo,
                    "Detectado": resultado.detectado,
                    "Movimientos": len(resultado.movimientos),
                    "Total ARS": float(totales.get("ARS", Decimal("0"))),
                    "Total USD": float(totales.get("USD", Decimal("0"))),
                }
            )

        df_resumen = pd.DataFrame(filas_resumen, columns=COLUMNAS_RESUMEN)
        df_movimientos = pd.DataFrame(filas_movimientos, columns=COLUMNAS_MOVIMIENTOS)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_movimientos.to_excel(writer, index=False, sheet_name="Movimientos")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_movimientos = writer.sheets["Movimientos"]

            # Comprobante con ceros iniciales
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            ws_resumen.set_column("A:A", 30)  # Archivo
            ws_resumen.set_column("B:B", 18)  # Detectado
            ws_resumen.set_column("C:C", 12)  # Movimientos
            ws_resumen.set_column("D:E", 16, money_format)  # Totales

            ws_movimientos.set_column("A:A", 12)  # Fecha
            ws_movimientos.set_column("B:B", 45)  # Concepto
            ws_movimientos.set_column("C:C", 15, money_format)  # Monto
            ws_movimientos.set_column("D:D", 8)  # Moneda
            ws_movimientos.set_column("E:E", 24)  # Cuenta
            ws_movimientos.set_column("F:F", 8)  # Cuota
            ws_movimientos.set_column("G:G", 12, text_format)  # Comprobante
            ws_movimientos.set_column("H:H", 30)  # Archivo
