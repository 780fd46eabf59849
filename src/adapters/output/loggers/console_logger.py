"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y acumula un resumen final.

Para otros entornos se puede implementar un FileLogger que cumpla la
misma interfaz sin cambiar el dominio.
"""

from pathlib import Path

from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._archivos_importados: int = 0
        self._archivos_descartados: int = 0
        self._archivos_sin_filas: int = 0
        self._total_movimientos: int = 0
        self._errores: list[dict] = []

    # --- Archivos ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name}: {reason}")

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        print(f"  🔍 Leyendo ({extractor_name}): {file_path.name}")

    # --- Detección ---

    def log_format_detected(self, file_path: Path, detected: str, num_movimientos: int) -> None:
        self._archivos_importados += 1
        self._total_movimientos += num_movimientos
        print(f"  🏦 Detectado: {detected}, {num_movimientos} movimientos ({file_path.name})")

    def log_no_text(self, file_path: Path) -> None:
        self._archivos_sin_filas += 1
        print(f"  ❌ Sin texto utilizable: {file_path.name} (¿PDF escaneado?)")

    def log_format_unknown(self, file_path: Path) -> None:
        self._archivos_sin_filas += 1
        print(f"  ❌ Formato NO reconocido: {file_path.name}")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name}: {error}")

    # --- Ledger ---

    def log_import_saved(self, origen: str, detected: str, count: int) -> None:
        print(f"  💾 Guardado en el ledger: {origen} [{detected}], {count} transacciones")

    def log_quick_entry(self, line: str, accepted: bool, detail: str) -> None:
        marca = "✅" if accepted else "❌"
        print(f"  {marca} Carga rápida '{line}': {detail}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_importados": self._archivos_importados,
            "archivos_descartados": self._archivos_descartados,
            "archivos_sin_filas": self._archivos_sin_filas,
            "archivos_con_error": len(self._errores),
            "total_movimientos": self._total_movimientos,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE IMPORTACIÓN")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Archivos importados:  {self._archivos_importados}")
        print(f"  Archivos descartados: {self._archivos_descartados}")
        print(f"  Archivos sin filas:   {self._archivos_sin_filas}")
        print(f"  Archivos con error:   {len(self._errores)}")
        print(f"  Total movimientos:    {self._total_movimientos}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
