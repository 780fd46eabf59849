"""
Punto de entrada CLI: fipe.

Uso:
    # Importar un resumen (PDF o planilla) y generar el Excel
    fipe importar /ruta/resumen_galicia.pdf -o /ruta/salida

    # Importar una carpeta y guardar los movimientos en el ledger
    fipe importar /ruta/resumenes --guardar

    # Carga rápida de un gasto
    fipe rapida Verdulería 900 ayer efectivo

    # Ver el historial
    fipe historial

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (PdfplumberExtractor, ExcelWriter, etc.)
- Las inyecta en el StatementImporter.
- Ejecuta el comando pedido.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from src.adapters.input.spreadsheet_readers.xlsx_reader import XlsxReader
from src.adapters.input.text_extractors.pdfplumber_extractor import (
    PdfplumberExtractor,
)
from src.adapters.output.ledger.json_ledger_store import JsonLedgerStore
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import LedgerError, OutputError
from src.domain.services.bank_dispatcher import MIN_TEXT_LENGTH
from src.domain.services.ledger_mapping import CUENTA_POR_DEFECTO
from src.domain.services.quick_entry import parse_quick_entry
from src.domain.services.statement_importer import StatementImporter
from src.domain.shared.date_parser import parse_slash_date
from src.domain.shared.money import format_money
from src.infrastructure.registry import create_default_registry

DEFAULT_LEDGER = Path.home() / ".fipe" / "ledger.json"


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)
    logger = ConsoleLogger()

    try:
        args.comando(args, logger)
    except (LedgerError, OutputError) as e:
        print(f"❌ {e}")
        sys.exit(1)


# =================================================================
# COMANDOS
# =================================================================


def _cmd_importar(args: argparse.Namespace, logger: ConsoleLogger) -> None:
    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Ensamblar componentes ---
    parser_registry = create_default_registry(titular_bbva=args.titular_bbva)
    importer = StatementImporter(
        text_extractors=[PdfplumberExtractor()],
        spreadsheet_readers=[XlsxReader()],
        parser_registry=parser_registry,
        logger=logger,
        min_length=args.min_chars,
    )
    excel_writer = ExcelWriter()

    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path

    print("=" * 60)
    print("FIPE: IMPORTACIÓN DE RESÚMENES")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print(f"  Formatos disponibles: {', '.join(parser_registry.available_banks)}")
    print()

    if input_path.is_file():
        resultado = importer.import_file(input_path)
        resultados = {input_path.name: resultado} if resultado and not resultado.vacio else {}
    elif input_path.is_dir():
        resultados = importer.import_directory(input_path)
    else:
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    if not resultados:
        print("\n❌ No se importó ningún movimiento.")
        logger.print_summary()
        sys.exit(1)

    for nombre, resultado in resultados.items():
        output_file = output_dir / f"movimientos_{Path(nombre).stem}.xlsx"
        excel_writer.write({nombre: resultado}, output_file)
        print(f"📁 Excel generado: {output_file}")

    if len(resultados) > 1:
        consolidado_path = output_dir / "consolidado.xlsx"
        excel_writer.write(resultados, consolidado_path)
        print(f"📁 Consolidado generado: {consolidado_path}")

    if args.guardar:
        store = JsonLedgerStore(Path(args.ledger))
        for nombre, resultado in resultados.items():
            lote = store.add_import(resultado.movimientos, origen=nombre, detectado=resultado.detectado)
            logger.log_import_saved(lote.origen, lote.detectado, lote.cantidad)

    logger.print_summary()


def _cmd_rapida(args: argparse.Namespace, logger: ConsoleLogger) -> None:
    linea = " ".join(args.texto)
    resultado = parse_quick_entry(linea, default_account=args.cuenta, default_date=args.fecha)
    if not resultado.ok:
        logger.log_quick_entry(linea, False, resultado.motivo)
        sys.exit(1)

    store = JsonLedgerStore(Path(args.ledger))
    lote = store.add_quick_entry(resultado)
    transaccion = lote.transacciones[0]
    logger.log_quick_entry(
        linea,
        True,
        f"{transaccion.fecha.isoformat()} {transaccion.concepto} "
        f"{format_money(transaccion.monto, transaccion.moneda)} "
        f"({transaccion.tipo}, {transaccion.cuenta})",
    )


def _cmd_historial(args: argparse.Namespace, logger: ConsoleLogger) -> None:
    store = JsonLedgerStore(Path(args.ledger))
    transacciones = store.load_transactions()

    if not transacciones:
        print("El historial está vacío.")
        return

    for t in transacciones[: args.limite]:
        monto = -t.monto if t.tipo == "expense" else t.monto
        cuota = f" [{t.cuota}]" if t.cuota else ""
        print(
            f"{t.fecha.isoformat()}  {format_money(monto, t.moneda):>16}  "
            f"{t.cuenta:<20}  {t.concepto}{cuota}"
        )
    print(f"\n{len(transacciones)} transacciones en {store.path}")


def _parse_fecha(texto: str) -> date:
    """Acepta YYYY-MM-DD o D/M/YYYY."""
    try:
        return date.fromisoformat(texto)
    except ValueError:
        pass
    try:
        return parse_slash_date(texto)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Fecha inválida: '{texto}'")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="fipe",
        description="Importador de resúmenes de tarjeta y carga rápida de gastos",
        epilog="Ejemplo: fipe importar /ruta/resumenes -o /ruta/salida --guardar",
    )
    parser.add_argument(
        "--ledger",
        default=str(DEFAULT_LEDGER),
        help=f"Archivo JSON del ledger (por defecto {DEFAULT_LEDGER})",
    )
    subparsers = parser.add_subparsers(dest="nombre_comando", required=True)

    # --- importar ---
    importar = subparsers.add_parser("importar", help="Importa un resumen o una carpeta")
    importar.add_argument(
        "input_path",
        help="Ruta a un PDF/planilla o a un directorio con resúmenes",
    )
    importar.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para los Excel generados. "
        "Si no se especifica, se usa el mismo directorio del archivo.",
    )
    importar.add_argument(
        "--guardar",
        action="store_true",
        help="Guarda los movimientos importados en el ledger",
    )
    importar.add_argument(
        "--titular-bbva",
        dest="titular_bbva",
        help="Nombre del titular tal como aparece en el resumen BBVA "
        "(por defecto se detecta del texto)",
    )
    importar.add_argument(
        "--min-chars",
        dest="min_chars",
        type=int,
        default=MIN_TEXT_LENGTH,
        help=f"Texto mínimo para considerar que el PDF no es escaneado "
        f"(por defecto {MIN_TEXT_LENGTH})",
    )
    importar.set_defaults(comando=_cmd_importar)

    # --- rapida ---
    rapida = subparsers.add_parser("rapida", help="Carga rápida: 'Verdulería 900 ayer efectivo'")
    rapida.add_argument("texto", nargs="+", help="Línea de carga rápida")
    rapida.add_argument(
        "--cuenta",
        default=CUENTA_POR_DEFECTO,
        help=f"Cuenta si la línea no nombra ninguna (por defecto {CUENTA_POR_DEFECTO})",
    )
    rapida.add_argument(
        "--fecha",
        type=_parse_fecha,
        help="Fecha si la línea no trae una (YYYY-MM-DD o D/M/YYYY, por defecto hoy)",
    )
    rapida.set_defaults(comando=_cmd_rapida)

    # --- historial ---
    historial = subparsers.add_parser("historial", help="Muestra las transacciones guardadas")
    historial.add_argument(
        "-n",
        "--limite",
        type=int,
        default=50,
        help="Cantidad máxima de transacciones a mostrar",
    )
    historial.set_defaults(comando=_cmd_historial)

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
