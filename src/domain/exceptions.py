"""
Excepciones de dominio del proyecto fipe-statement-parser.

El motor de resúmenes no lanza excepciones hacia afuera: una fila que no
cierra se descarta y un resumen que ningún parser entiende vuelve con la
etiqueta "Unknown". Las excepciones de este módulo son para lo que rodea
al motor (abrir archivos, guardar el ledger, escribir el Excel), donde el
importador necesita saber qué falló para informarlo y seguir.

Jerarquía:
    FipeError
    ├── FormatoInvalidoError   → el archivo no es lo que se esperaba
    ├── ExtractionError        → el archivo no se pudo leer
    ├── LedgerError            → el ledger no se pudo leer o guardar
    └── OutputError            → el Excel no se pudo generar
"""


class FipeError(Exception):
    """Excepción base del proyecto."""


class FormatoInvalidoError(FipeError):
    """El archivo no tiene la forma que el adaptador necesita.

    Ejemplos: la ruta no existe, se pasó un .docx donde iba un PDF, o la
    planilla no trae columnas de fecha, descripción y monto.
    """

    def __init__(self, archivo: str, esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.esperado = esperado
        self.detalle = detalle
        mensaje = f"'{archivo}' no es {esperado}"
        if detalle:
            mensaje = f"{mensaje}: {detalle}"
        super().__init__(mensaje)


class ExtractionError(FipeError):
    """La librería de lectura (pdfplumber, pandas) no pudo abrir el archivo.

    Un PDF sin texto NO es este error: eso lo informa el dispatcher con
    la etiqueta "NoText(Scanned?)".
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"No se pudo leer '{archivo}': {causa}")


class LedgerError(FipeError):
    """El archivo del ledger no se puede leer o escribir.

    Un ledger con registros corruptos NO es un error: los registros
    inválidos se descartan al cargar. Este error es para fallas de E/S
    (permisos, disco lleno) y para un archivo que no es JSON válido.
    """

    def __init__(self, ruta: str, causa: str):
        self.ruta = ruta
        self.causa = causa
        super().__init__(f"Error en el ledger '{ruta}': {causa}")


class OutputError(FipeError):
    """No se pudo generar el Excel de salida."""

    def __init__(self, ruta: str, causa: str):
        self.ruta = ruta
        self.causa = causa
        super().__init__(f"No se pudo escribir '{ruta}': {causa}")
