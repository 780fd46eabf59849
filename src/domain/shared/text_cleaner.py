"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto extraído de los PDFs
antes de que los bank parsers lo procesen.

Estas funciones NO tienen lógica de negocio (no saben de bancos ni montos).
Solo operan sobre strings puros.
"""

import re


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs/saltos por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  AUTO   ASIST   ")
        'AUTO ASIST'
        >>> clean_whitespace("\\tDETALLE\\nDEL CONSUMO")
        'DETALLE DEL CONSUMO'
    """
    return re.sub(r"\s+", " ", text).strip()


def remove_non_printable(text: str) -> str:
    """Reemplaza caracteres de control por espacio, excepto \\n, \\r, \\t.

    Ejemplos:
        >>> remove_non_printable("PAGO\\x00KIOSCO")
        'PAGO KIOSCO'
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_pdf_text(text: str) -> str:
    """Aplica las limpiezas comunes que el extractor hace después de leer el PDF.

    No colapsa espacios: eso lo hace section_between en el momento de
    acotar la sección, para que el texto crudo conserve sus saltos de
    línea si alguien lo quiere inspeccionar.
    """
    text = remove_non_printable(text)
    text = normalize_line_endings(text)
    return text


def section_between(
    text: str,
    start_pattern: re.Pattern[str],
    end_pattern: re.Pattern[str],
) -> str:
    """Acota el texto a la sección que empieza en start_pattern.

    1. Colapsa todos los espacios del texto.
    2. Busca la primera coincidencia de start_pattern. Si no aparece,
       devuelve el texto colapsado completo (falla abierta: los parsers
       deben tolerar texto sin acotar).
    3. Devuelve desde el inicio de esa coincidencia (incluida) hasta la
       primera coincidencia posterior de end_pattern, o hasta el final
       si end_pattern nunca aparece.

    Los resúmenes mezclan varias tablas (detalle, totales, legales) con
    el mismo vocabulario; acotar evita leer totales como consumos.

    Ejemplos:
        >>> section_between(
        ...     "x  DETALLE 1 2 TOTAL 3",
        ...     re.compile(r"DETALLE"),
        ...     re.compile(r"TOTAL"),
        ... )
        'DETALLE 1 2 '
    """
    collapsed = clean_whitespace(text)

    start = start_pattern.search(collapsed)
    if start is None:
        return collapsed

    after = collapsed[start.start():]
    end = end_pattern.search(after)
    if end is None:
        return after

    return after[: end.start()]
