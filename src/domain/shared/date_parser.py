"""
Conversión de las fechas que aparecen en los resúmenes de tarjeta.

Cada banco imprime la fecha de consumo en su propio formato:

- Galicia:  "15-03-24"  → DD-MM-YY
- BBVA:     "15-Mar-24" → DD-Mon-YY (mes abreviado en inglés)

Ambos parsers devuelven un objeto `date` de Python y lanzan ValueError
ante cualquier discrepancia estructural. Quien llama debe interpretar
el error como "este token no es el inicio de una fila", nunca como un
error fatal.

AÑO DE DOS DÍGITOS:
Siempre se mapea a 2000+yy. No hay ventana de siglo: un "99" es 2099.
Es una simplificación conocida (los resúmenes que se procesan son
recientes), no un bug.
"""

import re
from datetime import date

from src.domain.shared.month_map import month_to_int

_NUMERIC_DATE = re.compile(r"^(\d{2})-(\d{2})-(\d{2})$")
_ABBREVIATED_DATE = re.compile(r"^(\d{2})-([A-Za-z]{3})-(\d{2})$")


def parse_numeric_date(token: str) -> date:
    """Parsea una fecha DD-MM-YY (formato Galicia).

    Raises:
        ValueError: Si el token no tiene exactamente ese formato o la
                    fecha no existe en el calendario (ej: 31-02-24).

    Ejemplos:
        >>> parse_numeric_date("15-03-24")
        datetime.date(2024, 3, 15)
    """
    m = _NUMERIC_DATE.match(token.strip())
    if not m:
        raise ValueError(f"Formato DD-MM-YY esperado, recibido: '{token}'")

    day = int(m.group(1))
    month = int(m.group(2))
    year = _expand_year(int(m.group(3)))
    return _build_date(year, month, day, token)


def parse_abbreviated_month_date(token: str) -> date:
    """Parsea una fecha DD-Mon-YY (formato BBVA).

    Raises:
        ValueError: Si el formato no coincide, el mes no está en la
                    tabla o la fecha no existe.

    Ejemplos:
        >>> parse_abbreviated_month_date("05-Oct-24")
        datetime.date(2024, 10, 5)
    """
    m = _ABBREVIATED_DATE.match(token.strip())
    if not m:
        raise ValueError(f"Formato DD-Mon-YY esperado, recibido: '{token}'")

    day = int(m.group(1))
    month = month_to_int(m.group(2))
    year = _expand_year(int(m.group(3)))
    return _build_date(year, month, day, token)


def parse_slash_date(token: str) -> date:
    """Parsea una fecha D/M/YYYY escrita a mano (carga rápida).

    Acepta día y mes de 1 o 2 dígitos y año de 4 dígitos.

    Ejemplos:
        >>> parse_slash_date("3/1/2024")
        datetime.date(2024, 1, 3)
    """
    m = re.match(r"^(\d{1,2})/(\d{1,2})/(\d{4})$", token.strip())
    if not m:
        raise ValueError(f"Formato D/M/YYYY esperado, recibido: '{token}'")

    return _build_date(int(m.group(3)), int(m.group(2)), int(m.group(1)), token)


# ============================================================
# FUNCIONES INTERNAS (prefijo _ = no exportadas)
# ============================================================


def _expand_year(year_short: int) -> int:
    """Año de 2 dígitos → 2000+yy, sin ventana de siglo."""
    return 2000 + year_short


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un objeto date con un mensaje de error que incluye el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day}: {e}"
        )
