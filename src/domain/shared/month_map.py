"""
Tabla de abreviaturas de meses usada en las fechas DD-Mon-YY.

Los resúmenes de BBVA Visa imprimen la fecha de cada consumo como
"05-Oct-24", con la abreviatura del mes en inglés y tres letras.
La tabla es fija (12 entradas): si aparece algo que no está acá,
el token no es una fecha y la fila se descarta.

El lookup es case-insensitive: "oct", "OCT" y "Oct" son el mismo mes.
"""

_MONTH_MAP: dict[str, int] = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}


def month_to_int(month_abbr: str) -> int:
    """Convierte una abreviatura de 3 letras a su número de mes (1-12).

    Args:
        month_abbr: Abreviatura del mes. Ejemplos: 'Jan', 'OCT', 'dec'.

    Returns:
        Entero de 1 a 12.

    Raises:
        ValueError: Si la abreviatura no está en la tabla.

    Ejemplos:
        >>> month_to_int("Oct")
        10
        >>> month_to_int("dec")
        12
    """
    result = _MONTH_MAP.get(month_abbr.strip().upper())
    if result is None:
        raise ValueError(
            f"Mes no reconocido: '{month_abbr}'. " f"Valores válidos: {list(_MONTH_MAP)}"
        )
    return result
