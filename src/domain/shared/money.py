"""
Utilidades para manejo de montos monetarios en formato argentino.

Los resúmenes de tarjeta argentinos imprimen los montos con punto de
miles y coma decimal: "80.733,33", "4.685,95", "350,00".

La regla es estricta a propósito: solo se acepta un token con coma
decimal y exactamente dos decimales. Cualquier otra cosa ("1234",
"12,5", "1.234,567") se rechaza con ValueError en lugar de adivinar,
porque un monto mal interpretado es un error silencioso que nadie
detecta hasta conciliar la tarjeta.

Siempre se devuelve Decimal (nunca float) para no perder centavos.
"""

import re
from decimal import Decimal, InvalidOperation

# Token monetario aislado dentro de un texto más largo.
MONEY_TOKEN = re.compile(r"\b\d[\d.]*,\d{2}\b")

_MONEY_FULL = re.compile(r"^\d[\d.]*,\d{2}$")

_CURRENCY_SYMBOLS: dict[str, str] = {
    "ARS": "$",
    "USD": "U$S",
}


def parse_locale_amount(token: str) -> Decimal:
    """Convierte un token "1.234,56" a Decimal("1234.56").

    Args:
        token: Texto del monto tal como aparece en el resumen.

    Returns:
        Decimal finito con el valor del monto.

    Raises:
        TypeError: Si no se recibe un str.
        ValueError: Si el token no cumple el formato punto-miles /
                    coma-decimal con dos decimales.

    Ejemplos:
        >>> parse_locale_amount("80.733,33")
        Decimal('80733.33')
        >>> parse_locale_amount("350,00")
        Decimal('350.00')
    """
    if not isinstance(token, str):
        raise TypeError(f"parse_locale_amount espera str, recibió {type(token).__name__}")

    cleaned = token.strip()
    if not cleaned:
        raise ValueError("El texto del monto está vacío")

    if not _MONEY_FULL.match(cleaned):
        raise ValueError(f"Formato de monto no reconocido: '{token}'")

    normalized = cleaned.replace(".", "").replace(",", ".")
    try:
        result = Decimal(normalized)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{token}' (limpio: '{normalized}')")

    if not result.is_finite():
        raise ValueError(f"Monto no finito: '{token}'")

    return result


def format_money(amount: Decimal, currency: str = "ARS") -> str:
    """Formatea un Decimal con el estilo del resumen: "$ 1.234,56".

    Útil para la consola y el resumen del CLI.

    Ejemplos:
        >>> format_money(Decimal("-1234.5"))
        '-$ 1.234,50'
        >>> format_money(Decimal("12"), "USD")
        'U$S 12,00'
    """
    amount = amount.quantize(Decimal("0.01"))
    symbol = _CURRENCY_SYMBOLS.get(currency, currency)
    # Se formatea estilo inglés y después se intercambian los separadores.
    text = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {text}"
