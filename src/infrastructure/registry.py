"""
Registro de bank parsers disponibles.

Centraliza la lista ordenada de parsers que el dispatcher prueba contra
el texto de un resumen. Agregar un nuevo banco requiere solo 2 pasos:
1. Crear la clase XxxParser que implemente BankParser.
2. Registrarla aquí con register() o agregarla a create_default_registry().

El ORDEN de registro es la prioridad: el dispatcher usa el primer parser
que devuelva movimientos. Por eso el registro guarda una lista y no
solo un diccionario.
"""

from src.domain.ports.bank_parser import BankParser


class BankParserRegistry:
    """Registro ordenado de parsers de resúmenes."""

    def __init__(self) -> None:
        self._parsers: list[BankParser] = []

    def register(self, parser: BankParser) -> None:
        """Registra un parser al final de la cadena.

        Args:
            parser: Instancia de un BankParser concreto.

        Raises:
            ValueError: Si ya existe un parser con la misma etiqueta.
        """
        existente = self.get(parser.bank_name)
        if existente is not None:
            raise ValueError(
                f"Ya existe un parser registrado para '{parser.bank_name}': "
                f"{type(existente).__name__}. "
                f"No se puede registrar {type(parser).__name__}."
            )
        self._parsers.append(parser)

    def get(self, bank_name: str) -> BankParser | None:
        """Obtiene el parser por etiqueta (case-insensitive)."""
        buscado = bank_name.upper()
        for parser in self._parsers:
            if parser.bank_name.upper() == buscado:
                return parser
        return None

    @property
    def parsers(self) -> list[BankParser]:
        """Parsers en orden de prioridad."""
        return list(self._parsers)

    @property
    def available_banks(self) -> list[str]:
        """Etiquetas de los formatos soportados, en orden de prioridad."""
        return [parser.bank_name for parser in self._parsers]

    def __len__(self) -> int:
        return len(self._parsers)


def create_default_registry(titular_bbva: str | None = None) -> BankParserRegistry:
    """Crea un registro con todos los parsers disponibles.

    Orden: Galicia primero. Su formato de fecha (DD-MM-YY) no aparece en
    los resúmenes BBVA, así que un resumen BBVA nunca produce filas Galicia.

    Args:
        titular_bbva: Nombre del titular para la sección de consumos BBVA.
                      None para detectarlo del texto.
    """
    registry = BankParserRegistry()

    from src.adapters.input.bank_parsers.galicia_parser import GaliciaVisaParser

    registry.register(GaliciaVisaParser())

    from src.adapters.input.bank_parsers.bbva_parser import BBVAVisaParser

    registry.register(BBVAVisaParser(titular=titular_bbva))

    return registry
