"""
Tests para el registro de bank parsers.
"""

import pytest

from src.adapters.input.bank_parsers.bbva_parser import BBVAVisaParser
from src.adapters.input.bank_parsers.galicia_parser import GaliciaVisaParser
from src.infrastructure.registry import BankParserRegistry, create_default_registry


class TestBankParserRegistry:
    def test_registro_vacio(self):
        registro = BankParserRegistry()
        assert len(registro) == 0
        assert registro.parsers == []

    def test_conserva_el_orden(self):
        registro = BankParserRegistry()
        registro.register(BBVAVisaParser())
        registro.register(GaliciaVisaParser())
        assert registro.available_banks == ["BBVA Visa", "Galicia Visa"]

    def test_duplicado_lanza_error(self):
        registro = BankParserRegistry()
        registro.register(GaliciaVisaParser())
        with pytest.raises(ValueError, match="Ya existe"):
            registro.register(GaliciaVisaParser())

    def test_get_case_insensitive(self):
        registro = BankParserRegistry()
        parser = GaliciaVisaParser()
        registro.register(parser)
        assert registro.get("galicia visa") is parser

    def test_get_inexistente(self):
        assert BankParserRegistry().get("HSBC") is None

    def test_parsers_devuelve_copia(self):
        registro = BankParserRegistry()
        registro.register(GaliciaVisaParser())
        registro.parsers.clear()
        assert len(registro) == 1


class TestCreateDefaultRegistry:
    def test_galicia_primero(self):
        assert create_default_registry().available_banks == ["Galicia Visa", "BBVA Visa"]

    def test_titular_bbva(self):
        registro = create_default_registry(titular_bbva="Ana Perez")
        texto = "Pagos 01-Oct-24 SU PAGO 50.000,00 Consumos Ana Perez 05-Oct-24 KIOSCO 350,00"
        movimientos = registro.get("BBVA Visa").parse(texto)
        assert [m.concepto for m in movimientos] == ["KIOSCO"]
