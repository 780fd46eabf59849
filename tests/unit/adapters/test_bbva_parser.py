"""
Tests para el parser de BBVA Visa.

Los textos simulan la extracción de pdfplumber del resumen BBVA: fechas
DD-Mon-YY, encabezado "Consumos <Titular>", tabla con columnas Pesos y
Dólares y la sección "Impuestos, cargos e intereses".
"""

from datetime import date
from decimal import Decimal

import pytest

from src.adapters.input.bank_parsers.bbva_parser import BBVAVisaParser

ENCABEZADO_TABLA = "FECHA DESCRIPCIÓN NRO. CUPÓN PESOS DÓLARES"


def _resumen(consumos: str, impuestos: str = "", titular: str = "Tadeo Medina Vetre") -> str:
    """Arma un resumen con las dos secciones que lee el parser."""
    partes = [
        "Resumen Visa Sobre (1)",
        "Saldo anterior 12.000,00",
        f"Consumos {titular}",
        ENCABEZADO_TABLA,
        consumos,
        "Impuestos, cargos e intereses",
    ]
    if impuestos:
        partes.append(impuestos)
    partes.append("Legales y avisos Lorem ipsum")
    return "\n".join(partes)


class TestBBVAVisaParser:
    """Tests unitarios para BBVAVisaParser."""

    @pytest.fixture
    def parser(self):
        return BBVAVisaParser()

    def test_etiqueta(self, parser):
        assert parser.bank_name == "BBVA Visa"

    def test_consumo_en_pesos(self, parser):
        texto = _resumen("05-Oct-24 NETFLIX.COM 123456 4.500,00")

        movimientos = parser.parse(texto)

        assert len(movimientos) == 1
        mov = movimientos[0]
        assert mov.fecha == date(2024, 10, 5)
        assert mov.concepto == "NETFLIX.COM"
        assert mov.monto == Decimal("-4500.00")
        assert mov.moneda == "ARS"
        assert mov.comprobante == "123456"
        assert mov.cuenta_sugerida == "BBVA VISA"

    def test_consumo_en_dolares_toma_el_ultimo_monto(self, parser):
        texto = _resumen("20-Oct-24 AMAZON PRIME USD 21.250,00 25,00")

        mov = parser.parse(texto)[0]

        assert mov.moneda == "USD"
        assert mov.monto == Decimal("-25.00")
        assert mov.concepto == "AMAZON PRIME"

    def test_consumo_en_pesos_toma_el_primer_monto(self, parser):
        mov = parser.parse(_resumen("05-Oct-24 SUPERMERCADO 10.500,00 0,00"))[0]
        assert mov.monto == Decimal("-10500.00")

    def test_marca_u_s(self, parser):
        mov = parser.parse(_resumen("20-Oct-24 SPOTIFY U$S 9,99"))[0]
        assert mov.moneda == "USD"
        assert mov.concepto == "SPOTIFY"

    def test_cuota_con_prefijo(self, parser):
        mov = parser.parse(_resumen("12-Oct-24 FARMACIA C.02/03 654321 10.000,00"))[0]

        assert mov.cuota == "02/03"
        assert mov.comprobante == "654321"
        assert mov.concepto == "FARMACIA"

    def test_seccion_de_impuestos(self, parser):
        texto = _resumen(
            "05-Oct-24 NETFLIX.COM 123456 4.500,00",
            impuestos="31-Oct-24 IMPUESTO DE SELLOS 945,00 31-Oct-24 IVA 21% 123456 50,00",
        )

        movimientos = parser.parse(texto)

        assert [m.concepto for m in movimientos] == [
            "NETFLIX.COM",
            "IMPUESTO DE SELLOS",
            "IVA 21% 123456",
        ]
        impuesto = movimientos[1]
        assert impuesto.cuota is None
        assert impuesto.comprobante is None
        assert impuesto.monto == Decimal("-945.00")

    def test_pie_de_pagina_pegado_se_limpia(self, parser):
        texto = _resumen(
            "05-Oct-24 NETFLIX.COM 123456 4.500,00 Página 2 de 4 "
            + ENCABEZADO_TABLA
            + " 06-Oct-24 UBER 234567 3.000,00"
        )
        assert [m.concepto for m in parser.parse(texto)] == ["NETFLIX.COM", "UBER"]

    def test_ignora_lo_anterior_a_consumos(self, parser):
        texto = "Pagos 01-Oct-24 SU PAGO 50.000,00\n" + _resumen(
            "05-Oct-24 NETFLIX.COM 123456 4.500,00"
        )
        assert [m.concepto for m in parser.parse(texto)] == ["NETFLIX.COM"]

    # --- Titular ---

    def test_titular_por_constructor(self):
        parser = BBVAVisaParser(titular="ANA PEREZ")
        texto = "Pagos 01-Oct-24 SU PAGO 50.000,00\n" + _resumen(
            "05-Oct-24 KIOSCO 123456 350,00", titular="ANA PEREZ"
        )
        assert [m.concepto for m in parser.parse(texto)] == ["KIOSCO"]

    def test_titular_escrito_distinto_se_detecta_del_texto(self):
        parser = BBVAVisaParser(titular="Ana Perez")
        texto = (
            "Pagos 01-Oct-24 SU PAGO 50.000,00 "
            "Consumos Ana Pérez 05-Oct-24 NETFLIX.COM 123456 4.500,00 "
            "Impuestos, cargos e intereses 31-Oct-24 IMPUESTO DE SELLOS 945,00 "
            "Legales y avisos"
        )

        movimientos = parser.parse(texto)

        assert [(m.concepto, m.monto) for m in movimientos] == [
            ("NETFLIX.COM", Decimal("-4500.00")),
            ("IMPUESTO DE SELLOS", Decimal("-945.00")),
        ]

    def test_titular_ausente_no_duplica_impuestos(self):
        parser = BBVAVisaParser(titular="ANA PEREZ")
        texto = (
            "05-Oct-24 NETFLIX.COM 123456 4.500,00 "
            "Impuestos, cargos e intereses 31-Oct-24 IMPUESTO DE SELLOS 945,00"
        )
        assert [m.concepto for m in parser.parse(texto)] == ["NETFLIX.COM", "IMPUESTO DE SELLOS"]

    def test_sin_titular_lee_desde_el_principio(self, parser):
        texto = "05-Oct-24 NETFLIX.COM 123456 4.500,00 06-Oct-24 UBER 234567 3.000,00"
        assert [m.concepto for m in parser.parse(texto)] == ["NETFLIX.COM", "UBER"]

    def test_sin_titular_no_duplica_filas(self, parser):
        texto = (
            "05-Oct-24 NETFLIX.COM 123456 4.500,00 "
            "Impuestos, cargos e intereses 31-Oct-24 IMPUESTO DE SELLOS 945,00"
        )
        assert [m.concepto for m in parser.parse(texto)] == ["NETFLIX.COM", "IMPUESTO DE SELLOS"]

    # --- Filas descartadas ---

    def test_descarta_saldo_actual(self, parser):
        texto = _resumen("05-Oct-24 KIOSCO 350,00 31-Oct-24 SALDO ACTUAL 99.000,00")
        assert [m.concepto for m in parser.parse(texto)] == ["KIOSCO"]

    def test_descarta_total_consumos(self, parser):
        texto = _resumen("05-Oct-24 KIOSCO 350,00 31-Oct-24 TOTAL CONSUMOS 350,00")
        assert [m.concepto for m in parser.parse(texto)] == ["KIOSCO"]

    def test_saldo_actual_pegado_descarta_la_fila(self, parser):
        texto = "Consumos Tadeo Medina Vetre 05-Oct-24 KIOSCO 350,00 SALDO ACTUAL 99.000,00"
        assert parser.parse(texto) == []

    def test_legales_pegados_descartan_la_fila(self, parser):
        texto = "Consumos Tadeo Medina Vetre 05-Oct-24 KIOSCO 350,00 Legales y avisos Lorem ipsum"
        assert parser.parse(texto) == []

    def test_total_consumos_pegado_se_corta(self, parser):
        texto = _resumen("05-Oct-24 UBER 234567 3.000,00 TOTAL CONSUMOS 7.500,00")

        movimientos = parser.parse(texto)

        assert len(movimientos) == 1
        assert movimientos[0].concepto == "UBER"
        assert movimientos[0].monto == Decimal("-3000.00")

    def test_descarta_mes_fuera_de_tabla(self, parser):
        assert parser.parse(_resumen("05-Ene-24 KIOSCO 350,00")) == []

    def test_descarta_fila_sin_monto(self, parser):
        assert parser.parse(_resumen("05-Oct-24 KIOSCO")) == []

    # --- Casos borde ---

    def test_texto_vacio(self, parser):
        assert parser.parse("") == []

    def test_texto_de_galicia(self, parser):
        assert parser.parse("15-03-24 Kiosco 350,00") == []

    def test_idempotente(self, parser):
        texto = _resumen("05-Oct-24 NETFLIX.COM 123456 4.500,00")
        assert parser.parse(texto) == parser.parse(texto)
