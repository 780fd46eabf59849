"""
Tests para src.domain.shared.date_parser
"""

from datetime import date

import pytest

from src.domain.shared.date_parser import (
    parse_abbreviated_month_date,
    parse_numeric_date,
    parse_slash_date,
)


class TestParseNumericDate:
    """Formato Galicia: DD-MM-YY."""

    def test_fecha_simple(self):
        assert parse_numeric_date("15-03-24") == date(2024, 3, 15)

    def test_anio_siempre_2000(self):
        assert parse_numeric_date("01-01-99") == date(2099, 1, 1)

    def test_anio_cero(self):
        assert parse_numeric_date("31-12-00") == date(2000, 12, 31)

    def test_dia_invalido(self):
        with pytest.raises(ValueError, match="inválida"):
            parse_numeric_date("31-02-24")

    def test_mes_invalido(self):
        with pytest.raises(ValueError):
            parse_numeric_date("15-13-24")

    def test_formato_incorrecto(self):
        with pytest.raises(ValueError, match="DD-MM-YY"):
            parse_numeric_date("15/03/24")

    def test_mes_abreviado_rechazado(self):
        with pytest.raises(ValueError):
            parse_numeric_date("15-Mar-24")


class TestParseAbbreviatedMonthDate:
    """Formato BBVA: DD-Mon-YY."""

    def test_fecha_simple(self):
        assert parse_abbreviated_month_date("05-Oct-24") == date(2024, 10, 5)

    def test_mayusculas(self):
        assert parse_abbreviated_month_date("05-OCT-24") == date(2024, 10, 5)

    def test_minusculas(self):
        assert parse_abbreviated_month_date("28-feb-25") == date(2025, 2, 28)

    def test_mes_en_castellano_rechazado(self):
        """'Ene' no está en la tabla de 12 meses."""
        with pytest.raises(ValueError, match="Mes no reconocido"):
            parse_abbreviated_month_date("05-Ene-24")

    def test_dia_invalido(self):
        with pytest.raises(ValueError):
            parse_abbreviated_month_date("30-Feb-24")

    def test_formato_numerico_rechazado(self):
        with pytest.raises(ValueError, match="DD-Mon-YY"):
            parse_abbreviated_month_date("05-10-24")


class TestParseSlashDate:
    """Fechas escritas a mano en la carga rápida: D/M/YYYY."""

    def test_un_digito(self):
        assert parse_slash_date("3/1/2024") == date(2024, 1, 3)

    def test_dos_digitos(self):
        assert parse_slash_date("15/03/2024") == date(2024, 3, 15)

    def test_fecha_inexistente(self):
        with pytest.raises(ValueError):
            parse_slash_date("31/2/2024")

    def test_anio_corto_rechazado(self):
        with pytest.raises(ValueError):
            parse_slash_date("3/1/24")

    def test_cuota_no_es_fecha(self):
        with pytest.raises(ValueError):
            parse_slash_date("05/06")
