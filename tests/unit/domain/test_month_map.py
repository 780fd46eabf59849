"""
Tests para src.domain.shared.month_map
"""

import pytest

from src.domain.shared.month_map import month_to_int


class TestMonthToInt:
    @pytest.mark.parametrize(
        "abbr,expected",
        [
            ("Jan", 1),
            ("Feb", 2),
            ("Mar", 3),
            ("Apr", 4),
            ("May", 5),
            ("Jun", 6),
            ("Jul", 7),
            ("Aug", 8),
            ("Sep", 9),
            ("Oct", 10),
            ("Nov", 11),
            ("Dec", 12),
        ],
    )
    def test_doce_meses(self, abbr, expected):
        assert month_to_int(abbr) == expected

    def test_case_insensitive(self):
        assert month_to_int("oct") == month_to_int("OCT") == 10

    def test_con_espacios(self):
        assert month_to_int(" Dec ") == 12

    def test_abreviatura_castellana_rechazada(self):
        with pytest.raises(ValueError, match="Mes no reconocido"):
            month_to_int("Ago")

    def test_nombre_completo_rechazado(self):
        with pytest.raises(ValueError):
            month_to_int("October")
