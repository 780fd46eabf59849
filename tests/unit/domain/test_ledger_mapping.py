"""
Tests para la conversión de movimientos a transacciones del ledger.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from src.domain.models.entrada_rapida import EntradaRapida
from src.domain.models.movimiento_importado import MovimientoImportado
from src.domain.services.ledger_mapping import (
    account_from_hint,
    transaction_from_imported,
    transaction_from_quick_entry,
)

CREADO = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


class TestAccountFromHint:
    @pytest.mark.parametrize(
        "pista,esperada",
        [
            ("Galicia Crédito (VISA)", "galicia_credit_visa"),
            ("BBVA VISA", "bbva_credit"),
            ("", "cash_ars"),
            ("Otra tarjeta", "cash_ars"),
        ],
    )
    def test_pistas(self, pista, esperada):
        assert account_from_hint(pista) == esperada


class TestTransactionFromImported:
    def test_gasto(self):
        mov = MovimientoImportado(
            fecha=date(2024, 3, 15),
            concepto="MERPAGO*FARMACIA",
            monto=Decimal("-4685.95"),
            moneda="ARS",
            cuenta_sugerida="Galicia Crédito (VISA)",
            cuota="05/06",
            comprobante="051695",
        )
        t = transaction_from_imported(mov, make_id=lambda: "t1", clock=lambda: CREADO)

        assert t.id == "t1"
        assert t.creado == CREADO
        assert t.monto == Decimal("4685.95")
        assert t.tipo == "expense"
        assert t.cuenta == "galicia_credit_visa"
        assert t.cuota == "05/06"

    def test_monto_positivo_es_ingreso(self):
        mov = MovimientoImportado(
            fecha=date(2024, 3, 15),
            concepto="DEVOLUCION",
            monto=Decimal("100.00"),
            moneda="USD",
            cuenta_sugerida="BBVA VISA",
        )
        t = transaction_from_imported(mov, make_id=lambda: "t2", clock=lambda: CREADO)
        assert t.tipo == "income"
        assert t.moneda == "USD"
        assert t.cuenta == "bbva_credit"

    def test_id_por_defecto_es_uuid(self):
        mov = MovimientoImportado(
            fecha=date(2024, 3, 15), concepto="KIOSCO", monto=Decimal("-1.00"), moneda="ARS"
        )
        a = transaction_from_imported(mov)
        b = transaction_from_imported(mov)
        assert a.id != b.id
        assert len(a.id) == 36


class TestTransactionFromQuickEntry:
    def test_concepto_vacio(self):
        entrada = EntradaRapida(
            concepto="",
            monto=Decimal("900"),
            fecha=date(2024, 3, 19),
            tipo="expense",
            cuenta="cash_ars",
        )
        t = transaction_from_quick_entry(entrada, make_id=lambda: "q1", clock=lambda: CREADO)
        assert t.concepto == "(sin descripción)"
        assert t.monto == Decimal("900")
        assert t.cuenta == "cash_ars"
        assert t.cuota is None
