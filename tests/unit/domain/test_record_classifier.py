"""
Tests para RecordClassifier.

Cada test monta una línea con los constructores de conftest.py y
comprueba que los campos salen de sus columnas.
"""

from datetime import date
from decimal import Decimal

import pytest

from remesas.domain.exceptions import (
    MalformedAmountError,
    MalformedCountError,
    MalformedDateError,
    UnexpectedSubTypeError,
)
from remesas.domain.models.registros import (
    CabeceraAcreedor,
    CabeceraPresentador,
    RegistroAdeudo,
    TotalAcreedor,
    TotalFecha,
    TotalGeneral,
)
from remesas.domain.services.record_classifier import RecordClassifier


@pytest.fixture
def classifier():
    return RecordClassifier()


class TestPresentador:
    def test_campos(self, classifier, c19):
        registro = classifier.classify(c19.presentador())
        assert isinstance(registro, CabeceraPresentador)
        p = registro.presentador
        assert p.id == "ES12000B12345678"
        assert p.name == "COLEGIO SAN PEDRO SL"
        assert p.creation_date == date(2024, 1, 5)
        assert p.file_id == "PRE20240105093000"
        assert p.entity == "2100"
        assert p.office == "0418"

    def test_codigo_dato_incorrecto(self, classifier, c19):
        with pytest.raises(UnexpectedSubTypeError) as exc_info:
            classifier.classify(c19.presentador(codigo_dato="002"))
        assert exc_info.value.esperado == "001"
        assert exc_info.value.encontrado == "002"

    def test_fecha_creacion_invalida_es_fatal(self, classifier, c19):
        with pytest.raises(MalformedDateError):
            classifier.classify(c19.presentador(fecha="20241332"))


class TestAcreedor:
    def test_campos(self, classifier, c19):
        registro = classifier.classify(c19.acreedor())
        assert isinstance(registro, CabeceraAcreedor)
        assert registro.fecha_cobro == date(2024, 1, 10)
        a = registro.acreedor
        assert a.id == "ES12000B12345678"
        assert a.name == "COLEGIO SAN PEDRO SL"
        assert a.address1 == "CALLE MAYOR 1"
        assert a.address2 == "28001 MADRID"
        assert a.address3 == ""
        assert a.country == "ES"
        assert a.account == "ES9121000418450200051332"

    def test_codigo_dato_incorrecto(self, classifier, c19):
        linea = c19.acreedor()
        linea = linea[:7] + "003" + linea[10:]
        with pytest.raises(UnexpectedSubTypeError):
            classifier.classify(linea)


class TestAdeudo:
    def test_campos(self, classifier, c19):
        linea = c19.adeudo(
            referencia="REC0002",
            importe=1500,
            direccion1="C/ SOL 2",
            direccion2="SEVILLA",
            direccion3="ANDALUCIA",
            proposito="EDUC",
            concepto="CUOTA FEBRERO",
        )
        registro = classifier.classify(linea)
        assert isinstance(registro, RegistroAdeudo)
        t = registro.adeudo
        assert t.id == "REC0002"
        assert t.mandate_id == "MANDATO0001"
        assert t.sequence == "RCUR"
        assert t.amount == Decimal("15.00")
        assert t.date == date(2023, 10, 1)
        assert t.purpose == "EDUC"
        assert t.concept == "CUOTA FEBRERO"

    def test_deudor(self, classifier, c19):
        linea = c19.adeudo(direccion1="C/ SOL 2", direccion2="SEVILLA", direccion3="ANDALUCIA")
        d = classifier.classify(linea).adeudo.debtor
        assert d.entity == "BBVAESMMXXX"
        assert d.name == "JUAN PEREZ"
        assert (d.address1, d.address2, d.address3) == ("C/ SOL 2", "SEVILLA", "ANDALUCIA")
        assert d.country == "ES"
        assert d.id_type == "2"
        assert d.id == "12345678Z"
        assert d.account_id_type == "A"
        assert d.account == "ES7620770024003102575766"

    def test_importe_no_numerico(self, classifier, c19):
        with pytest.raises(MalformedAmountError):
            classifier.classify(c19.adeudo(importe_texto="00000010,00"))

    def test_linea_corta_se_rellena(self, classifier, c19):
        """Sin concepto ni espacios finales la línea sigue siendo válida."""
        linea = c19.adeudo(concepto="").rstrip()
        registro = classifier.classify(linea)
        assert registro.adeudo.concept == ""
        assert registro.adeudo.debtor.account == "ES7620770024003102575766"


class TestTotales:
    def test_total_fecha(self, classifier, c19):
        registro = classifier.classify(c19.total_fecha(importe=2500, adeudos=2, registros=4))
        assert isinstance(registro, TotalFecha)
        assert registro.acreedor_id == "ES12000B12345678"
        assert registro.fecha_cobro == date(2024, 1, 10)
        assert registro.totales.importe == Decimal("25.00")
        assert registro.totales.adeudos == 2
        assert registro.totales.registros == 4

    def test_total_acreedor(self, classifier, c19):
        registro = classifier.classify(c19.total_acreedor(importe=2500, adeudos=2, registros=5))
        assert isinstance(registro, TotalAcreedor)
        assert registro.totales.registros == 5

    def test_total_general(self, classifier, c19):
        registro = classifier.classify(c19.total_general(importe=123456, adeudos=9, registros=30))
        assert isinstance(registro, TotalGeneral)
        assert registro.totales.importe == Decimal("1234.56")
        assert registro.totales.adeudos == 9

    def test_contador_truncado(self, classifier, c19):
        """Un 99 cortado antes del número de registros no es válido."""
        linea = c19.total_general(importe=2500, adeudos=2, registros=7)[:27]
        with pytest.raises(MalformedCountError):
            classifier.classify(linea)


class TestCodigosDesconocidos:
    @pytest.mark.parametrize("linea", ["", "   ", "06 OTRA COSA", "X"])
    def test_se_ignoran(self, classifier, linea):
        assert classifier.classify(linea) is None
