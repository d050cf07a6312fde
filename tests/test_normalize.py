from __future__ import annotations

import math

import pytest

from conftest import raw_record
from pricing.config import KIT_ADVANCED, KIT_STANDARD, KIT_UNSPECIFIED
from pricing.data.normalize import (
    map_columns, normalize_kit_size, normalize_segment, parse_rows, to_float,
)


def test_parse_rows_is_one_to_one_and_ordered(raw_records):
    rows = parse_rows(raw_records)
    assert [r.id for r in rows] == [1, 2, 3, 4, 5]


def test_parse_rows_empty():
    assert parse_rows([]) == []


def test_labels_with_trailing_spaces_are_mapped():
    mapped = map_columns({"ID ": 7, "PRESENCIA DE PROMOCIONES ": "Sí", "Unrelated": 1})
    assert mapped == {"id": 7, "promo_presence": "Sí"}


def test_country_normalized_and_prices_converted(raw_records):
    row = parse_rows(raw_records)[1]
    assert row.country == "ARGENTINA"
    assert row.recurring_base == 30.0
    assert row.recurring_base_local == 50280
    assert row.alta_base == 100.0
    assert row.alta_promo == 50.0
    assert row.alta_promo_local == 83800


def test_promo_amount_converted_with_local_twin(raw_records):
    row = parse_rows(raw_records)[0]
    assert row.promo_amount == 5.0
    assert row.promo_amount_local == 8380


def test_nullable_fields_stay_none(raw_records):
    row = parse_rows(raw_records)[1]
    assert row.promo_amount is None
    assert row.promo_amount_local is None
    assert row.recurring_promo_pct is None
    assert row.alta_promo_pct == -0.5


def test_explicit_zero_is_not_null():
    (row,) = parse_rows([raw_record(**{"PORCENTAJE DE PROMOCION DE ALTA": 0, "MONTO DE LA PROMO": 0})])
    assert row.alta_promo_pct == 0.0
    assert row.promo_amount == 0.0


@pytest.mark.parametrize("raw, expected", [
    ("HOGAR", "Hogares"),
    ("hogares", "Hogares"),
    (" Negocio ", "Negocios"),
    ("NEGOCIOS", "Negocios"),
    ("Pymes", "Pymes"),
])
def test_normalize_segment(raw, expected):
    assert normalize_segment(raw) == expected


def test_malformed_fields_do_not_abort_the_batch():
    records = [
        raw_record(**{"ID ": None, "PRECIO RECURRENTE - BASE ": "n/a", "PORCENTAJE DE PROMOCION RECURRENTE": "??"}),
        {"Competidor": "Solo"},
    ]
    first, second = parse_rows(records)
    assert first.id == 1
    assert first.recurring_base == 0.0
    assert first.recurring_promo_pct is None
    assert second.id == 2
    assert second.competitor == "Solo"
    assert second.country == ""
    assert second.kit_size is None
    assert second.promo_presence == ""


def test_empty_kit_size_becomes_none():
    (row,) = parse_rows([raw_record(**{"Tamaño del Kit": "  "})])
    assert row.kit_size is None


@pytest.mark.parametrize("raw, expected", [
    (12, 12.0),
    ("1,234.5", 1234.5),
    ("29,99", 29.99),
    ("1.234,56", 1234.56),
    ("-12,5%", -0.125),
    ("1.234.567", 1234567.0),
    ("1,234,567", 1234567.0),
    ("1,234", None),
    ("12,3456", None),
    ("$ 10", 10.0),
    ("-25%", -0.25),
    ("", None),
    ("-", None),
    ("abc", None),
    (None, None),
    (True, None),
    (float("nan"), None),
    (float("inf"), None),
])
def test_to_float(raw, expected):
    result = to_float(raw)
    if expected is None:
        assert result is None
    else:
        assert math.isclose(result, expected)


@pytest.mark.parametrize("raw, expected", [
    (None, KIT_UNSPECIFIED),
    ("", KIT_UNSPECIFIED),
    ("-", KIT_UNSPECIFIED),
    ("Kit Estándar", KIT_STANDARD),
    ("basico", KIT_STANDARD),
    ("Standard 4 sensores", KIT_STANDARD),
    ("Premium", KIT_ADVANCED),
    ("Kit Plus", KIT_ADVANCED),
    ("Mini", "Mini"),
])
def test_normalize_kit_size(raw, expected):
    assert normalize_kit_size(raw) == expected


def test_decimal_comma_prices_keep_their_magnitude():
    (row,) = parse_rows([raw_record(**{
        "PRECIO RECURRENTE - BASE ": "29,99",
        "PRECIO ALTA - BASE": "1.234,56",
    })])
    assert math.isclose(row.recurring_base, 29.99)
    assert math.isclose(row.alta_base, 1234.56)
