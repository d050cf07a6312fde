from __future__ import annotations

import pytest

from conftest import make_row
from pricing.analytics.price_table import kit_price_table
from pricing.data.schemas import CurrencyMode, PriceType


def test_recurring_table(rows):
    table = kit_price_table(rows, PriceType.RECURRING)
    assert [(r.kit_type, r.avg_base, r.avg_promo, r.count) for r in table.rows] == [
        ("Kit Estándar", 20.0, 17.5, 2),
        ("Kit Avanzado", 40.0, 35.0, 2),
        ("Sin especificar", 40.0, 30.0, 1),
    ]
    assert table.total.avg_base == pytest.approx(32.0)
    assert table.total.avg_promo == pytest.approx(27.0)
    assert table.total.count == 5


def test_installation_table_averages_positive_prices_only(rows):
    table = kit_price_table(rows, PriceType.INSTALLATION)
    by_kit = {r.kit_type: r for r in table.rows}
    assert by_kit["Kit Estándar"].avg_base == 0.0
    assert by_kit["Kit Avanzado"].avg_base == pytest.approx(150.0)
    assert by_kit["Kit Avanzado"].avg_promo == pytest.approx(75.0)
    assert table.total.avg_base == pytest.approx(150.0)


def test_local_currency(rows):
    table = kit_price_table([r for r in rows if r.competitor == "Verisure"], "recurrente", "LOCAL")
    assert table.currency is CurrencyMode.LOCAL
    assert table.rows[0].avg_base == 50280


def test_unknown_kits_sort_after_known_buckets():
    data = [make_row(kit_size=k, recurring_base=1.0) for k in ("Mini", None, "Kit Pro", "Compacto", "Estándar")]
    labels = [r.kit_type for r in kit_price_table(data, PriceType.RECURRING).rows]
    assert labels == ["Kit Estándar", "Kit Avanzado", "Sin especificar", "Compacto", "Mini"]


def test_empty_rows():
    table = kit_price_table([], PriceType.RECURRING)
    assert table.rows == ()
    assert table.total.count == 0
    assert table.to_dict()["rows"] == []
