from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pricing.api import dependencies
from pricing.api import router_reports
from pricing.data.store import DataStore
from pricing.main import app


@pytest.fixture
def client(store):
    # no `with` block: the startup lifespan (which reads the data file) is skipped
    dependencies.set_store(store)
    yield TestClient(app)
    dependencies.set_store(None)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "rows": 5, "countries": 3, "competitors": 4, "segments": 2}


def test_store_not_loaded_is_503():
    dependencies.set_store(DataStore())
    try:
        resp = TestClient(app).get("/api/health")
    finally:
        dependencies.set_store(None)
    assert resp.status_code == 503


def test_filter_options(client):
    resp = client.get("/api/filters/options", params={"country": "ARGENTINA"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["country"] == ["ARGENTINA", "CHILE", "PORTUGAL"]
    assert body["competitor"] == ["ADT", "Verisure"]


def test_filter_select_resets_lower_dimensions(client):
    resp = client.get("/api/filters/select", params={
        "dimension": "country", "value": "CHILE",
        "country": "ARGENTINA", "competitor": "ADT", "segment": "Hogares",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["filters"] == {"country": "CHILE", "competitor": None, "segment": None, "kit_size": None}
    assert body["options"]["competitor"] == ["Prosegur"]
    assert body["record_count"] == 1


def test_filter_select_invalid_dimension(client):
    resp = client.get("/api/filters/select", params={"dimension": "brand", "value": "x"})
    assert resp.status_code == 400


def test_boxplots(client):
    resp = client.get("/api/boxplots", params={"price_type": "alta", "country": "ARGENTINA"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["price_type"] == "alta"
    assert [c["label"] for c in body["comparisons"]] == ["Verisure"]
    assert body["comparisons"][0]["base"]["values"] == [100.0]


def test_boxplots_invalid_price_type(client):
    assert client.get("/api/boxplots", params={"price_type": "mensual"}).status_code == 422


def test_promotions(client):
    body = client.get("/api/promotions").json()
    assert body["overall"]["total_count"] == 5
    assert body["overall"]["with_promo_count"] == 3
    assert [c["competitor"] for c in body["by_competitor"]] == ["ADT", "Prosegur", "Securitas", "Verisure"]


def test_promotions_follow_filters(client):
    body = client.get("/api/promotions", params={"country": "CHILE"}).json()
    assert body["overall"]["total_count"] == 1
    assert body["overall"]["with_promo_count"] == 0


def test_price_table(client):
    body = client.get("/api/price-table", params={"currency": "LOCAL", "competitor": "Verisure"}).json()
    assert body["currency"] == "LOCAL"
    assert body["rows"][0]["kit_type"] == "Kit Avanzado"
    assert body["rows"][0]["avg_base"] == 50280


def test_dashboard(client):
    body = client.get("/api/dashboard", params={"country": "ARGENTINA", "segment": ""}).json()
    assert body["filters"] == {"country": "ARGENTINA"}
    assert body["record_count"] == 3
    assert body["total_rows"] == 5
    assert set(body["boxplots"]) == {"recurrente", "alta"}
    assert [c["label"] for c in body["boxplots"]["recurrente"]] == ["ADT", "Verisure"]
    assert body["promotions"]["overall"]["total_count"] == 3


def test_export_xlsx(client, tmp_path, monkeypatch):
    monkeypatch.setattr(router_reports, "REPORTS_FOLDER", tmp_path)
    resp = client.get("/api/export/xlsx", params={"country": "ARGENTINA"})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == router_reports.XLSX_MEDIA_TYPE
    assert (tmp_path / "Pricing_Report_ARGENTINA_EUR.xlsx").exists()


def test_dashboard_json_replaces_non_finite_numbers():
    from pricing.api.router_dashboard import _safe_json

    resp = _safe_json({"mean": float("nan"), "rows": [float("inf"), 1.5]})
    assert resp.body == b'{"mean":0.0,"rows":[0.0,1.5]}'
