"""
Competitive Pricing Report — summary KPIs, kit price tables, box-plot and promo sheets.
"""
from __future__ import annotations

from pathlib import Path

from pricing.data.store import DataStore
from pricing.data.schemas import CurrencyMode, FilterState, PriceType
from pricing.analytics.dashboard import dashboard_summary
from pricing.excel.writer import ReportWorkbook
from pricing.excel.formatters import money_type


PRICE_TYPE_TITLES = {
    PriceType.RECURRING.value: "PRECIO RECURRENTE",
    PriceType.INSTALLATION.value: "PRECIO DE ALTA",
}


def filter_label(filters: FilterState) -> str:
    active = filters.active()
    return "  |  ".join(active.values()) if active else "Todos los registros"


def generate_json(
    store: DataStore,
    filters: FilterState | None = None,
    currency: CurrencyMode = CurrencyMode.EUR,
) -> dict:
    filters = filters or FilterState()
    data = dashboard_summary(store.rows, filters, currency)
    data["label"] = filter_label(filters)
    data["source"] = str(store.source) if store.source else None
    return data


def _boxplot_rows(comparisons: list[dict]) -> list[dict]:
    """Flatten base/promo stats into one table row per group."""
    out = []
    for c in comparisons:
        row = {"label": c["label"], "percentage_diff": c["percentage_diff"], "n": len(c["base"]["values"])}
        for side in ("base", "promo"):
            for stat in ("min", "q1", "median", "q3", "max", "mean"):
                row[f"{side}_{stat}"] = c[side][stat]
        out.append(row)
    return out


def _diff_highlight(row: dict) -> str | None:
    if row["percentage_diff"] < 0:
        return "discount"
    if row["percentage_diff"] > 0:
        return "markup"
    return None


def generate_excel(
    store: DataStore,
    output_path: str | Path,
    filters: FilterState | None = None,
    currency: CurrencyMode = CurrencyMode.EUR,
) -> Path:
    filters = filters or FilterState()
    data = generate_json(store, filters, currency)
    money = money_type(data["currency"])
    promo = data["promotions"]["overall"]
    book = ReportWorkbook()

    # Summary: KPIs + kit price tables
    ws = book.sheet("Resumen")
    book.heading(ws, "COMPETITIVE PRICING", f"{data['label']}  |  Moneda: {data['currency']}")
    row = book.kpis(ws, 4, [
        (data["record_count"], "Registros", "number"),
        (promo["promo_share"], "Con promoción", "percent"),
        (promo["avg_promo_amount"], "Monto promedio promo", "eur"),
        (promo["avg_recurring_promo_percent"], "Desc. recurrente", "percent"),
        (promo["avg_alta_promo_percent"], "Desc. alta", "percent"),
    ])

    price_cols = [
        ("kit_type", "text", "Tipo de Kit"),
        ("avg_base", money, "Precio Base"),
        ("avg_promo", money, "Precio Promo"),
        ("count", "number", "Registros"),
    ]
    for pt, table in data["price_tables"].items():
        row = book.section(ws, row, PRICE_TYPE_TITLES[pt])
        row = book.table(ws, row, price_cols, table["rows"], total=table["total"])

    # Box-plot statistics
    ws2 = book.sheet("Boxplots")
    row = book.heading(ws2, "BASE VS. PROMOCIONAL", data["label"], span=10)
    box_cols = [
        ("label", "text", "Grupo"),
        ("n", "number", "N"),
        ("base_min", money, "Base Mín"),
        ("base_q1", money, "Base Q1"),
        ("base_median", money, "Base Mediana"),
        ("base_q3", money, "Base Q3"),
        ("base_max", money, "Base Máx"),
        ("base_mean", money, "Base Media"),
        ("promo_mean", money, "Promo Media"),
        ("percentage_diff", "percent", "Dif. %"),
    ]
    for pt, comparisons in data["boxplots"].items():
        row = book.section(ws2, row, PRICE_TYPE_TITLES[pt])
        row = book.table(ws2, row, box_cols, _boxplot_rows(comparisons), highlight=_diff_highlight)

    # Promotions by competitor
    ws3 = book.sheet("Promociones")
    book.heading(ws3, "ANÁLISIS DE PROMOCIONES", data["label"])
    promo_rows = [{"competitor": c["competitor"], **c["analysis"]} for c in data["promotions"]["by_competitor"]]
    book.table(ws3, 4, [
        ("competitor", "text", "Competidor"),
        ("total_count", "number", "Registros"),
        ("with_promo_count", "number", "Con Promo"),
        ("without_promo_count", "number", "Sin Promo"),
        ("promo_share", "percent", "% Con Promo"),
        ("avg_promo_amount", "eur", "Monto Promedio"),
        ("avg_recurring_promo_percent", "percent", "Desc. Recurrente"),
        ("avg_alta_promo_percent", "percent", "Desc. Alta"),
    ], promo_rows, total={"competitor": "TOTAL", **promo}, freeze=True)

    return book.save(output_path)
