"""
Dashboard analytics — one full re-derivation for a filter state.

Filter → options → box-plots → promo analysis → kit price tables, returned as a
JSON-ready dict for the API, CLI and Excel export.
"""
from __future__ import annotations

from typing import Sequence

from pricing.config import REFERENCE_CURRENCY
from pricing.data.schemas import CanonicalRow, CurrencyMode, FilterState, PriceType
from pricing.analytics.boxplot import compare_by_group
from pricing.analytics.common import sanitize_for_json
from pricing.analytics.filters import apply_filters, cascading_options
from pricing.analytics.price_table import kit_price_table
from pricing.analytics.promotions import analyze_by_competitor, analyze_promotions


def boxplot_payload(
    rows: Sequence[CanonicalRow],
    filters: FilterState,
    price_type: PriceType,
    currency: CurrencyMode = CurrencyMode.EUR,
) -> list[dict]:
    return [c.to_dict() for c in compare_by_group(rows, filters, price_type, currency)]


def promotions_payload(rows: Sequence[CanonicalRow], filters: FilterState) -> dict:
    filtered = apply_filters(rows, filters)
    return {
        "overall": analyze_promotions(filtered).to_dict(),
        "by_competitor": [c.to_dict() for c in analyze_by_competitor(filtered)],
    }


def dashboard_summary(
    rows: Sequence[CanonicalRow],
    filters: FilterState,
    currency: CurrencyMode = CurrencyMode.EUR,
) -> dict:
    """Everything the pricing dashboard shows for one filter state."""
    currency = CurrencyMode(currency)
    filtered = apply_filters(rows, filters)

    return sanitize_for_json({
        "filters": filters.active(),
        "currency": currency.value,
        "reference_currency": REFERENCE_CURRENCY,
        "record_count": len(filtered),
        "total_rows": len(rows),
        "options": cascading_options(rows, filters).to_dict(),
        "boxplots": {
            pt.value: boxplot_payload(rows, filters, pt, currency)
            for pt in PriceType
        },
        "promotions": promotions_payload(rows, filters),
        "price_tables": {
            pt.value: kit_price_table(filtered, pt, currency).to_dict()
            for pt in PriceType
        },
    })
