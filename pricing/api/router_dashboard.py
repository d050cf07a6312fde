"""
Dashboard endpoints — box-plots, promotions, kit price tables, full summary.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from pricing.data.store import DataStore
from pricing.data.schemas import CurrencyMode, FilterState, PriceType
from pricing.api.dependencies import get_store, parse_filters
from pricing.analytics.common import sanitize_for_json
from pricing.analytics.dashboard import boxplot_payload, dashboard_summary, promotions_payload
from pricing.analytics.filters import apply_filters
from pricing.analytics.price_table import kit_price_table

router = APIRouter(prefix="/api", tags=["dashboard"])


def _safe_json(data) -> JSONResponse:
    return JSONResponse(content=sanitize_for_json(data))


@router.get("/boxplots")
def boxplots(
    price_type: PriceType = Query(PriceType.RECURRING),
    currency: CurrencyMode = Query(CurrencyMode.EUR),
    store: DataStore = Depends(get_store),
    filters: FilterState = Depends(parse_filters),
):
    """Base vs. promo box-plot statistics, one group or one per competitor."""
    return _safe_json({
        "price_type": price_type.value,
        "currency": currency.value,
        "comparisons": boxplot_payload(store.rows, filters, price_type, currency),
    })


@router.get("/promotions")
def promotions(
    store: DataStore = Depends(get_store),
    filters: FilterState = Depends(parse_filters),
):
    """Promo presence and discount depth, overall and per competitor."""
    return _safe_json(promotions_payload(store.rows, filters))


@router.get("/price-table")
def price_table(
    price_type: PriceType = Query(PriceType.RECURRING),
    currency: CurrencyMode = Query(CurrencyMode.EUR),
    store: DataStore = Depends(get_store),
    filters: FilterState = Depends(parse_filters),
):
    table = kit_price_table(apply_filters(store.rows, filters), price_type, currency)
    return _safe_json(table.to_dict())


@router.get("/dashboard")
def dashboard(
    currency: CurrencyMode = Query(CurrencyMode.EUR),
    store: DataStore = Depends(get_store),
    filters: FilterState = Depends(parse_filters),
):
    """Everything the dashboard renders for the current filter state."""
    return _safe_json(dashboard_summary(store.rows, filters, currency))
