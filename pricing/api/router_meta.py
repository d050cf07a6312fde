"""
Meta endpoints: health, cascading filter options, filter transitions.
"""
from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from pricing.data.store import DataStore
from pricing.data.schemas import FilterDimension, FilterState
from pricing.analytics.filters import cascading_options, record_count, select_filter
from pricing.api.dependencies import get_store, parse_filters
from pricing.api.response_models import (
    FilterSelectionResponse, FilterStateModel, HealthResponse, OptionsResponse,
)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store)):
    return HealthResponse(
        status="ok",
        rows=store.row_count(),
        countries=len(store.countries()),
        competitors=len(store.competitors()),
        segments=len(store.segments()),
    )


@router.get("/filters/options", response_model=OptionsResponse)
def filter_options(
    store: DataStore = Depends(get_store),
    filters: FilterState = Depends(parse_filters),
):
    """Selectable values per dimension given the selections above it."""
    return OptionsResponse(**cascading_options(store.rows, filters).to_dict())


@router.get("/filters/select", response_model=FilterSelectionResponse)
def filter_select(
    dimension: str = Query(..., description="country|competitor|segment|kit_size"),
    value: Optional[str] = Query(None, description="Omit to clear the selector"),
    store: DataStore = Depends(get_store),
    filters: FilterState = Depends(parse_filters),
):
    """Apply one selection, clearing lower-priority selectors, and return the new state."""
    try:
        dim = FilterDimension(dimension)
    except ValueError:
        raise HTTPException(400, f"Invalid dimension: {dimension}")

    new_state = select_filter(filters, dim, value)
    return FilterSelectionResponse(
        filters=FilterStateModel(**asdict(new_state)),
        options=OptionsResponse(**cascading_options(store.rows, new_state).to_dict()),
        record_count=record_count(store.rows, new_state),
    )
