"""
FastAPI dependencies — DataStore singleton, filter-state parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from pricing.data.store import DataStore
from pricing.data.schemas import FilterState

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _store


# ---------------------------------------------------------------------------
# Filter state from query params
# ---------------------------------------------------------------------------

def parse_filters(
    country: Optional[str] = Query(None, description="Canonical country name"),
    competitor: Optional[str] = Query(None),
    segment: Optional[str] = Query(None, description="Hogares|Negocios"),
    kit_size: Optional[str] = Query(None),
) -> FilterState:
    """Empty strings count as "all"."""
    return FilterState(
        country=country or None,
        competitor=competitor or None,
        segment=segment or None,
        kit_size=kit_size or None,
    )
