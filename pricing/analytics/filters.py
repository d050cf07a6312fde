"""
Filter engine — row filtering, cascading option sets, reset-on-change transitions.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from pricing.data.schemas import (
    CanonicalRow, FilterDimension, FilterOptions, FilterState, FILTER_PRIORITY,
)


def _matches(row: CanonicalRow, dimension: FilterDimension, value: str) -> bool:
    return getattr(row, dimension.value) == value


def apply_filters(rows: Iterable[CanonicalRow], filters: FilterState) -> list[CanonicalRow]:
    """Rows matching every active selector (exact, case-sensitive)."""
    active = [(d, filters.get(d)) for d in FILTER_PRIORITY if filters.get(d) is not None]
    return [r for r in rows if all(_matches(r, d, v) for d, v in active)]


def record_count(rows: Sequence[CanonicalRow], filters: FilterState) -> int:
    return len(apply_filters(rows, filters))


def _distinct(rows: Iterable[CanonicalRow], dimension: FilterDimension) -> list[str]:
    values = {getattr(r, dimension.value) for r in rows}
    if dimension is FilterDimension.KIT_SIZE:
        values = {v for v in values if v}
    return sorted(values)


def cascading_options(rows: Sequence[CanonicalRow], filters: FilterState) -> FilterOptions:
    """Selectable values per dimension, each narrowed only by the dimensions above it.

    Countries always come from the full dataset.
    """
    options: dict[str, list[str]] = {}
    narrowed: Sequence[CanonicalRow] = rows
    for dimension in FILTER_PRIORITY:
        options[dimension.value] = _distinct(rows if dimension is FilterDimension.COUNTRY else narrowed, dimension)
        value = filters.get(dimension)
        if value is not None:
            narrowed = [r for r in narrowed if _matches(r, dimension, value)]
    return FilterOptions(**options)


def select_filter(
    state: FilterState,
    dimension: FilterDimension,
    value: Optional[str],
) -> FilterState:
    """Set one selector and clear every lower-priority selector.

    An empty string is treated the same as None ("all").
    """
    position = FILTER_PRIORITY.index(dimension)
    new_state = state.with_value(dimension, value or None)
    for lower in FILTER_PRIORITY[position + 1:]:
        new_state = new_state.with_value(lower, None)
    return new_state
