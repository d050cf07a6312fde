"""
Box-plot analytics — nearest-rank quartiles and base vs. promo comparisons.
"""
from __future__ import annotations

import math
from collections import defaultdict
from typing import Iterable, Sequence

from pricing.config import ALL_GROUP_LABEL
from pricing.data.schemas import (
    BoxplotComparison, BoxplotStats, CanonicalRow, CurrencyMode, FilterState, PriceType,
)
from pricing.analytics.common import locale_sort_key, mean, percentage_diff
from pricing.analytics.filters import apply_filters


# (price type, currency) → (base attribute, promo attribute)
PRICE_COLUMNS = {
    (PriceType.RECURRING, CurrencyMode.EUR): ("recurring_base", "recurring_promo"),
    (PriceType.RECURRING, CurrencyMode.LOCAL): ("recurring_base_local", "recurring_promo_local"),
    (PriceType.INSTALLATION, CurrencyMode.EUR): ("alta_base", "alta_promo"),
    (PriceType.INSTALLATION, CurrencyMode.LOCAL): ("alta_base_local", "alta_promo_local"),
}


def price_values(
    rows: Iterable[CanonicalRow],
    price_type: PriceType,
    currency: CurrencyMode = CurrencyMode.EUR,
) -> tuple[list[float], list[float]]:
    """(base values, promo values) for the requested price type and currency."""
    base_col, promo_col = PRICE_COLUMNS[(PriceType(price_type), CurrencyMode(currency))]
    rows = list(rows)
    return [getattr(r, base_col) for r in rows], [getattr(r, promo_col) for r in rows]


def compute_stats(values: Sequence[float]) -> BoxplotStats:
    """Min, nearest-rank quartiles (index floor(n * p)), max and mean.

    Empty input returns the all-zero sentinel.
    """
    if not values:
        return BoxplotStats()

    ordered = sorted(values)
    n = len(ordered)
    return BoxplotStats(
        min=ordered[0],
        q1=ordered[math.floor(n * 0.25)],
        median=ordered[math.floor(n * 0.5)],
        q3=ordered[math.floor(n * 0.75)],
        max=ordered[-1],
        mean=mean(values),
        values=tuple(ordered),
    )


def _compare(label: str, rows: Sequence[CanonicalRow], price_type: PriceType, currency: CurrencyMode) -> BoxplotComparison | None:
    base, promo = price_values(rows, price_type, currency)
    if price_type is PriceType.INSTALLATION:
        # zero installation price means "no fee recorded"
        base = [v for v in base if v != 0]
        promo = [v for v in promo if v != 0]
    if not base:
        return None

    base_stats = compute_stats(base)
    promo_stats = compute_stats(promo)
    return BoxplotComparison(
        label=label,
        base=base_stats,
        promo=promo_stats,
        percentage_diff=percentage_diff(base_stats.mean, promo_stats.mean),
    )


def compare_by_group(
    rows: Sequence[CanonicalRow],
    filters: FilterState,
    price_type: PriceType,
    currency: CurrencyMode = CurrencyMode.EUR,
) -> list[BoxplotComparison]:
    """Base vs. promo box-plots: one "Todos" group, or one per competitor once a country is chosen."""
    price_type = PriceType(price_type)
    currency = CurrencyMode(currency)
    filtered = apply_filters(rows, filters)
    if not filtered:
        return []

    if filters.country is None:
        single = _compare(ALL_GROUP_LABEL, filtered, price_type, currency)
        return [single] if single else []

    groups: dict[str, list[CanonicalRow]] = defaultdict(list)
    for row in filtered:
        groups[row.competitor].append(row)

    comparisons = []
    for label, members in groups.items():
        comp = _compare(label, members, price_type, currency)
        if comp is not None:
            comparisons.append(comp)
    return sorted(comparisons, key=lambda c: locale_sort_key(c.label))
