"""
Promotion analytics — promo presence counts and average discount depth.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence

from pricing.config import PROMO_YES_VALUES
from pricing.data.schemas import CanonicalRow, CompetitorPromoAnalysis, PromoAnalysis
from pricing.analytics.common import locale_sort_key, mean, pct_of_total


def is_promo_flag(value: str | None) -> bool:
    """True for "si" / "sí" / "yes" in any case, surrounding whitespace ignored."""
    return (value or "").strip().lower() in PROMO_YES_VALUES


def has_promo(row: CanonicalRow) -> bool:
    return is_promo_flag(row.promo_presence)


def analyze_promotions(rows: Iterable[CanonicalRow]) -> PromoAnalysis:
    """Promo KPIs over a row set.

    Recurring discount depth only counts promo rows with a negative percentage;
    installation depth counts every row with a non-zero percentage, promo or not.
    """
    rows = list(rows)
    with_promo = [r for r in rows if has_promo(r)]

    amounts = [r.promo_amount for r in with_promo if r.promo_amount is not None and r.promo_amount > 0]
    recurring = [
        abs(r.recurring_promo_pct) * 100
        for r in with_promo
        if r.recurring_promo_pct is not None and r.recurring_promo_pct < 0
    ]
    # TODO: confirm with product whether this should also be gated on promo presence
    alta = [abs(r.alta_promo_pct) * 100 for r in rows if r.alta_promo_pct]

    total = len(rows)
    return PromoAnalysis(
        avg_promo_amount=mean(amounts),
        avg_recurring_promo_percent=mean(recurring),
        avg_alta_promo_percent=mean(alta),
        with_promo_count=len(with_promo),
        without_promo_count=total - len(with_promo),
        total_count=total,
        promo_share=pct_of_total(len(with_promo), total),
    )


def analyze_by_competitor(rows: Sequence[CanonicalRow]) -> list[CompetitorPromoAnalysis]:
    """analyze_promotions per competitor, sorted by competitor label."""
    groups: dict[str, list[CanonicalRow]] = defaultdict(list)
    for row in rows:
        groups[row.competitor].append(row)
    return [
        CompetitorPromoAnalysis(competitor=name, analysis=analyze_promotions(groups[name]))
        for name in sorted(groups, key=locale_sort_key)
    ]
