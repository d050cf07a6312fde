"""
Typed row, filter-state and derived view-model schemas.

Everything here is frozen: rows are parsed once and every filter change
produces fresh derived instances.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Optional


class PriceType(str, Enum):
    RECURRING = "recurrente"
    INSTALLATION = "alta"


class CurrencyMode(str, Enum):
    EUR = "EUR"
    LOCAL = "LOCAL"


class FilterDimension(str, Enum):
    """Filter dimensions; values double as attribute names on rows and filter state."""
    COUNTRY = "country"
    COMPETITOR = "competitor"
    SEGMENT = "segment"
    KIT_SIZE = "kit_size"


# Highest priority first; selecting a dimension resets everything after it
FILTER_PRIORITY: tuple[FilterDimension, ...] = (
    FilterDimension.COUNTRY,
    FilterDimension.COMPETITOR,
    FilterDimension.SEGMENT,
    FilterDimension.KIT_SIZE,
)


@dataclass(frozen=True)
class CanonicalRow:
    """One priced offer observation.

    Plain price attributes are in EUR; ``*_local`` twins keep the value in the
    country's own currency.
    """
    id: int
    country: str
    competitor: str
    segment: str
    kit_size: Optional[str]
    recurring_base: float
    recurring_base_local: float
    recurring_promo: float
    recurring_promo_local: float
    recurring_effective: float
    recurring_effective_local: float
    alta_base: float
    alta_base_local: float
    alta_promo: float
    alta_promo_local: float
    alta_effective: float
    alta_effective_local: float
    promo_amount: Optional[float] = None
    promo_amount_local: Optional[float] = None
    recurring_promo_pct: Optional[float] = None   # signed ratio, negative = discount
    alta_promo_pct: Optional[float] = None
    promo_presence: str = ""
    promo_duration: str = ""


@dataclass(frozen=True)
class FilterState:
    """Four independent selectors; None means no constraint."""
    country: Optional[str] = None
    competitor: Optional[str] = None
    segment: Optional[str] = None
    kit_size: Optional[str] = None

    def get(self, dimension: FilterDimension) -> Optional[str]:
        return getattr(self, dimension.value)

    def active(self) -> dict[str, str]:
        """Only the dimensions that currently constrain rows."""
        return {d.value: self.get(d) for d in FILTER_PRIORITY if self.get(d) is not None}

    def with_value(self, dimension: FilterDimension, value: Optional[str]) -> "FilterState":
        return replace(self, **{dimension.value: value})


@dataclass(frozen=True)
class FilterOptions:
    country: list[str] = field(default_factory=list)
    competitor: list[str] = field(default_factory=list)
    segment: list[str] = field(default_factory=list)
    kit_size: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class BoxplotStats:
    min: float = 0.0
    q1: float = 0.0
    median: float = 0.0
    q3: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    values: tuple[float, ...] = ()   # sorted ascending

    def to_dict(self) -> dict:
        d = asdict(self)
        d["values"] = list(self.values)
        return d


@dataclass(frozen=True)
class BoxplotComparison:
    label: str
    base: BoxplotStats
    promo: BoxplotStats
    percentage_diff: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "base": self.base.to_dict(),
            "promo": self.promo.to_dict(),
            "percentage_diff": self.percentage_diff,
        }


@dataclass(frozen=True)
class PromoAnalysis:
    avg_promo_amount: float = 0.0
    avg_recurring_promo_percent: float = 0.0
    avg_alta_promo_percent: float = 0.0
    with_promo_count: int = 0
    without_promo_count: int = 0
    total_count: int = 0
    promo_share: float = 0.0   # with_promo_count / total_count * 100

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CompetitorPromoAnalysis:
    competitor: str
    analysis: PromoAnalysis

    def to_dict(self) -> dict:
        return {"competitor": self.competitor, "analysis": self.analysis.to_dict()}


@dataclass(frozen=True)
class KitPriceRow:
    kit_type: str
    avg_base: float
    avg_promo: float
    count: int


@dataclass(frozen=True)
class PriceTable:
    price_type: PriceType
    currency: CurrencyMode
    rows: tuple[KitPriceRow, ...] = ()
    total: KitPriceRow = KitPriceRow("Total", 0.0, 0.0, 0)

    def to_dict(self) -> dict:
        return {
            "price_type": self.price_type.value,
            "currency": self.currency.value,
            "rows": [asdict(r) for r in self.rows],
            "total": asdict(self.total),
        }
