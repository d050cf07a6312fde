"""
Kit price table — average base / promo price per kit-size bucket.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from pricing.config import KIT_SIZE_ORDER
from pricing.data.normalize import normalize_kit_size
from pricing.data.schemas import CanonicalRow, CurrencyMode, KitPriceRow, PriceTable, PriceType
from pricing.analytics.boxplot import price_values
from pricing.analytics.common import locale_sort_key


def _positive_mean(series: pd.Series) -> float:
    """Mean over strictly positive values; 0.0 when none qualify."""
    positive = series[series > 0]
    return float(positive.mean()) if not positive.empty else 0.0


def _kit_order(kit_type: str) -> tuple:
    if kit_type in KIT_SIZE_ORDER:
        return (0, KIT_SIZE_ORDER.index(kit_type), "")
    return (1, 0, locale_sort_key(kit_type))


def kit_price_table(
    rows: Sequence[CanonicalRow],
    price_type: PriceType,
    currency: CurrencyMode = CurrencyMode.EUR,
) -> PriceTable:
    price_type = PriceType(price_type)
    currency = CurrencyMode(currency)
    if not rows:
        return PriceTable(price_type=price_type, currency=currency)

    base, promo = price_values(rows, price_type, currency)
    df = pd.DataFrame({
        "kit_type": [normalize_kit_size(r.kit_size) for r in rows],
        "base": np.asarray(base, dtype=float),
        "promo": np.asarray(promo, dtype=float),
    })

    agg = df.groupby("kit_type").agg(
        avg_base=("base", _positive_mean),
        avg_promo=("promo", _positive_mean),
        count=("base", "size"),
    ).reset_index()

    table_rows = [
        KitPriceRow(
            kit_type=str(r["kit_type"]),
            avg_base=float(r["avg_base"]),
            avg_promo=float(r["avg_promo"]),
            count=int(r["count"]),
        )
        for r in agg.to_dict("records")
    ]
    table_rows.sort(key=lambda r: _kit_order(r.kit_type))

    total = KitPriceRow(
        kit_type="Total",
        avg_base=_positive_mean(df["base"]),
        avg_promo=_positive_mean(df["promo"]),
        count=len(df),
    )
    return PriceTable(price_type=price_type, currency=currency, rows=tuple(table_rows), total=total)
