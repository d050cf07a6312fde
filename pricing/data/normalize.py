"""
Column mapping, numeric coercion, segment / kit-size normalisation, row parsing.
"""
from __future__ import annotations

import math
import numbers
import re
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from pricing.config import (
    COLUMN_MAP, PRICE_FIELDS, NULLABLE_FIELDS, SEGMENT_NORMALIZATION,
    KIT_SIZE_KEYWORDS, KIT_UNSPECIFIED,
)
from pricing.data.currency import CurrencyNormalizer
from pricing.data.schemas import CanonicalRow


_LABELS = {label.strip(): attr for label, attr in COLUMN_MAP.items()}
_NUMBER_JUNK_RE = re.compile(r"[\$€\s]")
_DECIMAL_COMMA_RE = re.compile(r"^-?\d*,\d{1,2}$")
_GROUPED_RE = re.compile(r"^-?\d{1,3}([.,])\d{3}(?:\1\d{3})*$")


def _unify_separators(text: str) -> Optional[str]:
    """Rewrite to a plain '.'-decimal number string; None when the separators are ambiguous.

    "29,99" and "1.234,56" use a decimal comma, "1,234.5" a thousands comma,
    "1.234.567" dot grouping. A lone comma before three digits ("1,234") is rejected.
    """
    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            return text.replace(".", "").replace(",", ".")
        return text.replace(",", "")
    if "," in text:
        if _DECIMAL_COMMA_RE.match(text):
            return text.replace(",", ".")
        if text.count(",") > 1 and _GROUPED_RE.match(text):
            return text.replace(",", "")
        return None
    if text.count(".") > 1 and _GROUPED_RE.match(text):
        return text.replace(".", "")
    return text


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------

def map_columns(record: Mapping[str, Any]) -> dict[str, Any]:
    """Rename raw survey labels to internal attribute names, dropping unknown keys."""
    out: dict[str, Any] = {}
    for label, value in record.items():
        attr = _LABELS.get(str(label).strip())
        if attr is not None:
            out[attr] = value
    return out


def to_float(value: Any) -> Optional[float]:
    """Best-effort numeric parse; None when the value is missing or unreadable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        number = float(value)
        return number if math.isfinite(number) else None
    text = _NUMBER_JUNK_RE.sub("", str(value))
    if text in ("", "-"):
        return None
    scale = 1.0
    if text.endswith("%"):
        text, scale = text[:-1], 0.01
    text = _unify_separators(text)
    if text is None:
        return None
    try:
        number = float(text) * scale
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value).strip()


def to_optional_text(value: Any) -> Optional[str]:
    text = to_text(value)
    return text or None


# ---------------------------------------------------------------------------
# Category normalisation
# ---------------------------------------------------------------------------

def normalize_segment(segment: Any) -> str:
    """Collapse HOGAR/hogares/... onto the closed segment set; pass others through."""
    text = to_text(segment)
    return SEGMENT_NORMALIZATION.get(text.lower(), text)


def normalize_kit_size(kit_size: Optional[str]) -> str:
    """Bucket a free-text kit size into a price-table label."""
    if not kit_size or kit_size.strip() in ("", "-"):
        return KIT_UNSPECIFIED
    lower = kit_size.strip().lower()
    for keywords, label in KIT_SIZE_KEYWORDS:
        if any(k in lower for k in keywords):
            return label
    return kit_size


# ---------------------------------------------------------------------------
# Row parsing
# ---------------------------------------------------------------------------

def parse_row(
    record: Mapping[str, Any],
    normalizer: CurrencyNormalizer,
    position: int = 0,
) -> CanonicalRow:
    """Build one CanonicalRow; missing prices default to 0, nullable numerics stay None."""
    raw = map_columns(record)
    country = normalizer.normalize_country(to_text(raw.get("country")) or None)

    row_id = to_float(raw.get("id"))
    fields: dict[str, Any] = {
        "id": int(row_id) if row_id is not None else position + 1,
        "country": country,
        "competitor": to_text(raw.get("competitor")),
        "segment": normalize_segment(raw.get("segment")),
        "kit_size": to_optional_text(raw.get("kit_size")),
        "promo_presence": to_text(raw.get("promo_presence")),
        "promo_duration": to_text(raw.get("promo_duration")),
    }

    for col in PRICE_FIELDS:
        local = to_float(raw.get(col))
        local = 0.0 if local is None else local
        fields[col] = normalizer.convert_to_reference(local, country)
        fields[f"{col}_local"] = local

    for col in NULLABLE_FIELDS:
        fields[col] = to_float(raw.get(col))

    amount = fields["promo_amount"]
    fields["promo_amount_local"] = amount
    fields["promo_amount"] = None if amount is None else normalizer.convert_to_reference(amount, country)

    return CanonicalRow(**fields)


def parse_rows(
    records: Iterable[Mapping[str, Any]],
    normalizer: CurrencyNormalizer | None = None,
) -> list[CanonicalRow]:
    """One CanonicalRow per raw record, order preserved."""
    normalizer = normalizer or CurrencyNormalizer()
    return [parse_row(rec, normalizer, i) for i, rec in enumerate(records)]
