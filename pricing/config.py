"""
Competitive Pricing — Configuration: paths, source schema, exchange rates, vocabularies.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths, overridable via PRICING_DATA_FILE / PRICING_REPORTS_DIR for deployment
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_FILE = Path(os.environ.get("PRICING_DATA_FILE", str(PROJECT_ROOT / "data" / "pricing-data.json")))
REPORTS_FOLDER = Path(os.environ.get("PRICING_REPORTS_DIR", str(PROJECT_ROOT / "reports")))

# ---------------------------------------------------------------------------
# Column mapping from the raw survey export → internal attribute names.
# Labels are matched after stripping surrounding whitespace (the export
# carries trailing spaces on several headers, e.g. "ID ").
# ---------------------------------------------------------------------------
COLUMN_MAP = {
    "ID": "id",
    "País": "country",
    "Competidor": "competitor",
    "Segmento": "segment",
    "Tamaño del Kit": "kit_size",
    "PRECIO RECURRENTE - BASE": "recurring_base",
    "PRECIO RECURRENTE - PROMOCIONAL": "recurring_promo",
    "PRECIO RECURRENTE - EFECTIVO": "recurring_effective",
    "PRECIO ALTA - BASE": "alta_base",
    "PRECIO ALTA - PROMOCIONAL": "alta_promo",
    "PRECIO DE ALTA - EFECTIVO": "alta_effective",
    "MONTO DE LA PROMO": "promo_amount",
    "PORCENTAJE DE PROMOCION RECURRENTE": "recurring_promo_pct",
    "PORCENTAJE DE PROMOCION DE ALTA": "alta_promo_pct",
    "PRESENCIA DE PROMOCIONES": "promo_presence",
    "Duración promos": "promo_duration",
}

# Local-currency price fields; each gets a EUR twin at parse time
PRICE_FIELDS = [
    "recurring_base",
    "recurring_promo",
    "recurring_effective",
    "alta_base",
    "alta_promo",
    "alta_effective",
]

# Nullable numerics: missing stays None, never 0
NULLABLE_FIELDS = ["promo_amount", "recurring_promo_pct", "alta_promo_pct"]

# ---------------------------------------------------------------------------
# Currency
# ---------------------------------------------------------------------------
REFERENCE_CURRENCY = "EUR"

# Local units per 1 EUR (TC / budget rates)
EXCHANGE_RATES = {
    "AR": 1676,
    "ARG": 1676,
    "ARGENTINA": 1676,
    "CO": 4900,
    "COL": 4900,
    "COLOMBIA": 4900,
    "PE": 4.24,
    "PER": 4.24,
    "PERU": 4.24,
    "PERÚ": 4.24,
    "UY": 49.5,
    "URY": 49.5,
    "URUGUAY": 49.5,
    "PY": 9268,
    "PRY": 9268,
    "PARAGUAY": 9268,
    "CH": 1081,
    "CL": 1081,
    "CHL": 1081,
    "CHILE": 1081,
    "PT": 1,
    "PRT": 1,
    "PORTUGAL": 1,
}

# Country codes, abbreviations and spellings → canonical display name
COUNTRY_ALIASES = {
    "AR": "ARGENTINA",
    "ARG": "ARGENTINA",
    "ARGENTINA": "ARGENTINA",
    "CO": "COLOMBIA",
    "COL": "COLOMBIA",
    "COLOMBIA": "COLOMBIA",
    "PE": "PERU",
    "PER": "PERU",
    "PERU": "PERU",
    "PERÚ": "PERU",
    "UY": "URUGUAY",
    "URY": "URUGUAY",
    "URUGUAY": "URUGUAY",
    "PY": "PARAGUAY",
    "PRY": "PARAGUAY",
    "PARAGUAY": "PARAGUAY",
    "CH": "CHILE",
    "CL": "CHILE",
    "CHL": "CHILE",
    "CHILE": "CHILE",
    "PT": "PORTUGAL",
    "PRT": "PORTUGAL",
    "PORTUGAL": "PORTUGAL",
}

# ---------------------------------------------------------------------------
# Segment normalization (lower-cased key → canonical)
# ---------------------------------------------------------------------------
SEGMENT_NORMALIZATION = {
    "hogar": "Hogares",
    "hogares": "Hogares",
    "negocio": "Negocios",
    "negocios": "Negocios",
}

# ---------------------------------------------------------------------------
# Promotion presence vocabulary (compared lower-cased and trimmed)
# ---------------------------------------------------------------------------
PROMO_YES_VALUES = {"si", "sí", "yes"}

# ---------------------------------------------------------------------------
# Kit-size buckets for the price table (first match wins)
# ---------------------------------------------------------------------------
KIT_STANDARD = "Kit Estándar"
KIT_ADVANCED = "Kit Avanzado"
KIT_UNSPECIFIED = "Sin especificar"

KIT_SIZE_KEYWORDS = [
    (("estandar", "estándar", "standard", "basico", "básico"), KIT_STANDARD),
    (("avanzado", "premium", "plus", "pro"), KIT_ADVANCED),
]
KIT_SIZE_ORDER = [KIT_STANDARD, KIT_ADVANCED, KIT_UNSPECIFIED]

# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------
ALL_GROUP_LABEL = "Todos"
