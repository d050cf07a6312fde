"""Data loading, normalization, and the in-memory row store."""
from .currency import CurrencyNormalizer
from .loader import load_records
from .store import DataStore
from .schemas import FilterState, FilterDimension, PriceType, CurrencyMode, CanonicalRow
from .normalize import parse_rows, normalize_segment, normalize_kit_size
