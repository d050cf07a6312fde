"""
DataStore — parsed, immutable pricing rows held in memory.

Loaded once at startup, queried on every request. All derivations are
pure functions over ``store.rows``; the store itself is never mutated after load.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from pricing.config import DATA_FILE
from pricing.data.currency import CurrencyNormalizer
from pricing.data.loader import load_records
from pricing.data.normalize import parse_rows
from pricing.data.schemas import CanonicalRow


class DataStore:
    """In-memory pricing observations with metadata accessors."""

    def __init__(self, normalizer: CurrencyNormalizer | None = None) -> None:
        self.normalizer = normalizer or CurrencyNormalizer()
        self.rows: tuple[CanonicalRow, ...] = ()
        self.source: Path | None = None
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: Path = DATA_FILE) -> "DataStore":
        """Read the raw file and parse it into canonical rows."""
        print(f"Loading pricing data from {path}...")
        records = load_records(path)
        self.source = Path(path)
        self.load_records(records)
        if not self.rows:
            print("  No pricing rows found — starting with empty dataset")
        else:
            print(f"  Parsed {len(self.rows):,} rows, {len(self.countries())} countries, "
                  f"{len(self.competitors())} competitors")
        return self

    def load_records(self, records: Iterable[Mapping[str, Any]]) -> "DataStore":
        """Parse already-in-memory raw records (used by tests and embedding callers)."""
        self.rows = tuple(parse_rows(records, self.normalizer))
        self._loaded = True
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self.rows)

    def countries(self) -> list[str]:
        return sorted({r.country for r in self.rows})

    def competitors(self) -> list[str]:
        return sorted({r.competitor for r in self.rows})

    def segments(self) -> list[str]:
        return sorted({r.segment for r in self.rows})
