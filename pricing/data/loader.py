"""
Raw survey loading — JSON export, Excel workbook or CSV → list of untyped records.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd

from pricing.config import DATA_FILE


SUPPORTED_SUFFIXES = {".json", ".xlsx", ".xls", ".csv"}


def _frame_to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """DataFrame → list of dicts with NaN replaced by None."""
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict("records")


def load_records(path: Path = DATA_FILE) -> list[dict[str, Any]]:
    """Read every record from the raw dataset file.

    A missing file yields an empty list; unknown extensions raise ValueError.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported data file type: {path.name}")
    if not path.exists():
        print(f"  Data file not found: {path}")
        return []

    if suffix == ".json":
        payload = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            # {"rows": [...]} style exports
            payload = payload.get("rows") or payload.get("data") or []
        return [dict(rec) for rec in payload if isinstance(rec, dict)]

    if suffix == ".csv":
        df = pd.read_csv(path)
    else:
        df = pd.read_excel(path)
    return _frame_to_records(df)
