"""
Report export endpoints — styled Excel workbook for the current filter state.
"""
from __future__ import annotations

import re

from fastapi import APIRouter, Depends, Query
from fastapi.responses import FileResponse

from pricing.config import REPORTS_FOLDER
from pricing.data.store import DataStore
from pricing.data.schemas import CurrencyMode, FilterState
from pricing.api.dependencies import get_store, parse_filters
from pricing.reports import pricing_report

router = APIRouter(prefix="/api/export", tags=["reports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def report_filename(filters: FilterState, currency: CurrencyMode) -> str:
    parts = ["Pricing_Report", *filters.active().values(), currency.value]
    safe = re.sub(r"[^\w\-]+", "_", "_".join(parts)).strip("_")
    return f"{safe[:80]}.xlsx"


@router.get("/xlsx")
def export_xlsx(
    currency: CurrencyMode = Query(CurrencyMode.EUR),
    store: DataStore = Depends(get_store),
    filters: FilterState = Depends(parse_filters),
):
    filename = report_filename(filters, currency)
    out_path = pricing_report.generate_excel(store, REPORTS_FOLDER / filename, filters, currency)
    return FileResponse(path=str(out_path), filename=out_path.name, media_type=XLSX_MEDIA_TYPE)
