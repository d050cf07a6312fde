"""
Cell-level formatting for pricing sheets: number formats per column kind, KPI cards.
"""
from __future__ import annotations

from typing import Iterable

from openpyxl.cell.cell import Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from pricing.excel.styles import (
    CENTER, LEFT, RIGHT,
    DATA_FONT, HEADER_FONT, TOTAL_FONT, KPI_LABEL_FONT, KPI_VALUE_FONT,
    GRID_BORDER, HEADER_BORDER, TOTAL_BORDER,
    HEADER_FILL, TOTAL_FILL, ZEBRA_FILL, DIFF_FILLS,
)

# Column kinds: "text" plus every key below
NUMBER_FORMATS = {
    "eur": '#,##0.00 "€"',
    "local": "#,##0.00",
    "percent": '0.0"%"',
    "number": "#,##0",
}


def money_type(currency: str) -> str:
    """Column kind for a price shown in the given currency mode."""
    return "eur" if currency == "EUR" else "local"


def style_header(cells: Iterable[Cell]) -> None:
    for cell in cells:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


def style_cell(cell: Cell, kind: str = "text", total: bool = False, highlight: str | None = None) -> None:
    """Font, border, alignment, number format and background for one body cell.

    Background precedence: diff highlight, then total row, then zebra striping.
    """
    fmt = NUMBER_FORMATS.get(kind)
    cell.font = TOTAL_FONT if total else DATA_FONT
    cell.border = TOTAL_BORDER if total else GRID_BORDER
    cell.alignment = LEFT if fmt is None else RIGHT
    if fmt is not None:
        cell.number_format = fmt

    if highlight in DIFF_FILLS:
        cell.fill = DIFF_FILLS[highlight]
    elif total:
        cell.fill = TOTAL_FILL
    elif cell.row % 2 == 0:
        cell.fill = ZEBRA_FILL


def fit_columns(ws: Worksheet, min_width: int = 10, max_width: int = 45) -> None:
    for column in ws.iter_cols():
        lengths = [len(str(c.value)) for c in column if c.value is not None]
        width = max(lengths, default=0) + 2
        ws.column_dimensions[get_column_letter(column[0].column)].width = min(max(width, min_width), max_width)


def kpi_card(ws: Worksheet, row: int, col: int, value, label: str, kind: str = "number") -> None:
    """Big figure with its caption on the row below."""
    figure = ws.cell(row=row, column=col, value=value)
    figure.font = KPI_VALUE_FONT
    figure.alignment = CENTER
    if kind in NUMBER_FORMATS:
        figure.number_format = NUMBER_FORMATS[kind]

    caption = ws.cell(row=row + 1, column=col, value=label)
    caption.font = KPI_LABEL_FONT
    caption.alignment = CENTER
