"""
ReportWorkbook — sheet builder used by the pricing Excel export.

Every write method takes the row to start on and returns the next free row,
so report code can stack blocks top to bottom.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from pricing.excel.styles import SECTION_FONT, SUBTITLE_FONT, TITLE_FONT
from pricing.excel.formatters import fit_columns, kpi_card, style_cell, style_header


Column = tuple[str, str, str]  # (row key, column kind, header label)
Highlighter = Callable[[Mapping], Optional[str]]


class ReportWorkbook:

    def __init__(self) -> None:
        self.wb = Workbook()
        self._sheets = 0

    def sheet(self, title: str) -> Worksheet:
        # openpyxl creates one empty sheet up front; rename it instead of adding a second
        ws = self.wb.active if self._sheets == 0 else self.wb.create_sheet()
        ws.title = title
        self._sheets += 1
        return ws

    def heading(self, ws: Worksheet, title: str, subtitle: str, span: int = 8) -> int:
        """Merged title and subtitle across ``span`` columns (rows 1-2)."""
        for row, text, font in ((1, title, TITLE_FONT), (2, subtitle, SUBTITLE_FONT)):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=span)
        for col in range(1, span + 1):
            ws.column_dimensions[get_column_letter(col)].width = 18
        return 4

    def section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = SECTION_FONT
        return row + 2

    def kpis(self, ws: Worksheet, row: int, cards: Sequence[tuple]) -> int:
        """One card per (value, label, kind), every other column."""
        for i, (value, label, kind) in enumerate(cards):
            kpi_card(ws, row, 1 + 2 * i, value, label, kind)
        return row + 3

    def table(
        self,
        ws: Worksheet,
        row: int,
        columns: Sequence[Column],
        records: Sequence[Mapping],
        highlight: Highlighter | None = None,
        total: Mapping | None = None,
        freeze: bool = False,
    ) -> int:
        """Header, one line per record and an optional pre-computed total line.

        Missing numeric values are written as 0. Leaves one blank row after the table.
        """
        header_row = row
        for col, (_, _, label) in enumerate(columns, 1):
            ws.cell(row=row, column=col, value=label)
        style_header(ws[row][:len(columns)])

        for record in records:
            row += 1
            mark = highlight(record) if highlight else None
            for col, (key, kind, _) in enumerate(columns, 1):
                value = record.get(key)
                if value is None and kind != "text":
                    value = 0
                style_cell(ws.cell(row=row, column=col, value=value), kind, highlight=mark)

        if total is not None:
            row += 1
            for col, (key, kind, _) in enumerate(columns, 1):
                style_cell(ws.cell(row=row, column=col, value=total.get(key, "")), kind, total=True)

        fit_columns(ws)
        if freeze:
            ws.freeze_panes = ws.cell(row=header_row + 1, column=1)
        return row + 2

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
