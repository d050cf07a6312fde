"""
Workbook palette: fonts, fills, borders and alignments shared by every pricing sheet.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
INDIGO = "4F46E5"
DARK_SLATE = "334155"
SLATE_500 = "64748B"
GRID = "CBD5E1"
TOTAL_EDGE = "94A3B8"
ZEBRA = "F8FAFC"
TOTAL_BG = "E0E7FF"
DISCOUNT_BG = "ECFDF5"   # promo below base
MARKUP_BG = "FEF2F2"     # promo above base


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _box(color: str, top: str = "thin", bottom: str = "thin", bottom_color: str | None = None) -> Border:
    side = Side(style="thin", color=color)
    return Border(
        left=side,
        right=side,
        top=Side(style=top, color=color),
        bottom=Side(style=bottom, color=bottom_color or color),
    )


def _calibri(size: int, color: str = "000000", **kw) -> Font:
    return Font(name="Calibri", size=size, color=color, **kw)


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = _calibri(22, DARK_SLATE, bold=True)
SUBTITLE_FONT = _calibri(11, SLATE_500, italic=True)
SECTION_FONT = _calibri(14, INDIGO, bold=True)
HEADER_FONT = _calibri(11, "FFFFFF", bold=True)
DATA_FONT = _calibri(10)
TOTAL_FONT = _calibri(10, bold=True)
KPI_VALUE_FONT = _calibri(24, INDIGO, bold=True)
KPI_LABEL_FONT = _calibri(10, SLATE_500)

# ---------------------------------------------------------------------------
# Fills, borders, alignments
# ---------------------------------------------------------------------------
HEADER_FILL = _solid(INDIGO)
ZEBRA_FILL = _solid(ZEBRA)
TOTAL_FILL = _solid(TOTAL_BG)

HEADER_BORDER = _box(INDIGO, bottom="medium", bottom_color=DARK_SLATE)
GRID_BORDER = _box(GRID)
TOTAL_BORDER = _box(TOTAL_EDGE, top="medium", bottom="medium")

CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")

# Row highlight keyed by the sign of the promo vs. base difference
DIFF_FILLS = {
    "discount": _solid(DISCOUNT_BG),
    "markup": _solid(MARKUP_BG),
}
