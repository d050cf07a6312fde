"""Styled workbook building for the pricing export."""
from .formatters import NUMBER_FORMATS, money_type
from .writer import ReportWorkbook
