"""
Excel処理ヘルパーモジュール

openpyxlのワークシートに対する列名解決・セル値変換・行操作のヘルパークラス群
"""

from sheet_adapter.excel.cell_coercer import ExcelCellCoercer
from sheet_adapter.excel.cell_reader import CellKind, ExcelCellReader
from sheet_adapter.excel.cell_writer import ExcelCellWriter
from sheet_adapter.excel.column_resolver import ExcelColumnResolver
from sheet_adapter.excel.dropdown_builder import ExcelDropdownBuilder
from sheet_adapter.excel.row_writer import ExcelRowWriter
from sheet_adapter.excel.sheet_access import ExcelSheetAccess
from sheet_adapter.excel.views import RowView, SheetAccessor
from sheet_adapter.excel.workbook_manager import ExcelWorkbookManager

__all__ = [
    "CellKind",
    "ExcelCellReader",
    "ExcelCellCoercer",
    "ExcelCellWriter",
    "ExcelColumnResolver",
    "ExcelDropdownBuilder",
    "ExcelRowWriter",
    "ExcelSheetAccess",
    "ExcelWorkbookManager",
    "RowView",
    "SheetAccessor",
]
