"""
Excel行書き込みユーティリティ

行単位の書き込み・追加・ヘッダー設定と、他の行からの複製を担当するヘルパークラス
"""

import logging
from collections.abc import Iterable

from openpyxl.utils import get_column_letter

from sheet_adapter.excel.cell_writer import ExcelCellWriter
from sheet_adapter.excel.sheet_access import ExcelSheetAccess
from sheet_adapter.excel.views import RowView

logger = logging.getLogger(__name__)


class ExcelRowWriter:
    """行単位の書き込み（全て staticmethod）"""

    @staticmethod
    def set_row(sheet, row_index: int, values: Iterable) -> None:
        """
        行に値を左から順に書き込む

        値が RowView 1つだけの場合は、その行の内容を複製する（replace_row）。

        Args:
            sheet: openpyxl Worksheet
            row_index: 行インデックス（0始まり）
            values: 書き込む値（ExcelCellWriter.set_cell_value が受け付ける型）
        """
        values = list(values)
        if len(values) == 1 and isinstance(values[0], RowView):
            ExcelRowWriter.replace_row(sheet, row_index, values[0])
            return

        for column, value in enumerate(values):
            ExcelCellWriter.set_cell_value(
                ExcelSheetAccess.get_cell(sheet, row_index, column), value
            )

    @staticmethod
    def add_row(sheet, values: Iterable) -> int:
        """
        値のある最後の行の次に行を追加する

        Returns:
            追加した行のインデックス
        """
        row_index = ExcelSheetAccess.last_row_index(sheet) + 1
        ExcelRowWriter.set_row(sheet, row_index, values)
        return row_index

    @staticmethod
    def set_header(sheet, values: Iterable) -> None:
        """ヘッダー行（0行目）を書き込む"""
        ExcelRowWriter.set_row(sheet, 0, values)

    @staticmethod
    def replace_row(sheet, row_index: int, source: RowView) -> None:
        """
        別の行（他シート可）の値・表示形式・列幅を複製する

        複製先と複製元のうち長い方の列数まで処理し、複製元に無いセルは空にする。

        Args:
            sheet: 複製先 openpyxl Worksheet
            row_index: 複製先の行インデックス
            source: 複製元の行
        """
        width = max(
            ExcelSheetAccess.get_cell_count(sheet, row_index), len(source)
        )
        logger.debug(
            f"Copying {width} cells from {source!r} to row {row_index} of '{sheet.title}'"
        )

        for column in range(width):
            cell = ExcelSheetAccess.get_cell(sheet, row_index, column)
            source_cell = ExcelSheetAccess.peek_cell(source.sheet, source.index, column)

            if source_cell is None:
                cell.number_format = "General"
                cell.value = None
            else:
                cell.number_format = source_cell.number_format
                cell.value = source_cell.value

            column_letter = get_column_letter(column + 1)
            source_dimension = source.sheet.column_dimensions.get(column_letter)
            if source_dimension is not None and source_dimension.width:
                sheet.column_dimensions[column_letter].width = source_dimension.width
