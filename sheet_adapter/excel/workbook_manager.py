"""
Excelワークブック管理ユーティリティ

ワークブックの読み込み・保存と、ヘッダー付きシートの作成・名前変更を担当するヘルパークラス
"""

import logging
from collections.abc import Callable
from pathlib import Path

from openpyxl import Workbook, load_workbook
from openpyxl.utils import get_column_letter

from sheet_adapter.config import config
from sheet_adapter.error_messages import CoercionFailed, handle_workbook_error
from sheet_adapter.excel.cell_coercer import ExcelCellCoercer
from sheet_adapter.excel.cell_reader import CellKind, ExcelCellReader
from sheet_adapter.excel.row_writer import ExcelRowWriter

logger = logging.getLogger(__name__)


class ExcelWorkbookManager:
    """ワークブックとシートの管理（全て staticmethod）"""

    @staticmethod
    def open_workbook(file_path: str | Path, data_only: bool = False) -> Workbook:
        """
        ワークブックを読み込む

        Args:
            file_path: ファイルパス
            data_only: Trueの場合、数式の代わりにキャッシュされた計算結果を読み込む

        Raises:
            SheetAdapterError: ファイルが存在しない・形式が不正な場合
        """
        logger.info(f"Opening workbook: {file_path}")
        try:
            return load_workbook(file_path, data_only=data_only)
        except Exception as e:
            logger.error(f"Failed to open workbook: {str(e)}")
            raise handle_workbook_error(e, "open", str(file_path)) from e

    @staticmethod
    def save_workbook(workbook: Workbook, file_path: str | Path) -> None:
        """
        ワークブックを保存する（再試行はしない）

        Raises:
            SheetAdapterError: 他のアプリケーションでファイルが開かれている場合など
        """
        logger.info(f"Saving workbook: {file_path}")
        try:
            workbook.save(file_path)
        except Exception as e:
            logger.error(f"Failed to save workbook: {str(e)}")
            raise handle_workbook_error(e, "save", str(file_path)) from e

    @staticmethod
    def create_sheet_with_header(
        workbook: Workbook,
        sheet_name: str,
        header: list[str],
        populate: Callable | None = None,
        auto_size_columns: bool = True,
    ):
        """
        ヘッダー行付きのシートを作成する

        Args:
            workbook: openpyxl Workbook
            sheet_name: シート名
            header: ヘッダー列名
            populate: シートを受け取りデータ行を書き込む関数
            auto_size_columns: ヘッダー列の幅を内容に合わせて調整するか

        Returns:
            作成した openpyxl Worksheet
        """
        sheet = workbook.create_sheet(sheet_name)
        ExcelRowWriter.set_header(sheet, header)
        if populate is not None:
            populate(sheet)
        if auto_size_columns:
            ExcelWorkbookManager.auto_size_columns(sheet, len(header))
        return sheet

    @staticmethod
    def auto_size_columns(sheet, column_count: int) -> None:
        """
        先頭column_count列の幅を最長の表示文字列に合わせる

        幅は (最長文字数 + 2) とし、SHEET_ADAPTER_MAX_COLUMN_WIDTH を上限とする。
        """
        if column_count <= 0:
            return

        max_width = config.max_column_width or 50
        longest = [0] * column_count

        for row in sheet.iter_rows(max_col=column_count):
            for cell in row:
                text = ExcelWorkbookManager._display_text(cell)
                column = cell.column - 1
                if len(text) > longest[column]:
                    longest[column] = len(text)

        for column, length in enumerate(longest):
            if length:
                sheet.column_dimensions[get_column_letter(column + 1)].width = min(
                    length + 2, max_width
                )

    @staticmethod
    def rename_sheet(workbook: Workbook, old_name: str, new_name: str) -> None:
        """
        シート名を変更する

        Raises:
            KeyError: old_nameのシートが存在しない場合
            ValueError: new_nameのシートが既に存在する場合
        """
        if old_name not in workbook.sheetnames:
            raise KeyError(f"Sheet '{old_name}' not found")
        if new_name != old_name and new_name in workbook.sheetnames:
            raise ValueError(f"Sheet '{new_name}' already exists")
        workbook[old_name].title = new_name

    @staticmethod
    def _display_text(cell) -> str:
        kind = ExcelCellReader.cell_kind(cell)
        if kind in (CellKind.TEXT, CellKind.NUMERIC):
            try:
                return ExcelCellCoercer.as_display_string(cell)
            except CoercionFailed:
                return str(cell.value)
        if kind is CellKind.BLANK:
            return ""
        return str(cell.value)
