"""
Excel列名解決ユーティリティ

ヘッダー行（0行目）を走査して、列名から0始まりの列インデックスを求めるヘルパークラス
"""

import logging

from sheet_adapter.config import config
from sheet_adapter.error_messages import ColumnNotFound
from sheet_adapter.excel.cell_reader import CellKind, ExcelCellReader
from sheet_adapter.excel.sheet_access import ExcelSheetAccess

logger = logging.getLogger(__name__)

HEADER_ROW = 0


class ExcelColumnResolver:
    """ヘッダー名による列解決（全て staticmethod）"""

    @staticmethod
    def resolve_column(sheet, column_name: str, overscan: int | None = None) -> int:
        """
        ヘッダー行から列名に完全一致する最初の列インデックスを返す

        比較は大文字小文字を区別し、前後の空白も除去しない。
        テキストとして読めないヘッダーセル（数値・空セルなど）は不一致として走査を続ける。

        Args:
            sheet: openpyxl Worksheet
            column_name: 列名
            overscan: 最終列より先に追加で走査する列数
                最終列を少なく報告するホストライブラリへの回避策。
                Noneの場合は設定値（SHEET_ADAPTER_HEADER_OVERSCAN）を使用

        Returns:
            列インデックス（0始まり）

        Raises:
            ValueError: column_nameが空、またはoverscanが負の場合
            ColumnNotFound: 一致する列がない場合（実在するヘッダー一覧を含む）
        """
        if not column_name:
            raise ValueError("column_name must not be empty")

        if overscan is None:
            overscan = config.header_overscan or 0
        if overscan < 0:
            raise ValueError(f"overscan must not be negative: {overscan}")

        # 一致するのは値ありセルだけなので、空セルが overscan + 1 個続くまで先頭から探す
        # （ヘッダー行の幅を求めずに済み、シートの行数に依存しない）
        column = 0
        blank_run = 0
        while blank_run <= overscan:
            cell = ExcelSheetAccess.peek_cell(sheet, HEADER_ROW, column)
            if cell is None or cell.value is None:
                blank_run += 1
            else:
                blank_run = 0
                if ExcelColumnResolver._read_header_text(sheet, column) == column_name:
                    return column
            column += 1

        # 空セルの並びの先にある列を含め、ヘッダー行の幅 + overscan まで確認する
        scan_end = ExcelSheetAccess.get_cell_count(sheet, HEADER_ROW) + overscan
        for column in range(column, scan_end):
            if ExcelColumnResolver._read_header_text(sheet, column) == column_name:
                return column

        headers = ExcelColumnResolver.header_texts(sheet)
        logger.warning(
            f"Column '{column_name}' not found in sheet '{sheet.title}' (headers={headers})"
        )
        raise ColumnNotFound(column_name, sheet.title, headers)

    @staticmethod
    def header_texts(sheet) -> list[str]:
        """
        ヘッダー行のテキストを列順に返す（テキストとして読めないセルは除外）

        Args:
            sheet: openpyxl Worksheet

        Returns:
            ヘッダーテキストのリスト
        """
        headers = []
        for column in range(ExcelSheetAccess.get_cell_count(sheet, HEADER_ROW)):
            text = ExcelColumnResolver._read_header_text(sheet, column)
            if text is not None:
                headers.append(text)
        return headers

    @staticmethod
    def _read_header_text(sheet, column: int) -> str | None:
        # 未作成セルは生成せずに空扱い
        cell = ExcelSheetAccess.peek_cell(sheet, HEADER_ROW, column)
        if cell is None:
            return None
        if ExcelCellReader.cell_kind(cell) is not CellKind.TEXT:
            return None
        return ExcelCellReader.read_text(cell)
