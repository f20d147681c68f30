"""
Excelシートアクセスユーティリティ

0始まりの行・列インデックスでのセル取得と、行範囲の検出を担当するヘルパークラス
"""

import logging

from sheet_adapter.config import config

logger = logging.getLogger(__name__)


class ExcelSheetAccess:
    """0始まりインデックスでのセル・行アクセス（全て staticmethod）"""

    @staticmethod
    def get_cell(sheet, row: int, column: int):
        """
        セルを取得する（存在しない場合は空セルを生成）

        Args:
            sheet: openpyxl Worksheet
            row: 行インデックス（0始まり）
            column: 列インデックス（0始まり）

        Returns:
            openpyxl Cell

        Raises:
            ValueError: 負のインデックスの場合
        """
        if row < 0 or column < 0:
            raise ValueError(f"Negative cell index: row={row}, column={column}")
        return sheet.cell(row=row + 1, column=column + 1)

    @staticmethod
    def peek_cell(sheet, row: int, column: int):
        """
        セルを生成せずに取得する

        Returns:
            openpyxl Cell、または未作成の場合はNone
        """
        if row < 0 or column < 0:
            return None

        # 注意: _cellsはopenpyxlのプライベート属性のため、将来のバージョンで変更される可能性があります。
        if hasattr(sheet, "_cells"):
            return sheet._cells.get((row + 1, column + 1))

        # 公開APIを使ったフォールバック版（範囲内のセルは生成される）
        if row + 1 > sheet.max_row or column + 1 > sheet.max_column:
            return None
        return sheet.cell(row=row + 1, column=column + 1)

    @staticmethod
    def get_cell_count(sheet, row: int) -> int:
        """
        行内の最後の値ありセルの次のインデックスを返す（空行は0）

        空セルが生成されていても数に含めないため、走査によって値が変わらない。
        走査は対象行のセルだけに限定し、シートの行数には依存しない。
        """
        values = ExcelSheetAccess._row_values(sheet, row)
        for column in range(len(values), 0, -1):
            if values[column - 1] is not None:
                return column
        return 0

    @staticmethod
    def last_row_index(sheet) -> int:
        """値のある最後の行インデックスを返す（空シートは-1）"""
        column_count = sheet.max_column
        for row in range(sheet.max_row - 1, -1, -1):
            values = ExcelSheetAccess._row_values(sheet, row, column_count)
            if any(value is not None for value in values):
                return row
        return -1

    @staticmethod
    def is_row_empty(sheet, row: int, probe_columns: int | None = None) -> bool:
        """
        先頭probe_columns列が全て空（未入力または空文字列）かどうか

        Args:
            sheet: openpyxl Worksheet
            row: 行インデックス（0始まり）
            probe_columns: 判定に使う先頭列数（Noneで設定値）
        """
        if probe_columns is None:
            probe_columns = config.blank_probe_columns or 10
        for column in range(probe_columns):
            cell = ExcelSheetAccess.peek_cell(sheet, row, column)
            if cell is not None and cell.value is not None and cell.value != "":
                return False
        return True

    @staticmethod
    def find_last_data_row(sheet, starting_from: int) -> int:
        """
        データが入っている最後の行インデックスを検出する

        通常はシートが報告する最終行から starting_from まで逆順に走査する。
        書式だけが設定された行などで報告上の行数が上限を超える場合は、
        先頭から順方向に走査して最初の空行の直前を最終行とする。

        Args:
            sheet: openpyxl Worksheet
            starting_from: 走査を打ち切る先頭行インデックス

        Returns:
            最終行インデックス（データ行がなければ starting_from - 1）
        """
        reported_last_row = sheet.max_row - 1
        max_row_warning = config.max_row_warning or 500000

        if reported_last_row > max_row_warning:
            logger.warning(
                f"Sheet '{sheet.title}' reports {reported_last_row + 1} rows "
                f"(more than {max_row_warning}); scanning forward for the first empty row"
            )
            forward_scan_limit = config.forward_scan_limit or 100000
            first_empty = next(
                (
                    row
                    for row in range(forward_scan_limit)
                    if ExcelSheetAccess.is_row_empty(sheet, row)
                ),
                forward_scan_limit,
            )
            return first_empty - 1

        for row in range(reported_last_row, starting_from - 1, -1):
            if not ExcelSheetAccess.is_row_empty(sheet, row):
                return row
        return starting_from - 1

    @staticmethod
    def _row_values(sheet, row: int, column_count: int | None = None) -> list:
        # 1行分の値を max_column までセルを生成せずに取得する
        # 互換性のため_cellsの有無をチェックしてフォールバック
        if hasattr(sheet, "_cells"):
            cells = sheet._cells
            values = []
            if column_count is None:
                column_count = sheet.max_column
            for column in range(1, column_count + 1):
                cell = cells.get((row + 1, column))
                values.append(cell.value if cell is not None else None)
            return values

        if row + 1 > sheet.max_row:
            return []
        return list(
            next(sheet.iter_rows(min_row=row + 1, max_row=row + 1, values_only=True), ())
        )
