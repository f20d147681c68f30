"""
Excelセル種別判定ユーティリティ

セルに格納された値の種別判定と、テキスト/数値の読み取りプリミティブを担当するヘルパークラス
"""

import datetime
from decimal import Decimal
from enum import Enum

from openpyxl.cell.rich_text import CellRichText
from openpyxl.utils.datetime import WINDOWS_EPOCH, to_excel

from sheet_adapter.error_messages import WrongCellKind

_DATE_TYPES = (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)


class CellKind(Enum):
    """セルに格納された値の種別"""

    BLANK = "blank"
    TEXT = "text"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    FORMULA = "formula"
    ERROR = "error"
    OTHER = "other"


class ExcelCellReader:
    """セル種別の判定と読み取り（全て staticmethod）"""

    @staticmethod
    def cell_kind(cell) -> CellKind:
        """
        セルの格納種別を返す

        日付・時刻はExcel内部と同様にシリアル値を持つ数値セルとして扱う。
        数式（data_only=Falseで読み込んだ場合）とエラー値はテキストとして扱わない。

        Args:
            cell: openpyxl Cell（MergedCellも可）

        Returns:
            CellKind
        """
        value = cell.value
        if value is None:
            return CellKind.BLANK

        data_type = getattr(cell, "data_type", None)
        if data_type == "f":
            return CellKind.FORMULA
        if data_type == "e":
            return CellKind.ERROR

        # boolはintのサブクラスなので数値判定より先に確認する
        if isinstance(value, bool):
            return CellKind.BOOLEAN
        if isinstance(value, (str, CellRichText)):
            return CellKind.TEXT
        if isinstance(value, (int, float, Decimal)):
            return CellKind.NUMERIC
        if isinstance(value, _DATE_TYPES):
            return CellKind.NUMERIC
        return CellKind.OTHER

    @staticmethod
    def read_text(cell) -> str:
        """
        テキストセルの値を読み取る

        Raises:
            WrongCellKind: テキスト以外のセルの場合
        """
        kind = ExcelCellReader.cell_kind(cell)
        if kind is not CellKind.TEXT:
            raise WrongCellKind(
                ExcelCellReader.coordinate(cell), CellKind.TEXT.value, kind.value
            )
        return str(cell.value)

    @staticmethod
    def read_number(cell) -> float:
        """
        数値セルの値をfloatで読み取る（日付はExcelシリアル値）

        Raises:
            WrongCellKind: 数値以外のセルの場合
        """
        kind = ExcelCellReader.cell_kind(cell)
        if kind is not CellKind.NUMERIC:
            raise WrongCellKind(
                ExcelCellReader.coordinate(cell), CellKind.NUMERIC.value, kind.value
            )

        value = cell.value
        if isinstance(value, _DATE_TYPES):
            return float(to_excel(value, ExcelCellReader._workbook_epoch(cell)))
        return float(value)

    @staticmethod
    def location(cell) -> tuple[int, int]:
        """セルの0始まり(row, column)を返す"""
        return (cell.row - 1, cell.column - 1)

    @staticmethod
    def coordinate(cell) -> str:
        """セル座標（例: "B2"）を返す"""
        return cell.coordinate

    @staticmethod
    def _workbook_epoch(cell) -> datetime.datetime:
        # 1904年基準のワークブックにも対応
        workbook = getattr(cell.parent, "parent", None)
        return getattr(workbook, "epoch", WINDOWS_EPOCH)
