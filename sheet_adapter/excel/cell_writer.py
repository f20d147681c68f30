"""
Excelセル書き込みユーティリティ

Python値の型に応じたセルへの書き込みと表示形式の設定を担当するヘルパークラス
"""

import datetime

from openpyxl.styles.numbers import BUILTIN_FORMATS

# 組み込み表示形式14（短い日付）
DATE_FORMAT = BUILTIN_FORMATS[14]


class ExcelCellWriter:
    """型別のセル書き込み（全て staticmethod）"""

    @staticmethod
    def set_cell_value(cell, value) -> None:
        """
        値の型に応じてセルに書き込む

        - str: テキスト
        - int / float: 数値
        - (数値, 桁数) のタプル: 数値を書き込み、小数点以下の表示桁数を設定
        - date / datetime: 値を書き込み、日付の表示形式を設定
        - None: 値をクリア

        Args:
            cell: openpyxl Cell
            value: 書き込む値

        Raises:
            TypeError: 上記以外の型（boolを含む）の場合
        """
        if value is None:
            cell.value = None
        elif isinstance(value, tuple):
            number, digits = ExcelCellWriter._unpack_rounded(value)
            cell.value = number
            ExcelCellWriter.set_rounding(cell, digits)
        elif isinstance(value, str):
            cell.value = value
        elif isinstance(value, bool):
            raise TypeError(f"Unsupported cell value type: {type(value).__name__}")
        elif isinstance(value, (int, float)):
            cell.value = value
        elif isinstance(value, (datetime.datetime, datetime.date)):
            cell.value = value
            cell.number_format = DATE_FORMAT
        else:
            raise TypeError(f"Unsupported cell value type: {type(value).__name__}")

    @staticmethod
    def set_rounding(cell, digits: int) -> None:
        """
        小数点以下の表示桁数を設定する（例: 2 -> "0.00"）

        Raises:
            ValueError: 桁数が負の場合
        """
        if digits < 0:
            raise ValueError(f"digits must not be negative: {digits}")
        cell.number_format = "0." + "0" * digits if digits else "0"

    @staticmethod
    def _unpack_rounded(value: tuple) -> tuple[float, int]:
        if len(value) != 2:
            raise TypeError(f"Rounded value must be (number, digits), got {value!r}")
        number, digits = value
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            raise TypeError(f"Rounded value must be numeric, got {number!r}")
        if isinstance(digits, bool) or not isinstance(digits, int):
            raise TypeError(f"Rounding digits must be an int, got {digits!r}")
        return (float(number), digits)
