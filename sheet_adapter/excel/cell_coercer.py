"""
Excelセル値変換ユーティリティ

テキストと数値が混在するセル値を、呼び出し側の用途に応じた型へ変換するヘルパークラス

各関数のフォールバック順序は固定:
    as_display_string       テキスト → 数値（整数部の文字列）
    as_double               数値 → テキスト（前後空白を除いて小数として解析）
    as_long                 as_double → 0方向への切り捨て
    prefer_string_then_int  テキスト → 数値（int）
    prefer_number_then_text 数値（float） → テキスト
    prefer_long_then_string 数値（整数部の文字列） → テキスト
    is_numeric              数値セルかどうか（失敗しない）

最後のフォールバックが失敗した場合のみ CoercionFailed を送出する。
既定値（0 や ""）で代替することはしない。
"""

import math
import re

from sheet_adapter.error_messages import CoercionFailed, WrongCellKind
from sheet_adapter.excel.cell_reader import CellKind, ExcelCellReader

# 符号・小数点・指数のみを許す10進表記（"1_000"、"nan"、"inf" などは不可）
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class ExcelCellCoercer:
    """用途別のセル値変換（全て staticmethod）"""

    @staticmethod
    def as_display_string(cell) -> str:
        """表示用の文字列として読み取る（数値は小数部を切り捨てた整数表記）"""
        kind = ExcelCellReader.cell_kind(cell)
        if kind is CellKind.TEXT:
            return ExcelCellReader.read_text(cell)
        try:
            return str(_truncate(ExcelCellReader.read_number(cell)))
        except (WrongCellKind, ValueError, OverflowError) as e:
            raise _coercion_failed(cell, "display string", e) from e

    @staticmethod
    def as_double(cell) -> float:
        """計算用のfloatとして読み取る（テキストは小数として解析）"""
        kind = ExcelCellReader.cell_kind(cell)
        if kind is CellKind.NUMERIC:
            return ExcelCellReader.read_number(cell)
        try:
            return _parse_decimal(ExcelCellReader.read_text(cell))
        except (WrongCellKind, ValueError) as e:
            raise _coercion_failed(cell, "double", e) from e

    @staticmethod
    def as_long(cell) -> int:
        """as_doubleの結果を0方向に切り捨てたintとして読み取る"""
        try:
            value = ExcelCellCoercer.as_double(cell)
        except CoercionFailed as e:
            raise _coercion_failed(cell, "long", e.original_error) from e
        try:
            return _truncate(value)
        except (ValueError, OverflowError) as e:
            raise _coercion_failed(cell, "long", e) from e

    @staticmethod
    def prefer_string_then_int(cell) -> str | int:
        """テキストを優先し、数値セルはintで返す"""
        kind = ExcelCellReader.cell_kind(cell)
        if kind is CellKind.TEXT:
            return ExcelCellReader.read_text(cell)
        try:
            return _truncate(ExcelCellReader.read_number(cell))
        except (WrongCellKind, ValueError, OverflowError) as e:
            raise _coercion_failed(cell, "string or int", e) from e

    @staticmethod
    def prefer_number_then_text(cell) -> float | str:
        """数値を優先し、テキストセルは文字列のまま返す"""
        kind = ExcelCellReader.cell_kind(cell)
        if kind is CellKind.NUMERIC:
            return ExcelCellReader.read_number(cell)
        try:
            return ExcelCellReader.read_text(cell)
        except WrongCellKind as e:
            raise _coercion_failed(cell, "number or text", e) from e

    @staticmethod
    def prefer_long_then_string(cell) -> str:
        """数値セルは整数部の文字列、テキストセルはそのまま返す"""
        kind = ExcelCellReader.cell_kind(cell)
        if kind is CellKind.NUMERIC:
            try:
                return str(_truncate(ExcelCellReader.read_number(cell)))
            except (WrongCellKind, ValueError, OverflowError) as e:
                raise _coercion_failed(cell, "long or string", e) from e
        try:
            return ExcelCellReader.read_text(cell)
        except WrongCellKind as e:
            raise _coercion_failed(cell, "long or string", e) from e

    @staticmethod
    def is_numeric(cell) -> bool:
        """数値セルかどうか"""
        return ExcelCellReader.cell_kind(cell) is CellKind.NUMERIC


def _truncate(value: float) -> int:
    # int()は0方向に切り捨て、NaNはValueError、無限大はOverflowError
    return int(value)


def _coercion_failed(cell, target: str, error: Exception | None) -> CoercionFailed:
    row, column = ExcelCellReader.location(cell)
    return CoercionFailed(
        ExcelCellReader.coordinate(cell), row, column, target, original_error=error
    )


def _parse_decimal(text: str) -> float:
    stripped = text.strip()
    if not DECIMAL_PATTERN.fullmatch(stripped):
        raise ValueError(f"not a decimal number: {text!r}")
    value = float(stripped)
    if not math.isfinite(value):
        raise ValueError(f"decimal number out of range: {text!r}")
    return value
