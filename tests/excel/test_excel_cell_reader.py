"""
ExcelCellReaderのテスト
"""

import datetime

import pytest
from openpyxl import Workbook
from openpyxl.cell.rich_text import CellRichText

from sheet_adapter.error_messages import ErrorCategory, WrongCellKind
from sheet_adapter.excel import CellKind, ExcelCellReader


class TestExcelCellReader:
    """ExcelCellReader（セル種別判定・読み取り）のテスト"""

    def setup_method(self):
        """テストメソッド実行前のセットアップ"""
        self.wb = Workbook()
        self.ws = self.wb.active

    # cell_kind のテスト

    def test_cell_kind_blank(self):
        """未入力セルはBLANKであること"""
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.BLANK

    def test_cell_kind_text(self):
        """文字列セルはTEXTであること"""
        self.ws["A1"] = "foo"
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.TEXT

    def test_cell_kind_empty_string_is_text(self):
        """空文字列はBLANKではなくTEXTであること"""
        self.ws["A1"] = ""
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.TEXT

    @pytest.mark.parametrize("value", [3, 3.5, -1, 0])
    def test_cell_kind_numeric(self, value):
        """int/floatはNUMERICであること"""
        self.ws["A1"] = value
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.NUMERIC

    def test_cell_kind_boolean_is_not_numeric(self):
        """boolはintのサブクラスだがNUMERICにならないこと"""
        self.ws["A1"] = True
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.BOOLEAN

    def test_cell_kind_formula(self):
        """数式はFORMULAであること（テキスト扱いしない）"""
        self.ws["A1"] = "=SUM(B1:B3)"
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.FORMULA

    def test_cell_kind_error_value(self):
        """エラー値はERRORであること"""
        self.ws["A1"] = "#N/A"
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.ERROR

    def test_cell_kind_date_is_numeric(self):
        """日付はシリアル値を持つNUMERICとして扱われること"""
        self.ws["A1"] = datetime.date(2024, 1, 1)
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.NUMERIC

    def test_cell_kind_rich_text(self):
        """リッチテキストはTEXTであること"""
        self.ws["A1"] = CellRichText(["Hello ", "World"])
        assert ExcelCellReader.cell_kind(self.ws["A1"]) is CellKind.TEXT

    def test_cell_kind_merged_cell_is_blank(self):
        """結合セルの左上以外はBLANKであること"""
        self.ws["A1"] = "Title"
        self.ws.merge_cells("A1:C1")
        assert ExcelCellReader.cell_kind(self.ws["B1"]) is CellKind.BLANK

    # read_text のテスト

    def test_read_text(self):
        """テキストセルの値が読めること"""
        self.ws["B2"] = "  padded  "
        assert ExcelCellReader.read_text(self.ws["B2"]) == "  padded  "

    def test_read_text_on_number_raises(self):
        """数値セルのテキスト読み取りはWrongCellKindになること"""
        self.ws["B2"] = 42

        with pytest.raises(WrongCellKind) as exc_info:
            ExcelCellReader.read_text(self.ws["B2"])

        error = exc_info.value
        assert error.category is ErrorCategory.WRONG_CELL_KIND
        assert error.coordinate == "B2"
        assert error.expected == "text"
        assert error.actual == "numeric"

    def test_read_text_on_blank_raises(self):
        """空セルのテキスト読み取りはWrongCellKindになること（""を返さない）"""
        with pytest.raises(WrongCellKind):
            ExcelCellReader.read_text(self.ws["A1"])

    # read_number のテスト

    def test_read_number_returns_float(self):
        """intで格納された値もfloatで返ること"""
        self.ws["A1"] = 5
        value = ExcelCellReader.read_number(self.ws["A1"])
        assert value == 5.0
        assert isinstance(value, float)

    def test_read_number_date_serial(self):
        """日付はExcelシリアル値で返ること"""
        self.ws["A1"] = datetime.datetime(2024, 1, 1)
        assert ExcelCellReader.read_number(self.ws["A1"]) == 45292.0

    def test_read_number_on_text_raises(self):
        """数字の文字列でもテキストセルはWrongCellKindになること"""
        self.ws["A1"] = "42"
        with pytest.raises(WrongCellKind):
            ExcelCellReader.read_number(self.ws["A1"])

    def test_read_number_on_boolean_raises(self):
        """boolセルの数値読み取りはWrongCellKindになること"""
        self.ws["A1"] = False
        with pytest.raises(WrongCellKind):
            ExcelCellReader.read_number(self.ws["A1"])

    # location / coordinate のテスト

    def test_location_is_zero_based(self):
        """位置が0始まりの(row, column)で返ること"""
        assert ExcelCellReader.location(self.ws["C5"]) == (4, 2)
        assert ExcelCellReader.coordinate(self.ws["C5"]) == "C5"
