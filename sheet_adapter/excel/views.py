"""
Excel行・シートのインデクサービュー

row[0] / row["列名"] / sheet[行] / sheet[列, 行] 形式でセルへアクセスするための薄いラッパー
"""

from sheet_adapter.excel.cell_writer import ExcelCellWriter
from sheet_adapter.excel.column_resolver import ExcelColumnResolver
from sheet_adapter.excel.sheet_access import ExcelSheetAccess


class RowView:
    """シート上の1行へのインデクサー"""

    def __init__(self, sheet, index: int):
        if index < 0:
            raise ValueError(f"Negative row index: {index}")
        self.sheet = sheet
        self.index = index

    def __getitem__(self, key: int | str):
        """列インデックスまたはヘッダー名でセルを取得（未作成セルは生成される）"""
        return ExcelSheetAccess.get_cell(self.sheet, self.index, self._column(key))

    def __setitem__(self, key: int | str, value) -> None:
        ExcelCellWriter.set_cell_value(self[key], value)

    def __len__(self) -> int:
        return ExcelSheetAccess.get_cell_count(self.sheet, self.index)

    def __iter__(self):
        for column in range(len(self)):
            yield ExcelSheetAccess.get_cell(self.sheet, self.index, column)

    def __repr__(self) -> str:
        return f"RowView(sheet={self.sheet.title!r}, index={self.index})"

    def _column(self, key: int | str) -> int:
        if isinstance(key, str):
            return ExcelColumnResolver.resolve_column(self.sheet, key)
        return key


class SheetAccessor:
    """シートへのインデクサー"""

    def __init__(self, sheet):
        self.sheet = sheet

    def __getitem__(self, key: int | tuple[int, int]):
        """
        acc[行] は RowView、acc[列, 行] はセルを返す
        """
        if isinstance(key, tuple):
            column, row = key
            return ExcelSheetAccess.get_cell(self.sheet, row, column)
        return RowView(self.sheet, key)

    @property
    def header(self) -> RowView:
        """ヘッダー行（0行目）"""
        return RowView(self.sheet, 0)

    @property
    def last_row(self) -> RowView:
        """値のある最後の行（空シートは0行目）"""
        return RowView(self.sheet, max(ExcelSheetAccess.last_row_index(self.sheet), 0))

    def get_rows(self, starting_from: int, to_including: int | None = None) -> list[RowView]:
        """
        starting_from 行から to_including 行までの RowView を返す

        Args:
            starting_from: 開始行インデックス（ヘッダーを除く場合は1）
            to_including: 終了行インデックス（Noneの場合は最後のデータ行を自動検出）

        Returns:
            RowViewのリスト
        """
        if to_including is None:
            to_including = ExcelSheetAccess.find_last_data_row(self.sheet, starting_from)
        return [RowView(self.sheet, row) for row in range(starting_from, to_including + 1)]
