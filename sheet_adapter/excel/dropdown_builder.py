"""
Excelドロップダウンリスト作成ユーティリティ

非表示シートと名前定義を使ったリスト入力規則の作成を担当するヘルパークラス
"""

import logging

from openpyxl.utils import quote_sheetname
from openpyxl.workbook.defined_name import DefinedName
from openpyxl.worksheet.datavalidation import DataValidation

from sheet_adapter.excel.row_writer import ExcelRowWriter

logger = logging.getLogger(__name__)


class ExcelDropdownBuilder:
    """ドロップダウンリストの作成（全て staticmethod）"""

    @staticmethod
    def create_dropdown_list(cell, hidden_name: str, choices: list[str]) -> DataValidation:
        """
        セルに選択肢リストの入力規則を設定する

        選択肢は hidden_name という名前の非表示シート（veryHidden）のA列に書き込み、
        同名のブック名前定義を介して入力規則から参照する。
        選択肢が多くても数式の文字数上限（255文字）に影響されない。

        Args:
            cell: 入力規則を設定する openpyxl Cell
            hidden_name: 非表示シート名兼名前定義名（空白を含まないこと）
            choices: 選択肢

        Returns:
            追加したDataValidation

        Raises:
            ValueError: 選択肢が空、名前が不正、または同名シートが既に存在する場合
        """
        if not choices:
            raise ValueError("choices must not be empty")
        if not hidden_name or any(ch.isspace() for ch in hidden_name):
            raise ValueError(f"Invalid dropdown name: {hidden_name!r}")

        sheet = cell.parent
        workbook = sheet.parent
        if hidden_name in workbook.sheetnames:
            raise ValueError(f"Sheet '{hidden_name}' already exists")

        hidden_sheet = workbook.create_sheet(hidden_name)
        hidden_sheet.sheet_state = "veryHidden"
        for row_index, choice in enumerate(choices):
            ExcelRowWriter.set_row(hidden_sheet, row_index, [choice])

        workbook.defined_names[hidden_name] = DefinedName(
            hidden_name,
            attr_text=f"{quote_sheetname(hidden_name)}!$A$1:$A${len(choices)}",
        )

        # showDropDown=Trueは矢印を「非表示」にする（OOXMLの仕様）
        data_validation = DataValidation(
            type="list", formula1=hidden_name, allow_blank=True, showDropDown=False
        )
        data_validation.add(cell)
        sheet.add_data_validation(data_validation)

        logger.info(
            f"Created dropdown '{hidden_name}' with {len(choices)} choices "
            f"at {sheet.title}!{cell.coordinate}"
        )
        return data_validation
