import os
from unittest.mock import patch

import pytest
from openpyxl import Workbook

from sheet_adapter.config import config


@pytest.fixture
def workbook():
    """空のワークブック"""
    return Workbook()


@pytest.fixture
def product_sheet(workbook):
    """ヘッダー付きの商品シート（数値とテキストが混在）"""
    ws = workbook.active
    ws.title = "Products"
    ws["A1"] = "Name"
    ws["B1"] = "Qty"
    ws["C1"] = "Price"
    ws["A2"] = "Widget"
    ws["B2"] = 5.0
    ws["C2"] = "12.50"
    ws["A3"] = "Gadget"
    ws["B3"] = 3
    ws["C3"] = 7
    return ws


@pytest.fixture
def mock_env_vars():
    """sheet-adapter用の環境変数をモック"""
    env_vars = {
        "SHEET_ADAPTER_HEADER_OVERSCAN": "5",
        "SHEET_ADAPTER_BLANK_PROBE_COLUMNS": "3",
        "SHEET_ADAPTER_MAX_ROW_WARNING": "1000",
        "SHEET_ADAPTER_FORWARD_SCAN_LIMIT": "200",
        "SHEET_ADAPTER_MAX_COLUMN_WIDTH": "30",
        "SHEET_ADAPTER_LOG_LEVEL": "debug",
    }

    with patch.dict(os.environ, env_vars, clear=True):
        yield env_vars


@pytest.fixture
def small_scan_limits():
    """行範囲検出の上限値を小さくする"""
    with (
        patch.object(config, "max_row_warning", 3),
        patch.object(config, "forward_scan_limit", 50),
        patch.object(config, "blank_probe_columns", 3),
    ):
        yield config
