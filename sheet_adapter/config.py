"""
設定管理モジュール
"""

import logging
import os

from dotenv import load_dotenv

# .envファイルを読み込み
load_dotenv()


class SheetAdapterConfig:
    """sheet-adapter設定クラス"""

    def __init__(self):
        # ヘッダー走査設定
        # ホストライブラリが最終列を少なく報告する場合の余剰走査幅（0で無効）
        self.header_overscan = self._parse_int("SHEET_ADAPTER_HEADER_OVERSCAN", "20")

        # 行範囲検出設定
        self.blank_probe_columns = self._parse_int(
            "SHEET_ADAPTER_BLANK_PROBE_COLUMNS", "10"
        )
        self.max_row_warning = self._parse_int(
            "SHEET_ADAPTER_MAX_ROW_WARNING", "500000"
        )
        self.forward_scan_limit = self._parse_int(
            "SHEET_ADAPTER_FORWARD_SCAN_LIMIT", "100000"
        )

        # 列幅自動調整の上限
        self.max_column_width = self._parse_int("SHEET_ADAPTER_MAX_COLUMN_WIDTH", "50")

        self.log_level = os.getenv("SHEET_ADAPTER_LOG_LEVEL", "INFO").strip().upper()

    def _parse_int(self, name: str, default: str) -> int | None:
        """整数の環境変数を読み込む（不正な値はNoneとしてvalidateで報告）"""
        raw = os.getenv(name, default).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    @property
    def log_level_value(self) -> int:
        """loggingモジュールのレベル値を取得（不明なレベルはINFO）"""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO

    def _is_known_level(self) -> bool:
        return isinstance(logging.getLevelName(self.log_level), int)

    def validate(self) -> list[str]:
        """設定の検証を行い、エラーメッセージのリストを返す"""
        errors = []

        non_negative = {
            "SHEET_ADAPTER_HEADER_OVERSCAN": self.header_overscan,
        }
        positive = {
            "SHEET_ADAPTER_BLANK_PROBE_COLUMNS": self.blank_probe_columns,
            "SHEET_ADAPTER_MAX_ROW_WARNING": self.max_row_warning,
            "SHEET_ADAPTER_FORWARD_SCAN_LIMIT": self.forward_scan_limit,
            "SHEET_ADAPTER_MAX_COLUMN_WIDTH": self.max_column_width,
        }

        for name, value in non_negative.items():
            if value is None:
                errors.append(f"{name} must be an integer")
            elif value < 0:
                errors.append(f"{name} must not be negative")

        for name, value in positive.items():
            if value is None:
                errors.append(f"{name} must be an integer")
            elif value <= 0:
                errors.append(f"{name} must be positive")

        if not self._is_known_level():
            errors.append(f"Unknown SHEET_ADAPTER_LOG_LEVEL: {self.log_level}")

        return errors

    @property
    def is_valid(self) -> bool:
        """設定が有効かどうかを返す"""
        return len(self.validate()) == 0


# グローバル設定インスタンス
config = SheetAdapterConfig()
