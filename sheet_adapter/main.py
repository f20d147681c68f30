import logging
import sys

import typer

from .config import config
from .error_messages import SheetAdapterError, get_configuration_error
from .excel import ExcelCellCoercer, ExcelColumnResolver, ExcelWorkbookManager, SheetAccessor

# 変換モード名 -> 変換関数
COERCIONS = {
    "display": ExcelCellCoercer.as_display_string,
    "double": ExcelCellCoercer.as_double,
    "long": ExcelCellCoercer.as_long,
    "string-int": ExcelCellCoercer.prefer_string_then_int,
    "number-text": ExcelCellCoercer.prefer_number_then_text,
    "long-string": ExcelCellCoercer.prefer_long_then_string,
    "numeric": ExcelCellCoercer.is_numeric,
}

# typerアプリケーションを作成
app = typer.Typer()


def setup_logging():
    """
    すべてのログ出力をstderrに向けるロギングを設定します。
    これにより、stdoutに出力する列の値とログが混ざるのを防ぎます。
    """
    log_formatter = logging.Formatter("%(asctime)s [%(levelname)s] - %(message)s")
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level_value)

    # stdoutへの出力を防ぐため、既存のハンドラをクリア
    root_logger.handlers.clear()

    # stderrにログを出力するハンドラを追加
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(log_formatter)
    root_logger.addHandler(stream_handler)

    logging.debug("Logging configured to output to stderr.")


def _prepare():
    setup_logging()
    errors = config.validate()
    if errors:
        error = get_configuration_error(errors)
        logging.error(error.get_formatted_message())
        raise typer.Exit(code=1)


def _open_sheet(file_path: str, sheet_name: str):
    workbook = ExcelWorkbookManager.open_workbook(file_path, data_only=True)
    if not sheet_name:
        return workbook.active
    if sheet_name not in workbook.sheetnames:
        raise typer.BadParameter(
            f"Sheet '{sheet_name}' not found. Sheets: {', '.join(workbook.sheetnames)}",
            param_hint="--sheet",
        )
    return workbook[sheet_name]


@app.command()
def headers(
    file_path: str = typer.Argument(..., help="読み込むExcelファイル（.xlsx）。"),
    sheet: str = typer.Option(
        "", "--sheet", help="対象シート名（省略時はアクティブシート）。"
    ),
):
    """
    ヘッダー行（1行目）の列名を1行ずつ表示します。
    """
    _prepare()
    try:
        worksheet = _open_sheet(file_path, sheet)
    except SheetAdapterError as e:
        typer.echo(e.get_formatted_message(), err=True)
        raise typer.Exit(code=1)

    for header in ExcelColumnResolver.header_texts(worksheet):
        typer.echo(header)


@app.command()
def column(
    file_path: str = typer.Argument(..., help="読み込むExcelファイル（.xlsx）。"),
    column_name: str = typer.Argument(..., help="ヘッダー行の列名（完全一致）。"),
    sheet: str = typer.Option(
        "", "--sheet", help="対象シート名（省略時はアクティブシート）。"
    ),
    mode: str = typer.Option(
        "display",
        "--as",
        help=f"セル値の変換方法（{', '.join(COERCIONS)}）。",
    ),
    start: int = typer.Option(
        1, "--start", min=0, help="読み込みを開始する行インデックス（0始まり）。"
    ),
):
    """
    指定した列の値を、変換方法に従って1行ずつ表示します。
    """
    _prepare()

    if mode not in COERCIONS:
        logging.error(f"Invalid mode: {mode}. Please use one of {', '.join(COERCIONS)}.")
        raise typer.Exit(code=1)
    coerce = COERCIONS[mode]

    try:
        worksheet = _open_sheet(file_path, sheet)
        column_index = ExcelColumnResolver.resolve_column(worksheet, column_name)
        rows = SheetAccessor(worksheet).get_rows(start)
        logging.info(f"Reading {len(rows)} rows of column '{column_name}' as {mode}")
        for row in rows:
            typer.echo(coerce(row[column_index]))
    except SheetAdapterError as e:
        typer.echo(e.get_formatted_message(), err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
