"""
Tests for error message generation
"""

from zipfile import BadZipFile

from openpyxl.utils.exceptions import InvalidFileException

from sheet_adapter.error_messages import (
    CoercionFailed,
    ColumnNotFound,
    ErrorCategory,
    SheetAdapterError,
    WrongCellKind,
    get_configuration_error,
    handle_workbook_error,
)


class TestSheetAdapterError:
    def test_formatted_message(self):
        """Message and solution are joined"""
        error = SheetAdapterError(
            category=ErrorCategory.UNKNOWN,
            message="Something failed.",
            solution="Try again.",
        )
        assert error.get_formatted_message() == "Something failed. Try again."
        assert str(error) == "Something failed. Try again."

    def test_wrong_cell_kind(self):
        """WrongCellKind names the cell and both kinds"""
        error = WrongCellKind("B2", "text", "numeric")
        assert error.category is ErrorCategory.WRONG_CELL_KIND
        assert str(error) == "Cell B2 stores numeric, not text."

    def test_coercion_failed(self):
        """CoercionFailed carries location and target type"""
        cause = ValueError("could not convert string to float: 'abc'")
        error = CoercionFailed("C2", 1, 2, "double", original_error=cause)

        assert error.category is ErrorCategory.COERCION_FAILED
        assert (error.coordinate, error.row, error.column, error.target) == (
            "C2",
            1,
            2,
            "double",
        )
        assert error.original_error is cause
        assert "C2 (row 1, column 2) as double" in str(error)

    def test_column_not_found(self):
        """ColumnNotFound lists headers in column order"""
        error = ColumnNotFound("Total", "Orders", ["Name", "Qty"])

        assert error.category is ErrorCategory.COLUMN_NOT_FOUND
        assert error.headers == ["Name", "Qty"]
        assert (
            'Column "Total" was not found in sheet "Orders". Columns: "Name", "Qty".'
            in str(error)
        )

    def test_configuration_error(self):
        """Configuration errors are joined into one message"""
        error = get_configuration_error(["A is bad", "B is bad"])
        assert error.category is ErrorCategory.CONFIGURATION
        assert "A is bad; B is bad" in error.message


class TestHandleWorkbookError:
    def test_file_not_found(self):
        error = handle_workbook_error(FileNotFoundError("gone"), "open", "a.xlsx")
        assert error.category is ErrorCategory.FILE_NOT_FOUND
        assert "a.xlsx" in error.message

    def test_permission_error_is_locked(self):
        error = handle_workbook_error(PermissionError("denied"), "save", "a.xlsx")
        assert error.category is ErrorCategory.FILE_LOCKED
        assert "close it" in error.solution

    def test_os_error_on_save_is_locked(self):
        error = handle_workbook_error(OSError("device busy"), "save")
        assert error.category is ErrorCategory.FILE_LOCKED

    def test_invalid_format(self):
        for original in [InvalidFileException("bad ext"), BadZipFile("not zip")]:
            error = handle_workbook_error(original, "open", "a.xls")
            assert error.category is ErrorCategory.INVALID_FORMAT
            assert error.original_error is original

    def test_unknown(self):
        error = handle_workbook_error(RuntimeError("boom"), "open")
        assert error.category is ErrorCategory.UNKNOWN

    def test_passes_through_existing_error(self):
        original = ColumnNotFound("X", "Sheet", [])
        assert handle_workbook_error(original, "open") is original
