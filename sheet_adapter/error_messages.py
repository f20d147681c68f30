"""
Error message definitions for sheet-adapter
Provides natural language error messages that point at the offending cell, column or file
"""

from enum import Enum
from zipfile import BadZipFile

from openpyxl.utils.exceptions import InvalidFileException


class ErrorCategory(Enum):
    """Error category definitions"""

    WRONG_CELL_KIND = "wrong_cell_kind"
    COERCION_FAILED = "coercion_failed"
    COLUMN_NOT_FOUND = "column_not_found"
    FILE_NOT_FOUND = "file_not_found"
    FILE_LOCKED = "file_locked"
    INVALID_FORMAT = "invalid_format"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class SheetAdapterError(Exception):
    """Custom exception class for spreadsheet operations"""

    def __init__(
        self,
        category: ErrorCategory,
        message: str,
        solution: str,
        original_error: Exception | None = None,
    ):
        self.category = category
        self.message = message
        self.solution = solution
        self.original_error = original_error
        super().__init__(self.get_formatted_message())

    def get_formatted_message(self) -> str:
        """Get formatted error message"""
        if not self.solution:
            return self.message
        return f"{self.message} {self.solution}"


class WrongCellKind(SheetAdapterError):
    """A text or number read was attempted on a cell storing another kind

    Raised by the read primitives and consumed inside the coercer; callers of
    the coercion functions only ever see CoercionFailed.
    """

    def __init__(self, coordinate: str, expected: str, actual: str):
        self.coordinate = coordinate
        self.expected = expected
        self.actual = actual
        super().__init__(
            category=ErrorCategory.WRONG_CELL_KIND,
            message=f"Cell {coordinate} stores {actual}, not {expected}.",
            solution="",
        )


class CoercionFailed(SheetAdapterError):
    """Every fallback for a target type was exhausted"""

    def __init__(
        self,
        coordinate: str,
        row: int,
        column: int,
        target: str,
        original_error: Exception | None = None,
    ):
        self.coordinate = coordinate
        self.row = row
        self.column = column
        self.target = target
        reason = f" ({original_error})" if original_error is not None else ""
        super().__init__(
            category=ErrorCategory.COERCION_FAILED,
            message=(
                f"Cannot read cell {coordinate} (row {row}, column {column}) "
                f"as {target}{reason}."
            ),
            solution="Please check the value entered in this cell.",
            original_error=original_error,
        )


class ColumnNotFound(SheetAdapterError):
    """No header cell in row 0 matches the requested column name"""

    def __init__(self, column_name: str, sheet_name: str, headers: list[str]):
        self.column_name = column_name
        self.sheet_name = sheet_name
        self.headers = list(headers)
        columns = ", ".join(f'"{header}"' for header in self.headers)
        super().__init__(
            category=ErrorCategory.COLUMN_NOT_FOUND,
            message=(
                f'Column "{column_name}" was not found in sheet "{sheet_name}". '
                f"Columns: {columns}."
            ),
            solution="Header names are matched exactly, including case and surrounding spaces.",
        )


def get_file_not_found_error(
    file_path: str | None, original_error: Exception
) -> SheetAdapterError:
    """Generate file not found error message"""
    if file_path:
        message = f"The specified workbook was not found: {file_path}"
    else:
        message = "The requested workbook was not found."

    return SheetAdapterError(
        category=ErrorCategory.FILE_NOT_FOUND,
        message=message,
        solution="Please verify the file path is correct.",
        original_error=original_error,
    )


def get_file_locked_error(
    file_path: str | None, original_error: Exception
) -> SheetAdapterError:
    """Generate file locked error message"""
    target = f": {file_path}" if file_path else "."
    return SheetAdapterError(
        category=ErrorCategory.FILE_LOCKED,
        message=f"The workbook could not be written{target}",
        solution="The file may be open in another application. Please close it and try again.",
        original_error=original_error,
    )


def get_invalid_format_error(
    file_path: str | None, original_error: Exception
) -> SheetAdapterError:
    """Generate invalid format error message"""
    target = f": {file_path}" if file_path else "."
    return SheetAdapterError(
        category=ErrorCategory.INVALID_FORMAT,
        message=f"The file is not a readable Excel workbook{target}",
        solution="Only .xlsx/.xlsm workbooks are supported. Please re-save the file in that format.",
        original_error=original_error,
    )


def get_configuration_error(errors: list[str]) -> SheetAdapterError:
    """Generate configuration error message"""
    return SheetAdapterError(
        category=ErrorCategory.CONFIGURATION,
        message=f"Invalid configuration: {'; '.join(errors)}.",
        solution="Please check the SHEET_ADAPTER_* environment variables.",
    )


def get_unknown_error(original_error: Exception) -> SheetAdapterError:
    """Generate unknown error message"""
    return SheetAdapterError(
        category=ErrorCategory.UNKNOWN,
        message=f"An unexpected error occurred: {original_error}",
        solution="Please check the workbook and try again.",
        original_error=original_error,
    )


def handle_workbook_error(
    error: Exception, context: str = "", file_path: str | None = None
) -> SheetAdapterError:
    """
    Classify workbook I/O errors into appropriate categories and generate natural language messages

    Args:
        error: The exception that occurred
        context: The context where the error occurred ("open" or "save")
        file_path: The workbook path involved, if known

    Returns:
        SheetAdapterError: Natural language error message
    """
    if isinstance(error, SheetAdapterError):
        return error

    if isinstance(error, FileNotFoundError):
        return get_file_not_found_error(file_path, error)
    if isinstance(error, (InvalidFileException, BadZipFile)):
        return get_invalid_format_error(file_path, error)
    if isinstance(error, PermissionError):
        return get_file_locked_error(file_path, error)

    error_str = str(error).lower()
    if isinstance(error, OSError) and context == "save":
        return get_file_locked_error(file_path, error)
    if any(keyword in error_str for keyword in ["locked", "being used"]):
        return get_file_locked_error(file_path, error)
    if any(keyword in error_str for keyword in ["zip", "not a valid", "unsupported format"]):
        return get_invalid_format_error(file_path, error)
    return get_unknown_error(error)
