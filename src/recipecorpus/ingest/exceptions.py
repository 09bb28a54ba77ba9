"""Exceptions raised by the recipe import pipeline."""


class RecipeImportError(Exception):
    """Base exception for import errors."""


class InputFileError(RecipeImportError):
    """Raised when the input CSV cannot be opened or read."""

    def __init__(self, path: str, cause: OSError | None = None):
        reason = cause.strerror if cause is not None and cause.strerror else str(cause or "")
        super().__init__(f"Cannot read recipe file {path}: {reason}".rstrip(": "))
        self.path = path
        self.cause = cause


class RowDecodeError(RecipeImportError):
    """Raised when a single CSV row cannot be turned into a recipe."""

    def __init__(self, row_index: int, message: str):
        super().__init__(f"Row {row_index}: {message}")
        self.row_index = row_index


class MalformedRecordError(RecipeImportError):
    """Raised when a logical CSV record cannot be split into fields."""
