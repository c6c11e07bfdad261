"""Custom exceptions for cckgen."""

from __future__ import annotations


class CckgenError(Exception):
    """Base exception for all cckgen errors."""


class InputReadError(CckgenError):
    """Failed to open or read the input CSV."""


class RecordSchemaError(CckgenError):
    """A data record does not have the expected number of fields."""

    def __init__(self, message: str, line_number: int, record: list[str]) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.record = record


class WattageExtractionError(CckgenError):
    """The wattage field has no leading digits or cannot be parsed."""

    def __init__(
        self,
        message: str,
        text: str,
        line_number: int | None = None,
        record: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.line_number = line_number
        self.record = record


class RenderError(CckgenError):
    """Failed to fill the fixture template."""


class OutputError(CckgenError):
    """Failed to open or write the output file."""
