from __future__ import annotations


class ConversionError(Exception):
    """Raised when a conversion run cannot produce a CSV."""


class DocumentError(ConversionError):
    """A failure tied to one input file."""

    def __init__(self, file_name: str, message: str):
        super().__init__(message)
        self.file_name = file_name


class ReadError(DocumentError):
    def __init__(self, file_name: str, reason: str = ""):
        message = f"Failed to read {file_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(file_name, message)


class ParseError(DocumentError):
    def __init__(self, file_name: str, reason: str = ""):
        message = f"Invalid JSON in {file_name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(file_name, message)
