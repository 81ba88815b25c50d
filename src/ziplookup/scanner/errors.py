from __future__ import annotations


class ScanError(Exception):
    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class CorruptArchiveError(ScanError):
    pass


class EntryLookupError(ScanError):
    pass


class EntryReadError(ScanError):
    pass


# Codes recorded without an exception being raised.
DIRECTORY_READ_ERROR = "DIRECTORY_READ_ERROR"
METADATA_ERROR = "METADATA_ERROR"
FILE_READ_ERROR = "FILE_READ_ERROR"
UNREPRESENTABLE_NAME = "UNREPRESENTABLE_NAME"
DEPTH_EXCEEDED = "DEPTH_EXCEEDED"
