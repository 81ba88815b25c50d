from __future__ import annotations

import io
import zipfile
import zlib
from typing import List

from .errors import CorruptArchiveError, EntryLookupError, EntryReadError

# zipfile surfaces damaged or unsupported members through a mix of exception types.
_OPEN_ERRORS = (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError, OSError, ValueError)
_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    OSError,
    NotImplementedError,
    RuntimeError,
    ValueError,
)


class ContainerReader:
    """Read-only view of a ZIP-family archive held entirely in memory."""

    def __init__(self, archive_zip: zipfile.ZipFile, logical_path: str) -> None:
        self._zip = archive_zip
        self.logical_path = logical_path

    def names(self) -> List[str]:
        return list(self._zip.namelist())

    def entry(self, name: str) -> zipfile.ZipInfo:
        try:
            return self._zip.getinfo(name)
        except KeyError as exc:
            raise EntryLookupError(
                f"failed to obtain {name!r} from {self.logical_path!r}: {exc}",
                "ENTRY_LOOKUP_ERROR",
            ) from exc

    def read(self, info: zipfile.ZipInfo) -> bytes:
        try:
            return self._zip.read(info)
        except _READ_ERRORS as exc:
            raise EntryReadError(
                f"failed to read {info.filename!r} from {self.logical_path!r}: {exc}",
                "ENTRY_READ_ERROR",
            ) from exc

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ContainerReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_container(logical_path: str, data: bytes) -> ContainerReader:
    # Open raw archive bytes; anything zipfile rejects counts as a corrupt archive.
    try:
        archive_zip = zipfile.ZipFile(io.BytesIO(data))
    except _OPEN_ERRORS as exc:
        raise CorruptArchiveError(
            f"failed to open {logical_path!r} as a ZIP archive: {exc}",
            "CORRUPT_ARCHIVE",
        ) from exc
    return ContainerReader(archive_zip, logical_path)
