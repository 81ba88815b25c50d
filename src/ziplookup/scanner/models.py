from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import DEPTH_EXCEEDED

MAX_DEPTH = 8
ARCHIVE_EXTENSIONS: Tuple[str, ...] = (".zip", ".jar", ".ear", ".war")


@dataclass(slots=True)
class ScanIssue:
    path: str
    code: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.code != DEPTH_EXCEEDED


@dataclass(slots=True)
class ScanSummary:
    directories_visited: int = 0
    files_checked: int = 0
    archives_opened: int = 0
    entries_visited: int = 0
    matches: int = 0
    issues: int = 0
    trace_lines: int = 0

    def as_dict(self) -> Dict[str, int]:
        summary = {
            "directories_visited": self.directories_visited,
            "files_checked": self.files_checked,
            "archives_opened": self.archives_opened,
            "entries_visited": self.entries_visited,
            "matches": self.matches,
            "issues_count": self.issues,
        }
        # Only surface trace counts when tracing actually produced output.
        if self.trace_lines:
            summary["trace_lines"] = self.trace_lines
        return summary


@dataclass(slots=True)
class ScanOptions:
    """
    Settings for a single lookup run.

    Everything is populated from the command line; there are no config
    files or environment variables behind these defaults.
    """

    max_depth: int = MAX_DEPTH
    trace_stride: int = 0
    archive_extensions: Tuple[str, ...] = ARCHIVE_EXTENSIONS

