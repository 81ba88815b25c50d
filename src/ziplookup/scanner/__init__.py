from .archive import scan_archive
from .context import ScanContext
from .errors import CorruptArchiveError, EntryLookupError, EntryReadError, ScanError
from .models import MAX_DEPTH, ScanIssue, ScanOptions, ScanSummary
from .reporter import MatchReporter
from .trace import TRACE_DISABLED, TRACE_EVERY, TRACE_SOME, TraceSampler
from .walker import walk_tree

__all__ = [
    "MAX_DEPTH",
    "TRACE_DISABLED",
    "TRACE_EVERY",
    "TRACE_SOME",
    "CorruptArchiveError",
    "EntryLookupError",
    "EntryReadError",
    "MatchReporter",
    "ScanContext",
    "ScanError",
    "ScanIssue",
    "ScanOptions",
    "ScanSummary",
    "TraceSampler",
    "scan_archive",
    "walk_tree",
]
