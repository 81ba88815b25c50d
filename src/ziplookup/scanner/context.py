from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .errors import DEPTH_EXCEEDED
from .models import ScanIssue, ScanOptions, ScanSummary
from .reporter import MatchReporter
from .trace import TraceSampler

logger = logging.getLogger(__name__)
trace_logger = logging.getLogger("ziplookup.trace")


@dataclass
class ScanContext:
    """State shared by the directory walk and every archive scan of one run."""

    options: ScanOptions = field(default_factory=ScanOptions)
    sampler: TraceSampler | None = None
    reporter: MatchReporter = field(default_factory=MatchReporter)
    summary: ScanSummary = field(default_factory=ScanSummary)
    issues: List[ScanIssue] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.sampler is None:
            self.sampler = TraceSampler(self.options.trace_stride)

    def trace(self, prefix: str, path: str) -> None:
        if self.sampler.should_trace():
            self.summary.trace_lines += 1
            trace_logger.info("%s> %s", prefix, path)

    def record_issue(self, path: str, code: str, message: str) -> ScanIssue:
        issue = ScanIssue(path=path, code=code, message=message)
        self.issues.append(issue)
        self.summary.issues += 1
        if code == DEPTH_EXCEEDED:
            logger.info("%s", message)
        else:
            logger.warning("%s", message)
        return issue

    def report_match(self, path: str) -> None:
        self.reporter.report(path)
        self.summary.matches += 1
