from __future__ import annotations

import sys
from typing import TextIO


class MatchReporter:
    """Write each matched logical path on its own line as soon as it is found."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolve lazily so a swapped sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def report(self, logical_path: str) -> None:
        print(logical_path, file=self.stream)
