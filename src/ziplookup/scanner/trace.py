from __future__ import annotations

TRACE_DISABLED = 0
TRACE_EVERY = 1
TRACE_SOME = 16384


class TraceSampler:
    """
    Counter-based sampler shared by every visit in a run.

    Directory visits and archive entry visits advance the same counter, so the
    stride applies to the combined stream. A stride of 0 never fires because
    the counter is incremented before it is compared.
    """

    def __init__(self, stride: int = TRACE_DISABLED) -> None:
        if stride < 0:
            raise ValueError("trace stride must not be negative")
        self.stride = stride
        self.counter = 0

    def should_trace(self) -> bool:
        self.counter += 1
        if self.counter == self.stride:
            self.counter = 0
            return True
        return False
