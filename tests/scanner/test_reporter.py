from __future__ import annotations

import io

import pytest

from ziplookup.scanner.context import ScanContext
from ziplookup.scanner.reporter import MatchReporter


def test_report_writes_one_line_per_match():
    stream = io.StringIO()
    reporter = MatchReporter(stream)

    reporter.report("a.zip[x.txt]")
    reporter.report("a.zip[x.txt]")

    assert stream.getvalue() == "a.zip[x.txt]\na.zip[x.txt]\n"


def test_default_stream_is_stdout(capsys: pytest.CaptureFixture[str]):
    MatchReporter().report("/srv/Foo.TXT")

    assert capsys.readouterr().out == "/srv/Foo.TXT\n"


def test_matches_are_counted_on_the_summary():
    stream = io.StringIO()
    context = ScanContext(reporter=MatchReporter(stream))

    context.report_match("one")
    context.report_match("two")

    assert context.summary.matches == 2
    assert stream.getvalue().splitlines() == ["one", "two"]
