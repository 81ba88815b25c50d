"""
Shared fixtures for building archive trees on disk and in memory.
"""
from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Mapping

import pytest

from ziplookup.scanner.context import ScanContext
from ziplookup.scanner.models import ScanOptions
from ziplookup.scanner.reporter import MatchReporter


def make_zip(entries: Mapping[str, bytes | str | None]) -> bytes:
    """Build a ZIP in memory; a ``None`` value adds a directory marker."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, payload in entries.items():
            if payload is None:
                zf.writestr(zipfile.ZipInfo(name.rstrip("/") + "/"), b"")
            else:
                zf.writestr(name, payload)
    return buffer.getvalue()


def corrupt_member(data: bytes, name: str) -> bytes:
    """Flip bytes inside the compressed stream of ``name`` so reading it fails."""
    damaged = bytearray(data)
    start = damaged.index(name.encode()) + len(name)
    for offset in range(start + 2, start + 12):
        damaged[offset] ^= 0xFF
    return bytes(damaged)


def make_chain(levels: int, leaf_name: str = "target.txt") -> bytes:
    """Return a zip whose ``levels`` nested zips each hold the next one."""
    payload = make_zip({leaf_name: "found"})
    for level in range(levels, 0, -1):
        payload = make_zip({f"level{level}.zip": payload})
    return payload


class Harness:
    def __init__(self, stride: int = 0) -> None:
        self.stdout = io.StringIO()
        self.context = ScanContext(
            options=ScanOptions(trace_stride=stride),
            reporter=MatchReporter(self.stdout),
        )

    @property
    def matches(self) -> list[str]:
        return self.stdout.getvalue().splitlines()

    def codes(self) -> list[str]:
        return [issue.code for issue in self.context.issues]


@pytest.fixture
def harness() -> Harness:
    return Harness()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "deploy"
    (root / "lib" / "ext").mkdir(parents=True)
    (root / "conf").mkdir()
    (root / "Foo.TXT").write_text("top level")
    (root / "conf" / "foo.txt").write_text("config copy")
    (root / "conf" / "foo.txt.bak").write_text("not a match")
    (root / "lib" / "app.jar").write_bytes(
        make_zip(
            {
                "META-INF/": None,
                "META-INF/MANIFEST.MF": "Manifest-Version: 1.0\n",
                "com/example/FOO.txt": "inside jar",
                "lib/inner.war": make_zip({"WEB-INF\\classes\\foo.TXT": "nested"}),
            }
        )
    )
    (root / "lib" / "ext" / "broken.zip").write_bytes(b"PK\x03\x04 definitely not an archive")
    return root
