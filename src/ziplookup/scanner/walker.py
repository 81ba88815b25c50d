from __future__ import annotations

import os
from typing import Iterator, List

from .archive import is_relevant_archive, scan_archive
from .context import ScanContext
from .errors import (
    DIRECTORY_READ_ERROR,
    FILE_READ_ERROR,
    METADATA_ERROR,
    UNREPRESENTABLE_NAME,
)

# Consecutive listing failures tolerated before a directory is abandoned.
_MAX_LISTING_ERRORS = 16


def _is_text(value: str) -> bool:
    # os.scandir hands back undecodable bytes as lone surrogates.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _read_file(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def _iter_children(dir_path: str, entries, context: ScanContext) -> Iterator[os.DirEntry]:
    """Yield children one by one, recording a listing error per failed entry."""
    failures = 0
    while True:
        try:
            child = next(entries)
        except StopIteration:
            return
        except OSError as exc:
            context.record_issue(
                dir_path,
                DIRECTORY_READ_ERROR,
                f"failed to read an entry of {dir_path!r}: {exc}",
            )
            failures += 1
            # A broken handle keeps failing; stop rather than spin.
            if failures >= _MAX_LISTING_ERRORS:
                return
            continue
        failures = 0
        yield child


def _visit_child(child: os.DirEntry, search_key: str, stack: List[str], context: ScanContext) -> None:
    options = context.options
    try:
        # Symlinked directories are not followed.
        is_dir = child.is_dir(follow_symlinks=False)
    except OSError as exc:
        context.record_issue(
            child.path,
            METADATA_ERROR,
            f"failed to read metadata of {child.path!r}: {exc}",
        )
        return
    if is_dir:
        stack.append(child.path)
        return

    if not _is_text(child.path):
        context.record_issue(
            child.path,
            UNREPRESENTABLE_NAME,
            f"failed to convert path {child.path!r} to UTF-8 string",
        )
        return

    context.summary.files_checked += 1
    if is_relevant_archive(child.name, options.archive_extensions):
        try:
            archive_bytes = _read_file(child.path)
        except OSError as exc:
            context.record_issue(
                child.path,
                FILE_READ_ERROR,
                f"failed to read {child.path!r}: {exc}",
            )
            return
        scan_archive(child.path, archive_bytes, search_key, options.max_depth, context)
    elif child.name.lower() == search_key:
        context.report_match(child.path)


def walk_tree(start_path: str, search_key: str, context: ScanContext) -> None:
    """
    Walk ``start_path`` with an explicit stack, scanning archives on the way.

    Siblings come out in whatever order the OS lists them and the stack
    reverses the order directories are revisited in, so callers must not
    expect sorted output.
    """
    stack = [os.fspath(start_path)]
    while stack:
        dir_path = stack.pop()
        context.summary.directories_visited += 1
        context.trace("F", dir_path)

        try:
            entries = os.scandir(dir_path)
        except OSError as exc:
            context.record_issue(
                dir_path,
                DIRECTORY_READ_ERROR,
                f"failed to read entries of {dir_path!r}: {exc}",
            )
            continue

        with entries:
            for child in _iter_children(dir_path, entries, context):
                _visit_child(child, search_key, stack, context)
