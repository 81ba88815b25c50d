from __future__ import annotations

import logging
from typing import Iterable

from .container import open_container
from .context import ScanContext
from .errors import DEPTH_EXCEEDED, ScanError

logger = logging.getLogger(__name__)


def is_relevant_archive(name: str, extensions: Iterable[str]) -> bool:
    lower_name = name.lower()
    return any(lower_name.endswith(ext) for ext in extensions)


def base_name(name: str) -> str:
    # Archive entries may use either separator regardless of platform.
    cut = max(name.rfind("/"), name.rfind("\\"))
    return name[cut + 1 :]


def entry_path(parent: str, name: str) -> str:
    return f"{parent}[{name}]"


def scan_archive(
    logical_path: str,
    data: bytes,
    search_key: str,
    remaining_depth: int,
    context: ScanContext,
) -> None:
    """
    Match entries of an in-memory archive against ``search_key``.

    Nested archives are scanned recursively with one less unit of depth; once
    the budget reaches zero further nested archives are recorded as
    ``DEPTH_EXCEEDED`` and left unopened. Failures are recorded on the context
    and only ever abandon the archive or entry they concern.
    """
    if remaining_depth < 0:
        raise ValueError("remaining_depth must not be negative")

    try:
        reader = open_container(logical_path, data)
    except ScanError as exc:
        context.record_issue(logical_path, exc.code, str(exc))
        return

    extensions = context.options.archive_extensions
    with reader:
        context.summary.archives_opened += 1
        names = reader.names()
        for name in names:
            child_path = entry_path(logical_path, name)
            context.summary.entries_visited += 1
            context.trace("A", child_path)

            try:
                info = reader.entry(name)
            except ScanError as exc:
                context.record_issue(child_path, exc.code, str(exc))
                continue
            if info.is_dir():
                continue

            if is_relevant_archive(name, extensions):
                if remaining_depth == 0:
                    context.record_issue(
                        child_path,
                        DEPTH_EXCEEDED,
                        f"{name!r} in {logical_path!r} is apparently an archive "
                        "but we have exceeded the maximum depth",
                    )
                    continue
                try:
                    nested_bytes = reader.read(info)
                except ScanError as exc:
                    context.record_issue(child_path, exc.code, str(exc))
                    continue
                logger.debug("descending into %s (%d left)", child_path, remaining_depth - 1)
                scan_archive(child_path, nested_bytes, search_key, remaining_depth - 1, context)
                # Release the nested buffer before moving to the next sibling.
                del nested_bytes
            elif base_name(name).lower() == search_key:
                context.report_match(child_path)
