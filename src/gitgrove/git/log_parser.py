"""Commit log parser for the separator-delimited ``git log`` format.

Records end with RECORD_SEPARATOR (0x1E) and fields are joined with
FIELD_SEPARATOR (0x1F), matching ``adapter.LOG_FORMAT``.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from gitgrove.git._text import strip_ws
from gitgrove.git.models import CommitInfo

log = structlog.get_logger(__name__)

RECORD_SEPARATOR = "\x1e"
FIELD_SEPARATOR = "\x1f"

# hash, short hash, author name, author email, timestamp, summary
MIN_FIELDS = 6


def _parse_timestamp(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return 0


def parse_commit_record(record: str) -> Optional[CommitInfo]:
    """Parse one record; None if it has fewer than six fields."""
    fields = record.split(FIELD_SEPARATOR)
    if len(fields) < MIN_FIELDS:
        return None

    return CommitInfo(
        hash=fields[0],
        short_hash=fields[1],
        author_name=fields[2],
        author_email=fields[3],
        timestamp=_parse_timestamp(fields[4]),
        summary=fields[5],
        message=strip_ws(fields[6]) if len(fields) > MIN_FIELDS else "",
    )


def parse_commit_log(text: str) -> List[CommitInfo]:
    """Return commits in input order, silently dropping short records."""
    commits: List[CommitInfo] = []
    for raw in text.split(RECORD_SEPARATOR):
        record = strip_ws(raw)
        if not record:
            continue
        commit = parse_commit_record(record)
        if commit is None:
            log.debug(
                "log.record_dropped",
                fields=record.count(FIELD_SEPARATOR) + 1,
            )
            continue
        commits.append(commit)
    return commits
