import logging
import re
from typing import List

from src.git_log.decorations import classify_decorations
from src.git_log.errors import GitLogParseError
from src.git_log.models import CommitNode

logger = logging.getLogger(__name__)

# ASCII unit / record separators never appear in commit metadata
FIELD_DELIMITER = "\x1f"
RECORD_DELIMITER = "\x1e"

# hash, parents, author, email, relative date, ISO date, unix date, subject, refs
LOG_FORMAT = "%H%x1f%P%x1f%an%x1f%ae%x1f%cr%x1f%cI%x1f%ct%x1f%s%x1f%D%x1e"
FIELD_COUNT = 9

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_int64(value: str) -> int:
    """Parses a plain signed 64-bit decimal integer.

    Unlike `int()`, rejects surrounding whitespace, underscores and non-ASCII digits.
    """
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f"invalid digit found in {value!r}")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"number too large to fit in target type: {value!r}")
    return number


def parse_git_log(raw_output: str) -> List[CommitNode]:
    """Parses the output of `git log --pretty=format:LOG_FORMAT`.

    Blank records (e.g. after the trailing record delimiter) are skipped.
    The first malformed record aborts the whole parse.
    """
    commits = [
        parse_record(record)
        for record in raw_output.split(RECORD_DELIMITER)
        if record.strip()
    ]
    logger.debug(f"Parsed {len(commits)} commits from git log output")
    return commits


def parse_record(record: str) -> CommitNode:
    """Parses one record of nine positional fields into a CommitNode."""
    fields = record.split(FIELD_DELIMITER)
    # Missing trailing fields read as empty strings
    fields += [""] * (FIELD_COUNT - len(fields))
    (
        oid,
        parents,
        author,
        author_email,
        relative_time,
        committed_at,
        committed_timestamp,
        summary,
        decorations,
    ) = fields[:FIELD_COUNT]

    # git separates `format:` entries with a newline, which lands before the hash
    oid = oid.strip()
    if not oid:
        raise GitLogParseError("missing commit hash")

    try:
        timestamp = parse_int64(committed_timestamp)
    except ValueError as e:
        raise GitLogParseError(f"timestamp parse error: {e}") from e

    return CommitNode(
        oid=oid,
        parents=tuple(parents.split()),
        author=author,
        author_email=author_email,
        relative_time=relative_time,
        committed_at=committed_at,
        committed_timestamp=timestamp,
        summary=summary,
        decorations=classify_decorations(decorations),
    )
