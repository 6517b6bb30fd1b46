from __future__ import annotations

import logging
from typing import Iterable

from .constants import (
    COPY_CHAR,
    DIFF_INDEX_FORMAT,
    FORMATS,
    RENAME_CHAR,
    STATUS_FORMAT,
    UNTRACKED_CHAR,
)
from .errors import InvalidInputError, ParseError
from .models import ChangeRecord


logger = logging.getLogger(__name__)

_STATUS_RENAME_SEP = " -> "


def parse_diff_index(line: str) -> ChangeRecord:
    """
    Parses `git diff-index --name-status` / `git diff --name-status` lines:
      M\tfile
      A\tfile
      D\tfile
      R100\told\tnew
    Only the tab separator is stripped, path content is kept as-is.
    """
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) < 2 or not fields[0] or not fields[1]:
        raise ParseError(f"Expected '<action>\\t<path>[\\t<path>]', got: {line!r}")

    x = fields[0][0]
    from_path = fields[1]

    if x != RENAME_CHAR:
        return ChangeRecord(x=x, from_path=from_path)

    if len(fields) < 3 or not fields[2]:
        raise ParseError(f"Rename line is missing its destination path: {line!r}")
    return ChangeRecord(x=x, from_path=from_path, to_path=fields[2])


def parse_status(line: str) -> ChangeRecord:
    """
    Parses `git status --porcelain=v1` lines:
      XY <path>
      XY <path> -> <path2>   (rename or copy)
    The index column wins; the worktree column is used for unstaged changes.
    Untracked files (??) count as created.
    """
    line = line.rstrip("\r\n")
    if len(line) < 4 or line[2] != " ":
        raise ParseError(f"Expected 'XY <path>', got: {line!r}")

    x, y = line[0], line[1]
    action = x if x not in {" ", UNTRACKED_CHAR} else y
    if action == UNTRACKED_CHAR:
        action = "A"

    rest = line[3:]
    if action in {RENAME_CHAR, COPY_CHAR}:
        if _STATUS_RENAME_SEP not in rest:
            raise ParseError(f"Rename/copy line is missing its destination path: {line!r}")
        a, b = rest.split(_STATUS_RENAME_SEP, 1)
        if not a or not b:
            raise ParseError(f"Rename/copy line has an empty path: {line!r}")
        # copies keep only the source, same as diff-index output
        return ChangeRecord(x=action, from_path=a, to_path=b if action == RENAME_CHAR else None)

    return ChangeRecord(x=action, from_path=rest)


def parse_lines(lines: Iterable[str], fmt: str = DIFF_INDEX_FORMAT) -> list[ChangeRecord]:
    """Parse many lines of git output, skipping blank ones."""
    if fmt not in FORMATS:
        raise InvalidInputError(f"Unknown output format: {fmt!r}. Allowed: {', '.join(FORMATS)}")

    parse = parse_status if fmt == STATUS_FORMAT else parse_diff_index
    out = [parse(raw) for raw in lines if raw.strip()]
    logger.debug("Parsed %d change records from %s output", len(out), fmt)
    return out
