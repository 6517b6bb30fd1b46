"""
Group changed files by action and describe each group with a count, rather
than naming individual files.

e.g. 'create 5 files'
e.g. 'update 16 files and delete 2 files'
"""
from __future__ import annotations

from typing import Iterable

from .classification import move_or_rename_from_change
from .constants import DIFF_INDEX_FORMAT
from .models import ChangeRecord
from .parsers import parse_lines
from .paths import _join


ActionCountMap = dict[str, dict[str, int]]


def _count_by_action(changes: Iterable[ChangeRecord]) -> ActionCountMap:
    result: ActionCountMap = {}
    for item in changes:
        action = move_or_rename_from_change(item)
        entry = result.setdefault(action, {"file_count": 0})
        entry["file_count"] += 1
    return result


def _format_one(action: str, count: int) -> str:
    plural = "" if count == 1 else "s"
    return f"{action} {count} file{plural}"


def count_by_action_msg(action_counts: ActionCountMap) -> str:
    msgs = [_format_one(action, v["file_count"]) for action, v in action_counts.items()]
    return _join(msgs)


def count_msg(lines: Iterable[str], fmt: str = DIFF_INDEX_FORMAT) -> str:
    return count_by_action_msg(_count_by_action(parse_lines(lines, fmt)))
