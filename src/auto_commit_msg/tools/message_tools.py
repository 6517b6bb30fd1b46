from __future__ import annotations

from typing import Any, Sequence

from .common import clean_lines, resolve_config
from ..core.count import _count_by_action, count_by_action_msg
from ..core.message import _describe_named, _describe_one, message_from_changes
from ..core.models import ChangeRecord
from ..core.parsers import parse_diff_index, parse_lines


def _result(message: str, changes: Sequence[ChangeRecord]) -> dict[str, Any]:
    return {
        "message": message,
        "changes": [c.to_dict() for c in changes],
        "count": len(changes),
    }


def parse_changes(lines: str | list[str], fmt: str | None = None) -> dict[str, Any]:
    """
    Structured change records for git output lines.
    """
    cfg = resolve_config(fmt)
    changes = parse_lines(clean_lines(lines), cfg.default_format)
    return {
        "format": cfg.default_format,
        "changes": [c.to_dict() for c in changes],
        "count": len(changes),
    }


def generate(lines: str | list[str], fmt: str | None = None) -> dict[str, Any]:
    """
    Commit message subject for a set of changes. Style depends on how many files changed.
    """
    cfg = resolve_config(fmt)
    changes = parse_lines(clean_lines(lines), cfg.default_format)
    return _result(message_from_changes(changes, config=cfg), changes)


def describe_one(line: str) -> dict[str, Any]:
    change = parse_diff_index(line)
    return _result(_describe_one(change), [change])


def describe_named(lines: str | list[str]) -> dict[str, Any]:
    changes = parse_lines(clean_lines(lines))
    return _result(_describe_named(changes), changes)


def count_summary(lines: str | list[str], fmt: str | None = None) -> dict[str, Any]:
    """
    Per-action file counts, e.g. 'update 3 files and delete 2 files'.
    """
    cfg = resolve_config(fmt)
    changes = parse_lines(clean_lines(lines), cfg.default_format)
    counts = _count_by_action(changes)
    return {
        "message": count_by_action_msg(counts),
        "counts": counts,
        "count": len(changes),
    }
