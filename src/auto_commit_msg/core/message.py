"""
Create a commit message from lines of git output.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .classification import lookup_diff_index_action, move_or_rename_file
from .config import DEFAULT_CONFIG, MessageConfig
from .constants import RENAME_CHAR, UNKNOWN
from .count import _count_by_action, count_by_action_msg
from .errors import InvalidInputError
from .models import ChangeRecord
from .parsers import parse_diff_index, parse_lines
from .paths import format_path, human_list
from .utils import all_equal


logger = logging.getLogger(__name__)


def _title(value: str) -> str:
    """Uppercase the first letter only. The rest of the string is left alone."""
    if not value:
        raise InvalidInputError("Cannot apply title case to an empty string.")
    return value[0].upper() + value[1:]


def _describe_one(change: ChangeRecord) -> str:
    if change.x == RENAME_CHAR and change.to_path is not None:
        return move_or_rename_file(change.from_path, change.to_path)
    return f"{_title(lookup_diff_index_action(change.x))} {format_path(change.from_path)}"


def _describe_named(changes: Sequence[ChangeRecord]) -> str:
    if not changes:
        raise InvalidInputError("At least one change is required.")

    actions = [c.x for c in changes]
    action = lookup_diff_index_action(actions[0]) if all_equal(actions) else UNKNOWN
    file_list = human_list(c.from_path for c in changes)

    if action == UNKNOWN:
        return f"Various changes to {file_list}"
    return f"{_title(action)} {file_list}"


def one_change(line: str) -> str:
    """
    Message for a single changed file, e.g. 'Update foo.txt'.
    A rename needs both paths staged so git reports R instead of D and A.
    """
    return _describe_one(parse_diff_index(line))


def named_files(lines: Sequence[str]) -> str:
    """Message naming every changed file, e.g. 'Update foo.txt and bar.txt'."""
    return _describe_named(parse_lines(lines))
def message_from_changes(
    changes: Sequence[ChangeRecord],
    config: MessageConfig | None = None,
) -> str:
    """
    Pick a message style by the number of changes:
      1 file                 -> one_change style
      up to max_named_files  -> named_files style
      more                   -> counts per action
    """
    cfg = config or DEFAULT_CONFIG
    if not changes:
        raise InvalidInputError("No changes to describe.")

    if len(changes) == 1:
        logger.debug("Single change message")
        return _describe_one(changes[0])

    if len(changes) <= cfg.max_named_files:
        logger.debug("Named files message for %d changes", len(changes))
        return _describe_named(changes)

    logger.debug("Count message for %d changes", len(changes))
    return _title(count_by_action_msg(_count_by_action(changes)))


def generate_message(
    lines: Sequence[str],
    config: MessageConfig | None = None,
    fmt: str | None = None,
) -> str:
    cfg = config or DEFAULT_CONFIG
    return message_from_changes(parse_lines(lines, fmt or cfg.default_format), cfg)
