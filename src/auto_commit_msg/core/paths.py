from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable

from .constants import MOVE, MOVE_AND_RENAME, RENAME
from .errors import InvalidInputError
from .models import PathParts


def split_path(path: str) -> PathParts:
    """Split a repo-relative path into directory segments and a file name."""
    p = PurePosixPath(path)
    return PathParts(dir_segments=tuple(p.parent.parts), name=p.name)


def format_path(path: str) -> str:
    return path


def _join(items: Iterable[str]) -> str:
    """
    Join items as prose:
      []              -> ""
      ["a"]           -> "a"
      ["a", "b"]      -> "a and b"
      ["a", "b", "c"] -> "a, b and c"
    """
    items = list(items)
    if len(items) <= 1:
        return "".join(items)
    return f"{', '.join(items[:-1])} and {items[-1]}"


def human_list(paths: Iterable[str]) -> str:
    formatted = [format_path(p) for p in paths]
    if not formatted:
        raise InvalidInputError("Cannot build a human list from an empty sequence.")
    return _join(formatted)


def move_or_rename_from_paths(old: PathParts, new: PathParts) -> str:
    if old.dir_segments == new.dir_segments:
        return RENAME
    if old.name == new.name:
        return MOVE
    return MOVE_AND_RENAME
