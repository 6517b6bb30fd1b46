from __future__ import annotations

from .constants import ACTION, MOVE, RENAME, RENAME_CHAR, ROOT_LABEL, UNKNOWN
from .models import ChangeRecord
from .paths import move_or_rename_from_paths, split_path


def lookup_diff_index_action(x: str) -> str:
    return ACTION.get(x, UNKNOWN)


def move_or_rename_from_change(item: ChangeRecord) -> str:
    """Label for a change: the action verb, or move/rename/both for renames."""
    if item.x != RENAME_CHAR or item.to_path is None:
        return lookup_diff_index_action(item.x)

    return move_or_rename_from_paths(split_path(item.from_path), split_path(item.to_path))


def move_or_rename_file(from_path: str, to_path: str) -> str:
    """
    Describe a single renamed file:
      a/foo.txt -> a/bar.txt : "Rename foo.txt to bar.txt"
      a/foo.txt -> b/foo.txt : "Move foo.txt to b"
      a/foo.txt -> b/bar.txt : "Move and rename a/foo.txt to b/bar.txt"
    """
    old = split_path(from_path)
    new = split_path(to_path)
    label = move_or_rename_from_paths(old, new)

    if label == RENAME:
        return f"Rename {old.name} to {new.name}"
    if label == MOVE:
        return f"Move {old.name} to {new.dir_path or ROOT_LABEL}"
    return f"Move and rename {from_path} to {to_path}"
