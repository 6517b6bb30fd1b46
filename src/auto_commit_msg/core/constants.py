from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


UNKNOWN = "unknown"

# git diff-index / status action character -> verb used in messages
ACTION: Mapping[str, str] = MappingProxyType(
    {
        "A": "create",
        "M": "update",
        "D": "delete",
        "R": "rename",
    }
)

RENAME_CHAR = "R"
COPY_CHAR = "C"
UNTRACKED_CHAR = "?"

MOVE = "move"
RENAME = ACTION[RENAME_CHAR]
MOVE_AND_RENAME = "move and rename"

MOVE_OR_RENAME_LABELS = frozenset({MOVE, RENAME, MOVE_AND_RENAME})

DIFF_INDEX_FORMAT = "diff-index"
STATUS_FORMAT = "status"
FORMATS = (DIFF_INDEX_FORMAT, STATUS_FORMAT)

ROOT_LABEL = "repo root"
