from __future__ import annotations

from dataclasses import dataclass

from .constants import DIFF_INDEX_FORMAT, FORMATS
from .errors import InvalidInputError


@dataclass(frozen=True)
class MessageConfig:
    """
    Message generation settings.
    """
    # Above this many changed files, name counts per action instead of paths.
    max_named_files: int = 3

    # Layout of incoming lines: "diff-index" (tab separated) or "status" (porcelain v1).
    default_format: str = DIFF_INDEX_FORMAT

    def __post_init__(self) -> None:
        if self.max_named_files < 1:
            raise InvalidInputError(f"max_named_files must be >= 1, got {self.max_named_files}")
        if self.default_format not in FORMATS:
            raise InvalidInputError(
                f"Unknown output format: {self.default_format!r}. Allowed: {', '.join(FORMATS)}"
            )


DEFAULT_CONFIG = MessageConfig()
