from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChangeRecord:
    x: str
    from_path: str
    to_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "from": self.from_path,
            "to": self.to_path,
        }


@dataclass(frozen=True)
class PathParts:
    dir_segments: tuple[str, ...]
    name: str

    @property
    def dir_path(self) -> str:
        return "/".join(self.dir_segments)
