from __future__ import annotations

from typing import Hashable, Sequence


def all_equal(items: Sequence[Hashable]) -> bool:
    """True when every item equals the first one. Empty input counts as equal."""
    return len(set(items)) <= 1
