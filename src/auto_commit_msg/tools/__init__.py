from .message_tools import (
    parse_changes,
    generate,
    describe_one,
    describe_named,
    count_summary,
)

__all__ = [
    "parse_changes",
    "generate",
    "describe_one",
    "describe_named",
    "count_summary",
]
