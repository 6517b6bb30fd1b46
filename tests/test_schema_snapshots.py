from __future__ import annotations

from typing import Any

import pytest


def _optional_str(v: Any) -> bool:
    return v is None or isinstance(v, str)


CHANGE_SCHEMA = {"x": str, "from": str, "to": _optional_str}


@pytest.mark.parametrize(
    "tool_name",
    ["generate_message_tool", "named_files_tool", "parse_changes_tool"],
)
def test_tools_return_stable_schema(tool_name, diff_index_lines, assert_schema):
    """
    Snapshot-style schema tests:
    - ensures contract for tools stays stable
    - does NOT pin message wording
    """
    import auto_commit_msg.server as server

    out = getattr(server, tool_name)(lines=diff_index_lines)

    schema: dict[str, Any] = {
        "changes": [CHANGE_SCHEMA],
        "count": lambda n: n == len(diff_index_lines),
    }
    if tool_name != "parse_changes_tool":
        schema["message"] = lambda s: isinstance(s, str) and len(s) > 0

    assert_schema(out, schema)


def test_count_message_tool_schema(diff_index_lines, assert_schema):
    from auto_commit_msg.server import count_message_tool

    out = count_message_tool(lines=diff_index_lines)

    assert_schema(
        out,
        {
            "message": lambda s: isinstance(s, str) and "file" in s,
            "counts": lambda d: all(v["file_count"] >= 1 for v in d.values()),
            "count": int,
        },
    )


def test_one_change_tool_schema(assert_schema):
    from auto_commit_msg.server import one_change_tool

    out = one_change_tool(line="M\tfoo.txt")

    assert out["message"] == "Update foo.txt"
    assert_schema(out, {"changes": [CHANGE_SCHEMA], "count": lambda n: n == 1})


def test_schema_matcher_reports_mismatch(assert_schema):
    with pytest.raises(AssertionError, match=r"\$\.changes\[0\]: missing key 'to'"):
        assert_schema({"changes": [{"x": "M", "from": "a.txt"}]}, {"changes": [CHANGE_SCHEMA]})
